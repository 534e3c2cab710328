"""add_purchase_orders

Revision ID: 8d41e6b05c2a
Revises: 3f9c2a1d7b40
Create Date: 2025-12-13 01:33:35.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8d41e6b05c2a'
down_revision: Union[str, None] = '3f9c2a1d7b40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'purchase_orders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('po_number', sa.String(length=50), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=False),
        sa.Column('order_date', sa.Date(), nullable=False),
        sa.Column('expected_delivery_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('total_amount', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['supplier_id'], ['suppliers.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_purchase_orders_id'), 'purchase_orders', ['id'], unique=False)
    op.create_index(op.f('ix_purchase_orders_po_number'), 'purchase_orders', ['po_number'], unique=True)
    op.create_index(op.f('ix_purchase_orders_supplier_id'), 'purchase_orders', ['supplier_id'], unique=False)
    op.create_index(op.f('ix_purchase_orders_status'), 'purchase_orders', ['status'], unique=False)

    # Link units to the purchase order they arrived on
    with op.batch_alter_table('inventory_items') as batch_op:
        batch_op.add_column(sa.Column('po_id', sa.Integer(), nullable=True))
        batch_op.create_foreign_key('fk_inventory_items_po_id', 'purchase_orders', ['po_id'], ['id'])
        batch_op.create_index(batch_op.f('ix_inventory_items_po_id'), ['po_id'], unique=False)


def downgrade() -> None:
    with op.batch_alter_table('inventory_items') as batch_op:
        batch_op.drop_index(batch_op.f('ix_inventory_items_po_id'))
        batch_op.drop_constraint('fk_inventory_items_po_id', type_='foreignkey')
        batch_op.drop_column('po_id')

    op.drop_index(op.f('ix_purchase_orders_status'), table_name='purchase_orders')
    op.drop_index(op.f('ix_purchase_orders_supplier_id'), table_name='purchase_orders')
    op.drop_index(op.f('ix_purchase_orders_po_number'), table_name='purchase_orders')
    op.drop_index(op.f('ix_purchase_orders_id'), table_name='purchase_orders')
    op.drop_table('purchase_orders')
