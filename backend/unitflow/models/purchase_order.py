from sqlalchemy import Column, Integer, String, DateTime, Date, Text, Float, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from unitflow.core.database import Base
import enum


class PurchaseOrderStatus(str, enum.Enum):
    PENDING = "pending"
    RECEIVED = "received"
    PARTIAL = "partial"        # Some units delivered
    CANCELLED = "cancelled"


class PurchaseOrder(Base):
    """
    Supplier invoice / purchase order.
    Inventory items can be linked to the PO they arrived on.
    """
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, index=True)
    po_number = Column(String(50), unique=True, nullable=False, index=True)  # e.g. "PO-2024-001"
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False, index=True)

    order_date = Column(Date, nullable=False)
    expected_delivery_date = Column(Date, nullable=True)

    status = Column(String(50), default=PurchaseOrderStatus.PENDING.value, nullable=False, index=True)
    total_amount = Column(Float, nullable=True)

    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    supplier = relationship("Supplier", back_populates="purchase_orders")
    items = relationship("InventoryItem", back_populates="purchase_order")

    @property
    def item_count(self) -> int:
        return len(self.items) if self.items else 0

    @property
    def items_cost(self) -> float:
        """Sum of purchase cost of the units linked to this PO"""
        return sum(item.purchase_cost or 0 for item in self.items or [])
