#!/usr/bin/env python3
"""
Export inventory units to CSV for backup purposes.
Usage: python -m scripts.export_inventory [--status STATUS] [--supplier-code CODE] [--output FILE]
"""

import csv
import sys
import os
from datetime import datetime

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session, joinedload
from unitflow.core.database import SessionLocal
from unitflow.models.inventory import InventoryItem, ItemStatus
from unitflow.models.supplier import Supplier

COLUMNS = [
    'item_id',
    'supplier_code',
    'supplier_name',
    'supplier_item_number',
    'po_number',
    'model_family',
    'screen_size',
    'chip',
    'ram_gb',
    'storage_gb',
    'year',
    'serial_number',
    'color',
    'keyboard_layout',
    'os_installed',
    'condition_grade',
    'condition_summary',
    'battery_cycle_count',
    'battery_health_percent',
    'charger_included',
    'box_included',
    'purchase_cost',
    'purchase_date',
    'status',
    'sold_date',
    'notes',
    'created_at',
]


def item_row(item: InventoryItem) -> dict:
    return {
        'item_id': item.item_id,
        'supplier_code': item.supplier.supplier_code if item.supplier else '',
        'supplier_name': item.supplier.supplier_name if item.supplier else '',
        'supplier_item_number': item.supplier_item_number,
        'po_number': item.purchase_order.po_number if item.purchase_order else '',
        'model_family': item.model_family,
        'screen_size': item.screen_size,
        'chip': item.chip,
        'ram_gb': item.ram_gb,
        'storage_gb': item.storage_gb,
        'year': item.year,
        'serial_number': item.serial_number or '',
        'color': item.color or '',
        'keyboard_layout': item.keyboard_layout or '',
        'os_installed': item.os_installed or '',
        'condition_grade': item.condition_grade,
        'condition_summary': item.condition_summary,
        'battery_cycle_count': item.battery_cycle_count if item.battery_cycle_count is not None else '',
        'battery_health_percent': item.battery_health_percent if item.battery_health_percent is not None else '',
        'charger_included': item.charger_included,
        'box_included': item.box_included,
        'purchase_cost': f"{item.purchase_cost:.2f}",
        'purchase_date': item.purchase_date.isoformat(),
        'status': item.status,
        'sold_date': item.sold_date.isoformat() if item.sold_date else '',
        'notes': item.notes or '',
        'created_at': item.created_at.isoformat() if item.created_at else '',
    }


def export_inventory_to_csv(
    db: Session,
    status: str = None,
    supplier_code: str = None,
    output_file: str = None
) -> str:
    """
    Export inventory units to a CSV file.

    Args:
        db: Database session
        status: Optional item status to filter by (e.g., 'in_stock')
        supplier_code: Optional supplier code to filter by (e.g., 'FB')
        output_file: Output file path (auto-generated if not provided)

    Returns:
        Path to the generated CSV file, or None when nothing matched
    """
    query = db.query(InventoryItem).options(
        joinedload(InventoryItem.supplier),
        joinedload(InventoryItem.purchase_order),
    )

    if status:
        query = query.filter(InventoryItem.status == status)
    if supplier_code:
        query = query.join(Supplier, InventoryItem.supplier_id == Supplier.id).filter(
            Supplier.supplier_code == supplier_code.upper()
        )

    items = query.order_by(InventoryItem.item_id).all()

    if not items:
        print("No inventory items found" + (f" with status '{status}'" if status else ""))
        return None

    if not output_file:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        suffix = f"_{status}" if status else "_all"
        output_file = f"inventory_export{suffix}_{timestamp}.csv"

    with open(output_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=COLUMNS)
        writer.writeheader()
        for item in items:
            writer.writerow(item_row(item))

    print(f"Exported {len(items)} items to {output_file}")
    return output_file


def main():
    import argparse

    parser = argparse.ArgumentParser(description='Export inventory units to CSV')
    parser.add_argument('--status', '-s', choices=[s.value for s in ItemStatus], help='Item status to filter by')
    parser.add_argument('--supplier-code', '-c', help='Supplier code to filter by (e.g., FB)')
    parser.add_argument('--output', '-o', help='Output CSV file path')
    parser.add_argument('--list-suppliers', '-l', action='store_true', help='List all suppliers')

    args = parser.parse_args()

    db = SessionLocal()
    try:
        if args.list_suppliers:
            suppliers = db.query(Supplier).order_by(Supplier.supplier_code).all()
            print("\nSuppliers:")
            print("-" * 40)
            for supplier in suppliers:
                item_count = db.query(InventoryItem).filter(
                    InventoryItem.supplier_id == supplier.id
                ).count()
                inactive = "" if supplier.is_active else " [inactive]"
                print(f"  {supplier.supplier_code}: {supplier.supplier_name} ({item_count} items){inactive}")
            print()
            return

        export_inventory_to_csv(
            db,
            status=args.status,
            supplier_code=args.supplier_code,
            output_file=args.output
        )
    finally:
        db.close()


if __name__ == '__main__':
    main()
