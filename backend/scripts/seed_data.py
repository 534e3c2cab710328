"""
Seed script for UnitFlow
Creates suppliers, a purchase order, inventory units, customers and a few sales
"""
import sys
import os
from datetime import date, datetime, timedelta
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from unitflow.core.database import SessionLocal, engine, Base
from unitflow.models import (
    Supplier, SupplierType, PurchaseOrder, PurchaseOrderStatus,
    InventoryItem, ItemStatus, Customer, CustomerType, CustomerSource,
    Sale, PaymentMethod, SaleChannel,
)
from unitflow.models.inventory import compose_item_id


def make_item(supplier, number, days_ago, cost, **specs):
    return InventoryItem(
        item_id=compose_item_id(supplier.supplier_code, number),
        supplier_id=supplier.id,
        supplier_item_number=number,
        purchase_cost=cost,
        purchase_date=date.today() - timedelta(days=days_ago),
        status=ItemStatus.IN_STOCK.value,
        **specs
    )


def seed_data():
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()

    try:
        # Check if data already exists
        if db.query(Supplier).first():
            print("Data already seeded. Skipping...")
            return

        # Create Suppliers
        print("Creating suppliers...")
        suppliers = [
            Supplier(supplier_code="FB", supplier_name="Facebook Marketplace",
                     supplier_type=SupplierType.MARKETPLACE.value),
            Supplier(supplier_code="WH", supplier_name="Laptop Liquidators",
                     supplier_type=SupplierType.WHOLESALER.value,
                     contact_name="Sales Desk", contact_phone="514-555-0140",
                     contact_email="sales@laptopliquidators.ca"),
            Supplier(supplier_code="TR", supplier_name="Customer Trade-ins",
                     supplier_type=SupplierType.TRADE_IN.value),
        ]
        db.add_all(suppliers)
        db.commit()

        fb, wh, tr = suppliers

        # Create a purchase order for the wholesale lot
        print("Creating purchase orders...")
        po = PurchaseOrder(
            po_number="PO-0001",
            supplier_id=wh.id,
            order_date=date.today() - timedelta(days=40),
            expected_delivery_date=date.today() - timedelta(days=33),
            status=PurchaseOrderStatus.RECEIVED.value,
            total_amount=3150.0,
        )
        db.add(po)
        db.commit()

        # Create Inventory Items
        print("Creating inventory items...")
        pro14 = dict(model_family="MacBook Pro", screen_size="14", chip="M1 Pro", ram_gb=16,
                     storage_gb=512, year=2021, condition_grade="A", condition_summary="Excellent, no marks")
        air13 = dict(model_family="MacBook Air", screen_size="13", chip="M1", ram_gb=8,
                     storage_gb=256, year=2020, condition_grade="B", condition_summary="Light wear on palm rest")
        pro16 = dict(model_family="MacBook Pro", screen_size="16", chip="M2 Max", ram_gb=32,
                     storage_gb=1024, year=2023, condition_grade="A", condition_summary="Like new, box included",
                     box_included=True)

        items = [
            make_item(wh, "1001", 35, 1050.0, po_id=po.id, charger_included=True, battery_health_percent=91, **pro14),
            make_item(wh, "1002", 35, 1050.0, po_id=po.id, charger_included=True, battery_health_percent=88, **pro14),
            make_item(wh, "1003", 35, 1050.0, po_id=po.id, battery_health_percent=85, **pro14),
            make_item(fb, "0001", 70, 520.0, battery_cycle_count=410, **air13),
            make_item(fb, "0002", 12, 480.0, battery_cycle_count=250, **air13),
            make_item(tr, "0001", 100, 1900.0, charger_included=True, **pro16),
        ]
        db.add_all(items)
        db.commit()

        # Create Customers
        print("Creating customers...")
        customers = [
            Customer(name="Marie Tremblay", phone="514-555-0101", email="marie.t@gmail.com",
                     customer_type=CustomerType.RETAIL.value, source=CustomerSource.INSTAGRAM.value,
                     ig_handle="@marie.t", preferred_contact="instagram"),
            Customer(name="Campus Repair Shop", phone="438-555-0177",
                     customer_type=CustomerType.DEALER.value, source=CustomerSource.REFERRAL.value,
                     preferred_contact="phone"),
        ]
        db.add_all(customers)
        db.commit()

        # Record sales; each sold unit is flagged in the same commit
        print("Creating sales...")
        sold = [
            (items[0], customers[0], 1399.0, 20, PaymentMethod.INTERAC, SaleChannel.INSTAGRAM),
            (items[3], customers[1], 650.0, 8, PaymentMethod.CASH, SaleChannel.WALK_IN),
            (items[1], None, 1349.0, 2, PaymentMethod.CREDIT_CARD, SaleChannel.MARKETPLACE),
        ]
        sales = []
        for item, customer, price, days_ago, payment, channel in sold:
            sales.append(Sale(
                item_id=item.id,
                customer_id=customer.id if customer else None,
                sale_price=price,
                sale_date=date.today() - timedelta(days=days_ago),
                payment_method=payment.value,
                channel=channel.value,
            ))
            item.status = ItemStatus.SOLD.value
            item.sold_date = datetime.utcnow() - timedelta(days=days_ago)
        db.add_all(sales)
        db.commit()

        print("\n=== SEED DATA COMPLETE ===")
        print(f"Created {len(suppliers)} suppliers")
        print("Created 1 purchase order")
        print(f"Created {len(items)} inventory items")
        print(f"Created {len(customers)} customers")
        print(f"Created {len(sales)} sales")

    except Exception as e:
        print(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
