from datetime import date
from typing import Optional

from sqlalchemy import Column, Integer, String, DateTime, Date, Text, Float, ForeignKey, Boolean
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from unitflow.core.database import Base
import enum


class ItemStatus(str, enum.Enum):
    IN_STOCK = "in_stock"
    SOLD = "sold"
    RESERVED = "reserved"
    RETURNED = "returned"
    DOA = "doa"                    # Dead on arrival
    PERSONAL_USE = "personal_use"


class ModelFamily(str, enum.Enum):
    MACBOOK_PRO = "MacBook Pro"
    MACBOOK_AIR = "MacBook Air"
    MACBOOK = "MacBook"


class ConditionGrade(str, enum.Enum):
    A = "A"
    B = "B"
    C = "C"


def compose_item_id(supplier_code: str, supplier_item_number: str) -> str:
    """Item identifier = supplier code + supplier item number, e.g. FB + 0042 -> FB0042"""
    return f"{supplier_code.strip().upper()}{supplier_item_number.strip()}"


def model_label(model_family: Optional[str], screen_size: Optional[str]) -> str:
    return f'{model_family} {screen_size}"'


class InventoryItem(Base):
    """
    A single unit (one laptop) held for resale.
    Status moves to sold when a sale is recorded and back to in_stock when the sale is removed.
    """
    __tablename__ = "inventory_items"

    id = Column(Integer, primary_key=True, index=True)
    item_id = Column(String(100), unique=True, nullable=False, index=True)

    # Supplier info
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    supplier_item_number = Column(String(100), nullable=False)
    po_id = Column(Integer, ForeignKey("purchase_orders.id"), nullable=True, index=True)

    # Hardware specs
    model_family = Column(String(50), nullable=False)
    screen_size = Column(String(10), nullable=False)
    chip = Column(String(50), nullable=False)
    ram_gb = Column(Integer, nullable=False)
    storage_gb = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    serial_number = Column(String(100), nullable=True)
    color = Column(String(50), nullable=True)
    keyboard_layout = Column(String(50), nullable=True)
    os_installed = Column(String(100), nullable=True)

    # Condition
    condition_grade = Column(String(5), nullable=False)
    condition_summary = Column(Text, nullable=False)
    battery_cycle_count = Column(Integer, nullable=True)
    battery_health_percent = Column(Integer, nullable=True)
    charger_included = Column(Boolean, default=False)
    box_included = Column(Boolean, default=False)

    # Purchase
    purchase_cost = Column(Float, nullable=False)
    purchase_date = Column(Date, nullable=False)

    status = Column(String(50), default=ItemStatus.IN_STOCK.value, nullable=False, index=True)
    sold_date = Column(DateTime(timezone=True), nullable=True)

    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    supplier = relationship("Supplier", back_populates="inventory_items")
    purchase_order = relationship("PurchaseOrder", back_populates="items")
    sales = relationship("Sale", back_populates="item")

    @property
    def model_label(self) -> str:
        return model_label(self.model_family, self.screen_size)

    def age_in_days(self, today: Optional[date] = None) -> int:
        """Whole days since purchase"""
        today = today or date.today()
        return (today - self.purchase_date).days

    def is_deletable(self) -> bool:
        """Sold units, and units still referenced by a sale, are kept for sales history"""
        return self.status != ItemStatus.SOLD.value and not self.sales
