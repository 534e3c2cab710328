from typing import Optional

from sqlalchemy import Column, Integer, String, DateTime, Date, Text, Float, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from unitflow.core.database import Base
import enum


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    INTERAC = "interac"
    CREDIT_CARD = "credit_card"
    BANK_TRANSFER = "bank_transfer"


class SaleChannel(str, enum.Enum):
    WALK_IN = "walk-in"
    MARKETPLACE = "marketplace"
    INSTAGRAM = "instagram"
    SHOPIFY = "shopify"
    REFERRAL = "referral"
    OTHER = "other"


class Sale(Base):
    """One unit sold. Customer is optional (anonymous walk-in sales)."""
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    item_id = Column(Integer, ForeignKey("inventory_items.id"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)

    sale_price = Column(Float, nullable=False)
    sale_date = Column(Date, nullable=False, index=True)
    payment_method = Column(String(50), nullable=False)
    channel = Column(String(50), nullable=False)

    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    item = relationship("InventoryItem", back_populates="sales")
    customer = relationship("Customer", back_populates="sales")

    @property
    def profit(self) -> Optional[float]:
        """Sale price minus the unit's purchase cost, None if the item is gone"""
        if self.item is None:
            return None
        return self.sale_price - self.item.purchase_cost

    @property
    def margin(self) -> Optional[float]:
        """Profit as a percentage of sale price"""
        if self.item is None:
            return None
        if not self.sale_price:
            return 0.0
        return (self.sale_price - self.item.purchase_cost) / self.sale_price * 100
