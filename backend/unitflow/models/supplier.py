from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from unitflow.core.database import Base
import enum


class SupplierType(str, enum.Enum):
    WHOLESALER = "wholesaler"
    TRADE_IN = "trade-in"
    MARKETPLACE = "marketplace"
    OTHER = "other"


class Supplier(Base):
    """Where units are bought from. The short code prefixes every item id."""
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    supplier_code = Column(String(20), unique=True, nullable=False, index=True)  # e.g. "FB", "KIJ"
    supplier_name = Column(String(255), nullable=False, index=True)
    supplier_type = Column(String(50), nullable=False, default=SupplierType.OTHER.value)
    contact_name = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    contact_email = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    inventory_items = relationship("InventoryItem", back_populates="supplier")
    purchase_orders = relationship("PurchaseOrder", back_populates="supplier")
