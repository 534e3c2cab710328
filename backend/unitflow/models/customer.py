from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from unitflow.core.database import Base
import enum


class CustomerType(str, enum.Enum):
    RETAIL = "retail"
    WHOLESALE = "wholesale"
    DEALER = "dealer"
    FRIEND_FAMILY = "friend_family"


class CustomerSource(str, enum.Enum):
    INSTAGRAM = "instagram"
    MARKETPLACE = "marketplace"
    REFERRAL = "referral"
    WALK_IN = "walk-in"
    OTHER = "other"


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=False)
    email = Column(String(255), nullable=True)
    customer_type = Column(String(50), nullable=False, default=CustomerType.RETAIL.value)
    source = Column(String(50), nullable=False, default=CustomerSource.OTHER.value)  # How they found us
    ig_handle = Column(String(100), nullable=True)
    preferred_contact = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    sales = relationship("Sale", back_populates="customer")
