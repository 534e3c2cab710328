from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Optional, List
from datetime import date, datetime

from unitflow.models.customer import CustomerType, CustomerSource
from unitflow.schemas.sale import SaleWithDetails


class CustomerBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str
    phone: str
    email: Optional[EmailStr] = None
    customer_type: CustomerType = CustomerType.RETAIL
    source: CustomerSource = CustomerSource.OTHER
    ig_handle: Optional[str] = None
    preferred_contact: Optional[str] = None
    notes: Optional[str] = None


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    customer_type: Optional[CustomerType] = None
    source: Optional[CustomerSource] = None
    ig_handle: Optional[str] = None
    preferred_contact: Optional[str] = None
    notes: Optional[str] = None


class CustomerResponse(BaseModel):
    id: int
    name: str
    phone: str
    email: Optional[str] = None
    customer_type: str
    source: str
    ig_handle: Optional[str] = None
    preferred_contact: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CustomerProfile(CustomerResponse):
    purchase_count: int = 0
    total_spent: float = 0.0
    total_profit: float = 0.0
    last_purchase_date: Optional[date] = None
    sales: List[SaleWithDetails] = []
