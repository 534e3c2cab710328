from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Optional
from datetime import datetime

from unitflow.models.supplier import SupplierType


class SupplierBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    supplier_code: str  # Short code, stored uppercase
    supplier_name: str
    supplier_type: SupplierType = SupplierType.OTHER
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    notes: Optional[str] = None
    is_active: bool = True


class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    supplier_code: Optional[str] = None
    supplier_name: Optional[str] = None
    supplier_type: Optional[SupplierType] = None
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    notes: Optional[str] = None
    is_active: Optional[bool] = None


class SupplierResponse(BaseModel):
    id: int
    supplier_code: str
    supplier_name: str
    supplier_type: str
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SupplierWithStats(SupplierResponse):
    item_count: int = 0
    in_stock_count: int = 0
    purchase_order_count: int = 0
