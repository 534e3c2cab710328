from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from unitflow.models.purchase_order import PurchaseOrderStatus


class PurchaseOrderBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    po_number: str
    supplier_id: int
    order_date: date
    expected_delivery_date: Optional[date] = None
    status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING
    total_amount: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None


class PurchaseOrderCreate(PurchaseOrderBase):
    pass


class PurchaseOrderUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    po_number: Optional[str] = None
    supplier_id: Optional[int] = None
    order_date: Optional[date] = None
    expected_delivery_date: Optional[date] = None
    status: Optional[PurchaseOrderStatus] = None
    total_amount: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None


class PurchaseOrderResponse(BaseModel):
    id: int
    po_number: str
    supplier_id: int
    order_date: date
    expected_delivery_date: Optional[date] = None
    status: str
    total_amount: Optional[float] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PurchaseOrderWithDetails(PurchaseOrderResponse):
    supplier_name: Optional[str] = None
    item_count: int = 0
    items_cost: float = 0.0  # Purchase cost of linked units
