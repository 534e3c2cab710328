from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from unitflow.models.sale import PaymentMethod, SaleChannel


class SaleBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True, protected_namespaces=())

    item_id: int  # inventory_items.id
    customer_id: Optional[int] = None
    sale_price: float = Field(gt=0)
    sale_date: date
    payment_method: PaymentMethod
    channel: SaleChannel
    notes: Optional[str] = None


class SaleCreate(SaleBase):
    pass


class SaleResponse(BaseModel):
    id: int
    item_id: int
    customer_id: Optional[int] = None
    sale_price: float
    sale_date: date
    payment_method: str
    channel: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())


class SaleWithDetails(SaleResponse):
    item_code: Optional[str] = None  # inventory item_id, e.g. "FB0042"
    model_label: Optional[str] = None
    purchase_cost: Optional[float] = None
    customer_name: Optional[str] = None
    profit: Optional[float] = None
    margin: Optional[float] = None
