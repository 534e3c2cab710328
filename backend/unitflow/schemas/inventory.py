from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from unitflow.models.inventory import ItemStatus, ModelFamily, ConditionGrade


class InventoryItemBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True, protected_namespaces=())

    po_id: Optional[int] = None
    model_family: ModelFamily
    screen_size: str  # "13", "14", "15", "16"
    chip: str  # "M1", "M2 Pro", "i7", ...
    ram_gb: int = Field(gt=0)
    storage_gb: int = Field(gt=0)
    year: int
    serial_number: Optional[str] = None
    color: Optional[str] = None
    keyboard_layout: Optional[str] = None
    os_installed: Optional[str] = None
    condition_grade: ConditionGrade
    condition_summary: str
    battery_cycle_count: Optional[int] = Field(default=None, ge=0)
    battery_health_percent: Optional[int] = Field(default=None, ge=0, le=100)
    charger_included: bool = False
    box_included: bool = False
    purchase_cost: float = Field(ge=0)
    purchase_date: date
    notes: Optional[str] = None


class InventoryItemCreate(InventoryItemBase):
    """New units always start in stock; sold status comes from recording a sale"""
    supplier_id: int
    supplier_item_number: str  # item_id is composed from supplier code + this


class InventoryItemUpdate(BaseModel):
    """item_id, supplier and supplier item number are fixed once created.
    Status can move between the unsold states only; sales drive sold and back.
    """
    model_config = ConfigDict(use_enum_values=True, protected_namespaces=())

    po_id: Optional[int] = None
    model_family: Optional[ModelFamily] = None
    screen_size: Optional[str] = None
    chip: Optional[str] = None
    ram_gb: Optional[int] = Field(default=None, gt=0)
    storage_gb: Optional[int] = Field(default=None, gt=0)
    year: Optional[int] = None
    serial_number: Optional[str] = None
    color: Optional[str] = None
    keyboard_layout: Optional[str] = None
    os_installed: Optional[str] = None
    condition_grade: Optional[ConditionGrade] = None
    condition_summary: Optional[str] = None
    battery_cycle_count: Optional[int] = Field(default=None, ge=0)
    battery_health_percent: Optional[int] = Field(default=None, ge=0, le=100)
    charger_included: Optional[bool] = None
    box_included: Optional[bool] = None
    purchase_cost: Optional[float] = Field(default=None, ge=0)
    purchase_date: Optional[date] = None
    status: Optional[ItemStatus] = None
    notes: Optional[str] = None


class InventoryItemResponse(BaseModel):
    id: int
    item_id: str
    supplier_id: int
    supplier_item_number: str
    po_id: Optional[int] = None
    model_family: str
    screen_size: str
    chip: str
    ram_gb: int
    storage_gb: int
    year: int
    serial_number: Optional[str] = None
    color: Optional[str] = None
    keyboard_layout: Optional[str] = None
    os_installed: Optional[str] = None
    condition_grade: str
    condition_summary: str
    battery_cycle_count: Optional[int] = None
    battery_health_percent: Optional[int] = None
    charger_included: bool = False
    box_included: bool = False
    purchase_cost: float
    purchase_date: date
    status: str
    sold_date: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())


class InventoryItemWithDetails(InventoryItemResponse):
    supplier_name: Optional[str] = None
    supplier_code: Optional[str] = None
    po_number: Optional[str] = None
    model_label: str = ""
    days_in_stock: int = 0
