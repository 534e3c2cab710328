from pydantic import BaseModel
from typing import Dict, List, Optional
from datetime import date
import enum

from unitflow.schemas.target import TargetProgress


class DateRange(str, enum.Enum):
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    LAST_MONTH = "last_month"
    ALL = "all"


class SummaryStats(BaseModel):
    total_revenue: float = 0.0
    total_profit: float = 0.0
    units_sold: int = 0
    avg_margin: float = 0.0  # Percentage


class ModelPerformance(BaseModel):
    model: str  # e.g. 'MacBook Pro 14"'
    units: int = 0
    revenue: float = 0.0
    profit: float = 0.0
    margin: float = 0.0


class SupplierPerformance(BaseModel):
    supplier_name: str
    units: int = 0
    revenue: float = 0.0
    profit: float = 0.0
    margin: float = 0.0
    avg_days_to_sell: int = 0


class CustomerPerformance(BaseModel):
    customer_name: str
    purchases: int = 0
    spent: float = 0.0
    profit: float = 0.0
    last_purchase: Optional[date] = None


class ModelStock(BaseModel):
    model: str
    count: int = 0
    value: float = 0.0


class InventorySnapshot(BaseModel):
    total_units: int = 0
    total_value: float = 0.0
    aging_buckets: Dict[str, int] = {}
    model_counts: List[ModelStock] = []


class Dashboard(BaseModel):
    date_range: DateRange
    start_date: Optional[date] = None
    stats: SummaryStats
    top_models: List[ModelPerformance] = []
    top_suppliers: List[SupplierPerformance] = []
    top_customers: List[CustomerPerformance] = []
    inventory: InventorySnapshot
    targets: List[TargetProgress] = []
