from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime
import enum


class TargetType(str, enum.Enum):
    REVENUE = "revenue"
    PROFIT = "profit"
    UNITS = "units"
    MARGIN = "margin"


class VisualType(str, enum.Enum):
    PROGRESS = "progress"
    PIE = "pie"
    FUNNEL = "funnel"


class TargetCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    type: TargetType = TargetType.PROFIT
    title: str = Field(min_length=1)
    target_value: float = Field(gt=0)
    deadline: date
    visual_type: VisualType = VisualType.PROGRESS


class TargetUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    type: Optional[TargetType] = None
    title: Optional[str] = Field(default=None, min_length=1)
    target_value: Optional[float] = Field(default=None, gt=0)
    deadline: Optional[date] = None
    visual_type: Optional[VisualType] = None
    completed: Optional[bool] = None


class Target(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    type: TargetType
    title: str
    target_value: float
    deadline: date
    created_at: datetime
    completed: bool = False
    visual_type: VisualType = VisualType.PROGRESS


class TargetProgress(Target):
    current_value: float = 0.0
    percentage: float = 0.0
    remaining: float = 0.0
    days_remaining: int = 0
    is_expired: bool = False
    is_urgent: bool = False  # Deadline within a week
