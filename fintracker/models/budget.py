"""
Budget Models
"""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from fintracker.models.base import CamelModel
from fintracker.models.transaction import Transaction


def comparable(value: datetime) -> datetime:
    """Naive datetimes are read as UTC so they compare with Firestore timestamps"""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def check_date_order(start: Optional[datetime], end: Optional[datetime]) -> None:
    if start and end and comparable(start) > comparable(end):
        raise ValueError("startDate must be <= endDate")


class PeriodType(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"
    CUSTOM = "custom"


class BudgetStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"
    EXCEEDED = "exceeded"


class BudgetNotifications(CamelModel):
    enabled: bool = False
    threshold: float = Field(default=80, ge=0, le=100)


class Budget(CamelModel):
    """Stored budget, one per (user, category)"""
    id: str
    user: str
    category: str
    amount: float = Field(ge=0)
    currency: str = "USD"
    # Kept as plain text: an unknown stored value resolves as monthly
    period_type: Optional[str] = PeriodType.MONTHLY.value
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    rollover: bool = False
    rollover_amount: float = 0
    notifications: BudgetNotifications = Field(default_factory=BudgetNotifications)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Period(CamelModel):
    """Inclusive date range a budget is evaluated against"""
    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end


class Progress(CamelModel):
    spent: float = 0
    remaining: float = 0
    percent_spent: float = 0
    status: BudgetStatus = BudgetStatus.OK


class BudgetWithProgress(Budget):
    """Budget enriched with its progress over the active period"""
    spent: float = 0
    remaining: float = 0
    percent_spent: float = 0
    status: BudgetStatus = BudgetStatus.OK
    period_start: datetime
    period_end: datetime
    transactions: List[Transaction] = Field(default_factory=list)


class BudgetVsActualItem(CamelModel):
    category: str
    budget: float
    actual: float
    remaining: float
    percent_used: float


class BudgetVsActualReport(CamelModel):
    budget_vs_actual: List[BudgetVsActualItem] = Field(default_factory=list)
    period: str
    start_date: datetime
    end_date: datetime


class BudgetCreate(CamelModel):
    """Payload for creating a budget"""
    category: str = Field(min_length=1)
    amount: float = Field(ge=0)
    period_type: PeriodType = PeriodType.MONTHLY
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    rollover: bool = False
    rollover_amount: float = 0
    notifications: BudgetNotifications = Field(default_factory=BudgetNotifications)

    @field_validator("category", mode="before")
    @classmethod
    def strip_category(cls, value):
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def validate_dates(self) -> "BudgetCreate":
        check_date_order(self.start_date, self.end_date)
        return self


class BudgetUpdate(CamelModel):
    """Partial update; only the fields sent are changed"""
    category: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[float] = Field(default=None, ge=0)
    period_type: Optional[PeriodType] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    rollover: Optional[bool] = None
    rollover_amount: Optional[float] = None
    notifications: Optional[BudgetNotifications] = None

    @field_validator("category", mode="before")
    @classmethod
    def strip_category(cls, value):
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def validate_dates(self) -> "BudgetUpdate":
        check_date_order(self.start_date, self.end_date)
        return self
