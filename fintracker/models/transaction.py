"""
Transaction Models
"""
import re
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from fintracker.core.config import SUPPORTED_CURRENCIES
from fintracker.core.utils import to_float
from fintracker.models.base import CamelModel


class TransactionType(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"
    TRANSFER = "transfer"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CREDIT_CARD = "credit card"
    DEBIT_CARD = "debit card"
    BANK_TRANSFER = "bank transfer"
    MOBILE_PAYMENT = "mobile payment"
    OTHER = "other"


def parse_amount(value: Any) -> float:
    """
    Parses a payload amount with to_float.
    Unlike to_float, a missing value or text without digits is an error.
    """
    if value is None:
        raise ValueError("amount is required")
    if isinstance(value, str) and not re.search(r'\d', value):
        raise ValueError(f"amount is not a number: {value!r}")
    return to_float(value)


def normalize_currency(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip().upper() or None
        if value and value not in SUPPORTED_CURRENCIES:
            raise ValueError(f"unsupported currency {value}")
    return value


class Transaction(CamelModel):
    """Stored transaction"""
    id: str
    user: str
    amount: float
    currency: str = "USD"
    original_amount: Optional[float] = None
    original_currency: Optional[str] = None
    exchange_rate: Optional[float] = None
    date: datetime
    description: str = ""
    category: str
    type: TransactionType = TransactionType.EXPENSE
    payment_method: PaymentMethod = PaymentMethod.OTHER
    is_recurring: bool = False
    tags: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE


class TransactionCreate(CamelModel):
    """Payload for creating a transaction"""
    amount: float
    currency: Optional[str] = None
    date: datetime = Field(default_factory=datetime.now)
    description: str = Field(min_length=1, max_length=100)
    category: str = Field(min_length=1)
    type: TransactionType = TransactionType.EXPENSE
    payment_method: PaymentMethod = PaymentMethod.OTHER
    is_recurring: bool = False
    tags: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, value: Any) -> float:
        # Accepts "50.00", "$ 50.00", "1,250" or "1.250,75"
        return parse_amount(value)

    @field_validator("description", "category", "notes", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("currency", mode="before")
    @classmethod
    def upper_currency(cls, value: Any) -> Any:
        return normalize_currency(value)


class TransactionUpdate(CamelModel):
    """Partial update; only the fields sent are changed"""
    amount: Optional[float] = None
    currency: Optional[str] = None
    date: Optional[datetime] = None
    description: Optional[str] = Field(default=None, min_length=1, max_length=100)
    category: Optional[str] = Field(default=None, min_length=1)
    type: Optional[TransactionType] = None
    payment_method: Optional[PaymentMethod] = None
    is_recurring: Optional[bool] = None
    tags: Optional[List[str]] = None
    notes: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, value: Any) -> Optional[float]:
        if value is None:
            return None
        return parse_amount(value)

    @field_validator("description", "category", "notes", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("currency", mode="before")
    @classmethod
    def upper_currency(cls, value: Any) -> Any:
        return normalize_currency(value)


class TransactionQuery(CamelModel):
    """Filters, ordering and page of the transaction listing"""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    category: Optional[str] = None
    type: Optional[TransactionType] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    sort: str = "date"
    order: str = "desc"
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class TransactionPage(CamelModel):
    transactions: List[Transaction] = Field(default_factory=list)
    count: int = 0
    total_transactions: int = 0
    current_page: int = 1
    total_pages: int = 0
    has_next_page: bool = False
    has_prev_page: bool = False


class IncomeExpense(CamelModel):
    income: float = 0
    expense: float = 0
    balance: float = 0


class TransactionSummary(CamelModel):
    """
    Totals over a date range.

    `summary` rows are keyed by the grouping field ("category", "type") or by
    "date" for the date and month groupings, plus totalAmount and count.
    """
    summary: List[Dict[str, Any]] = Field(default_factory=list)
    income_expense: IncomeExpense = Field(default_factory=IncomeExpense)
    period: str
    group_by: str
    start_date: datetime
    end_date: datetime
