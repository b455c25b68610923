"""
Transaction listing and summary helpers: amount filters, ordering,
pagination and grouped totals
"""
import math
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from fintracker.models.transaction import IncomeExpense, Transaction, TransactionType

# API sort key -> Transaction attribute
SORT_FIELDS = {
    "date": "date",
    "amount": "amount",
    "category": "category",
    "description": "description",
    "type": "type",
}

GROUP_BY_FIELDS = ("category", "type", "date", "month")


def filter_by_amount(
    transactions: Iterable[Transaction],
    min_amount: Optional[float] = None,
    max_amount: Optional[float] = None,
) -> List[Transaction]:
    """Keeps transactions whose abs(amount) lies within the inclusive bounds"""
    result = []
    for txn in transactions:
        value = abs(txn.amount)
        if min_amount is not None and value < min_amount:
            continue
        if max_amount is not None and value > max_amount:
            continue
        result.append(txn)
    return result


def sort_transactions(transactions: Iterable[Transaction], sort: str = "date", order: str = "desc") -> List[Transaction]:
    """Unknown sort keys order by date"""
    attr = SORT_FIELDS.get(sort, "date")
    return sorted(transactions, key=lambda txn: getattr(txn, attr), reverse=order != "asc")


def paginate(items: List[Any], page: int, limit: int) -> Tuple[List[Any], Dict[str, Any]]:
    """
    Slices one page out of `items`.

    Returns:
        tuple: (page items, {"total", "current_page", "total_pages",
        "has_next_page", "has_prev_page"})
    """
    page = max(1, page)
    limit = max(1, limit)
    total = len(items)
    total_pages = math.ceil(total / limit)
    start = (page - 1) * limit

    return items[start:start + limit], {
        "total": total,
        "current_page": page,
        "total_pages": total_pages,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
    }


def _group_key(group_by: str) -> Tuple[str, Callable[[Transaction], Any]]:
    if group_by == "type":
        return "type", lambda txn: txn.type
    if group_by == "date":
        return "date", lambda txn: txn.date.replace(hour=0, minute=0, second=0, microsecond=0)
    if group_by == "month":
        return "date", lambda txn: txn.date.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return "category", lambda txn: txn.category


def group_totals(transactions: Iterable[Transaction], group_by: str = "category") -> List[Dict[str, Any]]:
    """
    Sums abs(amount) and counts transactions per group, largest total first.
    Unknown groupings fall back to category.
    """
    field, key_of = _group_key(group_by)
    totals: Dict[Any, Dict[str, Any]] = {}

    for txn in transactions:
        key = key_of(txn)
        row = totals.setdefault(key, {field: key, "totalAmount": 0.0, "count": 0})
        row["totalAmount"] += abs(txn.amount)
        row["count"] += 1

    return sorted(totals.values(), key=lambda row: row["totalAmount"], reverse=True)


def income_expense(transactions: Iterable[Transaction]) -> IncomeExpense:
    """Income and expense totals by the `type` field; transfers count in neither"""
    income = 0.0
    expense = 0.0
    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            income += abs(txn.amount)
        elif txn.type == TransactionType.EXPENSE:
            expense += abs(txn.amount)
    return IncomeExpense(income=income, expense=expense, balance=income - expense)
