"""
Budget progress and budget-vs-actual aggregation
"""
from typing import Dict, Iterable, List, Mapping, Union

from fintracker.models.budget import (
    Budget,
    BudgetStatus,
    BudgetVsActualItem,
    Progress,
)
from fintracker.models.transaction import Transaction, TransactionType

# A category with spending and no budget is reported as fully used
UNBUDGETED_PERCENT_USED = 100.0

Actuals = Union[Mapping[str, float], Iterable[Mapping]]


def budget_status(percent_spent: float, threshold: float) -> BudgetStatus:
    if percent_spent >= 100:
        return BudgetStatus.EXCEEDED
    if percent_spent >= threshold:
        return BudgetStatus.WARNING
    return BudgetStatus.OK


def compute_progress(budget: Budget, transactions: Iterable[Transaction]) -> Progress:
    """
    Computes spent/remaining/percentSpent/status for a budget.

    The transactions are expected to be already filtered by category and
    period; only expense rows count, by absolute value.
    """
    spent = sum(abs(t.amount) for t in transactions if t.is_expense)
    remaining = budget.amount - spent
    percent_spent = (spent / budget.amount) * 100 if budget.amount > 0 else 0

    return Progress(
        spent=spent,
        remaining=remaining,
        percent_spent=percent_spent,
        status=budget_status(percent_spent, budget.notifications.threshold),
    )


def sum_by_category(
    transactions: Iterable[Transaction], type: str = TransactionType.EXPENSE.value
) -> Dict[str, float]:
    """Sum of abs(amount) of transactions of one type, grouped by category"""
    totals: Dict[str, float] = {}
    for t in transactions:
        if t.type != type:
            continue
        totals[t.category] = totals.get(t.category, 0) + abs(t.amount)
    return totals


def _actuals_mapping(actuals_by_category: Actuals) -> Dict[str, float]:
    if isinstance(actuals_by_category, Mapping):
        return dict(actuals_by_category)
    return {row["category"]: row["actual"] for row in actuals_by_category}


def aggregate(budgets: Iterable[Budget], actuals_by_category: Actuals) -> List[BudgetVsActualItem]:
    """
    Merges budgeted vs actual amounts per category for one shared period.

    Categories with spending but no budget are appended with budget 0 and
    percentUsed 100. The result is sorted by percentUsed, highest first;
    ties keep encounter order.
    """
    actuals = _actuals_mapping(actuals_by_category)
    items: List[BudgetVsActualItem] = []
    budgeted = set()

    for budget in budgets:
        actual = actuals.get(budget.category, 0)
        percent_used = (actual / budget.amount) * 100 if actual > 0 and budget.amount > 0 else 0
        items.append(BudgetVsActualItem(
            category=budget.category,
            budget=budget.amount,
            actual=actual,
            remaining=budget.amount - actual,
            percent_used=percent_used,
        ))
        budgeted.add(budget.category)

    for category, actual in actuals.items():
        if category in budgeted:
            continue
        items.append(BudgetVsActualItem(
            category=category,
            budget=0,
            actual=actual,
            remaining=-actual,
            percent_used=UNBUDGETED_PERCENT_USED,
        ))

    # sorted() is stable
    return sorted(items, key=lambda item: item.percent_used, reverse=True)
