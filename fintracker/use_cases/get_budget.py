"""
Get Budget Use Case
"""
from datetime import datetime
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.core.budgeting import compute_progress
from fintracker.core.exceptions import NotFoundError
from fintracker.core.periods import resolve_period
from fintracker.core.utils import ensure_string_id
from fintracker.models.budget import Budget, BudgetWithProgress
from fintracker.models.transaction import TransactionType


def with_progress(db: FirestoreService, user_id: str, budget: Budget, now: datetime) -> BudgetWithProgress:
    """Resolves the budget's active period and attaches its progress and transactions"""
    period = resolve_period(budget.period_type, now, budget.start_date, budget.end_date)
    transactions = db.find_transactions(
        user_id,
        category=budget.category,
        period=period,
        type=TransactionType.EXPENSE.value,
    )
    progress = compute_progress(budget, transactions)

    return BudgetWithProgress(
        **budget.model_dump(),
        **progress.model_dump(),
        period_start=period.start,
        period_end=period.end,
        transactions=transactions,
    )


class GetBudgetUseCase:
    """Use case for fetching one budget with its progress"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, budget_id: str, now: Optional[datetime] = None) -> BudgetWithProgress:
        """
        Raises:
            NotFoundError: no budget with this id for the user
        """
        user_id_str = ensure_string_id(user_id)
        budget = self.db.find_budget(user_id_str, budget_id)

        if budget is None:
            raise NotFoundError(f"No budget found with id {budget_id}")

        return with_progress(self.db, user_id_str, budget, now or datetime.now())
