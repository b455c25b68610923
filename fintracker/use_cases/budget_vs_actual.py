"""
Budget vs Actual Use Case
"""
from datetime import datetime
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.core.budgeting import aggregate
from fintracker.core.periods import REPORT_PERIODS, resolve_report_period
from fintracker.core.utils import ensure_string_id
from fintracker.models.budget import BudgetVsActualReport


class BudgetVsActualUseCase:
    """Use case for the budget-vs-actual report"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, period: Optional[str] = "month", now: Optional[datetime] = None) -> BudgetVsActualReport:
        """
        Compares every budget against the spending of one shared period
        (month, quarter or year), regardless of each budget's own period type.
        An unknown selector is treated as month.
        """
        user_id_str = ensure_string_id(user_id)
        selector = period if period in REPORT_PERIODS else "month"
        window = resolve_report_period(selector, now or datetime.now())

        budgets = self.db.find_budgets(user_id_str)
        actuals = self.db.sum_by_category(user_id_str, window)

        return BudgetVsActualReport(
            budget_vs_actual=aggregate(budgets, actuals),
            period=selector,
            start_date=window.start,
            end_date=window.end,
        )
