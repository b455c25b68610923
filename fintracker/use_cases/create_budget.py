"""
Create Budget Use Case
"""
from datetime import datetime
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.core.exceptions import BadRequestError
from fintracker.core.periods import resolve_period
from fintracker.core.utils import ensure_string_id
from fintracker.models.budget import Budget, BudgetCreate, PeriodType


class CreateBudgetUseCase:
    """Use case for creating a budget"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, payload: BudgetCreate, now: Optional[datetime] = None) -> Budget:
        """
        Creates the budget in the user's preferred currency.
        Only one budget per category is allowed.

        Raises:
            BadRequestError: a budget for the category already exists
        """
        user_id_str = ensure_string_id(user_id)

        if self.db.find_budget_by_category(user_id_str, payload.category):
            raise BadRequestError(f"Budget for category {payload.category} already exists")

        data = payload.model_dump(by_alias=True)
        data['currency'] = self.db.get_user_currency(user_id_str)

        # Stored bounds default to the current month
        current_month = resolve_period(PeriodType.MONTHLY, now or datetime.now())
        if data.get('startDate') is None:
            data['startDate'] = current_month.start
        if data.get('endDate') is None:
            data['endDate'] = current_month.end

        return self.db.create_budget(user_id_str, data)
