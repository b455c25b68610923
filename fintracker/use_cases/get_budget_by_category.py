"""
Get Budget By Category Use Case
"""
from datetime import datetime
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.use_cases.get_budget import with_progress
from fintracker.core.exceptions import NotFoundError
from fintracker.core.utils import ensure_string_id
from fintracker.models.budget import BudgetWithProgress


class GetBudgetByCategoryUseCase:
    """Use case for fetching the budget of a category"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, category: str, now: Optional[datetime] = None) -> BudgetWithProgress:
        user_id_str = ensure_string_id(user_id)
        budget = self.db.find_budget_by_category(user_id_str, category)

        if budget is None:
            raise NotFoundError(f"No budget found for category {category}")

        return with_progress(self.db, user_id_str, budget, now or datetime.now())
