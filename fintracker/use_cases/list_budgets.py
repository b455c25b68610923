"""
List Budgets Use Case
"""
from datetime import datetime
from typing import List, Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.use_cases.get_budget import with_progress
from fintracker.core.utils import ensure_string_id
from fintracker.models.budget import BudgetWithProgress


class ListBudgetsUseCase:
    """Use case for listing budgets with progress"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, now: Optional[datetime] = None) -> List[BudgetWithProgress]:
        """
        Every budget is evaluated against its own period type,
        all resolved from the same reference instant.
        """
        user_id_str = ensure_string_id(user_id)
        now = now or datetime.now()

        budgets = self.db.find_budgets(user_id_str)
        return [with_progress(self.db, user_id_str, budget, now) for budget in budgets]
