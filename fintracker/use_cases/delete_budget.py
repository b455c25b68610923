"""
Delete Budget Use Case
"""
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.core.exceptions import NotFoundError
from fintracker.core.utils import ensure_string_id


class DeleteBudgetUseCase:
    """Use case for deleting a budget"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, budget_id: str) -> dict:
        user_id_str = ensure_string_id(user_id)

        if not self.db.delete_budget(user_id_str, budget_id):
            raise NotFoundError(f"No budget found with id {budget_id}")

        return {"msg": "Budget successfully deleted"}
