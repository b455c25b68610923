"""
Update Budget Use Case
"""
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.core.exceptions import BadRequestError, NotFoundError
from fintracker.core.utils import ensure_string_id
from fintracker.models.budget import Budget, BudgetUpdate


class UpdateBudgetUseCase:
    """Use case for partially updating a budget"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, budget_id: str, payload: BudgetUpdate) -> Budget:
        user_id_str = ensure_string_id(user_id)
        changes = payload.model_dump(by_alias=True, exclude_unset=True)

        if not changes:
            raise BadRequestError("No fields to update")

        if self.db.find_budget(user_id_str, budget_id) is None:
            raise NotFoundError(f"No budget found with id {budget_id}")

        category = changes.get('category')
        if category:
            existing = self.db.find_budget_by_category(user_id_str, category)
            if existing and existing.id != budget_id:
                raise BadRequestError(f"Budget for category {category} already exists")

        budget = self.db.update_budget(user_id_str, budget_id, changes)
        if budget is None:
            raise NotFoundError(f"No budget found with id {budget_id}")
        return budget
