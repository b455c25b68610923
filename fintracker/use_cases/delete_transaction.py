"""
Delete Transaction Use Case
"""
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.core.exceptions import NotFoundError
from fintracker.core.utils import ensure_string_id


class DeleteTransactionUseCase:
    """Use case for deleting a transaction"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, transaction_id: str) -> dict:
        if not self.db.delete_transaction(ensure_string_id(user_id), transaction_id):
            raise NotFoundError(f"No transaction found with id {transaction_id}")
        return {"msg": "Transaction successfully deleted"}
