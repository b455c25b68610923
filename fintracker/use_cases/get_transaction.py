"""
Get Transaction Use Case
"""
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.core.exceptions import NotFoundError
from fintracker.core.utils import ensure_string_id
from fintracker.models.transaction import Transaction


class GetTransactionUseCase:
    """Use case for fetching one transaction"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, transaction_id: str) -> Transaction:
        transaction = self.db.find_transaction(ensure_string_id(user_id), transaction_id)
        if transaction is None:
            raise NotFoundError(f"No transaction found with id {transaction_id}")
        return transaction
