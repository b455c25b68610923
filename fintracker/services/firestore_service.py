"""
Firestore Service - Budget and transaction persistence
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from google.cloud import firestore

from fintracker.services.google_auth import GoogleAuth
from fintracker.core.budgeting import sum_by_category
from fintracker.core.config import DEFAULT_CURRENCY
from fintracker.core.exceptions import FirestoreError
from fintracker.core.utils import encode_value, ensure_string_id
from fintracker.models.budget import Budget, Period
from fintracker.models.transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)


class FirestoreService:
    """
    Persistence in Firestore.

    Layout:
        users/{user_id}                    -> {"preferences": {"currency": ...}}
        users/{user_id}/budgets/{id}       -> Budget (camelCase fields)
        users/{user_id}/transactions/{id}  -> Transaction (camelCase fields)
    """

    def __init__(self, client: Any = None):
        self.db = client if client is not None else GoogleAuth.get_firestore_client()

    def _user(self, user_id: Any):
        if not self.db:
            raise FirestoreError("Firestore is not available")
        return self.db.collection('users').document(ensure_string_id(user_id))

    def _budgets(self, user_id: Any):
        return self._user(user_id).collection('budgets')

    def _transactions(self, user_id: Any):
        return self._user(user_id).collection('transactions')

    @staticmethod
    def _to_budget(doc, user_id: Any) -> Budget:
        data = doc.to_dict()
        data['id'] = doc.id
        data.setdefault('user', ensure_string_id(user_id))
        return Budget.model_validate(data)

    @staticmethod
    def _to_transaction(doc, user_id: Any) -> Transaction:
        data = doc.to_dict()
        data['id'] = doc.id
        data.setdefault('user', ensure_string_id(user_id))
        return Transaction.model_validate(data)

    # --- USER ---
    def get_user_currency(self, user_id: Any) -> str:
        """Preferred currency of the user, default from configuration"""
        doc = self._user(user_id).get()
        if not doc.exists:
            return DEFAULT_CURRENCY

        preferences = (doc.to_dict() or {}).get('preferences') or {}
        return preferences.get('currency') or DEFAULT_CURRENCY

    # --- BUDGETS ---
    def find_budgets(self, user_id: Any) -> List[Budget]:
        """Returns every budget of the user"""
        docs = self._budgets(user_id).stream()
        return [self._to_budget(doc, user_id) for doc in docs]

    def find_budget(self, user_id: Any, budget_id: str) -> Optional[Budget]:
        doc = self._budgets(user_id).document(budget_id).get()
        if not doc.exists:
            return None
        return self._to_budget(doc, user_id)

    def find_budget_by_category(self, user_id: Any, category: str) -> Optional[Budget]:
        docs = (
            self._budgets(user_id)
            .where(filter=firestore.FieldFilter('category', '==', category))
            .limit(1)
            .stream()
        )
        for doc in docs:
            return self._to_budget(doc, user_id)
        return None

    def create_budget(self, user_id: Any, data: Dict[str, Any]) -> Budget:
        """Stores a new budget; `data` uses the camelCase document fields"""
        now = datetime.now()
        document = {**data, 'user': ensure_string_id(user_id), 'createdAt': now, 'updatedAt': now}
        _, ref = self._budgets(user_id).add(encode_value(document))

        logger.info(f"Budget created: user={user_id}, category={data.get('category')}, id={ref.id}")
        return Budget.model_validate({**document, 'id': ref.id})

    def update_budget(self, user_id: Any, budget_id: str, changes: Dict[str, Any]) -> Optional[Budget]:
        """Applies a partial update; returns None when the budget does not exist"""
        ref = self._budgets(user_id).document(budget_id)
        if not ref.get().exists:
            return None

        ref.update(encode_value({**changes, 'updatedAt': datetime.now()}))
        return self._to_budget(ref.get(), user_id)

    def delete_budget(self, user_id: Any, budget_id: str) -> bool:
        ref = self._budgets(user_id).document(budget_id)
        if not ref.get().exists:
            return False

        ref.delete()
        logger.info(f"Budget deleted: user={user_id}, id={budget_id}")
        return True

    # --- TRANSACTIONS ---
    def add_transaction(self, user_id: Any, data: Dict[str, Any]) -> Transaction:
        """Stores a new transaction; `data` uses the camelCase document fields"""
        document = {**data, 'user': ensure_string_id(user_id), 'createdAt': datetime.now()}
        _, ref = self._transactions(user_id).add(encode_value(document))
        return Transaction.model_validate({**document, 'id': ref.id})

    def find_transaction(self, user_id: Any, transaction_id: str) -> Optional[Transaction]:
        doc = self._transactions(user_id).document(transaction_id).get()
        if not doc.exists:
            return None
        return self._to_transaction(doc, user_id)

    def update_transaction(
        self, user_id: Any, transaction_id: str, changes: Dict[str, Any]
    ) -> Optional[Transaction]:
        """Applies a partial update; returns None when the transaction does not exist"""
        ref = self._transactions(user_id).document(transaction_id)
        if not ref.get().exists:
            return None

        ref.update(encode_value({**changes, 'updatedAt': datetime.now()}))
        return self._to_transaction(ref.get(), user_id)

    def delete_transaction(self, user_id: Any, transaction_id: str) -> bool:
        ref = self._transactions(user_id).document(transaction_id)
        if not ref.get().exists:
            return False

        ref.delete()
        logger.info(f"Transaction deleted: user={user_id}, id={transaction_id}")
        return True

    def find_transactions(
        self,
        user_id: Any,
        category: Optional[str] = None,
        period: Optional[Period] = None,
        type: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Transaction]:
        """
        Returns the user's transactions matching the filters, newest first.
        `period` sets both date bounds; `start` and `end` give open-ended ranges.
        """
        if period is not None:
            start, end = period.start, period.end

        query = self._transactions(user_id)

        if category is not None:
            query = query.where(filter=firestore.FieldFilter('category', '==', category))
        if type is not None:
            query = query.where(filter=firestore.FieldFilter('type', '==', type))
        if start is not None:
            query = query.where(filter=firestore.FieldFilter('date', '>=', start))
        if end is not None:
            query = query.where(filter=firestore.FieldFilter('date', '<=', end))

        docs = query.order_by('date', direction=firestore.Query.DESCENDING).stream()
        return [self._to_transaction(doc, user_id) for doc in docs]

    def sum_by_category(
        self, user_id: Any, period: Period, type: str = TransactionType.EXPENSE.value
    ) -> List[Dict[str, Any]]:
        """
        Sum of abs(amount) per category within the period.
        Firestore has no server-side group-by, so the grouping happens here.

        Returns:
            list: [{"category": str, "actual": float}, ...]
        """
        transactions = self.find_transactions(user_id, period=period, type=type)
        totals = sum_by_category(transactions, type=type)
        return [{'category': category, 'actual': actual} for category, actual in totals.items()]
