"""
Update Transaction Use Case
"""
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.services.currency_service import CurrencyService
from fintracker.core.exceptions import BadRequestError, NotFoundError
from fintracker.core.utils import ensure_string_id
from fintracker.models.transaction import Transaction, TransactionUpdate
from fintracker.use_cases.add_transaction import convert_into


class UpdateTransactionUseCase:
    """Use case for partially updating a transaction"""

    def __init__(self, db: Optional[FirestoreService] = None, currency: Optional[CurrencyService] = None):
        self.db = db or FirestoreService()
        self.currency = currency or CurrencyService()

    def execute(self, user_id: str, transaction_id: str, payload: TransactionUpdate) -> Transaction:
        """
        A new amount is converted to the user's currency like a new
        transaction, and replaces any earlier original amount and rate.

        Raises:
            BadRequestError: nothing to update, or a foreign currency without an amount
            NotFoundError: no transaction with this id for the user
        """
        user_id_str = ensure_string_id(user_id)
        changes = payload.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)

        if not changes:
            raise BadRequestError("No fields to update")

        if self.db.find_transaction(user_id_str, transaction_id) is None:
            raise NotFoundError(f"No transaction found with id {transaction_id}")

        if 'amount' in changes or 'currency' in changes:
            user_currency = self.db.get_user_currency(user_id_str)
            target = changes.get('currency') or user_currency

            if 'amount' not in changes:
                if target != user_currency:
                    raise BadRequestError("amount is required when changing currency")
            else:
                changes.update(originalAmount=None, originalCurrency=None, exchangeRate=None)
                if target != user_currency:
                    convert_into(self.currency, changes, changes['amount'], target, user_currency, user_id_str)
                else:
                    changes['currency'] = user_currency

        transaction = self.db.update_transaction(user_id_str, transaction_id, changes)
        if transaction is None:
            raise NotFoundError(f"No transaction found with id {transaction_id}")
        return transaction
