"""
Add Transaction Use Case
"""
import logging
from typing import Any, Dict, Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.services.currency_service import CurrencyService
from fintracker.core.utils import ensure_string_id
from fintracker.models.transaction import Transaction, TransactionCreate

logger = logging.getLogger(__name__)


def convert_into(
    currency: CurrencyService,
    data: Dict[str, Any],
    amount: float,
    from_currency: str,
    user_currency: str,
    user_id: str,
) -> Dict[str, Any]:
    """
    Writes the converted amount into `data` with the original amount,
    currency and rate. When no rate is available the amount stays in
    `from_currency` and is labelled with it.
    """
    result = currency.convert(amount, from_currency, user_currency)
    if result.error:
        logger.warning(f"Storing unconverted {from_currency} amount for user={user_id}: {result.error}")
        data['amount'] = amount
        data['currency'] = from_currency
        return data

    data['originalAmount'] = amount
    data['originalCurrency'] = from_currency
    data['amount'] = result.converted_amount
    data['exchangeRate'] = result.exchange_rate
    data['currency'] = user_currency
    return data


class AddTransactionUseCase:
    """Use case for recording a transaction"""

    def __init__(self, db: Optional[FirestoreService] = None, currency: Optional[CurrencyService] = None):
        self.db = db or FirestoreService()
        self.currency = currency or CurrencyService()

    def execute(self, user_id: str, payload: TransactionCreate) -> Transaction:
        """
        Stores the transaction in the user's preferred currency.
        A foreign-currency amount is converted and the original amount,
        currency and rate are kept alongside it.
        """
        user_id_str = ensure_string_id(user_id)
        user_currency = self.db.get_user_currency(user_id_str)
        data = payload.model_dump(by_alias=True)

        if payload.currency and payload.currency != user_currency:
            convert_into(self.currency, data, payload.amount, payload.currency, user_currency, user_id_str)
        else:
            data['currency'] = user_currency

        return self.db.add_transaction(user_id_str, data)
