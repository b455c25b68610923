from typing import Optional

from fastapi import Header

from fintracker.core.exceptions import UnauthenticatedError
from fintracker.services.currency_service import CurrencyService
from fintracker.services.firestore_service import FirestoreService

_db: Optional[FirestoreService] = None
_currency: Optional[CurrencyService] = None


def get_db() -> FirestoreService:
    global _db
    if _db is None:
        _db = FirestoreService()
    return _db


def get_currency_service() -> CurrencyService:
    # One instance per process so the exchange-rate cache is shared
    global _currency
    if _currency is None:
        _currency = CurrencyService()
    return _currency


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Identity set by the upstream gateway"""
    if not x_user_id or not x_user_id.strip():
        raise UnauthenticatedError("Missing X-User-Id header")
    return x_user_id.strip()
