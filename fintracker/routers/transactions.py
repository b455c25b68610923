"""
Transactions Router
"""
from datetime import datetime
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status

from fintracker.deps import get_currency_service, get_db, get_user_id
from fintracker.models.transaction import (
    TransactionCreate,
    TransactionQuery,
    TransactionType,
    TransactionUpdate,
)
from fintracker.services.currency_service import CurrencyService
from fintracker.services.firestore_service import FirestoreService
from fintracker.use_cases.add_transaction import AddTransactionUseCase
from fintracker.use_cases.delete_transaction import DeleteTransactionUseCase
from fintracker.use_cases.get_transaction import GetTransactionUseCase
from fintracker.use_cases.list_transactions import ListTransactionsUseCase
from fintracker.use_cases.transaction_summary import TransactionSummaryUseCase
from fintracker.use_cases.update_transaction import UpdateTransactionUseCase

router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


@router.get("")
def list_transactions(
    start_date: Optional[datetime] = Query(default=None, alias="startDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate"),
    category: Optional[str] = None,
    type: Optional[TransactionType] = None,
    min_amount: Optional[float] = Query(default=None, alias="minAmount"),
    max_amount: Optional[float] = Query(default=None, alias="maxAmount"),
    sort: Literal["date", "amount", "category", "description", "type"] = "date",
    order: Literal["asc", "desc"] = "desc",
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    user_id: str = Depends(get_user_id),
    db: FirestoreService = Depends(get_db),
):
    """Filtered, sorted and paginated transactions"""
    query = TransactionQuery(
        start_date=start_date,
        end_date=end_date,
        category=category,
        type=type,
        min_amount=min_amount,
        max_amount=max_amount,
        sort=sort,
        order=order,
        page=page,
        limit=limit,
    )
    return ListTransactionsUseCase(db).execute(user_id, query)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_transaction(
    payload: TransactionCreate,
    user_id: str = Depends(get_user_id),
    db: FirestoreService = Depends(get_db),
    currency: CurrencyService = Depends(get_currency_service),
):
    """Records a transaction, converting it to the user's currency when needed"""
    transaction = AddTransactionUseCase(db, currency).execute(user_id, payload)
    return {"transaction": transaction}


@router.get("/summary")
def transaction_summary(
    period: Optional[str] = "month",
    group_by: Optional[str] = Query(default="category", alias="groupBy"),
    start_date: Optional[datetime] = Query(default=None, alias="startDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate"),
    user_id: str = Depends(get_user_id),
    db: FirestoreService = Depends(get_db),
):
    """Totals grouped by category, type, date or month, plus income vs expense"""
    return TransactionSummaryUseCase(db).execute(user_id, period, group_by, start_date, end_date)


@router.get("/{transaction_id}")
def get_transaction(transaction_id: str, user_id: str = Depends(get_user_id), db: FirestoreService = Depends(get_db)):
    return {"transaction": GetTransactionUseCase(db).execute(user_id, transaction_id)}


@router.patch("/{transaction_id}")
def update_transaction(
    transaction_id: str,
    payload: TransactionUpdate,
    user_id: str = Depends(get_user_id),
    db: FirestoreService = Depends(get_db),
    currency: CurrencyService = Depends(get_currency_service),
):
    return {"transaction": UpdateTransactionUseCase(db, currency).execute(user_id, transaction_id, payload)}


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: str, user_id: str = Depends(get_user_id), db: FirestoreService = Depends(get_db)
):
    return DeleteTransactionUseCase(db).execute(user_id, transaction_id)
