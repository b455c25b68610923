"""
Transaction Summary Use Case
"""
from datetime import datetime
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.core.ledger import GROUP_BY_FIELDS, group_totals, income_expense
from fintracker.core.periods import SUMMARY_PERIODS, resolve_summary_period
from fintracker.core.utils import ensure_string_id
from fintracker.models.transaction import TransactionSummary


class TransactionSummaryUseCase:
    """Use case for grouped totals and the income/expense balance over a date range"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(
        self,
        user_id: str,
        period: Optional[str] = "month",
        group_by: Optional[str] = "category",
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> TransactionSummary:
        """
        `period` is week|month|year|all and ends at `now`; explicit start and
        end dates replace it and the response reports "custom". Unknown
        periods are treated as month, unknown groupings as category.
        """
        if start_date and end_date:
            period = "custom"
        elif period not in SUMMARY_PERIODS:
            period = "month"
        if group_by not in GROUP_BY_FIELDS:
            group_by = "category"

        window = resolve_summary_period(period, now or datetime.now(), start_date, end_date)
        transactions = self.db.find_transactions(ensure_string_id(user_id), period=window)

        return TransactionSummary(
            summary=group_totals(transactions, group_by),
            income_expense=income_expense(transactions),
            period=period,
            group_by=group_by,
            start_date=window.start,
            end_date=window.end,
        )
