"""
List Transactions Use Case
"""
from typing import Optional

from fintracker.services.firestore_service import FirestoreService
from fintracker.core.ledger import filter_by_amount, paginate, sort_transactions
from fintracker.core.utils import ensure_string_id
from fintracker.models.transaction import TransactionPage, TransactionQuery


class ListTransactionsUseCase:
    """Use case for the filtered, sorted and paginated transaction listing"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, query: Optional[TransactionQuery] = None) -> TransactionPage:
        """
        Category, type and date filters run in Firestore; the amount range,
        ordering and page slicing run on the matching rows, since Firestore
        allows a range filter on one field per query.
        """
        query = query or TransactionQuery()
        transactions = self.db.find_transactions(
            ensure_string_id(user_id),
            category=query.category,
            type=query.type,
            start=query.start_date,
            end=query.end_date,
        )

        transactions = filter_by_amount(transactions, query.min_amount, query.max_amount)
        transactions = sort_transactions(transactions, query.sort, query.order)
        items, info = paginate(transactions, query.page, query.limit)

        return TransactionPage(
            transactions=items,
            count=len(items),
            total_transactions=info["total"],
            current_page=info["current_page"],
            total_pages=info["total_pages"],
            has_next_page=info["has_next_page"],
            has_prev_page=info["has_prev_page"],
        )
