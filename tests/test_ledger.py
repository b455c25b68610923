from __future__ import annotations

from datetime import datetime

import pytest

from conftest import make_transaction
from fintracker.core.ledger import (
    filter_by_amount,
    group_totals,
    income_expense,
    paginate,
    sort_transactions,
)


def test_filter_by_amount_uses_absolute_values_and_inclusive_bounds():
    txns = [make_transaction(-5), make_transaction(-50), make_transaction(120, type="income"), make_transaction(-500)]

    kept = filter_by_amount(txns, min_amount=50, max_amount=120)

    assert [t.amount for t in kept] == [-50, 120]
    assert filter_by_amount(txns) == txns


def test_sort_transactions_by_amount_and_date():
    old = make_transaction(-30, date=datetime(2024, 1, 1))
    new = make_transaction(-10, date=datetime(2024, 3, 1))
    mid = make_transaction(-20, date=datetime(2024, 2, 1))

    assert sort_transactions([old, new, mid]) == [new, mid, old]
    assert sort_transactions([old, new, mid], "date", "asc") == [old, mid, new]
    assert [t.amount for t in sort_transactions([old, new, mid], "amount", "asc")] == [-30, -20, -10]
    assert sort_transactions([old, new, mid], "unknown") == [new, mid, old]


@pytest.mark.parametrize(
    "page, expected_items, total_pages, has_next, has_prev",
    [
        (1, [0, 1, 2, 3], 3, True, False),
        (2, [4, 5, 6, 7], 3, True, True),
        (3, [8, 9], 3, False, True),
        (4, [], 3, False, True),
    ],
)
def test_paginate(page, expected_items, total_pages, has_next, has_prev):
    items, info = paginate(list(range(10)), page, 4)

    assert items == expected_items
    assert info["total"] == 10
    assert info["current_page"] == page
    assert info["total_pages"] == total_pages
    assert info["has_next_page"] is has_next
    assert info["has_prev_page"] is has_prev


def test_paginate_empty_list_has_no_pages():
    items, info = paginate([], 1, 10)

    assert items == []
    assert info["total_pages"] == 0
    assert info["has_next_page"] is False


def test_group_totals_by_category_largest_first():
    txns = [
        make_transaction(-10, category="Food"),
        make_transaction(-200, category="Rent"),
        make_transaction(-15.5, category="Food"),
    ]

    assert group_totals(txns) == [
        {"category": "Rent", "totalAmount": 200.0, "count": 1},
        {"category": "Food", "totalAmount": 25.5, "count": 2},
    ]


def test_group_totals_by_type_and_month():
    txns = [
        make_transaction(-10, date=datetime(2024, 5, 3, 9)),
        make_transaction(3000, type="income", date=datetime(2024, 5, 28)),
        make_transaction(-40, date=datetime(2024, 4, 2)),
    ]

    by_type = group_totals(txns, "type")
    by_month = group_totals(txns, "month")
    by_day = group_totals(txns, "date")

    assert [(r["type"], r["totalAmount"]) for r in by_type] == [("income", 3000.0), ("expense", 50.0)]
    assert [(r["date"], r["count"]) for r in by_month] == [(datetime(2024, 5, 1), 2), (datetime(2024, 4, 1), 1)]
    assert by_day[-1] == {"date": datetime(2024, 5, 3), "totalAmount": 10.0, "count": 1}


def test_group_totals_unknown_grouping_is_category():
    assert "category" in group_totals([make_transaction(-1)], "weekday")[0]


def test_income_expense_follows_type_field():
    txns = [
        make_transaction(3000, type="income"),
        make_transaction(-400),
        make_transaction(100),
        make_transaction(-250, type="transfer"),
    ]

    totals = income_expense(txns)

    assert totals.income == 3000
    assert totals.expense == 500
    assert totals.balance == 2500
