from __future__ import annotations

import pytest

from conftest import make_budget, make_transaction
from fintracker.core.budgeting import aggregate, budget_status, compute_progress, sum_by_category


def test_progress_under_threshold_is_ok():
    budget = make_budget(amount=500)
    txns = [make_transaction(-200), make_transaction(-150)]

    progress = compute_progress(budget, txns)

    assert progress.spent == 350
    assert progress.remaining == 150
    assert progress.percent_spent == pytest.approx(70)
    assert progress.status == "ok"


def test_progress_over_threshold_is_warning():
    budget = make_budget(amount=500)
    txns = [make_transaction(-400), make_transaction(-10)]

    progress = compute_progress(budget, txns)

    assert progress.spent == 410
    assert progress.percent_spent == pytest.approx(82)
    assert progress.status == "warning"


def test_progress_over_budget_is_exceeded_with_negative_remaining():
    budget = make_budget(amount=500)
    txns = [make_transaction(-300), make_transaction(-220)]

    progress = compute_progress(budget, txns)

    assert progress.percent_spent == pytest.approx(104)
    assert progress.remaining == -20
    assert progress.status == "exceeded"


def test_progress_exactly_at_budget_is_exceeded():
    progress = compute_progress(make_budget(amount=100), [make_transaction(-100)])

    assert progress.status == "exceeded"


def test_progress_sums_absolute_amounts_of_expenses_only():
    budget = make_budget(amount=1000)
    txns = [
        make_transaction(-100),
        make_transaction(50),  # positive expense still counts by absolute value
        make_transaction(900, type="income"),
        make_transaction(-75, type="transfer"),
    ]

    assert compute_progress(budget, txns).spent == 150


def test_progress_with_zero_budget_never_divides_by_zero():
    progress = compute_progress(make_budget(amount=0), [make_transaction(-42)])

    assert progress.percent_spent == 0
    assert progress.remaining == -42
    assert progress.status == "ok"


def test_progress_without_transactions_is_zeroed():
    progress = compute_progress(make_budget(amount=500), [])

    assert (progress.spent, progress.remaining, progress.percent_spent, progress.status) == (0, 500, 0, "ok")


def test_progress_is_repeatable():
    budget = make_budget(amount=500)
    txns = [make_transaction(-200), make_transaction(-150)]

    assert compute_progress(budget, txns) == compute_progress(budget, txns)


def test_zero_threshold_warns_on_any_spending():
    budget = make_budget(amount=500, notifications={"threshold": 0})

    assert compute_progress(budget, []).status == "warning"


@pytest.mark.parametrize(
    "percent, threshold, expected",
    [(79.99, 80, "ok"), (80, 80, "warning"), (99.9, 80, "warning"), (100, 80, "exceeded"), (150, 100, "exceeded")],
)
def test_budget_status_boundaries(percent, threshold, expected):
    assert budget_status(percent, threshold) == expected


def test_aggregate_adds_unbudgeted_categories_and_sorts_them_first():
    result = aggregate([make_budget(category="Food", amount=500)], [{"category": "Travel", "actual": 120}])

    assert [item.category for item in result] == ["Travel", "Food"]
    travel, food = result
    assert (travel.budget, travel.actual, travel.remaining, travel.percent_used) == (0, 120, -120, 100)
    assert (food.budget, food.actual, food.remaining, food.percent_used) == (500, 0, 500, 0)


def test_aggregate_accepts_a_mapping_of_actuals():
    result = aggregate([make_budget(category="Food", amount=200)], {"Food": 50})

    assert result[0].percent_used == pytest.approx(25)
    assert result[0].remaining == 150


def test_aggregate_zero_budget_with_spending_reports_zero_percent():
    result = aggregate([make_budget(category="Gifts", amount=0)], {"Gifts": 30})

    assert result[0].percent_used == 0
    assert result[0].remaining == -30


def test_aggregate_sorts_descending_and_keeps_ties_in_encounter_order():
    budgets = [
        make_budget(id="1", category="Rent", amount=1000),
        make_budget(id="2", category="Food", amount=100),
        make_budget(id="3", category="Fun", amount=100),
        make_budget(id="4", category="Books", amount=50),
    ]
    actuals = {"Rent": 500, "Food": 120, "Books": 25, "Taxi": 10, "Coffee": 5}

    result = aggregate(budgets, actuals)

    assert [item.category for item in result] == ["Food", "Taxi", "Coffee", "Rent", "Books", "Fun"]
    percents = [item.percent_used for item in result]
    assert percents == sorted(percents, reverse=True)


def test_aggregate_empty_inputs():
    assert aggregate([], {}) == []


def test_sum_by_category_groups_expenses_in_first_seen_order():
    txns = [
        make_transaction(-10, category="Food"),
        make_transaction(-5, category="Travel"),
        make_transaction(20, category="Food"),
        make_transaction(1000, category="Salary", type="income"),
    ]

    assert sum_by_category(txns) == {"Food": 30, "Travel": 5}
    assert list(sum_by_category(txns)) == ["Food", "Travel"]
    assert sum_by_category(txns, type="income") == {"Salary": 1000}
