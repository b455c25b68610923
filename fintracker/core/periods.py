"""
Period resolution: date boundaries for budgets and reports
"""
import calendar
from datetime import datetime, timedelta
from typing import Optional

from fintracker.models.budget import Period, PeriodType

# Selector accepted by the budget-vs-actual report
REPORT_PERIODS = {
    "month": PeriodType.MONTHLY,
    "quarter": PeriodType.QUARTERLY,
    "year": PeriodType.YEARLY,
}


def _month_start(now: datetime, month: int) -> datetime:
    return now.replace(month=month, day=1, hour=0, minute=0, second=0, microsecond=0)


def _month_end(now: datetime, month: int) -> datetime:
    last_day = calendar.monthrange(now.year, month)[1]
    return now.replace(month=month, day=last_day, hour=23, minute=59, second=59, microsecond=999000)


def resolve_period(
    period_type: Optional[str],
    now: datetime,
    custom_start: Optional[datetime] = None,
    custom_end: Optional[datetime] = None,
) -> Period:
    """
    Computes the inclusive [start, end] of the period containing `now`.

    monthly, quarterly and yearly always derive from `now`; custom returns the
    stored bounds untouched. Anything unrecognised resolves as monthly.
    """
    if period_type == PeriodType.QUARTERLY:
        first_month = (now.month - 1) // 3 * 3 + 1
        return Period(start=_month_start(now, first_month), end=_month_end(now, first_month + 2))

    if period_type == PeriodType.YEARLY:
        return Period(start=_month_start(now, 1), end=_month_end(now, 12))

    if period_type == PeriodType.CUSTOM and custom_start and custom_end:
        return Period(start=custom_start, end=custom_end)

    return Period(start=_month_start(now, now.month), end=_month_end(now, now.month))


def resolve_report_period(period: Optional[str], now: datetime) -> Period:
    """Maps the month|quarter|year selector to a period; defaults to month"""
    return resolve_period(REPORT_PERIODS.get(period or "month", PeriodType.MONTHLY), now)


SUMMARY_PERIODS = ("week", "month", "year", "all")


def resolve_summary_period(
    period: Optional[str],
    now: datetime,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> Period:
    """
    Date range of a transaction summary: from the start of the current
    week (Monday), month or year up to `now`, or everything up to `now`
    for "all". Explicit start and end dates win over the selector.
    """
    if start_date and end_date:
        return Period(start=start_date, end=end_date)

    if period == "week":
        monday = now - timedelta(days=now.weekday())
        start = monday.replace(hour=0, minute=0, second=0, microsecond=0)
    elif period == "year":
        start = _month_start(now, 1)
    elif period == "all":
        start = datetime(1970, 1, 1, tzinfo=now.tzinfo)
    else:
        start = _month_start(now, now.month)

    return Period(start=start, end=now)
