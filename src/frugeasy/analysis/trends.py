#!/usr/bin/env python3
"""
Trend and Projection Analysis

Period-over-period deltas, spending pace and per-day activity for a month.

Projections are simple linear extrapolations of month-to-date spending.
Callers supply the elapsed day count (see MonthWindow.days_elapsed), so
nothing here depends on the wall clock.
"""

from collections.abc import Sequence

from ..core.dates import days_in_month, parse_instant
from ..core.models import CategoryComparison, DailyPoint, Transaction, TransactionType
from .categories import sum_by_category


def delta_pct(current: float, previous: float) -> float:
    """
    Percentage change from previous to current.

    A zero baseline yields 100 for any growth and 0 otherwise.

    Examples:
        delta_pct(200, 100) -> 100.0
        delta_pct(5, 0) -> 100.0
        delta_pct(0, 0) -> 0.0
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return (current - previous) / previous * 100


def weekly_burn(expense_total: float, days_elapsed: int) -> float:
    """Average spend per week so far this month (0 when no days have elapsed)."""
    if days_elapsed <= 0:
        return 0.0
    return (expense_total / days_elapsed) * 7


def projected_month_end(expense_total: float, days_elapsed: int, days_in_month: int) -> float:
    """
    Extrapolate month-to-date spending to the whole month.

    Args:
        expense_total: Expense so far this month
        days_elapsed: Days of the month that have started
        days_in_month: Calendar length of the month

    Returns:
        Projected month-end expense; the actual total when no days have elapsed
    """
    if days_elapsed <= 0:
        return expense_total
    return (expense_total / days_elapsed) * days_in_month


def daily_series(records: Sequence[Transaction], year: int, month_index: int) -> list[DailyPoint]:
    """
    Bucket income and expense by UTC day of month.

    Every day of the month gets a point, with or without activity. Records
    from other months or with unparseable dates are skipped.

    Args:
        records: Transactions to bucket
        year: Calendar year
        month_index: Zero-based month (January = 0)

    Returns:
        One DailyPoint per calendar day, in day order (empty for a month
        index outside 0-11)
    """
    if not 0 <= month_index <= 11:
        return []

    length = days_in_month(year, month_index)
    income = [0.0] * length
    expense = [0.0] * length

    for record in records:
        instant = parse_instant(record.date)
        if instant is None or instant.year != year or instant.month - 1 != month_index:
            continue
        index = instant.day - 1
        if not 0 <= index < length:
            continue
        if record.type is TransactionType.INCOME:
            income[index] += record.amount
        else:
            expense[index] += record.amount

    return [DailyPoint(day=i + 1, income=income[i], expense=expense[i]) for i in range(length)]


def category_comparison(
    current: Sequence[Transaction], previous: Sequence[Transaction]
) -> list[CategoryComparison]:
    """
    Compare per-category activity between two periods.

    Income and expense are summed together per category. Every category seen
    in either period is reported, largest current amount first; ties keep the
    order categories were first seen (current period, then previous).

    Args:
        current: Records of the period being reported
        previous: Records of the comparison period

    Returns:
        CategoryComparison list sorted by current amount descending
    """
    current_totals = sum_by_category(current)
    previous_totals = sum_by_category(previous)

    categories = list(current_totals)
    categories.extend(category for category in previous_totals if category not in current_totals)

    comparisons = []
    for category in categories:
        now = current_totals.get(category, 0.0)
        before = previous_totals.get(category, 0.0)
        comparisons.append(
            CategoryComparison(
                category=category,
                current=now,
                previous=before,
                delta_pct=delta_pct(now, before),
            )
        )

    comparisons.sort(key=lambda entry: entry.current, reverse=True)
    return comparisons
