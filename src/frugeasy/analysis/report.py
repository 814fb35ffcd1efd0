#!/usr/bin/env python3
"""
Monthly Report Assembly

Runs one full analysis pass for a month: window selection, totals, category
breakdowns, pace projections, outliers, nudges and budget progress, bundled
into a single immutable report.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..core.dates import MonthWindow
from ..core.models import (
    Budget,
    BudgetProgress,
    CategoryComparison,
    CategoryTotal,
    DailyPoint,
    MonthlyTotals,
    Transaction,
    TransactionType,
)
from .categories import budget_progress, category_totals
from .insights import largest_transactions, smart_nudges, unusual_transactions
from .summary import filter_by_month, monthly_totals
from .trends import category_comparison, daily_series, projected_month_end, weekly_burn

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyReport:
    """Everything the summary screen shows for one month."""

    window: MonthWindow
    days_elapsed: int
    totals: MonthlyTotals
    previous_totals: MonthlyTotals
    expense_categories: list[CategoryTotal]
    income_categories: list[CategoryTotal]
    daily: list[DailyPoint]
    weekly_burn: float
    projected_expense: float
    comparison: list[CategoryComparison]
    largest: list[Transaction]
    unusual: list[Transaction]
    nudges: list[str]
    budgets: list[BudgetProgress]

    @property
    def active_days(self) -> int:
        """Days of the month with any recorded activity."""
        return sum(1 for point in self.daily if point.income or point.expense)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dict for JSON serialization."""
        return {
            "month": self.window.key,
            "label": self.window.label,
            "daysElapsed": self.days_elapsed,
            "daysInMonth": self.window.days_in_month,
            "totals": self.totals.to_dict(),
            "previousTotals": self.previous_totals.to_dict(),
            "expenseCategories": [entry.to_dict() for entry in self.expense_categories],
            "incomeCategories": [entry.to_dict() for entry in self.income_categories],
            "daily": [point.to_dict() for point in self.daily],
            "weeklyBurn": self.weekly_burn,
            "projectedExpense": self.projected_expense,
            "comparison": [entry.to_dict() for entry in self.comparison],
            "largest": [record.to_dict() for record in self.largest],
            "unusual": [record.to_dict() for record in self.unusual],
            "nudges": list(self.nudges),
            "budgets": [entry.to_dict() for entry in self.budgets],
        }


def build_monthly_report(
    records: Sequence[Transaction],
    window: MonthWindow,
    now: str | datetime,
    budgets: Iterable[Budget] = (),
    largest_limit: int = 5,
) -> MonthlyReport:
    """
    Analyze one month of a transaction snapshot.

    Args:
        records: Full snapshot; the month and its predecessor are selected here
        window: Month to report on
        now: Injected current instant, used only to count elapsed days
        budgets: Budgets to report on; only those keyed to this month are used
        largest_limit: How many of the largest transactions to list

    Returns:
        MonthlyReport for the window
    """
    previous_window = window.previous()
    current = filter_by_month(records, window.year, window.month_index)
    previous = filter_by_month(records, previous_window.year, previous_window.month_index)
    logger.debug(
        "Report %s: %d of %d records in month, %d in %s",
        window.key,
        len(current),
        len(records),
        len(previous),
        previous_window.key,
    )

    totals = monthly_totals(current)
    elapsed = window.days_elapsed(now)
    month_budgets = [budget for budget in budgets if budget.month_key == window.key]

    return MonthlyReport(
        window=window,
        days_elapsed=elapsed,
        totals=totals,
        previous_totals=monthly_totals(previous),
        expense_categories=category_totals(current, TransactionType.EXPENSE),
        income_categories=category_totals(current, TransactionType.INCOME),
        daily=daily_series(current, window.year, window.month_index),
        weekly_burn=weekly_burn(totals.expense, elapsed),
        projected_expense=projected_month_end(totals.expense, elapsed, window.days_in_month),
        comparison=category_comparison(current, previous),
        largest=largest_transactions(current, largest_limit),
        unusual=unusual_transactions(current),
        nudges=smart_nudges(current, previous),
        budgets=budget_progress(current, month_budgets),
    )
