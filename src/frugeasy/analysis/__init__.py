"""
Financial Analysis Package

Stateless analysis of a transaction snapshot: every function takes records in
and returns freshly built values, never touching storage or the clock.

Key Components:
- summary: UTC month filtering and income/expense totals
- categories: per-category totals and budget progress
- trends: deltas, weekly burn, month-end projection, daily series
- insights: largest and unusual transactions, nudges
- report: one-call monthly report built from all of the above
"""

from .categories import budget_progress, category_totals
from .insights import largest_transactions, smart_nudges, unusual_transactions
from .report import MonthlyReport, build_monthly_report
from .summary import filter_by_month, monthly_totals
from .trends import category_comparison, daily_series, delta_pct, projected_month_end, weekly_burn

__all__ = [
    "MonthlyReport",
    "budget_progress",
    "build_monthly_report",
    "category_comparison",
    "category_totals",
    "daily_series",
    "delta_pct",
    "filter_by_month",
    "largest_transactions",
    "monthly_totals",
    "projected_month_end",
    "smart_nudges",
    "unusual_transactions",
    "weekly_burn",
]
