#!/usr/bin/env python3
"""
Outliers and Nudges

Flags unusually large transactions and turns monthly aggregates into short
plain-language observations.
"""

from collections.abc import Sequence

from ..core.currency import format_amount, format_percent
from ..core.models import Transaction, TransactionType
from .categories import category_totals
from .summary import monthly_totals
from .trends import delta_pct

MAX_NUDGES = 4

# Percent change in spending that is worth mentioning
SPENDING_CHANGE_THRESHOLD = 10

# A transaction is unusual at this multiple of the median amount
UNUSUAL_MULTIPLIER = 2

MIN_RECORDS_FOR_OUTLIERS = 3


def largest_transactions(records: Sequence[Transaction], limit: int = 5) -> list[Transaction]:
    """Top `limit` records by amount, largest first (ties keep input order)."""
    return sorted(records, key=lambda record: record.amount, reverse=True)[:limit]


def unusual_transactions(records: Sequence[Transaction]) -> list[Transaction]:
    """
    Find records at least twice the median amount.

    The median is the element at index n // 2 of the ascending amounts, i.e.
    the upper of the two middle values for even-length input. Keep it that way:
    averaging the middle pair changes which records are flagged.

    Args:
        records: Transactions to scan

    Returns:
        Unusual records sorted by amount descending; empty for fewer than
        three records or a non-positive median
    """
    if len(records) < MIN_RECORDS_FOR_OUTLIERS:
        return []

    amounts = sorted(record.amount for record in records)
    median = amounts[len(amounts) // 2]
    if median <= 0:
        return []

    flagged = [record for record in records if record.amount >= median * UNUSUAL_MULTIPLIER]
    flagged.sort(key=lambda record: record.amount, reverse=True)
    return flagged


def smart_nudges(current: Sequence[Transaction], previous: Sequence[Transaction]) -> list[str]:
    """
    Summarize this month against the previous one in a few sentences.

    Nudges come in a fixed order: spending change, net position, top
    expense category. At most four are returned.

    Args:
        current: This month's records
        previous: Previous month's records

    Returns:
        List of nudge strings
    """
    this_month = monthly_totals(current)
    last_month = monthly_totals(previous)

    nudges: list[str] = []
    expense_delta = delta_pct(this_month.expense, last_month.expense)
    if expense_delta > SPENDING_CHANGE_THRESHOLD:
        nudges.append(f"Spending is up {format_percent(expense_delta)}% vs last month.")
    elif expense_delta < -SPENDING_CHANGE_THRESHOLD:
        nudges.append(f"Nice! Spending is down {format_percent(abs(expense_delta))}% vs last month.")

    if this_month.net > 0:
        nudges.append(f"You are net positive this month by {format_amount(this_month.net)}.")
    elif this_month.net < 0:
        nudges.append(f"You are net negative this month by {format_amount(abs(this_month.net))}.")

    top_expenses = category_totals(current, TransactionType.EXPENSE)
    if top_expenses:
        top = top_expenses[0]
        nudges.append(f"Top expense category: {top.category.value} ({format_amount(top.total)}).")

    return nudges[:MAX_NUDGES]
