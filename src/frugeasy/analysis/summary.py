#!/usr/bin/env python3
"""
Monthly Summary

Selects the records of one UTC calendar month and totals them by direction.
"""

from collections.abc import Iterable

from ..core.dates import in_month
from ..core.models import MonthlyTotals, Transaction, TransactionType


def filter_by_month(records: Iterable[Transaction], year: int, month_index: int) -> list[Transaction]:
    """
    Keep the records whose UTC date falls in the given month.

    Input order is preserved. Records with unparseable dates are dropped, and
    a month index outside 0-11 matches nothing.

    Args:
        records: Transaction snapshot
        year: Calendar year
        month_index: Zero-based month (January = 0)

    Returns:
        Matching records in input order
    """
    return [record for record in records if in_month(record.date, year, month_index)]


def monthly_totals(records: Iterable[Transaction]) -> MonthlyTotals:
    """
    Sum income and expense over a set of records.

    Returns:
        MonthlyTotals with net = income - expense (all zeros for no records)
    """
    income = 0.0
    expense = 0.0
    for record in records:
        if record.type is TransactionType.INCOME:
            income += record.amount
        elif record.type is TransactionType.EXPENSE:
            expense += record.amount

    return MonthlyTotals(income=income, expense=expense, net=income - expense)
