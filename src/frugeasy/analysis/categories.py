#!/usr/bin/env python3
"""
Category Breakdown

Per-category totals for one direction of money movement, and progress
against per-category monthly budgets.
"""

from collections.abc import Iterable

from ..core.models import (
    Budget,
    BudgetProgress,
    CategoryTotal,
    Transaction,
    TransactionCategory,
    TransactionType,
)


def sum_by_category(records: Iterable[Transaction]) -> dict[TransactionCategory, float]:
    """Sum amounts per category, keyed in first-seen order."""
    totals: dict[TransactionCategory, float] = {}
    for record in records:
        totals[record.category] = totals.get(record.category, 0.0) + record.amount
    return totals


def category_totals(records: Iterable[Transaction], type: TransactionType) -> list[CategoryTotal]:
    """
    Total the records of one type per category, largest first.

    Ties keep first-seen category order. Categories with no matching
    records are omitted.

    Args:
        records: Transactions to aggregate
        type: INCOME or EXPENSE

    Returns:
        CategoryTotal list sorted by total descending
    """
    totals = sum_by_category(record for record in records if record.type is type)
    ranked = [CategoryTotal(category=category, total=total) for category, total in totals.items()]
    ranked.sort(key=lambda entry: entry.total, reverse=True)
    return ranked


def budget_progress(records: Iterable[Transaction], budgets: Iterable[Budget]) -> list[BudgetProgress]:
    """
    Compare expense per category against budgets.

    The caller picks which records and budgets belong together (normally one
    month's expenses and the budgets carrying that month's key).

    Args:
        records: Transactions to measure (income is ignored)
        budgets: Budgets to report on, in the order given

    Returns:
        One BudgetProgress per budget
    """
    spent_by_category = sum_by_category(record for record in records if record.is_expense)

    progress = []
    for budget in budgets:
        spent = spent_by_category.get(budget.category, 0.0)
        used_pct = spent / budget.amount * 100 if budget.amount > 0 else 0.0
        progress.append(
            BudgetProgress(
                category=budget.category,
                budget=budget.amount,
                spent=spent,
                remaining=budget.amount - spent,
                used_pct=used_pct,
            )
        )
    return progress
