#!/usr/bin/env python3
"""
Core Data Models for Frugeasy

Transaction records as handed over by the store, plus the transient value
types produced by the analysis engine. Every model is immutable; derived values
are rebuilt from a transaction snapshot on each analysis pass.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class TransactionType(Enum):
    """Direction of a money movement."""

    INCOME = "income"
    EXPENSE = "expense"


class TransactionCategory(Enum):
    """Closed set of semantic labels for a transaction's purpose."""

    FOOD = "Food"
    GROCERIES = "Groceries"
    TRANSPORT = "Transport"
    HOUSING = "Housing"
    UTILITIES = "Utilities"
    HEALTH = "Health"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    EDUCATION = "Education"
    TRAVEL = "Travel"
    SUBSCRIPTIONS = "Subscriptions"
    SALARY = "Salary"
    FREELANCE = "Freelance"
    INVESTMENTS = "Investments"
    GIFTS = "Gifts"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: "str | TransactionCategory | None") -> "TransactionCategory":
        """
        Resolve a stored label to a category.

        Missing or unknown labels resolve to OTHER, matching how the store
        coalesces rows written before categories existed.
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.OTHER
        for category in cls:
            if category.value.lower() == str(value).strip().lower():
                return category
        logger.warning("Unknown category %r, using %s", value, cls.OTHER.value)
        return cls.OTHER


@dataclass(frozen=True)
class Transaction:
    """
    A single dated money movement.

    Owned by the store; the engine only reads it. `date` is the economic event
    date used for all windowing, `created_at` is provenance only.
    """

    id: str
    amount: float
    type: TransactionType
    category: TransactionCategory
    date: str
    created_at: str = ""

    @property
    def is_income(self) -> bool:
        return self.type is TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type is TransactionType.EXPENSE

    def to_dict(self) -> dict[str, Any]:
        """Convert to the store's record layout for JSON serialization."""
        return {
            "id": self.id,
            "amount": self.amount,
            "type": self.type.value,
            "category": self.category.value,
            "date": self.date,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        """Create Transaction from a store record (camelCase or snake_case keys)."""
        return cls(
            id=str(data["id"]),
            amount=float(data["amount"]),
            type=TransactionType(str(data["type"]).strip().lower()),
            category=TransactionCategory.parse(data.get("category")),
            date=str(data["date"]),
            created_at=str(data.get("createdAt", data.get("created_at", "")) or ""),
        )


@dataclass(frozen=True)
class MonthlyTotals:
    """Income, expense and net for a set of records."""

    income: float
    expense: float
    net: float

    def to_dict(self) -> dict[str, Any]:
        return {"income": self.income, "expense": self.expense, "net": self.net}


@dataclass(frozen=True)
class CategoryTotal:
    """Summed amount for one category."""

    category: TransactionCategory
    total: float

    def to_dict(self) -> dict[str, Any]:
        return {"category": self.category.value, "total": self.total}


@dataclass(frozen=True)
class DailyPoint:
    """Income and expense on one calendar day (day is 1-based)."""

    day: int
    income: float
    expense: float

    def to_dict(self) -> dict[str, Any]:
        return {"day": self.day, "income": self.income, "expense": self.expense}


@dataclass(frozen=True)
class CategoryComparison:
    """Per-category amounts for the current and previous period."""

    category: TransactionCategory
    current: float
    previous: float
    delta_pct: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "current": self.current,
            "previous": self.previous,
            "deltaPct": self.delta_pct,
        }


@dataclass(frozen=True)
class Budget:
    """
    Monthly spending limit for one category.

    month_key is the "YYYY-MM" month the limit applies to.
    """

    id: str
    category: TransactionCategory
    amount: float
    month_key: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category.value,
            "amount": self.amount,
            "monthKey": self.month_key,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Budget":
        """Create Budget from a store record."""
        return cls(
            id=str(data["id"]),
            category=TransactionCategory.parse(data.get("category")),
            amount=float(data["amount"]),
            month_key=str(data.get("monthKey", data.get("month_key", ""))),
        )


@dataclass(frozen=True)
class BudgetProgress:
    """How much of a category budget has been spent."""

    category: TransactionCategory
    budget: float
    spent: float
    remaining: float
    used_pct: float

    @property
    def is_over_budget(self) -> bool:
        return self.spent > self.budget

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "budget": self.budget,
            "spent": self.spent,
            "remaining": self.remaining,
            "usedPct": self.used_pct,
        }
