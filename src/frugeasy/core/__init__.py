"""
Core Utilities Package

Shared data models and utilities used by the analysis engine and the CLI.

This package provides:
- Immutable transaction and derived value models
- UTC calendar-month windows
- Amount parsing and display formatting
- Configuration management for environment-specific settings
- Snapshot loading from JSON and CSV
"""

from .config import (
    AnalysisConfig,
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import format_amount, format_currency, format_percent, parse_amount
from .dates import MonthWindow, days_in_month, in_month, parse_instant
from .loader import load_budgets, load_transactions
from .models import (
    Budget,
    BudgetProgress,
    CategoryComparison,
    CategoryTotal,
    DailyPoint,
    MonthlyTotals,
    Transaction,
    TransactionCategory,
    TransactionType,
)

__all__ = [
    "AnalysisConfig",
    "Budget",
    "BudgetProgress",
    "CategoryComparison",
    "CategoryTotal",
    # Configuration
    "Config",
    "DailyPoint",
    "Environment",
    "MonthWindow",
    "MonthlyTotals",
    # Data models
    "Transaction",
    "TransactionCategory",
    "TransactionType",
    "days_in_month",
    "in_month",
    # Formatting
    "format_amount",
    "format_currency",
    "format_percent",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "load_budgets",
    "load_transactions",
    "parse_amount",
    "parse_instant",
    "reload_config",
]
