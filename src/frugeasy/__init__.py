"""
Frugeasy - Personal Finance Tracking

Analysis engine behind the Frugeasy tracker: turns a snapshot of dated,
typed, categorized money movements into monthly summaries, category
breakdowns, burn-rate projections, outlier flags and short nudges.

Domain Packages:
- core: Data models, UTC month windows, formatting, configuration, loading
- analysis: The stateless analysis engine
- cli: Command-line interface

Example Usage:
    from frugeasy.analysis import build_monthly_report
    from frugeasy.core import MonthWindow, load_transactions

    records = load_transactions("transactions.json")
    report = build_monthly_report(records, MonthWindow(2026, 1), now="2026-02-14T12:00:00Z")
"""

__version__ = "0.1.0"
__author__ = "Frugeasy Developers"

# Export core models for easy access
from .core.config import Environment, get_config
from .core.dates import MonthWindow
from .core.models import Transaction, TransactionCategory, TransactionType

__all__ = [
    # Configuration
    "Environment",
    "MonthWindow",
    # Core models
    "Transaction",
    "TransactionCategory",
    "TransactionType",
    "get_config",
]
