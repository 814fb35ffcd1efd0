#!/usr/bin/env python3
"""
Transaction Snapshot Loader

Reads a snapshot of store records into domain models for analysis.

Supported formats:
- JSON: an array of records, or an object with a "transactions" key
- CSV: one row per record with columns id, amount, type, category, date, createdAt

Functions:
- load_transactions: Load a transaction snapshot as domain models
- load_budgets: Load budget records as domain models
"""

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from .currency import parse_amount
from .json_utils import read_json
from .models import Budget, Transaction

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("id", "amount", "type", "date")


def _read_records(path: Path, key: str) -> list[dict[str, Any]]:
    suffix = path.suffix.lower()

    if suffix == ".json":
        data: Any = read_json(path)

        # Handle object format with a top-level key
        if isinstance(data, dict) and key in data:
            records = data[key]
        else:
            records = data
        if not isinstance(records, list):
            raise ValueError(f"Expected a JSON array or an object with '{key}' in {path}")

        rows: list[dict[str, Any]] = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                logger.warning("Skipping record %s: expected an object, got %s", index, type(record).__name__)
                continue
            rows.append(record)
        return rows

    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing and key == "transactions":
            raise ValueError(f"CSV snapshot {path} is missing columns: {', '.join(missing)}")
        return df.to_dict(orient="records")

    raise ValueError(f"Unsupported snapshot format: {path.suffix or path.name}")


def load_transactions(path: str | Path) -> list[Transaction]:
    """
    Load a transaction snapshot as domain models.

    Rows whose amount, type or id cannot be read are skipped with a warning;
    date parsing is left to the engine, which excludes malformed dates itself.

    Args:
        path: JSON or CSV snapshot file

    Returns:
        List of Transaction domain models in file order

    Raises:
        FileNotFoundError: If the snapshot file does not exist
        ValueError: If the file format is unsupported or malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Transaction snapshot not found: {path}")

    transactions: list[Transaction] = []
    for index, record in enumerate(_read_records(path, "transactions")):
        amount = parse_amount(record.get("amount"))
        if amount is None:
            logger.warning("Skipping record %s: unreadable amount %r", record.get("id", index), record.get("amount"))
            continue

        try:
            transactions.append(Transaction.from_dict({**record, "amount": amount}))
        except (KeyError, ValueError) as e:
            logger.warning("Skipping record %s: %s", record.get("id", index), e)

    logger.info("Loaded %d transactions from %s", len(transactions), path)
    return transactions


def load_budgets(path: str | Path) -> list[Budget]:
    """
    Load budget records as domain models.

    Args:
        path: JSON or CSV file of budgets (id, category, amount, monthKey)

    Returns:
        List of Budget domain models

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Budget file not found: {path}")

    budgets: list[Budget] = []
    for index, record in enumerate(_read_records(path, "budgets")):
        amount = parse_amount(record.get("amount"))
        if amount is None:
            logger.warning("Skipping budget %s: unreadable amount %r", record.get("id", index), record.get("amount"))
            continue

        try:
            budgets.append(Budget.from_dict({**record, "amount": amount}))
        except (KeyError, ValueError) as e:
            logger.warning("Skipping budget %s: %s", record.get("id", index), e)

    logger.info("Loaded %d budgets from %s", len(budgets), path)
    return budgets
