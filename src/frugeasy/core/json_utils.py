#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON reading and writing for snapshots and reports, so every
file the tools produce is pretty-printed the same way.
"""

import json
from pathlib import Path
from typing import Any


def read_json(filepath: str | Path) -> Any:
    """
    Read data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        The parsed JSON data

    Raises:
        ValueError: If the file is not valid JSON
    """
    with open(filepath, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {filepath}: {e}") from e


def format_json(data: Any, sort_keys: bool = False) -> str:
    """
    Format data as a pretty-printed JSON string.

    Non-ASCII text (currency symbols, category labels) is kept as-is.
    """
    return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys)


def write_json(filepath: str | Path, data: Any, sort_keys: bool = False) -> None:
    """
    Write data to a JSON file with standard pretty-printing.

    Args:
        filepath: Path to the JSON file (parent directories are created)
        data: Data to write to the file
        sort_keys: If True, sort dictionary keys (default: False)
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(format_json(data, sort_keys=sort_keys))
        f.write("\n")
