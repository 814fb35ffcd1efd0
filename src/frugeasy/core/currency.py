#!/usr/bin/env python3
"""
Amount Parsing and Formatting Utilities

Amounts are currency-agnostic magnitudes kept at full float precision by the
analysis engine. Rounding happens only here, at presentation time.

Formatting Rules:
- Magnitudes use two-decimal fixed point: 1234.5 -> "1234.50"
- Percentages use zero decimals: 33.333 -> "33"
- The currency code is a display label only; no conversion is ever performed
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
}


def _round_half_up(value: float, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    # Exact binary value, so 1.005 (stored as 1.00499...) rounds down
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def format_amount(amount: float) -> str:
    """
    Format a magnitude as two-decimal fixed point.

    Args:
        amount: Amount to format

    Returns:
        Formatted string

    Example:
        format_amount(45.5) -> "45.50"
    """
    return f"{_round_half_up(amount, 2):.2f}"


def format_percent(pct: float) -> str:
    """
    Format a percentage with zero decimals (no % sign).

    Example:
        format_percent(12.5) -> "13"
    """
    return f"{_round_half_up(pct, 0):.0f}"


def format_currency(amount: float, currency: str = "USD") -> str:
    """
    Format an amount for display with a currency label.

    Args:
        amount: Amount to format (sign preserved)
        currency: ISO currency code used as a label

    Returns:
        String like "$45.99", "-$45.99" or "CHF 45.99" for codes without a symbol
    """
    sign = "-" if amount < 0 else ""
    magnitude = format_amount(abs(amount))
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    if symbol:
        return f"{sign}{symbol}{magnitude}"
    return f"{sign}{currency.upper()} {magnitude}"


def parse_amount(value: Union[str, int, float, None]) -> float | None:
    """
    Parse a stored amount into a float.

    Handles strings such as "$1,234.56" as well as numeric input.

    Args:
        value: Raw amount from a snapshot row

    Returns:
        Float amount, or None when the value is missing or not a finite number

    Examples:
        parse_amount("$45.99") -> 45.99
        parse_amount("abc") -> None
        parse_amount(float("nan")) -> None
    """
    if value is None:
        return None

    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        clean = str(value).strip()
        for symbol in CURRENCY_SYMBOLS.values():
            clean = clean.replace(symbol, "")
        clean = clean.replace(",", "").strip()
        if not clean:
            return None
        try:
            amount = float(Decimal(clean))
        except (InvalidOperation, ValueError):
            return None

    if not math.isfinite(amount):
        return None
    return amount
