"""Price parsing and display formatting."""

from __future__ import annotations

import math
import re
from typing import Any

# Everything except digits, minus sign and decimal point is dropped before parsing.
_NON_NUMERIC = re.compile(r"[^0-9.\-]")

# Fractional digits shown for non-integral amounts.
MAX_FRACTION_DIGITS = 3


def parse_amount(text: Any) -> float:
    """Parse user input such as ``"1,234,000원"`` into a number.

    Returns 0 when nothing parseable remains or the result is not finite.
    """
    cleaned = _NON_NUMERIC.sub("", str(text))
    if not cleaned:
        return 0
    try:
        value = float(cleaned)
    except ValueError:
        return 0
    if not math.isfinite(value):
        return 0
    return int(value) if value.is_integer() else value


def coerce_amount(value: Any) -> float:
    """Coerce a raw cell value to a finite number.

    Numbers pass through when finite; anything else, booleans included, is
    parsed as text.
    """
    if isinstance(value, bool):
        return parse_amount(value)
    if isinstance(value, (int, float)):
        try:
            return value if math.isfinite(value) else 0
        except OverflowError:
            # int too large for a float
            return 0
    if value is None:
        return 0
    return parse_amount(value)


def format_amount(amount: float) -> str:
    """Format an amount with thousands separators for display."""
    value = float(amount) if amount is not None else 0.0
    if not math.isfinite(value) or value == 0:
        return "0"
    if value.is_integer():
        return f"{value:,.0f}"
    text = f"{value:,.{MAX_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    return text
