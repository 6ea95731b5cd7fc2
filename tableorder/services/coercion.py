"""Lenient coercion of client-supplied JSON values."""
import math
from typing import Any


def coerce_text(value: Any, default: str = "") -> str:
    """Stringify and trim; None and empty values fall back to ``default``."""
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def coerce_price(value: Any) -> float:
    """Coerce to a finite, non-negative number. Anything unusable becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(price):
        return 0.0
    return max(price, 0.0)


def coerce_quantity(value: Any) -> int:
    """Coerce to an integer quantity.

    Missing and falsy values (None, "", 0, False) default to 1. Values that
    cannot be read as a number become 0 so that callers filtering on
    ``qty > 0`` drop them.
    """
    if value is None or value == "" or isinstance(value, bool):
        return 1
    if isinstance(value, (int, float)) and value == 0:
        return 1
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
