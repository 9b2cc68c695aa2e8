"""
Text parsing helpers for values scraped from the rendered shop.

Prices, quantities and header counters are read as raw text. These helpers
turn that text into typed values without ever raising on absent or garbled
input, so speculative checks stay safe to call.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional, Sequence

_STRIP_CHARS = "()"
_THOUSANDS_SEPARATOR = ","


def clean_text(text: Optional[str]) -> str:
    """Return ``text`` stripped of surrounding whitespace, ``""`` for None."""
    if text is None:
        return ""
    return text.strip()


def strip_brackets(text: Optional[str]) -> str:
    """Strip counter brackets, e.g. ``"(3)"`` becomes ``"3"``."""
    cleaned = clean_text(text)
    for char in _STRIP_CHARS:
        cleaned = cleaned.replace(char, "")
    return cleaned.strip()


def _numeric_text(text: Optional[str]) -> str:
    return strip_brackets(text).replace(_THOUSANDS_SEPARATOR, "")


def parse_decimal(text: Optional[str], default: Decimal = Decimal("0")) -> Decimal:
    """
    Parse a price or amount as an exact decimal.

    Args:
        text: Raw text content, e.g. ``" 49.00 "``.
        default: Value returned when the text holds no number.

    Returns:
        The parsed value, or ``default``.
    """
    cleaned = _numeric_text(text)
    if not cleaned:
        return default
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return default
    if not value.is_finite():
        return default
    return value


def parse_int(text: Optional[str], default: int = 0) -> int:
    """Parse a quantity or counter as an integer, ``default`` if unparsable."""
    cleaned = _numeric_text(text)
    try:
        return int(cleaned)
    except ValueError:
        return default


def name_sort_key(title: str) -> str:
    """Ordering key for product titles: case-insensitive, whitespace-trimmed."""
    return title.strip().casefold()


def find_order_violation(
    values: Sequence[Any],
    descending: bool = False,
    key: Optional[Callable[[Any], Any]] = None,
) -> Optional[int]:
    """
    Find the first adjacent pair that breaks the requested order.

    Equal neighbours never count as a violation.

    Args:
        values: Values in rendered order.
        descending: Check for non-increasing instead of non-decreasing order.
        key: Optional key applied to each value before comparing.

    Returns:
        Index ``i`` such that ``values[i], values[i + 1]`` are out of order,
        or None when the sequence is ordered.
    """
    keyed = [key(v) for v in values] if key else list(values)
    for i in range(len(keyed) - 1):
        current, following = keyed[i], keyed[i + 1]
        if descending and current < following:
            return i
        if not descending and current > following:
            return i
    return None
