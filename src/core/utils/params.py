"""
Query parameter parsing helpers.
"""

from typing import Any


def parse_string(value: Any) -> str:
    """Return ``value`` as a string; falsy values become an empty string."""
    if not value:
        return ""
    return str(value)


def parse_int(value: Any) -> int | None:
    """Leading-integer parse; returns None when no integer can be read."""
    if value is None:
        return None
    text = str(value).strip()
    sign = ""
    if text and text[0] in "+-":
        sign, text = text[0], text[1:]
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    if not digits:
        return None
    return int(sign + digits)


def clamp_value(number: int | None, minimum: int, maximum: int) -> int:
    """Clamp ``number`` into [minimum, maximum]; a missing number yields the minimum."""
    if number is None:
        return minimum
    return max(minimum, min(number, maximum))
