"""
Guess validation - Turns raw host input into an integer guess.

Hosts hand over whatever the player typed. Validation never raises for bad
input; it reports an InvalidReason instead.
"""

from __future__ import annotations
import re
from typing import Any

from .outcome import InvalidReason


_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

# Default int() string conversion limit on Python 3.11+
MAX_DIGITS = 4300


def parse_integer(raw: Any) -> int | None:
    """
    Parse raw input as an integer.

    Accepts int (but not bool), integral floats and strings holding an
    optionally signed decimal integer. Returns None for anything else,
    including digit strings longer than MAX_DIGITS.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        text = raw.strip()
        if _INTEGER_PATTERN.fullmatch(text) and len(text.lstrip("+-")) <= MAX_DIGITS:
            try:
                return int(text)
            except ValueError:
                # Exceeds the interpreter's integer string conversion limit
                return None
    return None


def parse_guess(raw: Any, min_number: int, max_number: int) -> int | InvalidReason:
    """
    Validate a guess against the inclusive range.

    Returns the integer guess, or the InvalidReason it was rejected for.
    """
    value = parse_integer(raw)
    if value is None:
        return InvalidReason.NOT_A_NUMBER
    if value < min_number or value > max_number:
        return InvalidReason.OUT_OF_RANGE
    return value
