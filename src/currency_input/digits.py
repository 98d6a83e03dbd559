"""Counting of digit-class characters (ASCII digits and the decimal point)."""

from __future__ import annotations

# Characters the cursor arithmetic is measured in.
DIGIT_CLASS: frozenset[str] = frozenset("0123456789.")

def is_digit_class(char: str) -> bool:
    """Return True if *char* is an ASCII digit or the decimal point."""
    return char in DIGIT_CLASS


def count_digit_class(text: str, start: int = 0, end: int | None = None) -> int:
    """Count digit-class characters in ``text[start:end]``.

    Args:
        text: The string to scan.
        start: First index of the sub-range (inclusive).
        end: Last index of the sub-range (exclusive). Defaults to the end of
            the string.

    Returns:
        The number of characters in the sub-range that are digits or ``.``.
    """
    if end is None:
        end = len(text)
    return sum(1 for char in text[start:end] if char in DIGIT_CLASS)
