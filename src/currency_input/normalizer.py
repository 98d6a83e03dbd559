"""Turn formatted currency text back into a parseable numeric literal."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

# Anything that is not an ASCII digit or a decimal point.
NON_DIGIT_PATTERN = re.compile(r"[^0-9.]")

# The first decimal point followed by at least one digit.
FRACTION_PATTERN = re.compile(r"\.([0-9]+)")


def strip_non_digits(text: str) -> str:
    """Remove every character that is not a digit or ``.``.

    >>> strip_non_digits("$12,123.32")
    '12123.32'
    """
    return NON_DIGIT_PATTERN.sub("", text)


def find_fractional_part(text: str) -> tuple[int, int] | None:
    """Locate the fractional part of a stripped literal.

    Args:
        text: A string such as ``"12123.320"``.

    Returns:
        ``(match_length, digits_after_point)`` for the first ``.`` followed by
        one or more digits, or None when there is no such fraction.
        ``match_length`` includes the point itself.
    """
    match = FRACTION_PATTERN.search(text)
    if match is None:
        return None
    return len(match.group(0)), len(match.group(1))


def parse_decimal_literal(text: str) -> Decimal | None:
    """Parse a stripped literal into a Decimal.

    Returns None for input that is not a finite number, such as the empty
    string, a lone ``.``, or a literal with more than one decimal point.
    """
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number
