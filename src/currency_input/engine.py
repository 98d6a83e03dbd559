"""Live currency formatting with cursor preservation.

The engine receives each edit before the host applies it, reformats the
resulting text as currency, and works out where the cursor belongs in the
new string.  Cursor placement is tracked in digit-class characters (digits
and the decimal point) rather than raw offsets, because grouping separators
appear and disappear as the number grows or shrinks.

Breakdown, using ``"$12,123.32"`` with ``"0"`` typed at the end:

1. Replace the range in the current text (``"$12,123.320"``).
2. Count digit-class characters before the insertion point, or after it
   when text was removed.  This is the anchor count.
3. Strip everything but digits and the point (``"12123.320"``).
4. If there are more fractional digits than allowed, shift the excess into
   the whole part (``121233.20``).
5. Format as currency (``"$121,233.20"``).
6. Walk the formatted text until the anchor count is reached and put the
   cursor there.
"""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from currency_input.digits import count_digit_class, is_digit_class
from currency_input.formatter import CurrencyFormatter
from currency_input.models import EditRequest, EditResult, FormatConfig
from currency_input.normalizer import (
    find_fractional_part,
    parse_decimal_literal,
    strip_non_digits,
)

logger = logging.getLogger(__name__)


class CurrencyEditEngine:
    """Formats a currency field one edit at a time.

    An engine belongs to a single field and is not safe to share between
    threads; every call runs to completion synchronously.
    """

    def __init__(
        self,
        config: FormatConfig | None = None,
        formatter: CurrencyFormatter | None = None,
    ) -> None:
        self.config = config or FormatConfig()
        if formatter is None:
            formatter = CurrencyFormatter(
                locale=self.config.locale,
                currency_code=self.config.currency_code,
                currency_symbol=self.config.currency_symbol,
            )
        self.formatter = formatter
        self.formatter.maximum_fraction_digits = self.config.decimal_places

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_config(self, config: FormatConfig) -> None:
        """Replace the configuration between edits.

        The new locale and currency apply to the formatter immediately, but
        text already on screen is not reformatted until the next edit or
        until editing ends.
        """
        self.formatter.set_locale(config.locale)
        if config.currency_code:
            self.formatter.currency_code = config.currency_code
        if config.currency_symbol:
            self.formatter.currency_symbol = config.currency_symbol
        self.formatter.maximum_fraction_digits = config.decimal_places
        self.config = config

    def set_locale(self, locale: str) -> None:
        """Switch locale, deriving the currency code and symbol from it.

        Does not reformat existing text.
        """
        self.formatter.set_locale(locale)
        self.config = FormatConfig(
            decimal_places=self.config.decimal_places,
            locale=locale,
        )

    @property
    def decimal_places(self) -> int:
        return self.config.decimal_places

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def process_edit(self, edit: EditRequest) -> EditResult:
        """Decide how the host should handle an edit.

        Args:
            edit: The current text, the range being replaced and the
                replacement string reported by the host.

        Returns:
            ``EditResult.accept()`` to let the host apply the raw edit,
            ``EditResult.reject()`` to leave the text unchanged, or a
            formatted result carrying the new text and cursor offset.
        """
        old_text = edit.old_text
        replacement = strip_non_digits(edit.replacement)
        was_deleted = len(replacement) < edit.length

        if not old_text:
            num_digits = 1
        elif was_deleted:
            num_digits = count_digit_class(old_text, edit.start + 1)
        else:
            num_digits = count_digit_class(old_text, 0, edit.start) + count_digit_class(replacement)

        start = edit.start
        if was_deleted:
            start = self._widen_deletion(old_text, start, edit.end, edit.length)
        elif replacement == ".":
            old_text = self._drop_zero_fraction(old_text, edit.end)

        replaced = old_text[:start] + replacement + old_text[edit.end :]
        if not replaced:
            return EditResult.accept()

        literal = strip_non_digits(replaced)
        number = parse_decimal_literal(literal)
        if number is None:
            # Malformed input may only be reached by removing characters.
            logger.debug("unparseable literal %r (deleted=%s)", literal, was_deleted)
            return EditResult.accept() if was_deleted else EditResult.reject()

        number = self._apply_fraction(number, literal, bootstrap=not edit.old_text)

        formatted = self.formatter.format(number)
        if formatted is None:
            logger.debug("formatter returned nothing for %r, accepting raw edit", number)
            return EditResult.accept()

        # The formatter drops a trailing point, which would make one impossible to type.
        if replacement == ".":
            formatted += "."

        if was_deleted:
            cursor = len(formatted) - self._walk_backward(formatted, num_digits) + (edit.end - start)
        else:
            cursor = self._walk_forward(formatted, num_digits)

        if not 0 <= cursor <= len(formatted):
            logger.debug("cursor %d outside %r, rejecting edit", cursor, formatted)
            return EditResult.reject()
        return EditResult.formatted(formatted, cursor)

    def finish_editing(self, text: str) -> str | None:
        """Reformat *text* with the full number of decimal places.

        Called when the field loses focus so the value always ends up shown
        with the configured precision.

        Returns:
            The reformatted text, or None if *text* holds no number.
        """
        number = parse_decimal_literal(strip_non_digits(text))
        if number is None:
            return None
        self.formatter.minimum_fraction_digits = self.config.decimal_places
        return self.formatter.format(number)

    def format_value(self, value: Decimal | None) -> str:
        """Format a typed value with full precision, or ``""`` for None."""
        if value is None:
            return ""
        self.formatter.minimum_fraction_digits = self.config.decimal_places
        return self.formatter.format(value) or ""

    def parse_value(self, text: str) -> Decimal | None:
        """Return the decimal value shown in *text*, if any."""
        return self.formatter.parse(text)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _widen_deletion(text: str, start: int, end: int, length: int) -> int:
        """Move *start* left until the range covers *length* digits.

        Separators are not digits, so a one-character delete that lands on a
        comma must reach back to the digit before it.
        """
        while count_digit_class(text, start, end) < length and start > 0:
            start -= 1
        return start

    @staticmethod
    def _drop_zero_fraction(text: str, end: int) -> str:
        """Remove a point and all-zero fraction found at or after *end*.

        A field padded to full precision (``"$5.00"``) would otherwise refuse
        a decimal point typed after the whole part.
        """
        point = text.find(".", end)
        if point < 0 or text.find(".") != point:
            return text
        stop = point + 1
        while stop < len(text) and text[stop].isdigit():
            stop += 1
        fraction = text[point + 1 : stop]
        if not fraction or fraction.strip("0"):
            return text
        return text[:point] + text[stop:]

    def _apply_fraction(self, number: Decimal, literal: str, *, bootstrap: bool) -> Decimal:
        """Set the fraction digits to show and shift excess digits left.

        Typing past the configured precision rolls the extra digits into
        the whole-number part, so ``"5.257"`` becomes ``52.57``.
        """
        places = self.config.decimal_places
        fraction = find_fractional_part(literal)
        if fraction is None:
            # The first keystroke into an empty field shows full precision.
            self.formatter.minimum_fraction_digits = places if bootstrap else 0
            return number

        match_length, _ = fraction
        typed = match_length - 1
        self.formatter.minimum_fraction_digits = min(places, typed)
        if typed > places:
            with localcontext() as ctx:
                ctx.prec = max(ctx.prec, len(number.as_tuple().digits))
                number = number.scaleb(typed - places)
        return number

    @staticmethod
    def _walk_forward(text: str, num_digits: int) -> int:
        """Offset just after the *num_digits*-th digit-class character."""
        walked = 0
        seen = 0
        for char in text:
            if seen >= num_digits:
                break
            if is_digit_class(char):
                seen += 1
            walked += 1
        return walked

    @staticmethod
    def _walk_backward(text: str, num_digits: int) -> int:
        """Characters walked from the end until *num_digits* is exceeded."""
        walked = 0
        seen = 0
        for char in reversed(text):
            if seen > num_digits:
                break
            if is_digit_class(char):
                seen += 1
            walked += 1
        return walked
