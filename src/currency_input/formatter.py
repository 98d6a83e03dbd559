"""Locale-aware currency formatting backed by Babel's CLDR data."""

from __future__ import annotations

import copy
import logging
from decimal import Decimal

from babel import Locale
from babel.core import UnknownLocaleError as BabelUnknownLocaleError
from babel.numbers import NumberPattern, get_currency_symbol, get_territory_currencies

from currency_input.errors import UnknownLocaleError
from currency_input.normalizer import parse_decimal_literal, strip_non_digits

logger = logging.getLogger(__name__)

# CLDR placeholders in currency patterns.
_ISO_CODE_PLACEHOLDER = "¤¤"
_SYMBOL_PLACEHOLDER = "¤"


def resolve_locale(identifier: str) -> Locale:
    """Parse a locale identifier such as ``en_US`` or ``en-GB``.

    Args:
        identifier: A POSIX or BCP 47 style locale identifier.

    Returns:
        The Babel locale.

    Raises:
        UnknownLocaleError: If Babel has no data for the identifier.
    """
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (BabelUnknownLocaleError, ValueError, TypeError) as exc:
        raise UnknownLocaleError(f"unknown locale: {identifier!r}") from exc


def default_currency_code(locale: Locale) -> str | None:
    """Return the currency currently in use in the locale's territory, if any."""
    if not locale.territory:
        return None
    currencies = get_territory_currencies(locale.territory)
    return currencies[0] if currencies else None


class CurrencyFormatter:
    """Formats decimals as currency strings for one locale.

    The currency code and symbol are derived from the locale but can be
    overridden independently of number formatting.  The fraction digit
    bounds are mutable so the editing engine can show exactly as many
    fractional digits as the user has typed.
    """

    def __init__(
        self,
        locale: str = "en_US",
        currency_code: str | None = None,
        currency_symbol: str | None = None,
        maximum_fraction_digits: int = 2,
    ) -> None:
        self.minimum_fraction_digits = 0
        self.maximum_fraction_digits = maximum_fraction_digits
        self._symbol_override: str | None = None
        self.set_locale(locale)
        if currency_code:
            self.currency_code = currency_code
        if currency_symbol:
            self.currency_symbol = currency_symbol

    def set_locale(self, identifier: str) -> None:
        """Switch locale and re-derive the currency code, symbol and pattern.

        A symbol override set earlier is dropped so the new locale's symbol
        is used.

        Raises:
            UnknownLocaleError: If the identifier is not a known locale.
        """
        locale = resolve_locale(identifier)
        self._locale = locale
        self._pattern: NumberPattern = locale.currency_formats["standard"]
        self.currency_code = default_currency_code(locale)
        self._symbol_override = None

    @property
    def locale(self) -> Locale:
        """The Babel locale in use."""
        return self._locale

    @property
    def currency_symbol(self) -> str | None:
        """The symbol shown in formatted text.

        Falls back to the locale's symbol for the current currency code.
        """
        if self._symbol_override is not None:
            return self._symbol_override
        if self.currency_code is None:
            return None
        return get_currency_symbol(self.currency_code, locale=self._locale)

    @currency_symbol.setter
    def currency_symbol(self, symbol: str | None) -> None:
        self._symbol_override = symbol

    def format(self, number: Decimal) -> str | None:
        """Format *number* as currency.

        Args:
            number: The value to display.

        Returns:
            The formatted string, or None if no currency is configured or the
            value cannot be formatted.
        """
        symbol = self.currency_symbol
        if symbol is None:
            logger.debug("no currency configured for locale %s", self._locale)
            return None

        pattern = copy.copy(self._pattern)
        minimum = self.minimum_fraction_digits
        pattern.frac_prec = (minimum, max(minimum, self.maximum_fraction_digits))
        pattern.prefix = tuple(self._substitute(part, symbol) for part in pattern.prefix)
        pattern.suffix = tuple(self._substitute(part, symbol) for part in pattern.suffix)
        try:
            return pattern.apply(number, self._locale, currency_digits=False)
        except (ValueError, ArithmeticError, TypeError) as exc:
            logger.debug("could not format %r as currency: %s", number, exc)
            return None

    def parse(self, text: str) -> Decimal | None:
        """Parse formatted text back into a Decimal, ignoring decoration."""
        return parse_decimal_literal(strip_non_digits(text))

    def _substitute(self, affix: str, symbol: str) -> str:
        """Replace CLDR currency placeholders in a pattern prefix or suffix."""
        if _ISO_CODE_PLACEHOLDER in affix and self.currency_code:
            affix = affix.replace(_ISO_CODE_PLACEHOLDER, self.currency_code)
        return affix.replace(_SYMBOL_PLACEHOLDER, symbol)
