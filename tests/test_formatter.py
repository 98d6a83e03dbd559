"""Tests for the Babel-backed currency formatter."""

from decimal import Decimal

import pytest

from currency_input.errors import CurrencyInputError, UnknownLocaleError
from currency_input.formatter import CurrencyFormatter, default_currency_code, resolve_locale


class TestResolveLocale:
    """Tests for resolve_locale and default_currency_code."""

    def test_posix_identifier(self):
        assert str(resolve_locale("en_US")) == "en_US"

    def test_bcp47_identifier(self):
        assert str(resolve_locale("en-GB")) == "en_GB"

    def test_unknown_locale_raises(self):
        with pytest.raises(UnknownLocaleError):
            resolve_locale("xx_YY")

    def test_unknown_locale_is_package_error(self):
        with pytest.raises(CurrencyInputError):
            resolve_locale("not a locale")

    def test_territory_currency(self):
        assert default_currency_code(resolve_locale("en_US")) == "USD"
        assert default_currency_code(resolve_locale("de_DE")) == "EUR"

    def test_language_only_locale_has_no_currency(self):
        assert default_currency_code(resolve_locale("en")) is None


class TestCurrencyFormatter:
    """Tests for CurrencyFormatter.format and parse."""

    def test_full_precision(self):
        formatter = CurrencyFormatter("en_US")
        formatter.minimum_fraction_digits = 2
        assert formatter.format(Decimal("1234.5")) == "$1,234.50"

    def test_no_minimum_fraction_digits(self):
        formatter = CurrencyFormatter("en_US")
        assert formatter.format(Decimal("1234")) == "$1,234"

    def test_partial_fraction_digits(self):
        """Only as many fraction digits as requested are padded."""
        formatter = CurrencyFormatter("en_US")
        formatter.minimum_fraction_digits = 1
        assert formatter.format(Decimal("5.0")) == "$5.0"

    def test_maximum_fraction_digits_rounds(self):
        formatter = CurrencyFormatter("en_US", maximum_fraction_digits=0)
        assert formatter.format(Decimal("53")) == "$53"

    def test_locale_symbol(self):
        formatter = CurrencyFormatter("en_GB")
        formatter.minimum_fraction_digits = 2
        assert formatter.format(Decimal("5")) == "£5.00"

    def test_suffix_pattern_locale(self):
        """Locales that put the symbol after the number keep their pattern."""
        formatter = CurrencyFormatter("de_DE")
        formatter.minimum_fraction_digits = 2
        result = formatter.format(Decimal("1234.5"))
        assert result is not None
        assert "1.234,50" in result
        assert result.endswith("€")

    def test_currency_code_override(self):
        formatter = CurrencyFormatter("en_US", currency_code="EUR")
        assert formatter.currency_code == "EUR"
        assert formatter.format(Decimal("5")) == "€5"

    def test_currency_symbol_override(self):
        formatter = CurrencyFormatter("en_US", currency_symbol="US$")
        assert formatter.currency_code == "USD"
        assert formatter.format(Decimal("5")) == "US$5"

    def test_set_locale_rederives_currency(self):
        formatter = CurrencyFormatter("en_US", currency_symbol="US$")
        formatter.set_locale("en_GB")
        assert formatter.currency_code == "GBP"
        assert formatter.currency_symbol == "£"

    def test_no_currency_returns_none(self):
        """A locale without a territory has no currency to show."""
        formatter = CurrencyFormatter("en")
        assert formatter.format(Decimal("5")) is None

    def test_parse_formatted_text(self):
        formatter = CurrencyFormatter("en_US")
        assert formatter.parse("$12,123.32") == Decimal("12123.32")

    def test_parse_empty_text(self):
        formatter = CurrencyFormatter("en_US")
        assert formatter.parse("$") is None
