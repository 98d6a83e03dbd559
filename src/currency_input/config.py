"""Configuration resolution for the currency input demo.

Priority order (highest to lowest), per setting:
1. --locale / --decimal-places CLI arguments
2. CURRENCY_INPUT_LOCALE / CURRENCY_INPUT_DECIMAL_PLACES environment variables
3. ~/.config/currency-input/config.toml -> locale / decimal_places keys
4. en_US and 2 decimal places (defaults)
"""

from __future__ import annotations

import argparse
import os
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import NoReturn

from currency_input.errors import CurrencyInputError
from currency_input.formatter import resolve_locale
from currency_input.models import FormatConfig

_CONFIG_PATH = Path.home() / ".config" / "currency-input" / "config.toml"

DEFAULT_LOCALE = "en_US"
DEFAULT_DECIMAL_PLACES = 2


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, ValueError):
        return {}


def load_theme() -> str | None:
    """Return the saved theme name, or None if not set.

    Returns:
        Theme name string (e.g. 'textual-dark'), or None.
    """
    return _load_config_dict().get("theme")


def load_currency_symbol() -> str | None:
    """Return the currency symbol override from config.toml, if any."""
    symbol = _load_config_dict().get("currency_symbol")
    return str(symbol) if symbol else None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace with 'locale', 'decimal_places' and 'value' attributes.
    """
    parser = argparse.ArgumentParser(
        prog="currency-input",
        description="A terminal currency field that formats as you type.",
    )
    parser.add_argument(
        "-l",
        "--locale",
        help="Locale used for the currency and number format (e.g. en_US, en_GB).",
        default=None,
    )
    parser.add_argument(
        "-d",
        "--decimal-places",
        help="Number of decimal places shown when editing ends.",
        default=None,
    )
    parser.add_argument(
        "--value",
        help="Initial amount (e.g. 1234.5).",
        default=None,
    )
    return parser.parse_args(argv)


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def resolve_locale_name(cli_locale: str | None = None) -> str:
    """Resolve the locale using the priority chain.

    Args:
        cli_locale: Value from the --locale CLI argument, if provided.

    Returns:
        The locale identifier.

    Raises:
        SystemExit: If the resolved locale is unknown.
    """
    # 1. CLI argument, 2. environment, 3. config.toml, 4. default
    locale = (
        cli_locale
        or os.environ.get("CURRENCY_INPUT_LOCALE")
        or _load_config_dict().get("locale")
        or DEFAULT_LOCALE
    )
    try:
        resolve_locale(str(locale))
    except CurrencyInputError:
        _fail(f"unknown locale: {locale}")
    return str(locale)


def resolve_decimal_places(cli_places: str | int | None = None) -> int:
    """Resolve the number of decimal places using the priority chain.

    Args:
        cli_places: Value from the --decimal-places CLI argument, if provided.

    Returns:
        A non-negative integer.

    Raises:
        SystemExit: If the resolved value is not a non-negative integer.
    """
    raw = cli_places
    if raw is None:
        raw = os.environ.get("CURRENCY_INPUT_DECIMAL_PLACES")
    if raw is None:
        raw = _load_config_dict().get("decimal_places")
    if raw is None:
        return DEFAULT_DECIMAL_PLACES

    try:
        places = int(str(raw).strip())
    except ValueError:
        _fail(f"decimal places must be an integer, got {raw!r}")
    if places < 0:
        _fail(f"decimal places must not be negative, got {places}")
    return places


def resolve_initial_value(cli_value: str | None = None) -> Decimal | None:
    """Parse the --value argument.

    Raises:
        SystemExit: If the value is not a number.
    """
    if cli_value is None:
        return None
    try:
        return Decimal(cli_value)
    except InvalidOperation:
        _fail(f"initial value is not a number: {cli_value!r}")


def resolve_format_config(args: argparse.Namespace) -> FormatConfig:
    """Build the field configuration from CLI arguments, environment and config.toml."""
    return FormatConfig(
        decimal_places=resolve_decimal_places(args.decimal_places),
        locale=resolve_locale_name(args.locale),
        currency_symbol=load_currency_symbol(),
    )
