"""Live currency formatting for Textual inputs."""

from __future__ import annotations

from currency_input.delegate import CurrencyFieldDelegate, EditingObserver, TextHost
from currency_input.engine import CurrencyEditEngine
from currency_input.errors import CurrencyInputError, InvalidConfigError, UnknownLocaleError
from currency_input.formatter import CurrencyFormatter
from currency_input.models import EditRequest, EditResult, FormatConfig

__all__ = [
    "CurrencyEditEngine",
    "CurrencyFieldDelegate",
    "CurrencyFormatter",
    "CurrencyInputError",
    "EditRequest",
    "EditResult",
    "EditingObserver",
    "FormatConfig",
    "InvalidConfigError",
    "TextHost",
    "UnknownLocaleError",
]
