"""Textual widgets for currency entry."""

from __future__ import annotations

from currency_input.widgets.currency_input import CurrencyInput

__all__ = ["CurrencyInput"]
