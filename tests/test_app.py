"""Tests for the demo application."""

from __future__ import annotations

from decimal import Decimal

from textual.widgets import Static

from currency_input.app import CurrencyInputApp, describe_value
from currency_input.models import FormatConfig
from currency_input.widgets.currency_input import CurrencyInput


class TestDescribeValue:
    """Tests for the status line text."""

    def test_empty(self):
        assert describe_value(None) == "Value: (empty)"

    def test_amount(self):
        assert describe_value(Decimal("12.50")) == "Value: 12.50"


class TestCurrencyInputApp:
    """Tests for CurrencyInputApp."""

    async def test_amount_field_focused_on_mount(self, monkeypatch):
        monkeypatch.setattr("currency_input.app.load_theme", lambda: None)
        app = CurrencyInputApp(FormatConfig(locale="en_GB"))
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.focused, CurrencyInput)
            assert app.focused.locale == "en_GB"

    async def test_initial_value_shown(self, monkeypatch):
        monkeypatch.setattr("currency_input.app.load_theme", lambda: None)
        app = CurrencyInputApp(initial_value=Decimal("1234.5"))
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#amount", CurrencyInput).value == "$1,234.50"

    async def test_status_follows_typing(self, monkeypatch):
        monkeypatch.setattr("currency_input.app.load_theme", lambda: None)
        app = CurrencyInputApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("4", "2")
            await pilot.pause()
            status = app.query_one("#status-bar", Static)
            assert "42" in str(status.render())
