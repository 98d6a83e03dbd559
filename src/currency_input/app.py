"""Main Textual application for the currency input demo."""

from __future__ import annotations

from decimal import Decimal

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, Label, Static

from currency_input.config import load_theme
from currency_input.models import FormatConfig
from currency_input.widgets.currency_input import CurrencyInput

_FOOTER_TEXT = "\\[Tab] Next field  \\[Enter] Submit  \\[Ctrl+Q] Quit"


def describe_value(value: Decimal | None) -> str:
    """Return the status line text for a parsed amount."""
    if value is None:
        return "Value: (empty)"
    return f"Value: {value}"


class CurrencyInputApp(App):
    """A single form demonstrating live currency formatting."""

    TITLE = "currency-input"
    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        config: FormatConfig | None = None,
        initial_value: Decimal | None = None,
    ) -> None:
        """Initialize the app.

        Args:
            config: Formatting configuration for the amount field.
            initial_value: Amount shown when the app starts.
        """
        super().__init__()
        self.config = config or FormatConfig()
        self.initial_value = initial_value
        saved_theme = load_theme()
        if saved_theme:
            self.theme = saved_theme

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        with Vertical(id="form"):
            yield Label(f"Amount ({self.config.locale})", id="amount-label")
            yield CurrencyInput(
                decimal_places=self.config.decimal_places,
                locale=self.config.locale,
                currency_code=self.config.currency_code,
                currency_symbol=self.config.currency_symbol,
                currency_value=self.initial_value,
                id="amount",
            )
            yield Label("Note", id="note-label")
            yield Input(placeholder="Optional note", id="note")
            yield Static(describe_value(self.initial_value), id="status-bar")
        yield Static(_FOOTER_TEXT, id="footer-bar")

    def on_mount(self) -> None:
        """Focus the amount field after mount."""
        self.query_one("#amount", CurrencyInput).focus()

    def on_currency_input_value_changed(self, event: CurrencyInput.ValueChanged) -> None:
        """Show the parsed amount as the user types."""
        self.query_one("#status-bar", Static).update(describe_value(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Announce the submitted amount."""
        if isinstance(event.input, CurrencyInput):
            self.notify(f"Submitted {event.input.value or 'nothing'}")
