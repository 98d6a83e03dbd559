"""Currency input widget that reformats on every keystroke."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Any

from textual.events import Blur, Focus, Paste
from textual.message import Message
from textual.widgets import Input

from currency_input.delegate import CurrencyFieldDelegate, EditingObserver
from currency_input.digits import is_digit_class
from currency_input.engine import CurrencyEditEngine
from currency_input.models import EditRequest, FormatConfig


class CurrencyInput(Input):
    """An Input that keeps its text formatted as currency while typing.

    Digits, the decimal point, backspace, delete and paste are turned into
    edit requests and run through the formatting engine, which rewrites the
    text and moves the cursor so it stays next to the digit being edited.
    Other printable characters are rejected.  When the field loses focus
    the value is shown with the full number of decimal places.
    """

    # Keys that should pass through to the default Input handler.
    _PASSTHROUGH_KEYS = frozenset(
        {
            "left",
            "right",
            "home",
            "end",
            "shift+left",
            "shift+right",
            "shift+home",
            "shift+end",
            "tab",
            "shift+tab",
            "escape",
            "enter",
            "up",
            "down",
        }
    )

    class ValueChanged(Message):
        """Posted when the text changes, carrying the parsed amount."""

        def __init__(self, currency_input: CurrencyInput, value: Decimal | None) -> None:
            super().__init__()
            self.currency_input = currency_input
            self.value = value

    def __init__(
        self,
        *,
        decimal_places: int = 2,
        locale: str = "en_US",
        currency_code: str | None = None,
        currency_symbol: str | None = None,
        currency_value: Decimal | None = None,
        observer: EditingObserver | Any | None = None,
        **kwargs,
    ) -> None:
        """Initialize the field.

        Args:
            decimal_places: Number of fractional digits shown once editing ends.
            locale: Babel locale used to derive the currency and its pattern.
            currency_code: Overrides the locale's currency code.
            currency_symbol: Overrides the symbol shown in the text.
            currency_value: Initial amount.
            observer: Secondary observer that receives lifecycle events.
            **kwargs: Passed on to ``Input``.
        """
        config = FormatConfig(
            decimal_places=decimal_places,
            locale=locale,
            currency_code=currency_code,
            currency_symbol=currency_symbol,
        )
        self._delegate = CurrencyFieldDelegate(CurrencyEditEngine(config), inner=observer)
        self._editing = False
        kwargs.setdefault("placeholder", self.engine.format_value(Decimal(0)))
        if currency_value is not None:
            kwargs["value"] = self.engine.format_value(currency_value)
        super().__init__(**kwargs)

    @property
    def engine(self) -> CurrencyEditEngine:
        """The formatting engine owned by this field."""
        return self._delegate.engine

    @property
    def observer(self) -> EditingObserver | Any | None:
        """The secondary observer lifecycle events are forwarded to."""
        return self._delegate.inner

    @observer.setter
    def observer(self, observer: EditingObserver | Any | None) -> None:
        self._delegate.inner = observer

    # ------------------------------------------------------------------
    # Typed value and configuration
    # ------------------------------------------------------------------

    @property
    def currency_value(self) -> Decimal | None:
        """The amount shown in the field, or None when it holds no number."""
        return self.engine.parse_value(self.value)

    @currency_value.setter
    def currency_value(self, amount: Decimal | None) -> None:
        self.value = self.engine.format_value(amount)
        self.cursor_position = len(self.value)

    @property
    def decimal_places(self) -> int:
        return self.engine.config.decimal_places

    @decimal_places.setter
    def decimal_places(self, places: int) -> None:
        self.engine.set_config(replace(self.engine.config, decimal_places=places))

    @property
    def locale(self) -> str:
        return self.engine.config.locale

    @locale.setter
    def locale(self, locale: str) -> None:
        """Switch locale. The text is reformatted on the next edit or blur."""
        self.engine.set_locale(locale)

    @property
    def currency_code(self) -> str | None:
        return self.engine.formatter.currency_code

    @currency_code.setter
    def currency_code(self, code: str | None) -> None:
        self.engine.set_config(replace(self.engine.config, currency_code=code))

    @property
    def currency_symbol(self) -> str | None:
        return self.engine.formatter.currency_symbol

    @currency_symbol.setter
    def currency_symbol(self, symbol: str | None) -> None:
        self.engine.set_config(replace(self.engine.config, currency_symbol=symbol))

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def apply_edit(self, start: int, end: int, replacement: str) -> bool:
        """Replace ``[start, end)`` with *replacement* through the engine.

        Returns:
            True if the raw edit was applied verbatim.
        """
        request = EditRequest(self.value, start, end, replacement)
        if not self._delegate.should_change(self, request):
            return False
        self.value = request.apply()
        self.cursor_position = start + len(replacement)
        return True

    def _selected_range(self) -> tuple[int, int]:
        start, end = self.selection
        return min(start, end), max(start, end)

    async def _on_key(self, event) -> None:
        """Route digits, the decimal point, backspace and delete through the engine."""
        key = event.key

        if key in self._PASSTHROUGH_KEYS:
            await super()._on_key(event)
            return

        event.prevent_default()
        event.stop()

        start, end = self._selected_range()
        if key == "backspace":
            if start == end:
                if start == 0:
                    return
                start -= 1
            self.apply_edit(start, end, "")
            return

        if key == "delete":
            if start == end:
                if end >= len(self.value):
                    return
                end += 1
            self.apply_edit(start, end, "")
            return

        char = event.character
        if event.is_printable and char and is_digit_class(char):
            self.apply_edit(start, end, char)

    def _on_paste(self, event: Paste) -> None:
        """Run pasted text through the engine instead of inserting it raw."""
        event.prevent_default()
        event.stop()
        if not event.text:
            return
        start, end = self._selected_range()
        self.apply_edit(start, end, event.text.splitlines()[0])

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _on_focus(self, event: Focus) -> None:
        """Ask the observer whether editing may begin."""
        if not self._delegate.should_begin_editing(self):
            self.call_after_refresh(self.blur)
            return
        self._editing = True
        self._delegate.did_begin_editing(self)

    def _on_blur(self, event: Blur) -> None:
        """Reformat with the full number of decimal places when focus leaves."""
        if not self._editing:
            return
        if not self._delegate.should_end_editing(self):
            self.call_after_refresh(self.focus)
            return
        self._editing = False
        self._delegate.did_end_editing(self)

    def clear(self) -> None:
        """Clear the field unless the observer objects."""
        if self._delegate.should_clear(self):
            super().clear()

    async def action_submit(self) -> None:
        """Submit unless the observer objects."""
        if self._delegate.should_return(self):
            await super().action_submit()

    def watch_value(self, value: str) -> None:
        self.post_message(self.ValueChanged(self, self.engine.parse_value(value)))
