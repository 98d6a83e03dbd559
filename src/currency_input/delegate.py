"""Editing lifecycle observer that formats a currency field.

The delegate sits between a text host (anything with ``value`` and
``cursor_position``, such as a Textual ``Input``) and an optional secondary
observer.  Every lifecycle hook is offered to the secondary observer first;
hooks it does not implement fall back to ``True`` or do nothing.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from currency_input.engine import CurrencyEditEngine
from currency_input.models import EditRequest, EditResult


@runtime_checkable
class TextHost(Protocol):
    """The host widget's editable state."""

    value: str
    cursor_position: int


class EditingObserver(Protocol):
    """Lifecycle hooks a field reports while it is being edited.

    A secondary observer passed to ``CurrencyFieldDelegate`` may implement
    any subset of these.
    """

    def should_begin_editing(self, host: TextHost) -> bool: ...

    def did_begin_editing(self, host: TextHost) -> None: ...

    def should_end_editing(self, host: TextHost) -> bool: ...

    def did_end_editing(self, host: TextHost) -> None: ...

    def should_change(self, host: TextHost, edit: EditRequest) -> bool: ...

    def should_clear(self, host: TextHost) -> bool: ...

    def should_return(self, host: TextHost) -> bool: ...


class CurrencyFieldDelegate:
    """Formats the host's text on every edit and when editing ends.

    Args:
        engine: The formatting engine owned by the field.
        inner: Optional secondary observer to forward lifecycle events to.
    """

    def __init__(
        self,
        engine: CurrencyEditEngine | None = None,
        inner: EditingObserver | Any | None = None,
    ) -> None:
        self.engine = engine or CurrencyEditEngine()
        self.inner = inner

    def _forward(self, hook: str, *args: Any, default: Any = True) -> Any:
        """Call *hook* on the secondary observer, or return *default*."""
        if self.inner is None:
            return default
        method = getattr(self.inner, hook, None)
        if method is None:
            return default
        return method(*args)

    def should_begin_editing(self, host: TextHost) -> bool:
        return self._forward("should_begin_editing", host)

    def did_begin_editing(self, host: TextHost) -> None:
        self._forward("did_begin_editing", host, default=None)

    def should_end_editing(self, host: TextHost) -> bool:
        return self._forward("should_end_editing", host)

    def did_end_editing(self, host: TextHost) -> None:
        """Forward, then show the value with the full number of decimal places."""
        self._forward("did_end_editing", host, default=None)
        formatted = self.engine.finish_editing(host.value)
        if formatted is not None and formatted != host.value:
            host.value = formatted

    def should_change(self, host: TextHost, edit: EditRequest) -> bool:
        """Run the engine on *edit* and commit its outcome to *host*.

        Returns:
            True if the host should apply the raw edit itself.  False when the
            secondary observer vetoed it, the engine rejected it, or the engine
            already set the formatted text and cursor.
        """
        if not self._forward("should_change", host, edit):
            return False
        result = self.engine.process_edit(edit)
        self.commit(host, result)
        return result.accepted

    def should_clear(self, host: TextHost) -> bool:
        return self._forward("should_clear", host)

    def should_return(self, host: TextHost) -> bool:
        return self._forward("should_return", host)

    @staticmethod
    def commit(host: TextHost, result: EditResult) -> None:
        """Apply a formatted result to the host verbatim."""
        if not result.is_formatted:
            return
        host.value = result.new_text
        host.cursor_position = result.new_cursor
