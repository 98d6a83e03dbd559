"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from currency_input.engine import CurrencyEditEngine
from currency_input.models import EditRequest, FormatConfig


@dataclass
class FakeHost:
    """A text host with the same attributes as a Textual Input."""

    value: str = ""
    cursor_position: int = 0


@dataclass
class RecordingObserver:
    """A secondary observer that records calls and returns configurable answers."""

    allow_change: bool = True
    allow_begin: bool = True
    allow_end: bool = True
    allow_clear: bool = True
    allow_return: bool = True
    calls: list[str] = field(default_factory=list)

    def should_begin_editing(self, host) -> bool:
        self.calls.append("should_begin_editing")
        return self.allow_begin

    def did_begin_editing(self, host) -> None:
        self.calls.append("did_begin_editing")

    def should_end_editing(self, host) -> bool:
        self.calls.append("should_end_editing")
        return self.allow_end

    def did_end_editing(self, host) -> None:
        self.calls.append("did_end_editing")

    def should_change(self, host, edit: EditRequest) -> bool:
        self.calls.append("should_change")
        return self.allow_change

    def should_clear(self, host) -> bool:
        self.calls.append("should_clear")
        return self.allow_clear

    def should_return(self, host) -> bool:
        self.calls.append("should_return")
        return self.allow_return


@pytest.fixture
def engine() -> CurrencyEditEngine:
    """An engine formatting US dollars with 2 decimal places."""
    return CurrencyEditEngine(FormatConfig(decimal_places=2, locale="en_US"))


@pytest.fixture
def host() -> FakeHost:
    """An empty text host."""
    return FakeHost()


@pytest.fixture
def observer() -> RecordingObserver:
    """A permissive recording observer."""
    return RecordingObserver()


def type_text(engine: CurrencyEditEngine, host: FakeHost, keys: str) -> None:
    """Feed *keys* one at a time at the host's cursor, as a keyboard would."""
    for key in keys:
        edit = EditRequest(host.value, host.cursor_position, host.cursor_position, key)
        result = engine.process_edit(edit)
        if result.is_formatted:
            host.value = result.new_text
            host.cursor_position = result.new_cursor
        elif result.accepted:
            host.value = edit.apply()
            host.cursor_position = edit.start + len(key)
