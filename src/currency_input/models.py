"""Data models for edit requests, formatting configuration, and edit results."""

from __future__ import annotations

from dataclasses import dataclass

from currency_input.errors import InvalidConfigError


@dataclass(frozen=True)
class EditRequest:
    """A single keystroke or paste reported by the host before it changes text.

    The range ``[start, end)`` is half-open over ``old_text`` and is replaced
    by ``replacement``.
    """

    old_text: str
    start: int
    end: int
    replacement: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.old_text):
            raise ValueError(
                f"edit range [{self.start}, {self.end}) is outside "
                f"text of length {len(self.old_text)}"
            )

    @property
    def length(self) -> int:
        """Number of characters covered by the edit range."""
        return self.end - self.start

    def apply(self, replacement: str | None = None) -> str:
        """Return the old text with the range replaced.

        Args:
            replacement: Text to substitute. Defaults to the request's own
                replacement string, which is what the host would insert.
        """
        if replacement is None:
            replacement = self.replacement
        return self.old_text[: self.start] + replacement + self.old_text[self.end :]


@dataclass
class FormatConfig:
    """Per-field formatting configuration.

    Only mutated between edits. ``currency_code`` and ``currency_symbol``
    override what the locale would otherwise derive.
    """

    decimal_places: int = 2
    locale: str = "en_US"
    currency_code: str | None = None
    currency_symbol: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.decimal_places, bool) or not isinstance(self.decimal_places, int):
            raise InvalidConfigError(
                f"decimal_places must be an integer, got {self.decimal_places!r}"
            )
        if self.decimal_places < 0:
            raise InvalidConfigError(
                f"decimal_places must not be negative, got {self.decimal_places}"
            )


@dataclass(frozen=True)
class EditResult:
    """Outcome of processing an edit.

    ``accepted`` tells the host whether to apply its own edit verbatim.
    When ``new_text`` is set the host must instead show ``new_text`` with a
    collapsed selection at ``new_cursor``.
    """

    accepted: bool
    new_text: str | None = None
    new_cursor: int | None = None

    @classmethod
    def accept(cls) -> EditResult:
        """Let the host apply the raw edit."""
        return cls(accepted=True)

    @classmethod
    def reject(cls) -> EditResult:
        """Leave the host text unchanged."""
        return cls(accepted=False)

    @classmethod
    def formatted(cls, text: str, cursor: int) -> EditResult:
        """The engine produced the final text; the raw edit is rejected."""
        return cls(accepted=False, new_text=text, new_cursor=cursor)

    @property
    def is_formatted(self) -> bool:
        """Whether the host has new text to commit."""
        return self.new_text is not None
