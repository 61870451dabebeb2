#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Shared data structures for the search subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from textfind.constants import (
    NO_MORE_HIGHLIGHTS_MESSAGE,
    SEARCH_AGAIN_FROM_BOTTOM_MESSAGE,
    SEARCH_AGAIN_FROM_TOP_MESSAGE,
)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a single find call.

    Not-found results all compare equal to :data:`NOT_FOUND`; compare by
    value, never by identity.
    """

    found: bool
    start_offset: int = -1
    end_offset: int = -1

    @classmethod
    def at(cls, start_offset: int, end_offset: int) -> MatchResult:
        """Return a found result spanning ``[start_offset, end_offset)``."""
        return cls(found=True, start_offset=start_offset, end_offset=end_offset)

    @classmethod
    def not_found(cls) -> MatchResult:
        """Return the not-found value."""
        return NOT_FOUND

    @property
    def length(self) -> int:
        """Return the number of matched characters (0 when not found)."""
        return self.end_offset - self.start_offset if self.found else 0

    def span(self) -> tuple[int, int]:
        """Return ``(start_offset, end_offset)`` like ``re.Match.span``."""
        return self.start_offset, self.end_offset

    def __bool__(self) -> bool:
        return self.found


NOT_FOUND = MatchResult(found=False)


@dataclass(frozen=True)
class HighlightRange:
    """A previously discovered occurrence kept by the caller's highlighting layer."""

    start_offset: int
    end_offset: int
    is_valid: bool = True

    @property
    def is_selectable(self) -> bool:
        """Return True when the range is valid and non-empty."""
        return self.is_valid and self.start_offset < self.end_offset


@dataclass(frozen=True)
class Selected:
    """The navigator picked a highlight.

    Attributes
    ----------
    start_offset, end_offset : int
        Bounds of the chosen highlight; the caller selects them and moves the
        caret to ``start_offset``.
    approached_from_top : bool
        True when the view should scroll as if moving down the document
        (forward first pass, backward wrapped pass).
    wrapped : bool
        True when the highlight was found after wrapping around the document.

    """

    start_offset: int
    end_offset: int
    approached_from_top: bool
    wrapped: bool = False


@dataclass(frozen=True)
class FirstPassExhausted:
    """No highlight remains in the requested direction; the next call wraps."""

    forward: bool

    @property
    def message(self) -> str:
        """Return the hint to show the user."""
        template = SEARCH_AGAIN_FROM_TOP_MESSAGE if self.forward else SEARCH_AGAIN_FROM_BOTTOM_MESSAGE
        return template.format(message=NO_MORE_HIGHLIGHTS_MESSAGE)


@dataclass(frozen=True)
class NotFound:
    """Nothing could be selected, even after wrapping."""


SelectionOutcome = Union[Selected, FirstPassExhausted, NotFound]


@dataclass(frozen=True)
class ReplaceAllResult:
    """Text produced by a replace-all together with the number of replacements."""

    text: str
    count: int


__all__ = [
    "NOT_FOUND",
    "FirstPassExhausted",
    "HighlightRange",
    "MatchResult",
    "NotFound",
    "ReplaceAllResult",
    "Selected",
    "SelectionOutcome",
]
