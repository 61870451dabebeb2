#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Cycle through existing highlights with wrap-around.

After a "find all" the caller keeps a set of highlighted ranges. "Find next"
and "find previous" then move between those ranges instead of searching the
text again. Reaching the end of the document first reports
:class:`~textfind.search.types.FirstPassExhausted` so the user can be told;
the following call wraps to the other end of the document.

The wrap decision depends on per-document state (:class:`NavigatorState`)
that the caller keeps, usually through a :class:`NavigatorStateRegistry`.
Calls for the same document must not run concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Hashable, Iterable, Sequence

from textfind.search.types import (
    FirstPassExhausted,
    HighlightRange,
    NotFound,
    Selected,
    SelectionOutcome,
)

logger = logging.getLogger(__name__)


@dataclass
class NavigatorState:
    """Whether the previous navigation call ran out of highlights."""

    exhausted_once: bool = False

    def mark_exhausted(self) -> None:
        """Record that a full pass found nothing."""
        self.exhausted_once = True

    def clear(self) -> None:
        """Forget a previous exhausted pass."""
        self.exhausted_once = False


class NavigatorStateRegistry:
    """Navigator states keyed by document or session identifier."""

    def __init__(self) -> None:
        """Initialise an empty registry."""
        self._states: dict[Hashable, NavigatorState] = {}

    def get(self, key: Hashable) -> NavigatorState:
        """Return the state for ``key``, creating a cleared one on first use."""
        state = self._states.get(key)
        if state is None:
            state = self._states[key] = NavigatorState()
        return state

    def release(self, key: Hashable) -> None:
        """Drop the state for ``key`` (e.g. when its document is closed)."""
        self._states.pop(key, None)

    def clear_all(self) -> None:
        """Drop every tracked state."""
        self._states.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._states

    def __len__(self) -> int:
        return len(self._states)


def select_next(
    ranges: Iterable[HighlightRange],
    offset: int,
    forward: bool,
    state: NavigatorState,
    text_length: int | None = None,
) -> SelectionOutcome:
    """Select the highlight after (or before) ``offset``.

    Parameters
    ----------
    ranges : Iterable[HighlightRange]
        Highlights in any order; invalid and empty ranges are ignored
    offset : int
        Current caret offset
    forward : bool
        Move towards the end of the document
    state : NavigatorState
        Per-document state; updated in place
    text_length : int, optional
        Document length, used as the restart point of a backward wrap.
        Defaults to the largest highlight end.

    Returns
    -------
    Selected, FirstPassExhausted or NotFound
        ``Selected`` when a highlight was chosen. ``FirstPassExhausted`` the
        first time nothing remains in the requested direction.
        ``NotFound`` when even the wrapped pass finds nothing.

    """
    candidates = [r for r in ranges if r.is_selectable]

    # At most two passes: the normal one and a single wrapped retry
    for wrapped in (False, True):
        chosen = _pick(candidates, offset, forward, wrapped)
        if chosen is not None:
            state.clear()
            return Selected(
                start_offset=chosen.start_offset,
                end_offset=chosen.end_offset,
                approached_from_top=forward != wrapped,
                wrapped=wrapped,
            )

        if not state.exhausted_once:
            state.mark_exhausted()
            logger.debug("No highlight %s offset %d; next call wraps", "after" if forward else "before", offset)
            return FirstPassExhausted(forward=forward)

        if wrapped:
            break
        if forward:
            offset = 0
        else:
            offset = text_length if text_length is not None else _document_end(candidates, offset)

    return NotFound()


def _pick(
    candidates: Sequence[HighlightRange], offset: int, forward: bool, wrapped: bool
) -> HighlightRange | None:
    chosen: HighlightRange | None = None
    for highlight in candidates:
        start = highlight.start_offset
        end = highlight.end_offset
        if forward:
            if start > offset or (start == offset and wrapped):
                if chosen is None or chosen.start_offset > start:
                    chosen = highlight
        else:
            if end < offset or (end == offset and wrapped):
                if chosen is None or chosen.end_offset < end:
                    chosen = highlight
    return chosen


def _document_end(candidates: Sequence[HighlightRange], offset: int) -> int:
    return max([offset, *(r.end_offset for r in candidates)])


__all__ = ["NavigatorState", "NavigatorStateRegistry", "select_next"]
