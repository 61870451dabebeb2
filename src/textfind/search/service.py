#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Session-level orchestration of find and replace.

:class:`FindService` holds what a text editor session remembers between
searches: the current find-in-file model, the model used by "find next",
recently used search and replace strings, and the navigator state of every
open document. The searching itself is delegated to
:func:`~textfind.search.matcher.find` and
:func:`~textfind.search.replacement.compute_replacement`.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Hashable, Iterable, Optional

from textfind.exceptions import ValidationError
from textfind.options.search import SearchModel
from textfind.options.settings import FindSettings
from textfind.search.matcher import find, find_iter
from textfind.search.navigator import NavigatorStateRegistry, select_next
from textfind.search.replacement import compute_replacement
from textfind.search.types import NOT_FOUND, HighlightRange, MatchResult, ReplaceAllResult, SelectionOutcome

logger = logging.getLogger(__name__)

FindModelListener = Callable[[Optional[SearchModel]], None]


class FindService:
    """Service object coordinating searches within one editing session."""

    def __init__(self, settings: FindSettings | None = None) -> None:
        """Initialise the service with optional settings overrides."""
        self.settings = settings or FindSettings()
        self._find_in_file_model = self.settings.init_model()
        self._find_next_model: SearchModel | None = None
        self._find_was_performed = False
        self._recent_find: deque[str] = deque(maxlen=self.settings.max_history)
        self._recent_replace: deque[str] = deque(maxlen=self.settings.max_history)
        self._listeners: list[FindModelListener] = []
        self._navigator_states = NavigatorStateRegistry()

    @property
    def find_in_file_model(self) -> SearchModel:
        """Return the model used by find-in-file operations."""
        return self._find_in_file_model

    @find_in_file_model.setter
    def find_in_file_model(self, model: SearchModel) -> None:
        self._find_in_file_model = model

    @property
    def find_next_model(self) -> SearchModel | None:
        """Return the model repeated by "find next", if any."""
        return self._find_next_model

    def set_find_next_model(self, model: SearchModel | None) -> None:
        """Replace the "find next" model and notify listeners."""
        self._find_next_model = model
        for listener in list(self._listeners):
            listener(model)

    def get_find_next_model(self, search_field_text: str | None = None) -> SearchModel | None:
        """Return the "find next" model, patched with the live search field text.

        Parameters
        ----------
        search_field_text : str, optional
            Text currently typed in an inline search field. When it differs
            from the find-in-file pattern a copy of the find-next model using
            this text is returned.

        """
        if self._find_next_model is None:
            return None
        if search_field_text is not None and search_field_text != self._find_in_file_model.pattern:
            return self._find_next_model.create_updated(pattern=search_field_text)
        return self._find_next_model

    def add_listener(self, listener: FindModelListener) -> None:
        """Register a callback invoked whenever the "find next" model changes."""
        self._listeners.append(listener)

    def remove_listener(self, listener: FindModelListener) -> None:
        """Unregister a callback added with :meth:`add_listener`."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def find_was_performed(self) -> bool:
        """Return True once a find-in-file has been accepted."""
        return self._find_was_performed

    def set_find_was_performed(self) -> None:
        """Record that a find-in-file was performed."""
        self._find_was_performed = True

    def accept_find_model(self, model: SearchModel) -> bool:
        """Adopt ``model`` as the find-in-file model after the user confirms it.

        Returns False (and changes nothing) when the pattern is empty.
        Otherwise the pattern, and the replacement in replace mode, are
        added to the history.
        """
        if model.is_empty:
            return False
        _remember(self._recent_find, model.pattern)
        if model.is_replace:
            _remember(self._recent_replace, model.replacement)
        self._find_in_file_model = model
        self.set_find_was_performed()
        return True

    @property
    def recent_find_strings(self) -> list[str]:
        """Return recently searched strings, most recent first."""
        return list(self._recent_find)

    @property
    def recent_replace_strings(self) -> list[str]:
        """Return recently used replacement strings, most recent first."""
        return list(self._recent_replace)

    def find(self, text: str, offset: int, model: SearchModel | None = None) -> MatchResult:
        """Find the next match in ``text`` (see :func:`textfind.search.matcher.find`)."""
        return find(text, offset, model or self._find_in_file_model)

    def compute_replacement(self, found_text: str, model: SearchModel | None = None) -> str | None:
        """Return the replacement for ``found_text`` under ``model``."""
        return compute_replacement(found_text, model or self._find_in_file_model)

    def find_all(self, text: str, model: SearchModel | None = None) -> list[HighlightRange]:
        """Return every match in ``text`` in document order.

        The search always runs forward from the start of the text; after an
        empty match the scan advances by one character.
        """
        ranges = [
            HighlightRange(result.start_offset, result.end_offset)
            for result in find_iter(text, model or self._find_in_file_model)
        ]
        logger.debug("find_all located %d matches", len(ranges))
        return ranges

    def replace_all(self, text: str, model: SearchModel | None = None) -> ReplaceAllResult:
        """Replace every match in ``text``.

        Raises
        ------
        ValidationError
            If the model is not in replace mode
        PatternError, InvalidReplacementError
            Propagated from the matcher and replacement composer; ``text`` is
            left unchanged

        """
        active = model or self._find_in_file_model
        if not active.is_replace:
            raise ValidationError(
                "replace_all requires a model in replace mode", parameter_name="is_replace", parameter_value=False
            )

        pieces: list[str] = []
        last_end = 0
        for highlight in self.find_all(text, active):
            found_text = text[highlight.start_offset : highlight.end_offset]
            replacement = compute_replacement(found_text, active)
            pieces.append(text[last_end : highlight.start_offset])
            pieces.append(replacement if replacement is not None else found_text)
            last_end = highlight.end_offset
        count = len(pieces) // 2
        pieces.append(text[last_end:])
        return ReplaceAllResult(text="".join(pieces), count=count)

    def select_next_highlight(
        self,
        document_key: Hashable,
        ranges: Iterable[HighlightRange],
        offset: int,
        forward: bool = True,
        text_length: int | None = None,
    ) -> SelectionOutcome:
        """Move to the next highlight of a document, wrapping once at its ends."""
        state = self._navigator_states.get(document_key)
        return select_next(ranges, offset, forward, state, text_length=text_length)

    def find_next(
        self,
        document_key: Hashable,
        text: str,
        offset: int,
        ranges: Iterable[HighlightRange] = (),
        forward: bool = True,
    ) -> MatchResult | SelectionOutcome:
        """Repeat the "find next" model in a document.

        When the model has ``search_highlighters`` set and the document has
        highlights, the next highlight is selected with
        :meth:`select_next_highlight`. Otherwise ``text`` is searched again
        from ``offset`` in the requested direction.

        Returns
        -------
        MatchResult or SelectionOutcome
            A :class:`MatchResult` when the text was searched (``NOT_FOUND``
            when there is no "find next" model), otherwise the navigator
            outcome

        """
        model = self.get_find_next_model()
        if model is None:
            return NOT_FOUND

        highlights = list(ranges)
        if model.search_highlighters and highlights:
            return self.select_next_highlight(document_key, highlights, offset, forward, text_length=len(text))

        if model.forward != forward:
            model = model.reversed()
        return find(text, offset, model)

    def release_document(self, document_key: Hashable) -> None:
        """Forget the navigator state of a closed document."""
        self._navigator_states.release(document_key)


def _remember(history: deque[str], value: str) -> None:
    if value in history:
        history.remove(value)
    history.appendleft(value)


__all__ = ["FindModelListener", "FindService"]
