#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Search model consumed by the matcher and the replacement composer."""

from __future__ import annotations

from dataclasses import dataclass, field

from textfind.constants import (
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_FORWARD,
    DEFAULT_PRESERVE_CASE,
    DEFAULT_REGEX,
    DEFAULT_WHOLE_WORDS_ONLY,
)
from textfind.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class SearchModel(CloneFrozenMixin):
    """Everything one find or replace call needs to know about the search.

    A model is never mutated during a call. Callers repeating "find next"
    may reuse the same instance; use ``create_updated`` to derive variants
    (for example the opposite direction).

    Parameters
    ----------
    pattern : str, default ""
        Text or regular expression to look for. An empty pattern never matches.
    is_regex : bool, default False
        Interpret ``pattern`` as a regular expression.
    case_sensitive : bool, default False
        Compare letters exactly instead of case-insensitively.
    forward : bool, default True
        Search towards the end of the text.
    whole_word_only : bool, default False
        Only accept matches bounded by non-identifier characters.
    replacement : str, default ""
        Replacement text; in regex mode a template with ``$n`` references.
    preserve_case : bool, default False
        Adapt the casing of a literal replacement to the matched text.
    is_replace : bool, default False
        The model describes a replace operation.
    search_highlighters : bool, default False
        "Find next" should cycle existing highlights instead of searching again.

    """

    pattern: str = field(
        default="",
        metadata={"help": "Text or regular expression to search for", "importance": "core"},
    )
    is_regex: bool = field(
        default=DEFAULT_REGEX,
        metadata={"help": "Interpret the pattern as a regular expression", "importance": "core"},
    )
    case_sensitive: bool = field(
        default=DEFAULT_CASE_SENSITIVE,
        metadata={"help": "Match letter case exactly", "importance": "core"},
    )
    forward: bool = field(
        default=DEFAULT_FORWARD,
        metadata={"help": "Search towards the end of the text", "importance": "core"},
    )
    whole_word_only: bool = field(
        default=DEFAULT_WHOLE_WORDS_ONLY,
        metadata={"help": "Only accept matches that form whole words", "importance": "core"},
    )
    replacement: str = field(
        default="",
        metadata={"help": "Replacement text or regex replacement template", "importance": "core"},
    )
    preserve_case: bool = field(
        default=DEFAULT_PRESERVE_CASE,
        metadata={"help": "Adapt literal replacements to the case of the matched text", "importance": "advanced"},
    )
    is_replace: bool = field(
        default=False,
        metadata={"help": "Model describes a replace operation", "importance": "advanced"},
    )
    search_highlighters: bool = field(
        default=False,
        metadata={"help": "Cycle existing highlights on find next instead of searching again", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate field types at construction time.

        Raises
        ------
        ValueError
            If ``pattern`` or ``replacement`` is not a string.

        """
        if not isinstance(self.pattern, str):
            raise ValueError(f"pattern must be a string, got {type(self.pattern).__name__}")
        if not isinstance(self.replacement, str):
            raise ValueError(f"replacement must be a string, got {type(self.replacement).__name__}")

    @property
    def is_empty(self) -> bool:
        """Return True when there is nothing to search for."""
        return not self.pattern

    def reversed(self) -> SearchModel:
        """Return a copy searching in the opposite direction."""
        return self.create_updated(forward=not self.forward)


__all__ = ["SearchModel"]
