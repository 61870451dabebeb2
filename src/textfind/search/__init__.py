#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Search subsystem exposed to the public API."""

from __future__ import annotations

from textfind.search.matcher import compile_pattern, find, find_iter
from textfind.search.navigator import NavigatorState, NavigatorStateRegistry, select_next
from textfind.search.replacement import compute_replacement, replace_with_case_respect
from textfind.search.service import FindService
from textfind.search.types import (
    NOT_FOUND,
    FirstPassExhausted,
    HighlightRange,
    MatchResult,
    NotFound,
    ReplaceAllResult,
    Selected,
    SelectionOutcome,
)
from textfind.search.words import is_identifier_char, is_whole_word

__all__ = [
    "NOT_FOUND",
    "FindService",
    "FirstPassExhausted",
    "HighlightRange",
    "MatchResult",
    "NavigatorState",
    "NavigatorStateRegistry",
    "NotFound",
    "ReplaceAllResult",
    "Selected",
    "SelectionOutcome",
    "compile_pattern",
    "compute_replacement",
    "find",
    "find_iter",
    "is_identifier_char",
    "is_whole_word",
    "replace_with_case_respect",
    "select_next",
]
