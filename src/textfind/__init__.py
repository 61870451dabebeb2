#  Copyright (c) 2025 Tom Villani, Ph.D.

"""textfind - find and replace engine for text editors.

textfind locates the next or previous occurrence of a literal or regular
expression pattern relative to a cursor offset, optionally restricted to
whole words, and computes replacement text for a match: verbatim,
case-preserving, or with regex group references expanded. It also cycles
through previously highlighted matches with a one-shot "no more matches"
notice before wrapping around the document.

Key Features
------------
- Forward and backward literal and regular expression search
- Unicode-aware case-insensitive matching and whole-word filtering
- Case-preserving replacement (``Word`` -> ``Cat``, ``WORD`` -> ``CAT``)
- ``$1`` / ``${name}`` group references in regex replacements
- Highlight navigation with explicit, caller-owned state
- Session-level ``FindService`` with history and replace-all
- ``textfind`` command line tool

Requirements
------------
- Python 3.10+

Examples
--------
Find the next whole-word match:

    >>> from textfind import SearchModel, find
    >>> find("catcatalog cat", 0, SearchModel(pattern="cat", whole_word_only=True))
    MatchResult(found=True, start_offset=11, end_offset=14)

Compute a regex replacement:

    >>> from textfind import compute_replacement
    >>> model = SearchModel(pattern=r"(\\w+)@(\\w+)", is_regex=True, replacement="$2@$1", is_replace=True)
    >>> compute_replacement("alice@example", model)
    'example@alice'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "textfind requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from textfind.exceptions import InvalidReplacementError, PatternError, TextFindError, ValidationError
from textfind.options import FindSettings, SearchModel
from textfind.search import (
    NOT_FOUND,
    FindService,
    FirstPassExhausted,
    HighlightRange,
    MatchResult,
    NavigatorState,
    NavigatorStateRegistry,
    NotFound,
    ReplaceAllResult,
    Selected,
    SelectionOutcome,
    compute_replacement,
    find,
    select_next,
)

__all__ = [
    "__version__",
    # Core operations
    "find",
    "compute_replacement",
    "select_next",
    # Models and results
    "SearchModel",
    "FindSettings",
    "MatchResult",
    "NOT_FOUND",
    "HighlightRange",
    "NavigatorState",
    "NavigatorStateRegistry",
    "Selected",
    "FirstPassExhausted",
    "NotFound",
    "SelectionOutcome",
    "ReplaceAllResult",
    # Session
    "FindService",
    # Exceptions
    "TextFindError",
    "ValidationError",
    "PatternError",
    "InvalidReplacementError",
]
