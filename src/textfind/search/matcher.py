#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textfind/search/matcher.py
"""Literal and regular expression search over a text buffer.

The entry point is :func:`find`, which locates the next (or previous) match of
a :class:`~textfind.options.search.SearchModel` relative to a cursor offset.
When the model asks for whole words only, candidate matches whose boundaries
fall inside an identifier are rejected and the scan continues from just past
the rejected match.

Searches are pure functions of ``(text, offset, model)``. Regular expressions
run on :mod:`re` without a timeout, so callers that accept patterns from
untrusted sources should impose one themselves.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterator

from textfind.constants import PATTERN_CACHE_SIZE, REGEX_BASE_FLAGS
from textfind.exceptions import PatternError, ValidationError
from textfind.options.search import SearchModel
from textfind.search.types import NOT_FOUND, MatchResult
from textfind.search.words import is_whole_word

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str, case_sensitive: bool) -> re.Pattern[str]:
    """Compile a search pattern with the flags every search uses.

    Parameters
    ----------
    pattern : str
        Regular expression source
    case_sensitive : bool
        When False the pattern is compiled with ``re.IGNORECASE``

    Returns
    -------
    re.Pattern
        The compiled (and cached) pattern

    Raises
    ------
    PatternError
        If the expression is malformed

    """
    try:
        return _compile_cached(pattern, case_sensitive)
    except re.error as exc:
        logger.debug("Pattern %r failed to compile: %s", pattern, exc)
        raise PatternError(pattern, original_error=exc) from exc


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def _compile_cached(pattern: str, case_sensitive: bool) -> re.Pattern[str]:
    flags = REGEX_BASE_FLAGS if case_sensitive else REGEX_BASE_FLAGS | re.IGNORECASE
    return re.compile(pattern, flags)


@lru_cache(maxsize=4096)
def _fold_char(ch: str) -> str:
    # Simple (one-to-one) case folding; characters whose full mapping would
    # change length fold to themselves so offsets stay aligned.
    upper = ch.upper()
    if len(upper) == 1:
        lower = upper.lower()
        if len(lower) == 1:
            return lower
    lower = ch.lower()
    if len(lower) == 1:
        return lower
    # U+0130 lowercases to "i" plus a combining dot
    if lower == "i\u0307":
        return "i"
    return ch


def fold_case(text: str) -> str:
    """Return ``text`` case-folded character by character, keeping its length.

    Characters without a one-to-one lowercase mapping (``ß``) are left
    unchanged; dotted capital I folds to ``i``.
    """
    return "".join(map(_fold_char, text))


def _haystack(text: str, model: SearchModel) -> str:
    if model.is_regex or model.case_sensitive or model.is_empty:
        return text
    return fold_case(text)


def find(text: str, offset: int, model: SearchModel) -> MatchResult:
    """Find the next occurrence of ``model.pattern`` relative to ``offset``.

    Forward searches consider matches starting at or after ``offset``;
    backward searches return the nearest match lying entirely before it.

    Parameters
    ----------
    text : str
        Text to search
    offset : int
        Cursor position, ``0 <= offset <= len(text)``
    model : SearchModel
        What to look for and how

    Returns
    -------
    MatchResult
        The match, or :data:`~textfind.search.types.NOT_FOUND`

    Raises
    ------
    ValidationError
        If ``offset`` lies outside the text
    PatternError
        If ``model.is_regex`` and the pattern does not compile

    Examples
    --------
    >>> find("catcatalog cat", 0, SearchModel(pattern="cat", whole_word_only=True))
    MatchResult(found=True, start_offset=11, end_offset=14)

    """
    if not 0 <= offset <= len(text):
        raise ValidationError(
            f"offset must be between 0 and {len(text)}, got {offset}",
            parameter_name="offset",
            parameter_value=offset,
        )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("offset=%d", offset)
        logger.debug("textlength=%d", len(text))
        logger.debug("%r", model)

    return _find_from(text, _haystack(text, model), offset, model)


def find_iter(text: str, model: SearchModel) -> Iterator[MatchResult]:
    """Yield every forward match of ``model`` in ``text`` in document order.

    The text is case-folded once for the whole scan. After an empty match the
    scan advances by one character.

    Raises
    ------
    PatternError
        If ``model.is_regex`` and the pattern does not compile

    """
    active = model if model.forward else model.create_updated(forward=True)
    haystack = _haystack(text, active)
    offset = 0
    while offset <= len(text):
        result = _find_from(text, haystack, offset, active)
        if not result.found:
            return
        yield result
        offset = result.end_offset if result.end_offset > result.start_offset else result.end_offset + 1


def _find_from(text: str, haystack: str, offset: int, model: SearchModel) -> MatchResult:
    while True:
        result = _find_raw(haystack, offset, model)

        if not model.whole_word_only or not result.found:
            return result
        if is_whole_word(text, result.start_offset, result.end_offset):
            return result

        offset = result.start_offset + 1 if model.forward else result.end_offset - 1
        if not 0 <= offset <= len(text):
            return NOT_FOUND


def _find_raw(haystack: str, offset: int, model: SearchModel) -> MatchResult:
    if model.is_empty:
        return NOT_FOUND
    if model.is_regex:
        return _find_regex(haystack, offset, model)
    return _find_literal(haystack, offset, model)


def _find_literal(haystack: str, offset: int, model: SearchModel) -> MatchResult:
    # haystack is already folded when the search ignores case
    needle = model.pattern if model.case_sensitive else fold_case(model.pattern)
    if model.forward:
        index = haystack.find(needle, offset)
    else:
        index = haystack.rfind(needle, 0, offset)

    if index < 0:
        return NOT_FOUND
    return MatchResult.at(index, index + len(needle))


def _find_regex(text: str, offset: int, model: SearchModel) -> MatchResult:
    pattern = compile_pattern(model.pattern, model.case_sensitive)

    if model.forward:
        match = pattern.search(text, offset)
        if match is not None and match.end() <= len(text):
            return MatchResult.at(match.start(), match.end())
        return NOT_FOUND

    # No backward regex search in re: scan forward and keep the last match
    # that ends before the cursor.
    last: re.Match[str] | None = None
    for match in pattern.finditer(text):
        if match.end() >= offset:
            break
        last = match
    if last is None:
        return NOT_FOUND
    return MatchResult.at(last.start(), last.end())


__all__ = ["compile_pattern", "find", "find_iter", "fold_case"]
