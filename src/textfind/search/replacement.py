#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textfind/search/replacement.py
"""Compute the text that replaces a match.

Three flavours are supported:

- literal: the replacement string as typed;
- case-preserving literal: the replacement re-cased after the matched text
  (``Word`` -> ``Cat``, ``WORD`` -> ``CAT``);
- regular expression: ``$n`` / ``${name}`` group references expanded against
  the matched text.
"""

from __future__ import annotations

import logging

from textfind.options.search import SearchModel
from textfind.search.matcher import compile_pattern
from textfind.utils.escape import expand_template, unescape_string_characters

logger = logging.getLogger(__name__)


def compute_replacement(found_text: str, model: SearchModel | None) -> str | None:
    """Return the string to insert in place of ``found_text``.

    Parameters
    ----------
    found_text : str
        The text of the match being replaced
    model : SearchModel or None
        The search model; only replace-mode models produce replacements

    Returns
    -------
    str or None
        The replacement, or None when ``model`` is missing or not in replace mode

    Raises
    ------
    PatternError
        If the model is a regex model whose pattern does not compile
    InvalidReplacementError
        If the regex replacement template is malformed or references a
        missing group

    Notes
    -----
    In regex mode the pattern is matched against ``found_text`` on its own.
    Patterns relying on surrounding context (lookbehind, ``^`` after a
    newline) may match in the document but not in isolation; the template is
    then returned unexpanded instead of raising.

    """
    if model is None or not model.is_replace:
        return None

    template = model.replacement
    if not model.is_regex:
        if model.preserve_case:
            return replace_with_case_respect(template, found_text)
        return template

    pattern = compile_pattern(model.pattern, model.case_sensitive)
    match = pattern.fullmatch(found_text)
    if match is None:
        logger.debug("Pattern %r does not match %r in isolation; using template verbatim", model.pattern, found_text)
        return template

    return expand_template(unescape_string_characters(template), match)


def replace_with_case_respect(template: str, found: str) -> str:
    """Re-case ``template`` to follow the casing of ``found``.

    The first character follows the case of ``found[0]``. The rest of the
    template is upper-cased when the rest of ``found`` is all upper case,
    lower-cased when it is all lower case, and left alone otherwise.

    Examples
    --------
    >>> replace_with_case_respect("cat", "WORD")
    'CAT'
    >>> replace_with_case_respect("cat", "Word")
    'Cat'
    >>> replace_with_case_respect("cat", "wOrD")
    'cat'

    """
    if not found or not template:
        return template

    first = template[0].upper() if found[0].isupper() else template[0].lower()
    if len(template) == 1:
        return first

    rest = template[1:]
    if len(found) == 1:
        return first + rest

    tail = found[1:]
    if all(ch.isupper() for ch in tail):
        return first + rest.upper()
    if all(ch.islower() for ch in tail):
        return first + rest.lower()
    return first + rest


__all__ = ["compute_replacement", "replace_with_case_respect"]
