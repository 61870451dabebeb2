#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Word boundary checks used by whole-word searches."""

from __future__ import annotations

import unicodedata
from functools import lru_cache


@lru_cache(maxsize=4096)
def is_identifier_char(ch: str) -> bool:
    """Return True if ``ch`` may appear inside an identifier.

    Letters, digits, combining marks and connector punctuation (``_``)
    qualify, as do currency symbols such as ``$``.
    """
    return ("a" + ch).isidentifier() or unicodedata.category(ch) == "Sc"


def is_whole_word(text: str, start_offset: int, end_offset: int) -> bool:
    """Return True if ``text[start_offset:end_offset]`` is bounded as a whole word.

    A character two positions before the match that is a backslash also
    counts as a word start, so ``\\nfoo`` matches ``foo`` as a word.

    Parameters
    ----------
    text : str
        The searched text
    start_offset : int
        Start of the match
    end_offset : int
        End of the match (exclusive)

    Returns
    -------
    bool
        Whether both boundaries are acceptable

    """
    is_word_start = (
        start_offset == 0
        or not is_identifier_char(text[start_offset - 1])
        or (start_offset > 1 and text[start_offset - 2] == "\\")
    )
    is_word_end = (
        end_offset == len(text)
        or not is_identifier_char(text[end_offset])
        or (end_offset > 0 and not is_identifier_char(text[end_offset - 1]))
    )
    return is_word_start and is_word_end


__all__ = ["is_identifier_char", "is_whole_word"]
