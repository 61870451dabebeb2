#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textfind/utils/escape.py
r"""Escape handling for replacement templates.

Replacement templates are processed in two steps, mirroring what a user types
into a "replace with" field:

1. :func:`unescape_string_characters` turns the familiar string escapes
   (``\n``, ``\t``, ``\r``, ``\b``, ``\f`` and ``\uXXXX``) into the characters
   they denote. Every other backslash pair is left untouched.
2. :func:`expand_template` substitutes group references against a match:
   ``$1``, ``$12`` and ``${name}``. A backslash makes the next character
   literal, so ``\$`` yields ``$`` and ``\\`` yields ``\``.

"""

from __future__ import annotations

import re

from textfind.exceptions import InvalidReplacementError

_DIGITS = "0123456789"

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
}


def unescape_string_characters(text: str) -> str:
    r"""Replace string escape sequences with the characters they denote.

    Parameters
    ----------
    text : str
        Text possibly containing escape sequences

    Returns
    -------
    str
        Text with ``\n``, ``\t``, ``\r``, ``\b``, ``\f`` and ``\uXXXX``
        replaced; other backslash pairs and a trailing backslash are kept

    Examples
    --------
        >>> unescape_string_characters(r"a\tb")
        'a\tb'
        >>> unescape_string_characters(r"cost: \$1")
        'cost: \\$1'

    """
    if "\\" not in text:
        return text

    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch != "\\" or i + 1 >= length:
            out.append(ch)
            i += 1
            continue

        nxt = text[i + 1]
        if nxt in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[nxt])
            i += 2
        elif nxt == "u" and _is_hex(text[i + 2 : i + 6]):
            out.append(chr(int(text[i + 2 : i + 6], 16)))
            i += 6
        else:
            # Keep the pair so the template expander still sees the escape
            out.append(ch)
            out.append(nxt)
            i += 2
    return "".join(out)


def _is_hex(chunk: str) -> bool:
    return len(chunk) == 4 and all(c in "0123456789abcdefABCDEF" for c in chunk)


def expand_template(template: str, match: re.Match[str]) -> str:
    r"""Expand ``$``-style group references in ``template`` against ``match``.

    Parameters
    ----------
    template : str
        Replacement template. ``$n`` refers to group ``n``; further digits
        extend the group number while it stays a valid group. ``${name}``
        refers to a named group. ``\x`` inserts ``x`` literally.
    match : re.Match
        The match supplying group values. Groups that did not participate
        expand to an empty string.

    Returns
    -------
    str
        The expanded replacement

    Raises
    ------
    InvalidReplacementError
        For a dangling ``\`` or ``$``, an unterminated or empty ``${``, or a
        reference to a group the pattern does not define

    Examples
    --------
        >>> m = re.fullmatch(r"(\w+)@(\w+)", "alice@example")
        >>> expand_template("$2@$1", m)
        'example@alice'

    """
    group_count = match.re.groups
    out: list[str] = []
    i = 0
    length = len(template)
    while i < length:
        ch = template[i]
        if ch == "\\":
            if i + 1 >= length:
                raise InvalidReplacementError(template, "Character to be escaped is missing")
            out.append(template[i + 1])
            i += 2
        elif ch == "$":
            i += 1
            if i >= length:
                raise InvalidReplacementError(template, "Illegal group reference: group index is missing")
            if template[i] == "{":
                close = template.find("}", i + 1)
                if close < 0:
                    raise InvalidReplacementError(template, "Named capturing group is missing trailing '}'")
                name = template[i + 1 : close]
                if not name:
                    raise InvalidReplacementError(template, "Named capturing group has 0 length name")
                if name not in match.re.groupindex:
                    raise InvalidReplacementError(template, f"No group with name {{{name}}}")
                out.append(match.group(name) or "")
                i = close + 1
            elif template[i] in _DIGITS:
                number = int(template[i])
                if number > group_count:
                    raise InvalidReplacementError(template, f"No group {number}")
                i += 1
                # Take further digits while they still name an existing group
                while i < length and template[i] in _DIGITS:
                    candidate = number * 10 + int(template[i])
                    if candidate > group_count:
                        break
                    number = candidate
                    i += 1
                out.append(match.group(number) or "")
            else:
                raise InvalidReplacementError(template, "Illegal group reference")
        else:
            out.append(ch)
            i += 1
    return "".join(out)


__all__ = ["expand_template", "unescape_string_characters"]
