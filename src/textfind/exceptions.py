#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the textfind library.

This module defines specialized exception classes for the error conditions
that can occur while searching text and composing replacements. A search that
simply finds nothing is not an error: it returns the not-found
:class:`~textfind.search.types.MatchResult` value instead.

Exception Hierarchy
-------------------
- TextFindError (base exception)

  - ValidationError (parameter/option validation)

  - PatternError (malformed regular expression)

  - InvalidReplacementError (malformed replacement template or group reference)

"""

from typing import Any


class TextFindError(Exception):
    """Root of the textfind exception hierarchy.

    ``except TextFindError`` handles every error the engine raises on purpose.

    Parameters
    ----------
    message : str
        What went wrong, suitable for showing to a user
    original_error : Exception, optional
        Lower-level exception being translated, if any

    Attributes
    ----------
    message : str
        Same as ``str(error)``
    original_error : Exception or None
        The translated exception

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Store the message and the translated exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(TextFindError):
    """A caller passed an argument or setting the engine cannot use.

    Raised for cursor offsets outside the text, wrongly typed configuration
    values and replace-all calls on a model that is not in replace mode.

    Parameters
    ----------
    message : str
        What is wrong with the value
    parameter_name : str, optional
        Argument or setting name, e.g. ``"offset"``
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        Name of the rejected argument
    parameter_value : any
        The rejected value

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Record which parameter was rejected."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class PatternError(TextFindError):
    """Exception raised when a regular expression search pattern cannot be compiled.

    The search call aborts without producing a result.

    Parameters
    ----------
    pattern : str
        The pattern that failed to compile
    message : str, optional
        Custom error message. If not provided, one is built from the pattern
        and the compiler's complaint
    original_error : Exception, optional
        The ``re.error`` raised by the compiler

    Attributes
    ----------
    pattern : str
        The offending pattern
    position : int or None
        Index into the pattern where compilation failed, when known

    """

    def __init__(self, pattern: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the pattern error."""
        position = getattr(original_error, "pos", None)
        if message is None:
            detail = f": {original_error}" if original_error is not None else ""
            message = f"Bad regular expression pattern {pattern!r}{detail}"
        super().__init__(message, original_error=original_error)
        self.pattern = pattern
        self.position = position


class InvalidReplacementError(TextFindError):
    """Exception raised when a regex replacement template cannot be expanded.

    Covers dangling ``$`` or ``\\`` characters, references to groups that the
    pattern does not define, and unterminated ``${name}`` references. No text
    is ever inserted when this is raised.

    Parameters
    ----------
    template : str
        The replacement template that failed to expand
    message : str, optional
        Description of the problem
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    template : str
        The offending replacement template

    """

    def __init__(self, template: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the invalid replacement error."""
        if message is None:
            message = f"Invalid replacement string {template!r}"
        super().__init__(message, original_error=original_error)
        self.template = template


__all__ = [
    "TextFindError",
    "ValidationError",
    "PatternError",
    "InvalidReplacementError",
]
