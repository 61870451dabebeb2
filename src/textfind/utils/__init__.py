#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textfind/utils/__init__.py
"""Utility modules for the textfind package."""

from textfind.utils.escape import expand_template, unescape_string_characters

__all__ = [
    "expand_template",
    "unescape_string_characters",
]
