#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration objects for searches and find sessions."""

from textfind.options.base import CloneFrozenMixin
from textfind.options.search import SearchModel
from textfind.options.settings import FindSettings

__all__ = [
    "CloneFrozenMixin",
    "FindSettings",
    "SearchModel",
]
