#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Shared behaviour for the frozen option classes.

:class:`~textfind.options.search.SearchModel` and
:class:`~textfind.options.settings.FindSettings` are immutable; variants are
derived with :meth:`CloneFrozenMixin.create_updated`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Give frozen dataclasses a keyword-based copy constructor."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy of this object with the given fields changed.

        ``__post_init__`` validation runs again on the copy, and unknown
        field names raise ``TypeError``.

        Examples
        --------
        >>> from textfind.options import SearchModel
        >>> SearchModel(pattern="cat").create_updated(forward=False).forward
        False

        """
        return replace(self, **kwargs)
