#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textfind/options/settings.py
"""Default find preferences.

``FindSettings`` is the settings store consulted once when a find service
builds its initial search model. It can be created directly or from the
``[find]`` table of a configuration file (see :mod:`textfind.cli.config`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from textfind.constants import (
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_MAX_HISTORY,
    DEFAULT_PRESERVE_CASE,
    DEFAULT_REGEX,
    DEFAULT_WHOLE_WORDS_ONLY,
)
from textfind.exceptions import ValidationError
from textfind.options.base import CloneFrozenMixin
from textfind.options.search import SearchModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FindSettings(CloneFrozenMixin):
    """User preferences applied to newly created search models.

    Parameters
    ----------
    case_sensitive : bool, default False
        Default case sensitivity for find in file.
    whole_words_only : bool, default False
        Default whole-word restriction for find in file.
    regex : bool, default False
        Default to regular expression patterns.
    preserve_case : bool, default False
        Default to case-preserving literal replacement.
    max_history : int, default 20
        Number of recent find and replace strings to remember.

    """

    case_sensitive: bool = field(
        default=DEFAULT_CASE_SENSITIVE,
        metadata={"help": "Match letter case exactly by default", "importance": "core"},
    )
    whole_words_only: bool = field(
        default=DEFAULT_WHOLE_WORDS_ONLY,
        metadata={"help": "Restrict matches to whole words by default", "importance": "core"},
    )
    regex: bool = field(
        default=DEFAULT_REGEX,
        metadata={"help": "Treat patterns as regular expressions by default", "importance": "core"},
    )
    preserve_case: bool = field(
        default=DEFAULT_PRESERVE_CASE,
        metadata={"help": "Preserve the case of replaced text by default", "importance": "advanced"},
    )
    max_history: int = field(
        default=DEFAULT_MAX_HISTORY,
        metadata={"help": "Number of recent find/replace strings to remember", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges at construction time."""
        if self.max_history <= 0:
            raise ValueError(f"max_history must be positive, got {self.max_history}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> FindSettings:
        """Build settings from a configuration mapping.

        Unknown keys are logged and ignored so that newer configuration files
        keep working with older versions.

        Parameters
        ----------
        data : Mapping[str, Any] or None
            Values keyed by field name, typically the ``[find]`` table of a
            configuration file

        Returns
        -------
        FindSettings
            Settings with the supplied overrides applied

        Raises
        ------
        ValidationError
            If a value has the wrong type or is out of range

        """
        if not data:
            return cls()

        known = {f.name: f for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            normalized = str(key).replace("-", "_")
            if normalized not in known:
                logger.warning("Ignoring unknown find setting: %s", key)
                continue
            expected = int if known[normalized].metadata.get("type") is int else bool
            # bool is an int subclass, so reject it explicitly for numeric fields
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ValidationError(
                    f"Setting '{normalized}' must be of type {expected.__name__}, got {type(value).__name__}",
                    parameter_name=normalized,
                    parameter_value=value,
                )
            values[normalized] = value

        try:
            return cls(**values)
        except ValueError as exc:
            raise ValidationError(str(exc), parameter_name="max_history", original_error=exc) from exc

    def init_model(self, model: SearchModel | None = None) -> SearchModel:
        """Apply these defaults to ``model`` (or to a fresh model)."""
        base = model or SearchModel()
        return base.create_updated(
            case_sensitive=self.case_sensitive,
            whole_word_only=self.whole_words_only,
            is_regex=self.regex,
            preserve_case=self.preserve_case,
        )


__all__ = ["FindSettings"]
