#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Rendering of find results for the textfind CLI.

Matches can be printed as plain ``line:column`` records, as JSON, or as a
table rendered with ``rich``.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Sequence, TextIO

from textfind.search.types import HighlightRange


def line_and_column(text: str, offset: int) -> tuple[int, int]:
    """Return the 1-based line and column of ``offset`` in ``text``."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def match_to_dict(text: str, match: HighlightRange) -> dict[str, Any]:
    """Describe one match as a JSON-serialisable dictionary."""
    line, column = line_and_column(text, match.start_offset)
    return {
        "start": match.start_offset,
        "end": match.end_offset,
        "line": line,
        "column": column,
        "text": text[match.start_offset : match.end_offset],
    }


def render_matches_plain(text: str, matches: Sequence[HighlightRange], stream: TextIO | None = None) -> None:
    """Print matches as ``line:column:start-end: text`` records."""
    out = stream or sys.stdout
    for match in matches:
        info = match_to_dict(text, match)
        out.write(f"{info['line']}:{info['column']}:{info['start']}-{info['end']}: {info['text']!r}\n")


def render_matches_json(text: str, matches: Sequence[HighlightRange], stream: TextIO | None = None) -> None:
    """Print matches as a JSON array."""
    out = stream or sys.stdout
    out.write(json.dumps([match_to_dict(text, m) for m in matches], indent=2, ensure_ascii=False))
    out.write("\n")


def render_matches_rich(text: str, matches: Sequence[HighlightRange], source_name: str) -> None:
    """Render matches as a rich table on the terminal."""
    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Matches in {source_name}")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Column", justify="right", style="cyan")
    table.add_column("Offsets", style="dim")
    table.add_column("Text", style="bold yellow")

    for match in matches:
        info = match_to_dict(text, match)
        table.add_row(str(info["line"]), str(info["column"]), f"{info['start']}-{info['end']}", repr(info["text"]))

    Console().print(table)


__all__ = [
    "line_and_column",
    "match_to_dict",
    "render_matches_json",
    "render_matches_plain",
    "render_matches_rich",
]
