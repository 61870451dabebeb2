"""Test utilities for the textfind test suite.

This module provides sample texts and small helpers shared by unit and
integration tests.
"""

from pathlib import Path

SAMPLE_SOURCE = """def count_items(items):
    total = 0
    for item in items:
        total += item.count
    return total


class Counter:
    COUNT_LIMIT = 10

    def count(self):
        return count_items(self.items)
"""


def write_text_file(path: Path, content: str) -> Path:
    """Write ``content`` as UTF-8 to ``path`` and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def all_occurrences(text: str, needle: str) -> list[int]:
    """Return every start offset of ``needle`` in ``text``, overlaps included."""
    starts = []
    index = text.find(needle)
    while index >= 0:
        starts.append(index)
        index = text.find(needle, index + 1)
    return starts
