#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command handlers for the textfind CLI.

Each handler receives the parsed arguments and the effective
:class:`~textfind.options.settings.FindSettings`, runs the operation through a
:class:`~textfind.search.service.FindService`, and returns a process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from textfind.cli.builder import (
    EXIT_FILE_ERROR,
    EXIT_NOT_FOUND,
    EXIT_PATTERN_ERROR,
    EXIT_REPLACEMENT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from textfind.cli.output import render_matches_json, render_matches_plain, render_matches_rich
from textfind.exceptions import InvalidReplacementError, PatternError, ValidationError
from textfind.options.search import SearchModel
from textfind.options.settings import FindSettings
from textfind.search.service import FindService
from textfind.search.types import HighlightRange

logger = logging.getLogger(__name__)


def read_input(source: str) -> str:
    """Read the text to search from a file path or ``-`` for stdin.

    Files are read without newline translation so reported offsets, and any
    text written back, keep the file's own line endings.

    Raises
    ------
    OSError, UnicodeDecodeError
        If the file cannot be read as UTF-8 text

    """
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8", newline="") as f:
        return f.read()


def write_output(target: str, text: str) -> None:
    """Write ``text`` to ``target`` exactly as given, without newline translation."""
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def build_model(parsed: argparse.Namespace, settings: FindSettings, *, replace: bool = False) -> SearchModel:
    """Combine configuration defaults with the flags given on the command line."""
    model = settings.init_model(SearchModel(pattern=parsed.pattern))
    overrides: dict[str, object] = {}
    if parsed.regex is not None:
        overrides["is_regex"] = parsed.regex
    if parsed.case_sensitive is not None:
        overrides["case_sensitive"] = parsed.case_sensitive
    if parsed.whole_word is not None:
        overrides["whole_word_only"] = parsed.whole_word
    if replace:
        overrides["is_replace"] = True
        overrides["replacement"] = parsed.replacement
        if parsed.preserve_case is not None:
            overrides["preserve_case"] = parsed.preserve_case
    else:
        overrides["forward"] = not parsed.backward
    return model.create_updated(**overrides)


def _load_text(source: str) -> str | None:
    try:
        return read_input(source)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading {source}: {exc}", file=sys.stderr)
        return None


def handle_find_command(parsed: argparse.Namespace, settings: FindSettings) -> int:
    """Handle ``textfind find``."""
    text = _load_text(parsed.input)
    if text is None:
        return EXIT_FILE_ERROR

    service = FindService(settings)
    model = build_model(parsed, settings)
    service.accept_find_model(model)

    try:
        if parsed.find_all:
            matches = service.find_all(text, model)
        else:
            if parsed.offset is not None:
                offset = parsed.offset
            else:
                offset = 0 if model.forward else len(text)
            result = service.find(text, offset, model)
            matches = [HighlightRange(result.start_offset, result.end_offset)] if result.found else []
    except PatternError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_PATTERN_ERROR
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    logger.info("Found %d match(es) in %s", len(matches), parsed.input)

    if parsed.json:
        render_matches_json(text, matches)
    elif parsed.rich:
        render_matches_rich(text, matches, "stdin" if parsed.input == "-" else parsed.input)
    else:
        render_matches_plain(text, matches)

    return EXIT_SUCCESS if matches else EXIT_NOT_FOUND


def handle_replace_command(parsed: argparse.Namespace, settings: FindSettings) -> int:
    """Handle ``textfind replace``."""
    if parsed.in_place and parsed.input == "-":
        print("Error: --in-place requires an input file", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    text = _load_text(parsed.input)
    if text is None:
        return EXIT_FILE_ERROR

    service = FindService(settings)
    model = build_model(parsed, settings, replace=True)
    service.accept_find_model(model)

    try:
        outcome = service.replace_all(text, model)
    except PatternError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_PATTERN_ERROR
    except InvalidReplacementError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_REPLACEMENT_ERROR

    print(f"Replaced {outcome.count} occurrence(s)", file=sys.stderr)

    target = parsed.input if parsed.in_place else parsed.output
    if target:
        if parsed.in_place and outcome.count == 0:
            logger.info("Nothing replaced; leaving %s untouched", target)
        else:
            try:
                write_output(target, outcome.text)
            except OSError as exc:
                print(f"Error writing {target}: {exc}", file=sys.stderr)
                return EXIT_FILE_ERROR
    else:
        sys.stdout.write(outcome.text)

    return EXIT_SUCCESS if outcome.count else EXIT_NOT_FOUND


__all__ = ["build_model", "handle_find_command", "handle_replace_command", "read_input", "write_output"]
