#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction for the textfind CLI."""

from __future__ import annotations

import argparse

from textfind import __version__

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PATTERN_ERROR = 5
EXIT_REPLACEMENT_ERROR = 6


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to a configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose logging with timestamps and logger names")
    parser.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")


def _add_search_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--regex", "-e", action="store_true", default=None, help="Treat PATTERN as a regular expression")
    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "--case-sensitive", "-s", dest="case_sensitive", action="store_true", default=None, help="Match case exactly"
    )
    case_group.add_argument(
        "--ignore-case", "-i", dest="case_sensitive", action="store_false", default=None, help="Ignore letter case"
    )
    parser.add_argument(
        "--whole-word", "-w", dest="whole_word", action="store_true", default=None, help="Match whole words only"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the ``textfind`` argument parser with its subcommands.

    Search flags left unset on the command line are ``None`` so that
    configuration file defaults can fill them in.
    """
    parser = argparse.ArgumentParser(
        prog="textfind",
        description="Find and replace text in files or standard input.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    find_parser = subparsers.add_parser("find", help="Locate matches of a pattern")
    find_parser.add_argument("pattern", help="Text or regular expression to search for")
    find_parser.add_argument("input", nargs="?", default="-", help="File to search ('-' or omitted for stdin)")
    _add_search_options(find_parser)
    find_parser.add_argument("--backward", "-b", action="store_true", help="Search backwards from --offset")
    find_parser.add_argument(
        "--offset", type=int, default=None, help="Cursor offset (default: start, or end when searching backwards)"
    )
    find_parser.add_argument("--all", "-a", dest="find_all", action="store_true", help="Report every match")
    output_group = find_parser.add_mutually_exclusive_group()
    output_group.add_argument("--json", action="store_true", help="Emit matches as JSON")
    output_group.add_argument("--rich", action="store_true", help="Render matches as a rich table")

    replace_parser = subparsers.add_parser("replace", help="Replace every match of a pattern")
    replace_parser.add_argument("pattern", help="Text or regular expression to search for")
    replace_parser.add_argument("replacement", help="Replacement text; '$1' and '${name}' refer to regex groups")
    replace_parser.add_argument("input", nargs="?", default="-", help="File to edit ('-' or omitted for stdin)")
    _add_search_options(replace_parser)
    replace_parser.add_argument(
        "--preserve-case", "-p", action="store_true", default=None, help="Adapt replacement case to each match"
    )
    destination = replace_parser.add_mutually_exclusive_group()
    destination.add_argument("--in-place", action="store_true", help="Rewrite the input file")
    destination.add_argument("--output", "-o", help="Write the result to this file instead of stdout")

    return parser


__all__ = [
    "EXIT_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_NOT_FOUND",
    "EXIT_PATTERN_ERROR",
    "EXIT_REPLACEMENT_ERROR",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_ERROR",
    "create_parser",
]
