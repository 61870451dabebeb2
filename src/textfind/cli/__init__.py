#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command-line interface for the textfind find and replace engine.

Usage examples
--------------
Find the first whole-word match::

    $ textfind find --whole-word cat notes.txt

List every regex match as JSON::

    $ textfind find --regex --all --json "\\bTODO\\b" main.py

Swap user and domain in addresses, writing back to the file::

    $ textfind replace --regex "(\\w+)@(\\w+)" "$2@$1" contacts.txt --in-place

Defaults for case sensitivity, whole words, regex and preserve-case come from
the ``[find]`` table of a configuration file (``.textfind.toml``, ``.yaml``,
``.json``, or ``[tool.textfind.find]`` in ``pyproject.toml``), located through
``--config``, the ``TEXTFIND_CONFIG`` environment variable, or discovery.
"""

import argparse
import logging
import os
import sys
from typing import Sequence

from textfind.cli.builder import EXIT_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR, create_parser
from textfind.cli.commands import handle_find_command, handle_replace_command
from textfind.cli.config import load_config_with_priority, settings_from_config
from textfind.constants import CONFIG_ENV_VAR
from textfind.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["create_parser", "main"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: Sequence[str] | None = None) -> int:
    """Run the textfind command line tool.

    Parameters
    ----------
    args : Sequence[str], optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else EXIT_SUCCESS

    _setup_logging_level(parsed)

    try:
        config = load_config_with_priority(explicit_path=parsed.config, env_var_path=os.environ.get(CONFIG_ENV_VAR))
        settings = settings_from_config(config)
    except argparse.ArgumentTypeError as exc:
        logger.error("Error loading configuration: %s", exc)
        return EXIT_VALIDATION_ERROR

    logger.debug("Effective settings: %s", settings)

    try:
        if parsed.command == "find":
            return handle_find_command(parsed, settings)
        return handle_replace_command(parsed, settings)
    except Exception as e:
        logger.exception(f"Command failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
