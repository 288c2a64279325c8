"""Command-line helpers for configuring logging.

This module exposes functions to register logging-related subcommands on an
``argparse`` parser and to dispatch the parsed arguments to their respective
handlers.
"""

import logging

from personapi.logging import get_logger, reset_logger
from personapi.logging.logging import get_configured_level, _resolve_log_file
from personapi.logging.config import save_log_level


def register_subcommands(subparsers):
    set_level_parser = subparsers.add_parser(
        "set-level", help="Set the logging level"
    )
    set_level_parser.add_argument(
        "level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level to use",
    )

    subparsers.add_parser("show-path", help="Show the log file location")
    subparsers.add_parser("show-level", help="Show the configured logging level")


def dispatch(args):
    """Execute the logging command associated with ``args.subcommand``."""

    if args.subcommand == "set-level":
        level_name = args.level.upper()
        level = getattr(logging, level_name)
        path = save_log_level(level_name)
        reset_logger()
        get_logger(level=level).info("log level set to %s (%s)", level_name, path)
    elif args.subcommand == "show-path":
        print(_resolve_log_file().resolve())
    elif args.subcommand == "show-level":
        get_logger()
        print(get_configured_level())
    else:
        message = f"No handler for logging subcommand: {args.subcommand}"
        get_logger(__file__).error(message)
        raise ValueError(message)
