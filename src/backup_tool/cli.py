"""Entry point for the ``backup`` command.

``--help`` trumps every other argument. Validation errors print two lines to
stderr and return ``EINVAL``. The backup itself is not implemented yet; a
valid invocation only reports the source filename.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from .args import parse_args
from .defaults import INVALID_ARG_EXIT_CODE, SUCCESS_EXIT_CODE
from .errors import ArgumentError
from .logging_utils import configure_logging, log_event
from .settings import load_settings
from .ui import print_help, print_prog_error, print_source_filename, print_try_help


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    settings = load_settings()
    try:
        configure_logging(
            settings.verbose,
            settings.log_file,
            settings.log_json,
            settings.log_level,
        )
    except OSError as e:
        # Unusable log file: report it and keep logging to the streams only
        print_prog_error(f"cannot open log file '{settings.log_file}': {e.strerror}")
        configure_logging(
            settings.verbose, None, settings.log_json, settings.log_level
        )

    try:
        config = parse_args(argv)
    except ArgumentError as e:
        log_event("invalid_args", level=logging.DEBUG, error_type=e.kind)
        print_prog_error(str(e))
        print_try_help()
        return INVALID_ARG_EXIT_CODE

    if config.show_help:
        print_help()
        return SUCCESS_EXIT_CODE

    log_event("parsed", level=logging.DEBUG, operand=config.filename)
    print_source_filename(config.filename)
    return SUCCESS_EXIT_CODE


__all__ = ["main"]
