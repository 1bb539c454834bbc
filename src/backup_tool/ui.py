"""Console output helpers (help, filename, and error messages).

Error output is always plain text in the two-line form
``<prog>: <message>`` / ``Try '<prog> --help' for more information.``
"""

from __future__ import annotations
import sys

from .defaults import HELP_TEXT, PROG_NAME


def print_help() -> None:
    print(HELP_TEXT)


def print_prog_error(message: str) -> None:
    """Write ``<prog>: <message>`` to stderr."""
    print(f"{PROG_NAME}: {message}", file=sys.stderr)


def print_try_help() -> None:
    print(f"Try '{PROG_NAME} --help' for more information.", file=sys.stderr)


def print_source_filename(filename: str) -> None:
    print(f"The source filename is: {filename}")


__all__ = [
    "print_help",
    "print_prog_error",
    "print_try_help",
    "print_source_filename",
]
