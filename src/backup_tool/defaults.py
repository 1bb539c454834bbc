"""Program name, exit codes, help text and environment variable names."""

from __future__ import annotations
import errno

PROG_NAME = "backup"

SUCCESS_EXIT_CODE = 0
INVALID_ARG_EXIT_CODE = errno.EINVAL  # 22

# Help message is loosely modeled after "cp --help"
HELP_TEXT = f"""Usage: {PROG_NAME} [OPTION]... FILE_TO_BACKUP

Puts a copy of FILE_TO_BACKUP in the same directory as the original file.
If this is the only copy, this copy's filename has ".bak" appended to it.
If other copies exist, this copy's filename has ".bak.n" appended to it, where
n is the (nth - 1) copy. For example, if a copy of a.txt is being made and a.txt.bak
exists, then this copy is written to a.txt.bak.1.

Options:
  -t, --truncate    truncate the copy
      --help        display this help and exit"""

ENV_VERBOSE = "BACKUP_VERBOSE"
ENV_LOG_LEVEL = "BACKUP_LOG_LEVEL"
ENV_LOG_FILE = "BACKUP_LOG_FILE"
ENV_LOG_JSON = "BACKUP_LOG_JSON"

__all__ = [
    "PROG_NAME",
    "SUCCESS_EXIT_CODE",
    "INVALID_ARG_EXIT_CODE",
    "HELP_TEXT",
    "ENV_VERBOSE",
    "ENV_LOG_LEVEL",
    "ENV_LOG_FILE",
    "ENV_LOG_JSON",
]
