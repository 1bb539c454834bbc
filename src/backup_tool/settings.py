"""Runtime settings read from the environment.

The command line only accepts ``--help`` and ``-t/--truncate``, so logging
knobs live in environment variables instead of flags:

 - ``BACKUP_VERBOSE``: truthy value enables DEBUG logging
 - ``BACKUP_LOG_LEVEL``: explicit level name (debug, info, warning, error)
 - ``BACKUP_LOG_FILE``: also write logs to this path
 - ``BACKUP_LOG_JSON``: truthy value emits JSON log lines on stdout
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .defaults import ENV_LOG_FILE, ENV_LOG_JSON, ENV_LOG_LEVEL, ENV_VERBOSE

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


@dataclass
class Settings:
    verbose: bool = False
    log_level: Optional[str] = None
    log_file: Optional[str] = None
    log_json: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (defaults to ``os.environ``).

    Empty values are treated as unset.
    """
    env = os.environ if environ is None else environ
    return Settings(
        verbose=_flag(env.get(ENV_VERBOSE)),
        log_level=env.get(ENV_LOG_LEVEL) or None,
        log_file=env.get(ENV_LOG_FILE) or None,
        log_json=_flag(env.get(ENV_LOG_JSON)),
    )


__all__ = ["Settings", "load_settings"]
