"""Argument parsing for the ``backup`` command.

Ties the tokenizer and the binder together for a raw ``argv`` list.
"""

from __future__ import annotations
import logging
import sys
from typing import List, Optional

from .config import ParsedConfig, bind
from .cursor import TokenCursor
from .logging_utils import log_event
from .tokens import Token, tokenize


def parse_args(argv: Optional[List[str]] = None) -> ParsedConfig:
    """Tokenize and validate ``argv`` (defaults to ``sys.argv[1:]``).

    Raises :class:`~backup_tool.errors.ArgumentError` on invalid input
    unless ``--help`` is present.
    """
    if argv is None:
        argv = sys.argv[1:]
    tokens: TokenCursor[Token] = TokenCursor(tokenize(argv))
    log_event("tokenize", level=logging.DEBUG, count=len(tokens))
    return bind(tokens)


__all__ = ["parse_args"]
