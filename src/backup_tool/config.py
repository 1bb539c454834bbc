"""Parsed configuration and the token binder.

:func:`bind` walks the token sequence once and produces a
:class:`ParsedConfig`, or raises an :class:`~backup_tool.errors.ArgumentError`.

Validation rules
 - ``-t`` and ``--truncate`` set ``truncate``; ``--help`` sets ``show_help``.
 - The first unknown option is remembered; later ones are ignored.
 - Positionals are collected; the first one becomes ``filename`` and any
   extras are dropped.
 - ``--help`` wins over every failure (unknown option, missing operand).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .cursor import TokenCursor
from .errors import MissingOperand, UnrecognizedOption
from .logging_utils import log_event
from .tokens import LongOption, Positional, ShortOption, Token

TRUNCATE_SHORT = "t"
TRUNCATE_LONG = "truncate"
HELP_LONG = "help"


@dataclass(frozen=True)
class ParsedConfig:
    """Validated command-line settings for one invocation."""

    filename: str = ""
    show_help: bool = False
    truncate: bool = False


def bind(tokens: Union[TokenCursor[Token], Iterable[Token]]) -> ParsedConfig:
    """Validate ``tokens`` and bind them into a :class:`ParsedConfig`.

    ``tokens`` may be any iterable of tokens or a :class:`TokenCursor`; a
    cursor is rewound first so repeated calls see the same sequence.
    """
    if isinstance(tokens, TokenCursor):
        cursor = tokens
        cursor.reset()
    else:
        cursor = TokenCursor(tokens)

    show_help = False
    truncate = False
    invalid: Optional[Union[ShortOption, LongOption]] = None
    operands: List[str] = []

    for tok in cursor:
        # Flags taking an argument would pull it with cursor.next() here.
        if isinstance(tok, ShortOption):
            if tok.char == TRUNCATE_SHORT:
                truncate = True
            elif invalid is None:
                invalid = tok
        elif isinstance(tok, LongOption):
            if tok.name == HELP_LONG:
                show_help = True
            elif tok.name == TRUNCATE_LONG:
                truncate = True
            elif invalid is None:
                invalid = tok
        elif isinstance(tok, Positional):
            operands.append(tok.text)

    log_event(
        "bind",
        level=logging.DEBUG,
        count=len(cursor),
        operand=operands[0] if operands else None,
        option=str(invalid) if invalid is not None else None,
    )

    if not show_help and invalid is not None:
        raise UnrecognizedOption(invalid)

    if operands:
        return ParsedConfig(filename=operands[0], show_help=show_help, truncate=truncate)
    if not show_help:
        raise MissingOperand()
    return ParsedConfig(show_help=show_help, truncate=truncate)


__all__ = ["ParsedConfig", "bind", "TRUNCATE_SHORT", "TRUNCATE_LONG", "HELP_LONG"]
