"""Command-line tokenization.

This module turns raw process arguments into classified tokens:
 - ``ShortOption``: one character, from ``-t`` or a grouped ``-tx``
 - ``LongOption``: a multi-character name plus the number of leading dashes
 - ``Positional``: anything that does not start with a dash

Known limitations kept on purpose:
 - ``--opt=value`` is not split; the whole remainder is the option name.
 - Only single-dash arguments are expanded into grouped short options.
 - Arguments made only of dashes, or with a dash after the name
   (``-a-b``), produce no tokens at all.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Union

_OPTION_RE = re.compile(r"(-+)([^-]+)")


@dataclass(frozen=True)
class ShortOption:
    """A single-character flag such as ``-t``."""

    char: str

    def __str__(self) -> str:
        return f"-{self.char}"


@dataclass(frozen=True)
class LongOption:
    """A named flag such as ``--help``.

    ``dash_count`` records how many leading dashes were matched; it is never
    clamped, so ``---foo`` keeps a count of 3.
    """

    name: str
    dash_count: int = 2

    def __str__(self) -> str:
        return "-" * self.dash_count + self.name


@dataclass(frozen=True)
class Positional:
    """An operand, i.e. any argument not starting with ``-``."""

    text: str

    def __str__(self) -> str:
        return self.text


Token = Union[ShortOption, LongOption, Positional]


def tokenize_one(arg: str) -> List[Token]:
    """Classify a single raw argument into zero or more tokens."""
    if not arg.startswith("-"):
        return [Positional(arg)]
    m = _OPTION_RE.fullmatch(arg)
    if not m:
        return []
    dashes, name = m.groups()
    if len(dashes) > 1:
        return [LongOption(name, len(dashes))]
    return [ShortOption(ch) for ch in name]


def tokenize(argv: Iterable[str]) -> List[Token]:
    """Tokenize ``argv`` (program path excluded) preserving input order.

    Grouped short options expand in place: ``["-tx", "a"]`` becomes
    ``[ShortOption("t"), ShortOption("x"), Positional("a")]``.
    """
    tokens: List[Token] = []
    for arg in argv:
        tokens.extend(tokenize_one(arg))
    return tokens


__all__ = [
    "ShortOption",
    "LongOption",
    "Positional",
    "Token",
    "tokenize_one",
    "tokenize",
]
