"""Command-line front end for the ``backup`` tool.

Re-exports the parsing building blocks so callers can use them from one
place.
"""

from .args import parse_args
from .cli import main
from .config import ParsedConfig, bind
from .cursor import TokenCursor
from .errors import ArgumentError, MissingOperand, UnrecognizedOption
from .tokens import LongOption, Positional, ShortOption, Token, tokenize

__version__ = "0.1.0"

__all__ = [
    "parse_args",
    "main",
    "ParsedConfig",
    "bind",
    "TokenCursor",
    "ArgumentError",
    "MissingOperand",
    "UnrecognizedOption",
    "LongOption",
    "Positional",
    "ShortOption",
    "Token",
    "tokenize",
    "__version__",
]
