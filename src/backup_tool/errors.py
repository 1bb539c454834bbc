"""Argument validation errors.

Two kinds exist: an unrecognized option (short or long, which decides the
message wording) and a missing file operand. The entry point prints
``str(exc)`` after the program name and exits with ``EINVAL``.
"""

from __future__ import annotations

from typing import Union

from .tokens import LongOption, ShortOption


class ArgumentError(Exception):
    """Base class for command-line validation failures."""

    kind = "ArgumentError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnrecognizedOption(ArgumentError):
    """An option the program does not know, reported only for the first one."""

    kind = "UnrecognizedOption"

    def __init__(self, option: Union[ShortOption, LongOption]) -> None:
        if isinstance(option, ShortOption):
            message = f"invalid option -- {option.char}"
        elif isinstance(option, LongOption):
            message = f"unrecognized option '{option.name}'"
        else:
            raise TypeError(f"not an option: {option!r}")
        self.option = option
        self.is_short = isinstance(option, ShortOption)
        super().__init__(message)


class MissingOperand(ArgumentError):
    kind = "MissingOperand"

    def __init__(self) -> None:
        super().__init__("missing file operand")


__all__ = ["ArgumentError", "UnrecognizedOption", "MissingOperand"]
