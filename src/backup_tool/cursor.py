"""Forward-only cursor over a token list."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class TokenCursor(Generic[T]):
    """A list plus an explicit read position.

    ``next()`` hands out items in order and stops at the end without moving
    past it. A handler for a flag that takes an argument can call ``next()``
    from its own branch to consume that argument; ``peek()`` looks ahead
    without moving.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = list(items)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        while True:
            item = self.next()
            if item is None:
                return
            yield item

    def push(self, item: T) -> None:
        self._items.append(item)

    def next(self) -> Optional[T]:
        if self._pos >= len(self._items):
            return None
        item = self._items[self._pos]
        self._pos += 1
        return item

    def peek(self, window: int = 1) -> Optional[Tuple[T, ...]]:
        """Return the next ``window`` items, or None if fewer remain."""
        end = self._pos + window
        if end > len(self._items):
            return None
        return tuple(self._items[self._pos : end])

    def reset(self) -> None:
        self._pos = 0

    def __repr__(self) -> str:
        return f"TokenCursor(position={self._pos}, items={self._items!r})"


__all__ = ["TokenCursor"]
