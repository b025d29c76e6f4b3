"""A first-in first-out queue."""

from collections import deque
from typing import Any, Iterator


class Fifo:
    """Unbounded FIFO queue of arbitrary values."""

    def __init__(self) -> None:
        self._items: deque = deque()

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the head; raise IndexError if empty."""
        if not self._items:
            raise IndexError("dequeue from an empty fifo")
        return self._items.popleft()

    def first(self) -> Any:
        """Return the value at the head without removing it."""
        if not self._items:
            raise IndexError("first of an empty fifo")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))