"""A bounded ring buffer with one producer and any number of consumers."""

import threading
from typing import Any, List


class RingFull(Exception):
    """Raised when an item is enqueued on a full ring."""


class RingEmpty(Exception):
    """Raised when no item could be dequeued."""


class Ring:
    """Fixed-size circular queue.

    ``size`` must be a power of two. One slot is always kept free to tell a
    full ring from an empty one, so at most ``size - 1`` items are held.
    """

    def __init__(self, size: int) -> None:
        if size < 1 or size & (size - 1):
            raise ValueError("ring size must be a positive power of two")
        self._size = size
        self._mask = size - 1
        self._slots: List[Any] = [None] * size
        self._head = 0
        self._tail = 0
        self._producer = threading.Lock()
        self._consumer = threading.Lock()

    def capacity(self) -> int:
        """The number of slots the ring was created with."""
        return self._size

    def __len__(self) -> int:
        return (self._tail - self._head) & self._mask

    def _put(self, item: Any) -> int:
        with self._producer:
            consumer = self._head
            producer = self._tail
            size = (producer - consumer) & self._mask
            if ((producer + 1) & self._mask) == (consumer & self._mask):
                raise RingFull("ring is full")
            self._slots[producer & self._mask] = item
            self._tail = producer + 1
            return size

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the tail; raise RingFull if no slot is free."""
        self._put(item)

    def enqueue_with_size(self, item: Any) -> int:
        """Add ``item`` and return how many items were queued just before it."""
        return self._put(item)

    def _take(self) -> Any:
        consumer = self._head
        if consumer == self._tail:
            raise RingEmpty("ring is empty")
        index = consumer & self._mask
        item = self._slots[index]
        self._slots[index] = None
        self._head = consumer + 1
        return item

    def dequeue(self) -> Any:
        """Remove and return the item at the head; raise RingEmpty if none."""
        with self._consumer:
            return self._take()

    def try_dequeue(self) -> Any:
        """Like ``dequeue`` but without waiting for another consumer.

        Raises RingEmpty if the ring is empty or another consumer is
        dequeuing at the same moment.
        """
        if not self._consumer.acquire(blocking=False):
            raise RingEmpty("ring is busy")
        try:
            return self._take()
        finally:
            self._consumer.release()