"""Exponential busy-wait backoff."""

INITIAL = 1 << 9
CEILING = (1 << 20) - 1


class ExponentialBackoff:
    """Spins for a number of iterations that doubles on each wait."""

    def __init__(self, initial: int = INITIAL, ceiling: int = CEILING) -> None:
        self._value = initial
        self._ceiling = ceiling

    def wait(self) -> None:
        """Spin for the current count, then double it while below the ceiling."""
        current = self._value
        for _ in range(current):
            pass
        if current < self._ceiling:
            self._value = current << 1

    def value(self) -> int:
        """The iteration count of the next wait."""
        return self._value