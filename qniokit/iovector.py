"""An ordered vector of I/O buffers that tracks their combined size."""

from typing import Any, Callable, Iterator, Optional

Destructor = Callable[[Any], None]

_MIN_CAPACITY = 8


def _size_of(buf: Any) -> int:
    return memoryview(buf).nbytes


class IoVector:
    """Sequence of buffers with a running total of their byte sizes."""

    def __init__(self, capacity: int = _MIN_CAPACITY, destructor: Optional[Destructor] = None) -> None:
        self.capacity = max(capacity, _MIN_CAPACITY)
        self.destructor = destructor
        self._buffers: list = []
        self._total = 0

    def _make_room(self) -> None:
        if len(self._buffers) >= self.capacity:
            self.capacity *= 2

    def _position(self, index: int, *, allow_end: bool) -> int:
        count = len(self._buffers)
        if index < 0:
            index += count
        upper = count if allow_end else count - 1
        if not 0 <= index <= upper:
            raise IndexError("io vector index out of range")
        return index

    def copy_from(self, other: "IoVector") -> None:
        """Replace the contents, destructor and size with those of ``other``."""
        if self.capacity < len(other):
            self.capacity = other.capacity
        self._buffers = list(other._buffers)
        self.destructor = other.destructor
        self._total = other._total

    def insert(self, index: int, buf: Any) -> None:
        """Insert ``buf`` before position ``index``."""
        position = self._position(index, allow_end=True)
        self._make_room()
        self._buffers.insert(position, buf)
        self._total += _size_of(buf)

    def remove(self, index: int) -> Any:
        """Remove and return the buffer at ``index``."""
        buf = self._buffers.pop(self._position(index, allow_end=False))
        self._total -= _size_of(buf)
        return buf

    def __getitem__(self, index: int) -> Any:
        return self._buffers[self._position(index, allow_end=False)]

    def push_front(self, buf: Any) -> None:
        """Insert ``buf`` at the front."""
        self.insert(0, buf)

    def push_back(self, buf: Any) -> None:
        """Append ``buf`` at the back."""
        self._make_room()
        self._buffers.append(buf)
        self._total += _size_of(buf)

    def pop_front(self) -> Any:
        """Remove and return the first buffer."""
        return self.remove(0)

    def pop_back(self) -> Any:
        """Remove and return the last buffer."""
        return self.remove(-1)

    def clear(self, destructor: Optional[Destructor] = None) -> None:
        """Empty the vector, passing each buffer to ``destructor`` if given."""
        if destructor is not None:
            for buf in self._buffers:
                destructor(buf)
        self._buffers.clear()
        self._total = 0

    def destroy(self) -> None:
        """Empty the vector, releasing buffers with its own destructor."""
        self.clear(self.destructor)

    def __len__(self) -> int:
        return len(self._buffers)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._buffers))

    def total_size(self) -> int:
        """Combined size in bytes of all buffers."""
        return self._total