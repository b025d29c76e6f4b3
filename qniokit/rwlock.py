"""Reader-writer locks that favour a waiting writer over new readers."""

import threading
from contextlib import contextmanager
from typing import Iterator


class RWLock:
    """A reader-writer lock.

    A writer first claims the writer slot, which keeps new readers out,
    then waits for the readers already inside to leave.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._writer = 0
        self._readers = 0

    # Writer-slot primitives shared with RecursiveRWLock.

    def _acquire_write(self, owner: int) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._writer == 0)
            self._writer = owner
            self._cond.wait_for(lambda: self._readers == 0)

    def _try_write(self, owner: int) -> bool:
        with self._cond:
            if self._writer != 0 or self._readers != 0:
                return False
            self._writer = owner
            return True

    def _release_write(self) -> None:
        with self._cond:
            self._writer = 0
            self._cond.notify_all()

    def write_lock(self) -> None:
        """Block until the lock is held exclusively."""
        self._acquire_write(1)

    def write_unlock(self) -> None:
        """Release exclusive ownership."""
        self._release_write()

    def write_trylock(self) -> bool:
        """Take exclusive ownership only if no writer or reader holds the lock."""
        return self._try_write(1)

    def write_downgrade(self) -> None:
        """Turn a held write lock into a read lock without letting a writer in."""
        with self._cond:
            self._readers += 1
            self._writer = 0
            self._cond.notify_all()

    def read_lock(self) -> None:
        """Block until shared ownership is held."""
        with self._cond:
            self._cond.wait_for(lambda: self._writer == 0)
            self._readers += 1

    def read_unlock(self) -> None:
        """Release one shared ownership."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("read_unlock without a reader")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def read_trylock(self) -> bool:
        """Take shared ownership only if no writer holds or awaits the lock."""
        with self._cond:
            if self._writer != 0:
                return False
            self._readers += 1
            return True

    def locked(self) -> bool:
        """Whether any writer or reader holds the lock."""
        with self._cond:
            return bool(self._writer or self._readers)

    def locked_writer(self) -> bool:
        """Whether a writer holds or awaits the lock."""
        with self._cond:
            return self._writer != 0

    def locked_reader(self) -> bool:
        """Whether any reader holds the lock."""
        with self._cond:
            return self._readers != 0

    @contextmanager
    def reading(self) -> Iterator["RWLock"]:
        """Hold a read lock for the duration of the block."""
        self.read_lock()
        try:
            yield self
        finally:
            self.read_unlock()

    @contextmanager
    def writing(self) -> Iterator["RWLock"]:
        """Hold the write lock for the duration of the block."""
        self.write_lock()
        try:
            yield self
        finally:
            self.write_unlock()


def _check_tid(tid: int) -> None:
    if tid == 0:
        raise ValueError("thread id must be non-zero")


class RecursiveRWLock:
    """Reader-writer lock whose writer, named by a non-zero id, may re-enter."""

    def __init__(self) -> None:
        self._rw = RWLock()
        self._depth = 0

    def write_lock(self, tid: int) -> None:
        """Take or re-enter the write lock as ``tid``."""
        _check_tid(tid)
        rw = self._rw
        with rw._cond:
            if rw._writer != tid:
                rw._acquire_write(tid)
            self._depth += 1

    def write_trylock(self, tid: int) -> bool:
        """Take or re-enter the write lock as ``tid`` without waiting."""
        _check_tid(tid)
        rw = self._rw
        with rw._cond:
            if rw._writer != tid and not rw._try_write(tid):
                return False
            self._depth += 1
            return True

    def write_unlock(self) -> None:
        """Leave one level of the write lock; the last level releases it."""
        rw = self._rw
        with rw._cond:
            if self._depth == 0:
                raise RuntimeError("write_unlock without a writer")
            self._depth -= 1
            if self._depth == 0:
                rw._release_write()

    def read_lock(self) -> None:
        """Block until shared ownership is held."""
        self._rw.read_lock()

    def read_trylock(self) -> bool:
        """Take shared ownership only if no writer holds the lock."""
        return self._rw.read_trylock()

    def read_unlock(self) -> None:
        """Release one shared ownership."""
        self._rw.read_unlock()