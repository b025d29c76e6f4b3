"""Big-reader locks: cheap reads through per-reader records, costly writes."""

import threading
from typing import List


class BRReader:
    """A reader's record in a BRLock; read locks taken through it may nest."""

    def __init__(self, lock: "BRLock") -> None:
        self._lock = lock
        self.n_readers = 0

    def read_lock(self) -> None:
        """Take a read lock, waiting while a writer holds the lock."""
        cond = self._lock._cond
        with cond:
            if self.n_readers >= 1:
                self.n_readers += 1
                return
            cond.wait_for(lambda: not self._lock._writer)
            self.n_readers = 1

    def read_trylock(self, factor: int) -> bool:
        """Take a read lock, checking for a writer at most ``factor`` times."""
        cond = self._lock._cond
        with cond:
            if self.n_readers >= 1:
                self.n_readers += 1
                return True
            steps = 0
            while self._lock._writer:
                steps += 1
                if steps >= factor:
                    return False
                cond.wait(0)
            self.n_readers = 1
            return True

    def read_unlock(self) -> None:
        """Leave one level of the read lock."""
        cond = self._lock._cond
        with cond:
            if self.n_readers == 0:
                raise RuntimeError("read_unlock without a read lock")
            self.n_readers -= 1
            if self.n_readers == 0:
                cond.notify_all()


class BRLock:
    """Lock with registered readers; a writer waits for every reader to leave."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._writer = False
        self._readers: List[BRReader] = []

    def _acquire(self) -> None:
        self._cond.wait_for(lambda: not self._writer)
        self._writer = True
        for reader in list(self._readers):
            self._cond.wait_for(lambda: reader.n_readers == 0)

    def _release(self) -> None:
        self._writer = False
        self._cond.notify_all()

    def register(self) -> BRReader:
        """Create and register a new reader record."""
        with self._cond:
            self._acquire()
            reader = BRReader(self)
            self._readers.insert(0, reader)
            self._release()
            return reader

    def unregister(self, reader: BRReader) -> None:
        """Remove ``reader`` from the lock; raise ValueError if not registered."""
        with self._cond:
            if reader not in self._readers:
                raise ValueError("reader is not registered with this lock")
            self._acquire()
            self._readers.remove(reader)
            self._release()

    def write_lock(self) -> None:
        """Block until the lock is held exclusively."""
        with self._cond:
            self._acquire()

    def write_unlock(self) -> None:
        """Release exclusive ownership."""
        with self._cond:
            self._release()

    def write_trylock(self, factor: int) -> bool:
        """Take exclusive ownership, giving up after ``factor`` failed checks."""
        with self._cond:
            steps = 0
            while self._writer:
                steps += 1
                if steps >= factor:
                    return False
                self._cond.wait(0)
            self._writer = True
            for reader in list(self._readers):
                while reader.n_readers != 0:
                    steps += 1
                    if steps >= factor:
                        self._release()
                        return False
                    self._cond.wait(0)
            return True