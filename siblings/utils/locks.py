"""Reader-writer lock."""
from __future__ import annotations

import contextlib
import threading
from typing import Generator


class ReadWriteLock:
    """Lock allowing many concurrent readers or a single writer.

    Writers waiting on the lock block new readers from entering so a
    continuous stream of readers cannot starve a writer. The lock is not
    reentrant: a thread holding the read lock must not request the write
    lock.

    Example:
        ```python
        lock = ReadWriteLock()

        with lock.read():
            ...

        with lock.write():
            ...
        ```
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        """Acquire the lock in shared mode."""
        with self._cond:
            while self._writer or self._writers_waiting > 0:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        """Release a shared hold on the lock."""
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError('Cannot release un-acquired read lock.')
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        """Acquire the lock in exclusive mode."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers > 0:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
                if self._writers_waiting == 0:
                    self._cond.notify_all()
            self._writer = True

    def release_write(self) -> None:
        """Release an exclusive hold on the lock."""
        with self._cond:
            if not self._writer:
                raise RuntimeError('Cannot release un-acquired write lock.')
            self._writer = False
            self._cond.notify_all()

    @contextlib.contextmanager
    def read(self) -> Generator[None, None, None]:
        """Context manager holding the lock in shared mode."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextlib.contextmanager
    def write(self) -> Generator[None, None, None]:
        """Context manager holding the lock in exclusive mode."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
