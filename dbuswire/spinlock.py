"""A minimal non-reentrant lock that is not bound to an owning thread."""

from __future__ import annotations

import threading

__all__ = ["Spinlock"]


class Spinlock:
    """A plain lock; usable as a context manager."""

    def __init__(self) -> None:
        self._flag = threading.Lock()

    def lock(self) -> None:
        """Wait until the lock is free and take it."""
        self._flag.acquire()

    def unlock(self) -> None:
        """Release the lock; releasing a free lock does nothing."""
        try:
            self._flag.release()
        except RuntimeError:
            pass

    def locked(self) -> bool:
        """True while the lock is held."""
        return self._flag.locked()

    def __enter__(self) -> "Spinlock":
        self.lock()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unlock()