"""Link between two communicating objects that survives either one going away.

The initiator of a link creates a :class:`Commutex` shared by two
:class:`CommutexPeer` ends. Unlinking from one end puts the commutex into the
``BROKEN`` state forever, so the other end learns that its partner is gone,
and an ongoing call holds the commutex ``LOCKED`` so that other calls and
unlinking through it must wait.
"""

from __future__ import annotations

import threading
import time
from enum import Enum
from typing import Optional

__all__ = [
    "CommutexState",
    "TryLockResult",
    "Commutex",
    "CommutexPeer",
    "CommutexLocker",
    "CommutexUnlinker",
]


class CommutexState(Enum):
    FREE = 0
    LOCKED = 1
    BROKEN = 2


class TryLockResult(Enum):
    TRANSIENT_FAILURE = 0  # state was LOCKED
    PERMANENT_FAILURE = 1  # state was BROKEN
    SUCCESS = 2  # state was FREE and is now LOCKED


class Commutex:
    """A three-state lock: free, locked, or permanently broken."""

    def __init__(self) -> None:
        self._state = CommutexState.FREE
        self._guard = threading.Lock()

    def _compare_exchange(
        self, expected: CommutexState, desired: CommutexState
    ) -> tuple[bool, CommutexState]:
        with self._guard:
            previous = self._state
            if previous is expected:
                self._state = desired
                return True, previous
            return False, previous

    def try_lock(self) -> TryLockResult:
        """Lock if free; report whether a failure is transient or permanent."""
        ok, previous = self._compare_exchange(CommutexState.FREE, CommutexState.LOCKED)
        if ok:
            return TryLockResult.SUCCESS
        if previous is CommutexState.BROKEN:
            return TryLockResult.PERMANENT_FAILURE
        return TryLockResult.TRANSIENT_FAILURE

    def lock(self) -> bool:
        """Wait until locked and return True, or return False once broken."""
        while True:
            result = self.try_lock()
            if result is TryLockResult.TRANSIENT_FAILURE:
                time.sleep(0)
                continue
            return result is TryLockResult.SUCCESS

    def unlock(self) -> bool:
        """Release the lock; return False if the commutex was broken meanwhile."""
        ok, previous = self._compare_exchange(CommutexState.LOCKED, CommutexState.FREE)
        if ok:
            return True
        if previous is not CommutexState.BROKEN:
            raise RuntimeError("unlocking a commutex that is not locked")
        return False

    def try_unlink(self) -> bool:
        """Break the link unless it is locked; True if it is broken afterwards."""
        ok, previous = self._compare_exchange(CommutexState.FREE, CommutexState.BROKEN)
        return ok or previous is CommutexState.BROKEN

    def unlink(self) -> None:
        """Wait until the link can be broken and break it."""
        while not self.try_unlink():
            time.sleep(0)

    def unlink_from_locked(self) -> None:
        """Break the link from the locked state held by the caller."""
        ok, _ = self._compare_exchange(CommutexState.LOCKED, CommutexState.BROKEN)
        if not ok:
            raise RuntimeError("commutex is not locked")

    def state(self) -> CommutexState:
        """Current state, for diagnostics only."""
        with self._guard:
            return self._state


class CommutexPeer:
    """One end of a commutex link. A peer without a link behaves as broken."""

    def __init__(self, commutex: Optional[Commutex] = None) -> None:
        self._comm = commutex

    @staticmethod
    def create_link() -> tuple["CommutexPeer", "CommutexPeer"]:
        """Create two peers sharing a new commutex."""
        commutex = Commutex()
        return CommutexPeer(commutex), CommutexPeer(commutex)

    def try_lock(self) -> TryLockResult:
        if self._comm is None:
            return TryLockResult.PERMANENT_FAILURE
        result = self._comm.try_lock()
        if result is TryLockResult.PERMANENT_FAILURE:
            self._comm = None
        return result

    def lock(self) -> bool:
        if self._comm is None:
            return False
        result = self._comm.lock()
        if not result:
            self._comm = None
        return result

    def unlock(self) -> None:
        if self._comm is not None:
            self._comm.unlock()

    def try_unlink(self) -> bool:
        """Try to break the link; True once it is broken."""
        if self._comm is None:
            return True
        result = self._comm.try_unlink()
        if result:
            self._comm = None
        return result

    def unlink(self) -> None:
        if self._comm is not None:
            self._comm.unlink()
            self._comm = None

    def unlink_from_locked(self) -> None:
        """Break the link; the caller must hold the lock."""
        if self._comm is not None:
            self._comm.unlink_from_locked()

    def state(self) -> CommutexState:
        if self._comm is None:
            return CommutexState.BROKEN
        return self._comm.state()

    def id(self) -> Optional[Commutex]:
        """The shared commutex, to tell which peers belong together."""
        return self._comm

    def __enter__(self) -> "CommutexPeer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unlink()


class CommutexLocker:
    """Locks a peer on construction and unlocks it on leaving the ``with`` block."""

    def __init__(self, peer: CommutexPeer) -> None:
        self._peer = peer
        self._has_lock = peer.lock()

    def has_lock(self) -> bool:
        return self._has_lock

    def release(self) -> None:
        """Unlock now if the lock is held."""
        if self._has_lock:
            self._has_lock = False
            self._peer.unlock()

    def __enter__(self) -> "CommutexLocker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


class CommutexUnlinker:
    """Locks a peer in order to break its link on leaving the ``with`` block."""

    def __init__(self, peer: CommutexPeer, must_succeed: bool = True) -> None:
        self._peer = peer
        self._result = peer.try_lock()
        while must_succeed and self._result is TryLockResult.TRANSIENT_FAILURE:
            time.sleep(0)
            self._result = peer.try_lock()

    def has_lock(self) -> bool:
        return self._result is TryLockResult.SUCCESS

    def will_succeed(self) -> bool:
        """True if the link is already broken or the lock is held."""
        return self._result is not TryLockResult.TRANSIENT_FAILURE

    def unlink_now(self) -> None:
        """Break the link immediately instead of on exit."""
        if not self.will_succeed():
            raise RuntimeError("unlinking cannot succeed without the lock")
        if self._result is TryLockResult.SUCCESS:
            self._peer.unlink_from_locked()
        self._result = TryLockResult.PERMANENT_FAILURE

    def __enter__(self) -> "CommutexUnlinker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._result is TryLockResult.SUCCESS:
            self._peer.unlink_from_locked()
            self._result = TryLockResult.PERMANENT_FAILURE