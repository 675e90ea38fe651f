"""Value types describing the outcome of transport I/O."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag

__all__ = ["RW", "Status", "Result"]


class RW(Flag):
    """Direction of I/O readiness; members may be combined."""

    READ = 1
    WRITE = 2


class Status(Enum):
    """Outcome of an I/O operation."""

    OK = 0
    REMOTE_CLOSED = 1
    LOCAL_CLOSED = 2
    PAYLOAD_ERROR = 3
    INTERNAL_ERROR = 4


@dataclass
class Result:
    """Status of an I/O operation and the number of bytes it moved."""

    status: Status = Status.OK
    length: int = 0