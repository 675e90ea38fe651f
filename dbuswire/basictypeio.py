"""Alignment helpers and fixed-size number reading and writing.

Values are written in the host's byte order; readers are told whether the
data they read came from a peer with the opposite byte order.
"""

from __future__ import annotations

import struct
import sys

__all__ = [
    "align",
    "is_padding_zero",
    "zero_pad",
    "read_int16",
    "read_uint16",
    "read_int32",
    "read_uint32",
    "read_int64",
    "read_uint64",
    "read_double",
    "write_int16",
    "write_uint16",
    "write_int32",
    "write_uint32",
    "write_int64",
    "write_uint64",
    "write_double",
]

_NATIVE = "<" if sys.byteorder == "little" else ">"
_SWAPPED = ">" if _NATIVE == "<" else "<"


def _check_alignment(alignment: int) -> None:
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a power of two, not {alignment}")


def align(index: int, alignment: int) -> int:
    """Round ``index`` up to the next multiple of ``alignment``."""
    _check_alignment(alignment)
    step_up = alignment - 1
    return (index + step_up) & ~step_up


def is_padding_zero(buffer: bytes, pad_start: int, pad_end: int) -> bool:
    """True if every byte of ``buffer[pad_start:pad_end]`` is zero.

    ``pad_end`` is clamped to the length of the buffer.
    """
    pad_end = min(pad_end, len(buffer))
    return not any(buffer[pad_start:pad_end])


def zero_pad(buffer: bytearray, alignment: int, position: int) -> int:
    """Write zeros from ``position`` up to the next aligned offset and return that offset.

    The buffer grows if it is too short to hold the padding.
    """
    end = align(position, alignment)
    if len(buffer) < end:
        buffer.extend(bytes(end - len(buffer)))
    buffer[position:end] = bytes(end - position)
    return end


def _reader(code: str):
    native = struct.Struct(_NATIVE + code)
    swapped = struct.Struct(_SWAPPED + code)

    def read(data: bytes, offset: int, swap: bool):
        fmt = swapped if swap else native
        return fmt.unpack_from(data, offset)[0]

    return read


def _writer(code: str):
    fmt = struct.Struct(_NATIVE + code)

    def write(buffer: bytearray, offset: int, value) -> None:
        fmt.pack_into(buffer, offset, value)

    return write


_read_int16 = _reader("h")
_read_uint16 = _reader("H")
_read_int32 = _reader("i")
_read_uint32 = _reader("I")
_read_int64 = _reader("q")
_read_uint64 = _reader("Q")
_read_double = _reader("d")

_write_int16 = _writer("h")
_write_uint16 = _writer("H")
_write_int32 = _writer("i")
_write_uint32 = _writer("I")
_write_int64 = _writer("q")
_write_uint64 = _writer("Q")
_write_double = _writer("d")


def read_int16(data: bytes, offset: int, swap: bool) -> int:
    """Read a signed 16-bit integer, byte-swapping if ``swap`` is set."""
    return _read_int16(data, offset, swap)


def read_uint16(data: bytes, offset: int, swap: bool) -> int:
    """Read an unsigned 16-bit integer, byte-swapping if ``swap`` is set."""
    return _read_uint16(data, offset, swap)


def read_int32(data: bytes, offset: int, swap: bool) -> int:
    """Read a signed 32-bit integer, byte-swapping if ``swap`` is set."""
    return _read_int32(data, offset, swap)


def read_uint32(data: bytes, offset: int, swap: bool) -> int:
    """Read an unsigned 32-bit integer, byte-swapping if ``swap`` is set."""
    return _read_uint32(data, offset, swap)


def read_int64(data: bytes, offset: int, swap: bool) -> int:
    """Read a signed 64-bit integer, byte-swapping if ``swap`` is set."""
    return _read_int64(data, offset, swap)


def read_uint64(data: bytes, offset: int, swap: bool) -> int:
    """Read an unsigned 64-bit integer, byte-swapping if ``swap`` is set."""
    return _read_uint64(data, offset, swap)


def read_double(data: bytes, offset: int, swap: bool) -> float:
    """Read an IEEE 754 double, byte-swapping if ``swap`` is set."""
    return _read_double(data, offset, swap)


def write_int16(buffer: bytearray, offset: int, value: int) -> None:
    """Write a signed 16-bit integer in host byte order."""
    _write_int16(buffer, offset, value)


def write_uint16(buffer: bytearray, offset: int, value: int) -> None:
    """Write an unsigned 16-bit integer in host byte order."""
    _write_uint16(buffer, offset, value)


def write_int32(buffer: bytearray, offset: int, value: int) -> None:
    """Write a signed 32-bit integer in host byte order."""
    _write_int32(buffer, offset, value)


def write_uint32(buffer: bytearray, offset: int, value: int) -> None:
    """Write an unsigned 32-bit integer in host byte order."""
    _write_uint32(buffer, offset, value)


def write_int64(buffer: bytearray, offset: int, value: int) -> None:
    """Write a signed 64-bit integer in host byte order."""
    _write_int64(buffer, offset, value)


def write_uint64(buffer: bytearray, offset: int, value: int) -> None:
    """Write an unsigned 64-bit integer in host byte order."""
    _write_uint64(buffer, offset, value)


def write_double(buffer: bytearray, offset: int, value: float) -> None:
    """Write an IEEE 754 double in host byte order."""
    _write_double(buffer, offset, value)