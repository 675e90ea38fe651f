import struct

import pytest

from dbuswire import basictypeio as bio


@pytest.mark.parametrize("alignment", [1, 2, 4, 8])
def test_align_invariants(alignment):
    for index in range(40):
        result = bio.align(index, alignment)
        assert result % alignment == 0
        assert index <= result < index + alignment


def test_align_keeps_aligned_values():
    assert bio.align(16, 8) == 16
    assert bio.align(5, 1) == 5
    assert bio.align(0, 4) == 0


def test_align_rejects_non_power_of_two():
    with pytest.raises(ValueError):
        bio.align(3, 3)
    with pytest.raises(ValueError):
        bio.align(3, 0)


def test_is_padding_zero():
    data = b"ab\0\0\0"
    assert bio.is_padding_zero(data, 2, 5) is True
    assert bio.is_padding_zero(data, 0, 5) is False
    assert bio.is_padding_zero(data, 1, 3) is False


def test_is_padding_zero_clamps_end():
    assert bio.is_padding_zero(b"x\0\0", 1, 100) is True
    assert bio.is_padding_zero(b"x\0\0", 5, 100) is True


def test_zero_pad_grows_buffer():
    buf = bytearray(b"xyz")
    end = bio.zero_pad(buf, 4, 3)
    assert end == 4
    assert buf == bytearray(b"xyz\0")


def test_zero_pad_overwrites_existing_bytes():
    buf = bytearray(b"abcdefgh")
    end = bio.zero_pad(buf, 8, 2)
    assert end == 8
    assert buf == bytearray(b"ab\0\0\0\0\0\0")


def test_zero_pad_already_aligned():
    buf = bytearray(b"abcd")
    assert bio.zero_pad(buf, 4, 4) == 4
    assert buf == bytearray(b"abcd")


_CASES = [
    (bio.write_int16, bio.read_int16, 2, -12345),
    (bio.write_uint16, bio.read_uint16, 2, 0xBEEF),
    (bio.write_int32, bio.read_int32, 4, -123456789),
    (bio.write_uint32, bio.read_uint32, 4, 0xDEADBEEF),
    (bio.write_int64, bio.read_int64, 8, -(2**62) + 7),
    (bio.write_uint64, bio.read_uint64, 8, 2**64 - 2),
    (bio.write_double, bio.read_double, 8, -3.25),
]


@pytest.mark.parametrize("write, read, size, value", _CASES)
def test_round_trip_native_at_aligned_offset(write, read, size, value):
    offset = bio.align(3, size)
    buf = bytearray(offset + size)
    write(buf, offset, value)
    assert bio.is_padding_zero(bytes(buf), 0, offset)
    assert read(bytes(buf), offset, False) == value


@pytest.mark.parametrize("write, read, size, value", _CASES)
def test_swapped_read_of_reversed_bytes(write, read, size, value):
    offset = bio.align(1, size)
    buf = bytearray(offset + size)
    write(buf, offset, value)
    swapped = bytes(buf[:offset]) + bytes(reversed(buf[offset:]))
    assert bio.is_padding_zero(swapped, 0, offset)
    assert read(swapped, offset, True) == value


def test_swap_reverses_interpretation():
    data = b"\x01\x02"
    plain = bio.read_uint16(data, 0, False)
    swapped = bio.read_uint16(data, 0, True)
    assert {plain, swapped} == {0x0102, 0x0201}


def test_write_out_of_range_raises():
    with pytest.raises(struct.error):
        bio.write_uint16(bytearray(2), 0, 1 << 16)


def test_read_past_end_raises():
    with pytest.raises(struct.error):
        bio.read_uint32(b"\0\0\0", 0, False)