"""SHA-1 hashing and HMAC-SHA1, computed incrementally."""

from __future__ import annotations

import struct

__all__ = ["Sha1", "HmacSha1", "sha1", "hmac_sha1"]

HASH_LENGTH = 20
BLOCK_LENGTH = 64

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_K0 = 0x5A827999
_K20 = 0x6ED9EBA1
_K40 = 0x8F1BBCDC
_K60 = 0xCA62C1D6

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_HMAC_IPAD = 0x36
_HMAC_OPAD = 0x5C

_BLOCK_WORDS = struct.Struct(">16I")
_DIGEST_WORDS = struct.Struct(">5I")


def _rol32(number: int, bits: int) -> int:
    return ((number << bits) | (number >> (32 - bits))) & _MASK32


def _compress(state: list[int], block: bytes) -> None:
    """Mix one 64-byte block into ``state``."""
    w = list(_BLOCK_WORDS.unpack(block))
    for i in range(16, 80):
        w.append(_rol32(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i, word in enumerate(w):
        if i < 20:
            f = (d ^ (b & (c ^ d))) + _K0
        elif i < 40:
            f = (b ^ c ^ d) + _K20
        elif i < 60:
            f = ((b & c) | (d & (b | c))) + _K40
        else:
            f = (b ^ c ^ d) + _K60
        t = (f + _rol32(a, 5) + e + word) & _MASK32
        e = d
        d = c
        c = _rol32(b, 30)
        b = a
        a = t

    state[0] = (state[0] + a) & _MASK32
    state[1] = (state[1] + b) & _MASK32
    state[2] = (state[2] + c) & _MASK32
    state[3] = (state[3] + d) & _MASK32
    state[4] = (state[4] + e) & _MASK32


class Sha1:
    """Incremental SHA-1 hash; ``digest`` may be called at any time."""

    digest_size = HASH_LENGTH
    block_size = BLOCK_LENGTH

    def __init__(self, data: bytes = b"") -> None:
        self._state = list(_INITIAL_STATE)
        self._buffer = bytearray()
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        self._length += len(data)
        self._buffer += data
        full = len(self._buffer) - len(self._buffer) % BLOCK_LENGTH
        for start in range(0, full, BLOCK_LENGTH):
            _compress(self._state, bytes(self._buffer[start:start + BLOCK_LENGTH]))
        del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the 20-byte hash of everything fed so far."""
        state = list(self._state)
        tail = bytearray(self._buffer)
        tail.append(0x80)
        tail.extend(bytes((56 - len(tail)) % BLOCK_LENGTH))
        tail += struct.pack(">Q", (self._length * 8) & _MASK64)
        for start in range(0, len(tail), BLOCK_LENGTH):
            _compress(state, bytes(tail[start:start + BLOCK_LENGTH]))
        return _DIGEST_WORDS.pack(*state)

    def hexdigest(self) -> str:
        """Return the hash as a lower-case hexadecimal string."""
        return self.digest().hex()


class HmacSha1:
    """Incremental HMAC using SHA-1."""

    digest_size = HASH_LENGTH
    block_size = BLOCK_LENGTH

    def __init__(self, key: bytes, data: bytes = b"") -> None:
        key = bytes(key)
        if len(key) > BLOCK_LENGTH:
            key = Sha1(key).digest()
        key = key.ljust(BLOCK_LENGTH, b"\0")
        self._inner = Sha1(bytes(k ^ _HMAC_IPAD for k in key))
        self._outer_key = bytes(k ^ _HMAC_OPAD for k in key)
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more message bytes into the MAC."""
        self._inner.update(data)

    def digest(self) -> bytes:
        """Return the 20-byte MAC of everything fed so far."""
        return Sha1(self._outer_key + self._inner.digest()).digest()

    def hexdigest(self) -> str:
        """Return the MAC as a lower-case hexadecimal string."""
        return self.digest().hex()


def sha1(data: bytes) -> bytes:
    """Return the SHA-1 hash of ``data``."""
    return Sha1(data).digest()


def hmac_sha1(key: bytes, data: bytes) -> bytes:
    """Return the HMAC-SHA1 of ``data`` under ``key``."""
    return HmacSha1(key, data).digest()