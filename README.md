# dbuswire

Small, dependency-free building blocks for working with the D-Bus wire format
and the machinery around it.

## What is inside

- `dbuswire.errors` – `ErrorCode`, an `IntEnum` of argument, message and
  connection error codes grouped by numeric range (`MAX_ARGUMENTS_ERROR`,
  `MAX_MESSAGE_ERROR`, `MAX_CONNECTION_ERROR` mark the ends of the ranges), and
  `Error`, a dataclass carrying one code. `Error.is_error` is true for any code
  other than `NO_ERROR`; `Error.message()` currently returns an empty string.
- `dbuswire.iovalues` – `RW` (a `Flag` with `READ` and `WRITE`), `Status`
  (`OK`, `REMOTE_CLOSED`, `LOCAL_CLOSED`, `PAYLOAD_ERROR`, `INTERNAL_ERROR`) and
  `Result`, a dataclass holding a status and a byte count.
- `dbuswire.basictypeio` – alignment helpers (`align`, `is_padding_zero`,
  `zero_pad`) and `read_*` / `write_*` functions for 16, 32 and 64 bit signed
  and unsigned integers and doubles. Writers use the host byte order; readers
  take a `swap` flag to read data of the opposite byte order.
- `dbuswire.nesting` – `Nesting`, which counts open arrays, structs and
  variants and reports when the D-Bus limits (32 arrays, 32 structs, 64 in
  total) are exceeded; `is_aligned`; and `STRUCT_ALIGNMENT` (8).
- `dbuswire.completion` – `CompletionListener`, an abstract base with
  `handle_completion(task)`, and `CompletionFunc`, which forwards to a callable
  if one is set.
- `dbuswire.sha1` – `Sha1` and `HmacSha1`, incremental hashers with
  `update`, `digest` and `hexdigest`, plus the one-shot helpers `sha1` and
  `hmac_sha1`.
- `dbuswire.commutex` – `Commutex`, `CommutexPeer`, `CommutexLocker` and
  `CommutexUnlinker`: a three-state lock (free, locked, broken) shared by two
  communicating objects, which either side can break for good.
- `dbuswire.spinlock` – `Spinlock`, a plain non-reentrant lock with `lock`,
  `unlock` and `locked`, usable as a context manager. Unlocking a free lock
  does nothing.

## Installation

```
pip install .
```

## Examples

```python
from dbuswire.basictypeio import align, read_uint32, write_uint32
from dbuswire.errors import Error, ErrorCode
from dbuswire.nesting import Nesting
from dbuswire.sha1 import hmac_sha1, sha1

align(5, 4)                     # 8

buf = bytearray(8)
write_uint32(buf, 0, 0x01020304)
read_uint32(buf, 0, False)      # 0x01020304

sha1(b"abc").hex()              # 'a9993e364706816aba3e25717850c26c9cd0d89d'
hmac_sha1(b"secret", b"message")

nest = Nesting()
nest.begin_array()              # True while within the limits
nest.end_array()

err = Error(ErrorCode.TIMEOUT)
err.is_error                    # True
```

Linking two objects through a commutex:

```python
from dbuswire.commutex import CommutexLocker, CommutexPeer

left, right = CommutexPeer.create_link()
with CommutexLocker(left) as locker:
    if locker.has_lock():
        ...                     # the other side cannot unlink meanwhile
right.unlink()                  # from now on, locking `left` fails for good
left.lock()                     # False
```

## What this package does not do

It provides pieces, not a D-Bus client. There is no argument or message
serializer, no connection, transport, authentication handshake, bus address
parsing or event loop; the error codes for those areas are defined, but
nothing in the package produces them.

## Running the tests

```
pip install .[test]
pytest
```