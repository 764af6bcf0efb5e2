"""
esovm — Byte Streams

Both machines talk to the outside world through one bidirectional byte
stream supplied by the caller. Any object with binary-file style ``read``
and ``write`` methods works, including ``io.BytesIO``, sockets wrapped with
``makefile('rwb')`` and serial ports.

Stream contract used by the executors:
  read(n)     -> bytes   up to n bytes; fewer (or b"") is a short read
  write(data) -> int     bytes written; None is accepted as "all of it"

``OSError`` or ``ValueError`` (closed file) from either call is a failure.
The executors never close the stream; it belongs to the caller.

Two adapters are provided:
  BufferStream  — in-memory input queue + output buffer (tests, embedding)
  DuplexStream  — joins a read-only and a write-only binary file
"""

from typing import BinaryIO, Optional, Protocol, runtime_checkable
from collections import deque


@runtime_checkable
class ByteStream(Protocol):
    def read(self, size: int = -1) -> bytes: ...

    def write(self, data: bytes) -> Optional[int]: ...


class BufferStream:
    """In-memory byte stream.

    Input is queued with inject() (or the constructor) and consumed by
    read(); everything written lands in ``output``. Once input runs out,
    read() returns b"" like a file at EOF.

    close() simulates the caller tearing the stream down: every later
    read/write raises OSError, which is how an evaluation gets cancelled.

    Usage:
        stream = BufferStream(b"A")
        brainfuck.evaluate(",.", stream)
        stream.output  # b"A"
    """

    def __init__(self, data: bytes = b""):
        self._rx: deque = deque(data)
        self._tx: bytearray = bytearray()
        self._closed = False

    # --- Input side ---

    def inject(self, data: bytes):
        """Queue bytes for later reads."""
        self._rx.extend(data)

    @property
    def pending(self) -> int:
        """Number of input bytes not yet read."""
        return len(self._rx)

    def read(self, size: int = -1) -> bytes:
        self._check_open()
        if size is None or size < 0:
            size = len(self._rx)
        count = min(size, len(self._rx))
        return bytes(self._rx.popleft() for _ in range(count))

    # --- Output side ---

    @property
    def output(self) -> bytes:
        """Everything written so far."""
        return bytes(self._tx)

    def write(self, data: bytes) -> int:
        self._check_open()
        self._tx.extend(data)
        return len(data)

    # --- Lifecycle ---

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self):
        self._closed = True

    def _check_open(self):
        if self._closed:
            raise OSError("stream is closed")


class DuplexStream:
    """Join two one-directional binary files into one stream.

    Typical use is running a program against the console:

        stream = DuplexStream(sys.stdin.buffer, sys.stdout.buffer)
        bytesyze.evaluate(image, stream)
        stream.flush()

    Neither file is closed by this wrapper.
    """

    def __init__(self, reader: BinaryIO, writer: BinaryIO):
        self.reader = reader
        self.writer = writer

    def read(self, size: int = -1) -> bytes:
        return self.reader.read(size)

    def write(self, data: bytes) -> Optional[int]:
        return self.writer.write(data)

    def flush(self):
        self.writer.flush()
