from __future__ import annotations

import sys
from typing import BinaryIO


class BytesSource:
    """In-memory input, consumed front to back."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytes(data)
        self._pos = 0

    def read_byte(self) -> int | None:
        if self._pos >= len(self._data):
            return None
        value = self._data[self._pos]
        self._pos += 1
        return value


class StreamSource:
    """Blocking one-byte reads from a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read_byte(self) -> int | None:
        chunk = self._stream.read(1)
        if not chunk:
            return None
        return chunk[0]


class BufferSink:
    def __init__(self) -> None:
        self.buffer = bytearray()

    def write_byte(self, value: int) -> None:
        self.buffer.append(value)

    def getvalue(self) -> bytes:
        return bytes(self.buffer)


class StreamSink:
    """Writes each byte to a binary stream and flushes immediately."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write_byte(self, value: int) -> None:
        self._stream.write(bytes((value,)))
        self._stream.flush()


def stdin_source() -> StreamSource:
    return StreamSource(sys.stdin.buffer)


def stdout_sink() -> StreamSink:
    return StreamSink(sys.stdout.buffer)
