"""Binary writing utilities for little-endian PS2 data."""

import struct
from typing import BinaryIO, Optional


class BinaryWriter:
    """Helper for writing little-endian binary data (PS2 format).

    Field writes accumulate in an internal buffer until ``flush`` hands
    the buffered record to the sink in a single ``write`` call. ``write``
    bypasses the buffer for bulk data such as file payloads.
    """

    def __init__(self, stream: Optional[BinaryIO] = None):
        self._stream = stream
        self._buffer = bytearray()

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet handed to the stream."""
        return len(self._buffer)

    def write_u8(self, value: int) -> None:
        self._buffer += struct.pack("<B", value & 0xFF)

    def write_u16(self, value: int) -> None:
        self._buffer += struct.pack("<H", value & 0xFFFF)

    def write_u32(self, value: int) -> None:
        self._buffer += struct.pack("<I", value & 0xFFFFFFFF)

    def write_bytes(self, data: bytes) -> None:
        self._buffer += data

    def skip(self, count: int) -> None:
        """Write ``count`` reserved zero bytes."""
        self._buffer += bytes(count)

    def getvalue(self) -> bytes:
        """Return the buffered bytes without flushing them."""
        return bytes(self._buffer)

    def flush(self) -> None:
        """Hand the buffered record to the stream."""
        data = bytes(self._buffer)
        self._buffer.clear()
        self.write(data)

    def write(self, data: bytes) -> None:
        """Write ``data`` straight to the stream in one call.

        Errors raised by the stream propagate unchanged. A stream that
        reports writing fewer bytes than it was given raises ``OSError``.
        """
        if not data:
            return

        if self._stream is None:
            raise RuntimeError("No stream to write to")

        written = self._stream.write(data)
        if written is not None and written < len(data):
            raise OSError(f"short write: {written} of {len(data)} bytes")


def align_up(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of ``alignment``."""
    return (value + alignment - 1) // alignment * alignment
