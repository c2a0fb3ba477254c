"""Checksumming writer for sfnt tables.

A table checksum is the wrapping 32-bit sum of the table read as big-endian
32-bit words after zero-padding it to a multiple of four bytes. The writer
folds each word in as soon as its four bytes are known, so the result does
not depend on how the bytes were split across ``write`` calls.
"""

import io
import struct
from typing import BinaryIO

_WORD = struct.Struct(">I")
_MASK = 0xFFFFFFFF


class TableWriter:
    """Forwards bytes to a sink while computing the table checksum.

    Example:
        writer = TableWriter(sink)
        writer.write(b"\\x00\\x01")
        checksum, length = writer.finalize()
    """

    def __init__(self, sink: BinaryIO) -> None:
        """Initialize the writer.

        Args:
            sink: Writable binary stream receiving the table bytes
        """
        self._sink = sink
        self._checksum = 0
        self._pending = b""
        self._length = 0
        self._finalized = False

    @property
    def length(self) -> int:
        """Number of bytes written so far, not counting padding."""
        return self._length

    def write(self, data: bytes) -> int:
        """Write bytes through to the sink and fold them into the checksum.

        Args:
            data: Bytes to write

        Returns:
            Number of bytes written

        Raises:
            RuntimeError: If the writer was already finalized
        """
        if self._finalized:
            raise RuntimeError("TableWriter already finalized")
        data = bytes(data)
        self._sink.write(data)
        self._length += len(data)

        buffer = self._pending + data
        whole = len(buffer) - len(buffer) % 4
        for (word,) in _WORD.iter_unpack(buffer[:whole]):
            self._checksum = (self._checksum + word) & _MASK
        self._pending = buffer[whole:]
        return len(data)

    def flush(self) -> None:
        self._sink.flush()

    def finalize(self) -> tuple[int, int]:
        """Pad the table to a four-byte boundary.

        Returns:
            Tuple of (checksum, unpadded length)

        Raises:
            RuntimeError: If the writer was already finalized
        """
        if self._finalized:
            raise RuntimeError("TableWriter already finalized")
        padding = b"\0" * (-self._length % 4)
        self._sink.write(padding)
        if self._pending:
            (word,) = _WORD.unpack(self._pending + padding)
            self._checksum = (self._checksum + word) & _MASK
            self._pending = b""
        self._finalized = True
        return self._checksum, self._length


def calc_checksum(data: bytes) -> int:
    """Checksum of an in-memory block, zero-padded to four bytes.

    Examples:
        >>> calc_checksum(b"abcd")
        1633837924
        >>> calc_checksum(b"abcdxyz")
        3655064932
    """
    writer = TableWriter(io.BytesIO())
    writer.write(data)
    checksum, _ = writer.finalize()
    return checksum
