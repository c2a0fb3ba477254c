"""A seekable writer with two write heads."""

import io
from typing import BinaryIO


class SplitWriter:
    """Writes two interleaved regions of one seekable sink.

    Writes go to the active head. :meth:`swap` parks the active head and moves
    to the other one, so a directory and the data it describes can be written
    alternately without buffering either.

    Example:
        writer = SplitWriter(sink, other_head=directory_end)
        writer.write(directory_header)
        writer.swap()  # now at directory_end
        writer.write(table_data)
        writer.swap()  # back after directory_header
    """

    def __init__(self, sink: BinaryIO, other_head: int) -> None:
        """Initialize the writer.

        Args:
            sink: Seekable binary stream; the active head starts at its
                current position
            other_head: Absolute position of the second head
        """
        self._sink = sink
        self._other_head = other_head

    def swap(self) -> None:
        """Exchange the active head with the parked one."""
        position = self._sink.tell()
        self._sink.seek(self._other_head, io.SEEK_SET)
        self._other_head = position

    def write(self, data: bytes) -> int:
        return self._sink.write(data)

    def tell(self) -> int:
        return self._sink.tell()

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._sink.seek(offset, whence)

    def flush(self) -> None:
        self._sink.flush()
