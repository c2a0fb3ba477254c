"""Header/body buffers for offset-based subtables.

OpenType layout tables are built from subtables with a fixed-size header that
holds 16-bit offsets into a variable-size body. ``SubtableBuffer`` keeps the
two regions apart so that code can write a header field, then write the data
it points at into the body, in plain program order. Each offset is filled in
from the body's size at the moment it is marked.

Subtables nest: finalizing a child into ``parent.body`` appends it to the
parent's body, and the child's offsets stay relative to the child's own start.
"""

import io
from typing import BinaryIO

from pixelfont.exceptions import OffsetOverflowError
from pixelfont.io.packing import u16


class SubtableHeader:
    """Write target for the header region of a :class:`SubtableBuffer`."""

    def __init__(self, owner: "SubtableBuffer") -> None:
        self._owner = owner
        self._buffer = io.BytesIO()

    def write(self, data: bytes) -> int:
        return self._buffer.write(data)

    def mark_offset(self) -> int:
        """Write the offset of the body's current end as a u16.

        Whatever is written to the body next starts at that offset.

        Returns:
            The offset that was written, relative to the subtable start

        Raises:
            OffsetOverflowError: If the offset exceeds 0xFFFF
        """
        offset = self._owner.body.tell() + self._owner.body_offset
        if offset > 0xFFFF:
            raise OffsetOverflowError(offset)
        self._buffer.write(u16(offset))
        return offset

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()

    def __len__(self) -> int:
        return self._buffer.tell()


class SubtableBuffer:
    """A subtable under construction.

    Example:
        subtable = SubtableBuffer(body_offset=4)
        subtable.header.write(u16(1))
        subtable.header.mark_offset()
        subtable.body.write(coverage_bytes)
        subtable.finalize(sink)

    Attributes:
        body_offset: Distance from the subtable start to its body, which is
            the final size of the header
        header: Header region, with :meth:`SubtableHeader.mark_offset`
        body: Body region
    """

    def __init__(self, body_offset: int) -> None:
        self.body_offset = body_offset
        self.header = SubtableHeader(self)
        self.body = io.BytesIO()

    def finalize(self, sink: BinaryIO) -> None:
        """Write header then body to ``sink``.

        Args:
            sink: Any writable, including another subtable's body

        Raises:
            ValueError: If the header size differs from ``body_offset``
        """
        if len(self.header) != self.body_offset:
            raise ValueError(
                f"subtable header is {len(self.header)} bytes, "
                f"but offsets assumed {self.body_offset}"
            )
        sink.write(self.header.getvalue())
        sink.write(self.body.getvalue())

    def getvalue(self) -> bytes:
        """Return the finalized subtable as bytes."""
        out = io.BytesIO()
        self.finalize(out)
        return out.getvalue()
