"""Index-to-location table ('loca')."""

from typing import BinaryIO

from pixelfont.io.packing import u16, u32
from pixelfont.tables.base import FontTable

SHORT_FORMAT = 0
LONG_FORMAT = 1


class Loca(FontTable):
    """Offsets of each glyph into 'glyf', plus the end of the last glyph.

    The short format stores offsets halved in 16-bit fields and is used while
    the largest offset fits in 16 bits; otherwise 32-bit offsets are written.
    """

    tag = b"loca"

    def __init__(self, offsets: list[int]) -> None:
        self.offsets = offsets

    def needs_long(self) -> bool:
        return bool(self.offsets) and self.offsets[-1] > 0xFFFF

    @property
    def index_to_loc_format(self) -> int:
        """Value of head.indexToLocFormat matching this table."""
        return LONG_FORMAT if self.needs_long() else SHORT_FORMAT

    def write(self, writer: BinaryIO) -> None:
        if self.needs_long():
            for offset in self.offsets:
                writer.write(u32(offset))
        else:
            for offset in self.offsets:
                writer.write(u16(offset // 2))
