"""Character to glyph mapping table ('cmap').

Glyph ids are handed out in ascending character order, so a run of
consecutive character codes maps to a run of consecutive glyph ids. Format 4
stores each such run as one segment with a constant delta. Format 0, a flat
256-entry byte array, is added for the Macintosh platform when the font only
covers ASCII.

https://learn.microsoft.com/en-us/typography/opentype/spec/cmap
"""

import io
from collections.abc import Sequence
from dataclasses import dataclass
from typing import BinaryIO

from pixelfont.core.bsearch import BSearch
from pixelfont.domain import GlyphId
from pixelfont.exceptions import CharacterRangeError, FieldOverflowError
from pixelfont.io.packing import u16, u16_array, u32
from pixelfont.tables.base import FontTable

# (platform, encoding)
UNICODE_BMP = (0, 3)
MACINTOSH_ROMAN = (1, 0)
WINDOWS_BMP = (3, 1)

MAX_CODE = 0xFFFE
MAX_SUBTABLE_LENGTH = 0xFFFF


@dataclass(frozen=True, slots=True)
class Segment:
    """Codes ``start..end`` (inclusive) map to ``code + delta``."""

    start: int
    end: int
    delta: int

    def lookup(self, code: int) -> GlyphId | None:
        if self.start <= code <= self.end:
            return (code + self.delta) % 0x10000
        return None


END_SEGMENT = Segment(0xFFFF, 0xFFFF, 1)


def check_code(char: str) -> int:
    """Return the code point of ``char`` if a 16-bit map can hold it.

    0xFFFF is reserved for the closing segment.

    Raises:
        CharacterRangeError: If the code point is above 0xFFFE
    """
    code = ord(char)
    if code > MAX_CODE:
        raise CharacterRangeError(char)
    return code


def segments(codes: Sequence[int], first_glyph_id: GlyphId = 1) -> list[Segment]:
    """Split sorted character codes into runs of consecutive codes.

    The codes map to ``first_glyph_id``, ``first_glyph_id + 1``, ... in order.
    The closing 0xFFFF segment is appended.

    Args:
        codes: Distinct character codes in ascending order
        first_glyph_id: Glyph id of ``codes[0]``

    Returns:
        Segments in ascending order, the closing segment last

    Examples:
        >>> segments([1, 2, 3, 5, 6, 8])[:3]
        [Segment(start=1, end=3, delta=0), Segment(start=5, end=6, delta=-1), Segment(start=8, end=8, delta=-2)]
    """
    out = []
    run_start = 0
    for i in range(1, len(codes) + 1):
        if i == len(codes) or codes[i] != codes[i - 1] + 1:
            start = codes[run_start]
            out.append(Segment(start, codes[i - 1], first_glyph_id + run_start - start))
            run_start = i
    out.append(END_SEGMENT)
    return out


class CmapFormat4:
    """Segment mapping to delta values."""

    format = 4

    def __init__(self, codes: Sequence[int], language: int = 0) -> None:
        """Build the segments for ``codes``.

        Raises:
            FieldOverflowError: If the codes split into so many segments that
                the subtable length no longer fits its 16-bit field
        """
        self.segments = segments(codes)
        self.language = language
        if self.length > MAX_SUBTABLE_LENGTH:
            raise FieldOverflowError("cmap format 4 length", self.length, MAX_SUBTABLE_LENGTH)

    @property
    def length(self) -> int:
        """Encoded size: a 14-byte header, the pad and four arrays."""
        return 16 + 8 * len(self.segments)

    def lookup(self, code: int) -> GlyphId:
        """Resolve a code the way a reader would; 0 when unmapped."""
        for segment in self.segments:
            if code <= segment.end:
                return segment.lookup(code) or 0
        return 0

    def to_bytes(self) -> bytes:
        seg_count = len(self.segments)
        search = BSearch.from_count(seg_count, 2)
        body = io.BytesIO()
        body.write(u16(search.len))
        body.write(u16(search.search_range))
        body.write(u16(search.entry_selector))
        body.write(u16(search.range_shift))
        body.write(u16_array(s.end for s in self.segments))
        body.write(u16(0))  # reservedPad
        body.write(u16_array(s.start for s in self.segments))
        body.write(u16_array(s.delta % 0x10000 for s in self.segments))
        body.write(u16_array(0 for _ in self.segments))  # idRangeOffsets
        data = body.getvalue()
        return u16(self.format) + u16(6 + len(data)) + u16(self.language) + data


class CmapFormat0:
    """Byte encoding table: one glyph id byte per code 0-255."""

    format = 0

    def __init__(self, codes: Sequence[int], language: int = 0) -> None:
        self.glyph_ids = bytearray(256)
        for glyph_id, code in enumerate(codes, start=1):
            if code > 0xFF or glyph_id > 0xFF:
                raise ValueError(f"format 0 cannot map code {code} to glyph {glyph_id}")
            self.glyph_ids[code] = glyph_id
        self.language = language

    @staticmethod
    def supports(codes: Sequence[int]) -> bool:
        """Check if the codes are all ASCII and their glyph ids fit a byte."""
        return all(code < 0x80 for code in codes) and len(codes) < 0x100

    def lookup(self, code: int) -> GlyphId:
        return self.glyph_ids[code] if code < 256 else 0

    def to_bytes(self) -> bytes:
        return u16(self.format) + u16(262) + u16(self.language) + bytes(self.glyph_ids)


class Cmap(FontTable):
    """Character map with Unicode, Macintosh and Windows encoding records."""

    tag = b"cmap"

    def __init__(self, codes: Sequence[int]) -> None:
        """Build the map for ``codes``, which get glyph ids 1, 2, ... in order.

        Args:
            codes: Distinct character codes in ascending order
        """
        self.codes = list(codes)
        unicode = CmapFormat4(self.codes)
        self.records: dict[tuple[int, int], CmapFormat0 | CmapFormat4] = {
            UNICODE_BMP: unicode,
            WINDOWS_BMP: unicode,
        }
        if CmapFormat0.supports(self.codes):
            self.records[MACINTOSH_ROMAN] = CmapFormat0(self.codes)

    def write(self, writer: BinaryIO) -> None:
        records = sorted(self.records.items())
        writer.write(u16(0))  # version
        writer.write(u16(len(records)))

        offset = 4 + 8 * len(records)
        subtables: dict[int, int] = {}
        blobs = []
        for (platform, encoding), subtable in records:
            if id(subtable) not in subtables:
                data = subtable.to_bytes()
                subtables[id(subtable)] = offset
                blobs.append(data)
                offset += len(data)
            writer.write(u16(platform))
            writer.write(u16(encoding))
            writer.write(u32(subtables[id(subtable)]))
        for data in blobs:
            writer.write(data)
