"""Binary output layer for pixelfont.

This module handles everything that touches bytes on the way out, plus the
glyph source files on the way in.

Key responsibilities:
- Checksum tables while streaming them
- Build offset-based subtables without a second layout pass
- Interleave the table directory with table data
- Load JSON glyph sources

Key classes:
- TableWriter: Checksumming table sink
- SubtableBuffer: Header/body buffer with offset marking
- SplitWriter: Two-headed seekable writer
- GlyphSource: Parsed glyph source file
"""

from pixelfont.io.sfnt import TableRecord, write_sfnt
from pixelfont.io.source import GlyphSource, load_source
from pixelfont.io.split_writer import SplitWriter
from pixelfont.io.subtable import SubtableBuffer
from pixelfont.io.table_writer import TableWriter, calc_checksum

__all__ = [
    "GlyphSource",
    "SplitWriter",
    "SubtableBuffer",
    "TableRecord",
    "TableWriter",
    "calc_checksum",
    "load_source",
    "write_sfnt",
]
