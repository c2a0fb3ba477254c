"""sfnt container assembly.

Layout of the file written here:

- offset table: version, table count and binary-search fields
- table directory: one 16-byte record per table, ordered by tag
- table data: each table padded with zeros to a four-byte boundary

The directory and the data are written as two interleaved streams through a
:class:`SplitWriter`: after each table is written its record goes into the
directory, then writing resumes after the table. Once all tables are in
place, head.checkSumAdjustment is patched so the whole file sums to
0xB1B0AFBA.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import BinaryIO

from pixelfont.core.bsearch import BSearch
from pixelfont.io.packing import u16, u32
from pixelfont.io.split_writer import SplitWriter
from pixelfont.io.table_writer import TableWriter, calc_checksum
from pixelfont.tables.base import FontTable
from pixelfont.tables.head import CHECKSUM_ADJUSTMENT_OFFSET

logger = logging.getLogger(__name__)

TRUETYPE_VERSION = 0x00010000
OFFSET_TABLE_SIZE = 12
TABLE_RECORD_SIZE = 16
CHECKSUM_MAGIC = 0xB1B0AFBA


@dataclass(frozen=True, slots=True)
class TableRecord:
    """Directory entry for one table."""

    tag: bytes
    checksum: int
    offset: int
    length: int

    def to_bytes(self) -> bytes:
        return self.tag + u32(self.checksum) + u32(self.offset) + u32(self.length)


def offset_table(num_tables: int) -> bytes:
    """The 12-byte header at the start of the file."""
    search = BSearch.from_count(num_tables, TABLE_RECORD_SIZE)
    return (
        u32(TRUETYPE_VERSION)
        + u16(num_tables)
        + u16(search.search_range)
        + u16(search.entry_selector)
        + u16(search.range_shift)
    )


def write_sfnt(
    sink: BinaryIO,
    tables: Iterable[FontTable],
    on_table: Callable[[TableRecord], None] | None = None,
) -> list[TableRecord]:
    """Write tables into an sfnt container.

    Offsets are relative to the sink position at the time of the call, which
    is normally the start of the file.

    Args:
        sink: Seekable binary stream
        tables: Tables to write; their tags must be unique
        on_table: Called with each record once its table is written

    Returns:
        Directory records in file order

    Raises:
        ValueError: If two tables share a tag
        OSError: If the sink fails; the output is then incomplete
    """
    tables = sorted(tables, key=lambda table: table.tag)
    tags = [table.tag for table in tables]
    if len(set(tags)) != len(tags):
        raise ValueError(f"duplicate table tags in {tags}")

    base = sink.tell()
    header = offset_table(len(tables))
    data_start = OFFSET_TABLE_SIZE + TABLE_RECORD_SIZE * len(tables)

    writer = SplitWriter(sink, other_head=base + data_start)
    writer.write(header)

    directory = [header]
    records = []
    for table in tables:
        writer.swap()
        offset = writer.tell() - base
        table_writer = TableWriter(writer)
        table.write(table_writer)
        checksum, length = table_writer.finalize()
        record = TableRecord(table.tag, checksum, offset, length)
        writer.swap()
        writer.write(record.to_bytes())

        directory.append(record.to_bytes())
        records.append(record)
        logger.debug("Wrote %s table: offset=%d length=%d", table.tag.decode("ascii"), offset, length)
        if on_table is not None:
            on_table(record)

    # Leave the stream positioned after the last table
    writer.swap()
    end = writer.tell()

    head = next((record for record in records if record.tag == b"head"), None)
    if head is not None:
        total = calc_checksum(b"".join(directory))
        for record in records:
            total += record.checksum
        adjustment = (CHECKSUM_MAGIC - total) & 0xFFFFFFFF
        sink.seek(base + head.offset + CHECKSUM_ADJUSTMENT_OFFSET)
        sink.write(u32(adjustment))
        sink.seek(end)

    return records
