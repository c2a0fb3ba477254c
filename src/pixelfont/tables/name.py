"""Naming table ('name'), format 0."""

import io
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

from pixelfont.exceptions import FieldOverflowError
from pixelfont.io.packing import u16
from pixelfont.tables.base import FontTable


class NameId(IntEnum):
    COPYRIGHT = 0
    FAMILY = 1
    SUBFAMILY = 2
    UNIQUE_ID = 3
    FULL_NAME = 4
    VERSION = 5
    POSTSCRIPT = 6


# (platform, encoding, language)
MACINTOSH_ENGLISH = (1, 0, 0)
WINDOWS_ENGLISH_US = (3, 1, 0x409)

RECORD_SIZE = 12
MAX_STORAGE = 0xFFFF


@dataclass(frozen=True, slots=True)
class NameRecord:
    platform_id: int
    encoding_id: int
    language_id: int
    name_id: int
    text: str

    def encode(self) -> bytes:
        """String bytes in the platform's encoding."""
        if self.platform_id == 1:
            return self.text.encode("mac_roman", errors="replace")
        return self.text.encode("utf-16-be")


def postscript_name(family: str, style: str) -> str:
    """PostScript name: printable ASCII without spaces, at most 63 characters."""
    allowed = (c for c in f"{family}-{style}" if 33 <= ord(c) <= 126 and c not in "[](){}<>/%")
    return "".join(allowed)[:63]


class Name(FontTable):
    """Family, style and version strings for Macintosh and Windows."""

    tag = b"name"

    def __init__(self, names: dict[NameId, str]) -> None:
        self.records = sorted(
            (
                NameRecord(platform, encoding, language, name_id, text)
                for platform, encoding, language in (MACINTOSH_ENGLISH, WINDOWS_ENGLISH_US)
                for name_id, text in names.items()
            ),
            key=lambda r: (r.platform_id, r.encoding_id, r.language_id, r.name_id),
        )
        storage = sum(len(record.encode()) for record in self.records)
        if storage > MAX_STORAGE:
            raise FieldOverflowError("name string storage", storage, MAX_STORAGE)

    @classmethod
    def for_font(cls, family: str, style: str, version: float) -> "Name":
        """Standard name set for a family and style."""
        version_string = f"Version {version:.3f}"
        return cls(
            {
                NameId.FAMILY: family,
                NameId.SUBFAMILY: style,
                NameId.UNIQUE_ID: f"{version_string};{postscript_name(family, style)}",
                NameId.FULL_NAME: f"{family} {style}",
                NameId.VERSION: version_string,
                NameId.POSTSCRIPT: postscript_name(family, style),
            }
        )

    def write(self, writer: BinaryIO) -> None:
        count = len(self.records)
        writer.write(u16(0))  # format
        writer.write(u16(count))
        writer.write(u16(6 + count * RECORD_SIZE))  # storage offset

        storage = io.BytesIO()
        for record in self.records:
            data = record.encode()
            writer.write(u16(record.platform_id))
            writer.write(u16(record.encoding_id))
            writer.write(u16(record.language_id))
            writer.write(u16(record.name_id))
            writer.write(u16(len(data)))
            writer.write(u16(storage.tell()))
            storage.write(data)
        writer.write(storage.getvalue())
