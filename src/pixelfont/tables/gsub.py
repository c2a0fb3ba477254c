"""Glyph substitution table ('GSUB') carrying standard ligatures.

The table holds a single lookup of type 4 (ligature substitution), registered
under the 'liga' feature of the default script. Every level of the
script/feature/lookup hierarchy is offset-based, so each one is assembled in a
:class:`SubtableBuffer`.

https://learn.microsoft.com/en-us/typography/opentype/spec/gsub
"""

import io
from collections.abc import Iterable
from itertools import groupby
from typing import BinaryIO

from pixelfont.domain import GlyphId, Ligature
from pixelfont.exceptions import LigatureError
from pixelfont.io.packing import tag, u16, u16_array, u32
from pixelfont.io.subtable import SubtableBuffer
from pixelfont.tables.base import FontTable

LIGATURE_SUBST = 4
DEFAULT_SCRIPT = "DFLT"
LIGATURE_FEATURE = "liga"
NO_REQUIRED_FEATURE = 0xFFFF


def sort_ligatures(ligatures: Iterable[Ligature]) -> list[Ligature]:
    """Order ligatures for lookup: grouped by first glyph, longest first.

    A reader applies the first ligature in a set that matches, so a longer
    pattern has to come before any shorter one sharing its prefix. The sort is
    stable, so ligatures that tie keep their input order.
    """
    return sorted(ligatures, key=lambda lig: (lig.first, -len(lig.pattern)))


def coverage_format1(glyph_ids: list[GlyphId]) -> bytes:
    """Coverage table listing ``glyph_ids``, which must be sorted."""
    return u16(1) + u16(len(glyph_ids)) + u16_array(glyph_ids)


class LigatureSubst:
    """Ligature substitution subtable, format 1.

    Attributes:
        ligatures: Ligatures in lookup order
        ligature_sets: Ligatures grouped by first glyph, in coverage order
    """

    def __init__(self, ligatures: Iterable[Ligature]) -> None:
        """Build the subtable.

        Args:
            ligatures: Ligatures in any order

        Raises:
            LigatureError: If a pattern has fewer than two glyphs
        """
        ligatures = list(ligatures)
        for ligature in ligatures:
            if len(ligature.pattern) < 2:
                raise LigatureError(f"pattern {ligature.pattern} needs at least two glyphs")
        self.ligatures = sort_ligatures(ligatures)
        self.ligature_sets = [list(group) for _, group in groupby(self.ligatures, key=lambda lig: lig.first)]

    @property
    def coverage(self) -> list[GlyphId]:
        return [ligature_set[0].first for ligature_set in self.ligature_sets]

    def write(self, writer: BinaryIO) -> None:
        set_count = len(self.ligature_sets)
        subtable = SubtableBuffer(body_offset=6 + 2 * set_count)
        subtable.header.write(u16(1))  # substFormat
        subtable.header.mark_offset()
        subtable.body.write(coverage_format1(self.coverage))
        subtable.header.write(u16(set_count))

        for ligature_set in self.ligature_sets:
            subtable.header.mark_offset()
            lig_count = len(ligature_set)
            set_buffer = SubtableBuffer(body_offset=2 + 2 * lig_count)
            set_buffer.header.write(u16(lig_count))
            for ligature in ligature_set:
                set_buffer.header.mark_offset()
                set_buffer.body.write(u16(ligature.replacement))
                set_buffer.body.write(u16(len(ligature.pattern)))
                set_buffer.body.write(u16_array(ligature.pattern[1:]))
            set_buffer.finalize(subtable.body)

        subtable.finalize(writer)


def _write_script_list(writer: BinaryIO) -> None:
    scripts = SubtableBuffer(body_offset=2 + 6)
    scripts.header.write(u16(1))
    scripts.header.write(tag(DEFAULT_SCRIPT))
    scripts.header.mark_offset()

    script = SubtableBuffer(body_offset=4)
    script.header.mark_offset()  # defaultLangSys
    script.header.write(u16(0))  # langSysCount
    script.body.write(u16(0))  # lookupOrderOffset
    script.body.write(u16(NO_REQUIRED_FEATURE))
    script.body.write(u16(1))
    script.body.write(u16(0))  # feature index
    script.finalize(scripts.body)

    scripts.finalize(writer)


def _write_feature_list(writer: BinaryIO) -> None:
    features = SubtableBuffer(body_offset=2 + 6)
    features.header.write(u16(1))
    features.header.write(tag(LIGATURE_FEATURE))
    features.header.mark_offset()
    features.body.write(u16(0))  # featureParamsOffset
    features.body.write(u16(1))
    features.body.write(u16(0))  # lookup index
    features.finalize(writer)


def _write_lookup_list(writer: BinaryIO, subst: LigatureSubst) -> None:
    lookups = SubtableBuffer(body_offset=2 + 2)
    lookups.header.write(u16(1))
    lookups.header.mark_offset()

    lookup = SubtableBuffer(body_offset=6 + 2)
    lookup.header.write(u16(LIGATURE_SUBST))
    lookup.header.write(u16(0))  # lookupFlag
    lookup.header.write(u16(1))
    lookup.header.mark_offset()
    subst.write(lookup.body)
    lookup.finalize(lookups.body)

    lookups.finalize(writer)


class Gsub(FontTable):
    """GSUB version 1.0 with one 'liga' ligature lookup."""

    tag = b"GSUB"

    def __init__(self, ligatures: Iterable[Ligature]) -> None:
        """Build and encode the table.

        Raises:
            LigatureError: If a pattern has fewer than two glyphs
            OffsetOverflowError: If the ligatures need offsets beyond 0xFFFF
        """
        self.subst = LigatureSubst(ligatures)
        self._data = self._encode()

    @property
    def max_context(self) -> int:
        """Longest pattern, for OS/2.usMaxContext."""
        return max((len(lig.pattern) for lig in self.subst.ligatures), default=0)

    def _encode(self) -> bytes:
        out = io.BytesIO()
        table = SubtableBuffer(body_offset=10)
        table.header.write(u32(0x00010000))  # version 1.0
        table.header.mark_offset()
        _write_script_list(table.body)
        table.header.mark_offset()
        _write_feature_list(table.body)
        table.header.mark_offset()
        _write_lookup_list(table.body, self.subst)
        table.finalize(out)
        return out.getvalue()

    def write(self, writer: BinaryIO) -> None:
        writer.write(self._data)
