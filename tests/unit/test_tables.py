"""Unit tests for the fixed-layout tables."""

import struct
from datetime import datetime, timezone

import pytest
from fontTools.ttLib import TTFont, newTable

from pixelfont.domain import Glyph, Rect
from pixelfont.exceptions import FieldOverflowError
from pixelfont.tables.head import Head, font_timestamp
from pixelfont.tables.hmtx import Hhea, HorizontalMetric, Hmtx
from pixelfont.tables.loca import Loca
from pixelfont.tables.maxp import Maxp
from pixelfont.tables.name import Name, NameId, postscript_name
from pixelfont.tables.os2 import Os2
from pixelfont.tables.post import Post, glyph_name, ligature_name

SQUARE = Glyph.from_contours([[(1, 3), (4, 3), (4, 0), (1, 0)]])
EMPTY = Glyph.from_contours([])


def decompile(tag: str, data: bytes, font: TTFont | None = None):
    table = newTable(tag)
    table.decompile(data, font if font is not None else TTFont())
    return table


class TestLoca:
    """Tests for Loca table."""

    def test_short_format(self) -> None:
        """Test small fonts store halved 16-bit offsets."""
        loca = Loca([0, 22, 22, 44])
        assert loca.index_to_loc_format == 0
        assert loca.to_bytes() == struct.pack(">4H", 0, 11, 11, 22)

    def test_long_format(self) -> None:
        """Test offsets past 0xFFFF switch to 32-bit entries."""
        loca = Loca([0, 0x10000])
        assert loca.index_to_loc_format == 1
        assert loca.to_bytes() == struct.pack(">2I", 0, 0x10000)

    def test_boundary(self) -> None:
        """Test 0xFFFF still fits the short format."""
        assert Loca([0, 0xFFFF]).index_to_loc_format == 0


class TestHead:
    """Tests for Head table."""

    def test_timestamp_epoch(self) -> None:
        """Test the 1904 epoch and naive datetimes as UTC."""
        assert font_timestamp(datetime(1904, 1, 1, tzinfo=timezone.utc)) == 0
        assert font_timestamp(datetime(1904, 1, 2)) == 86400
        assert font_timestamp(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2082844800

    def test_fields(self) -> None:
        """Test fontTools reads back the header fields."""
        moment = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        head = Head(
            units_per_em=16,
            created=moment,
            modified=moment,
            bounds=Rect(0, -1, 5, 7),
            index_to_loc_format=0,
            lowest_rec_ppem=8,
        )
        data = head.to_bytes()
        assert len(data) == 54
        table = decompile("head", data)
        assert table.magicNumber == 0x5F0F3CF5
        assert table.unitsPerEm == 16
        assert (table.xMin, table.yMin, table.xMax, table.yMax) == (0, -1, 5, 7)
        assert table.lowestRecPPEM == 8
        assert table.indexToLocFormat == 0
        assert table.checkSumAdjustment == 0
        assert table.created == font_timestamp(moment)


class TestHmtx:
    """Tests for Hmtx and Hhea tables."""

    def test_monospace(self) -> None:
        """Test side bearings come from glyph bounds."""
        hmtx = Hmtx.monospace(8, [EMPTY, SQUARE])
        assert hmtx.metrics == [HorizontalMetric(8, 0), HorizontalMetric(8, 1)]
        assert hmtx.number_of_h_metrics == 1
        assert hmtx.to_bytes() == struct.pack(">Hhh", 8, 0, 1)

    def test_number_of_h_metrics(self) -> None:
        """Test only trailing equal advances are collapsed."""
        hmtx = Hmtx(
            [
                HorizontalMetric(5, 0),
                HorizontalMetric(8, 0),
                HorizontalMetric(8, 1),
                HorizontalMetric(8, 2),
            ]
        )
        assert hmtx.number_of_h_metrics == 2
        assert hmtx.to_bytes() == struct.pack(">HhHhhh", 5, 0, 8, 0, 1, 2)

    def test_empty(self) -> None:
        """Test an empty metrics table is refused."""
        with pytest.raises(ValueError):
            Hmtx([])

    def test_hhea_extremes(self) -> None:
        """Test hhea extremes ignore empty glyphs."""
        glyphs = [EMPTY, SQUARE]
        hmtx = Hmtx.monospace(8, glyphs)
        hhea = Hhea(7, -1, 0, glyphs, hmtx)
        data = hhea.to_bytes()
        assert len(data) == 36
        table = decompile("hhea", data)
        assert table.ascent == 7
        assert table.descent == -1
        assert table.advanceWidthMax == 8
        assert table.minLeftSideBearing == 1
        assert table.minRightSideBearing == 4
        assert table.xMaxExtent == 4
        assert table.numberOfHMetrics == 1


class TestMaxp:
    """Tests for Maxp table."""

    def test_layout(self) -> None:
        """Test the version 1.0 table reads back."""
        data = Maxp(num_glyphs=3, max_points=12, max_contours=2).to_bytes()
        assert len(data) == 32
        table = decompile("maxp", data)
        assert table.tableVersion == 0x00010000
        assert table.numGlyphs == 3
        assert table.maxPoints == 12
        assert table.maxContours == 2
        assert table.maxZones == 2


class TestName:
    """Tests for Name table."""

    def test_postscript_name(self) -> None:
        """Test spaces and reserved characters are removed."""
        assert postscript_name("My Pixel (Font)", "Bold") == "MyPixelFont-Bold"

    def test_records(self) -> None:
        """Test both platforms carry every name."""
        table = decompile("name", Name.for_font("Pixel", "Regular", 1.0).to_bytes())
        assert table.getName(NameId.FAMILY, 3, 1, 0x409).toUnicode() == "Pixel"
        assert table.getName(NameId.FAMILY, 1, 0, 0).toUnicode() == "Pixel"
        assert table.getName(NameId.FULL_NAME, 3, 1, 0x409).toUnicode() == "Pixel Regular"
        assert table.getName(NameId.VERSION, 3, 1, 0x409).toUnicode() == "Version 1.000"
        assert table.getName(NameId.POSTSCRIPT, 3, 1, 0x409).toUnicode() == "Pixel-Regular"
        assert len(table.names) == 12

    def test_records_sorted(self) -> None:
        """Test records are ordered by platform then name id."""
        name = Name.for_font("Pixel", "Regular", 1.0)
        keys = [(r.platform_id, r.encoding_id, r.language_id, r.name_id) for r in name.records]
        assert keys == sorted(keys)

    def test_storage_limit(self) -> None:
        """Test names too long for 16-bit string offsets are refused."""
        with pytest.raises(FieldOverflowError, match="name string storage"):
            Name.for_font("F" * 20000, "Regular", 1.0)


class TestOs2:
    """Tests for Os2 table."""

    def test_layout(self) -> None:
        """Test the version 4 table reads back."""
        os2 = Os2(
            units_per_em=16,
            avg_char_width=8,
            ascender=7,
            descender=-1,
            line_gap=0,
            x_height=5,
            cap_height=7,
            first_char_index=0x61,
            last_char_index=0x7A,
            max_context=2,
            vendor_id="PXFT",
        )
        data = os2.to_bytes()
        assert len(data) == 96
        table = decompile("OS/2", data)
        assert table.version == 4
        assert table.xAvgCharWidth == 8
        assert table.achVendID == "PXFT"
        assert table.usFirstCharIndex == 0x61
        assert table.usLastCharIndex == 0x7A
        assert table.usWinAscent == 7
        assert table.usWinDescent == 1
        assert table.sxHeight == 5
        assert table.sCapHeight == 7
        assert table.usMaxContext == 2


class TestPost:
    """Tests for Post table and glyph naming."""

    def test_glyph_names(self) -> None:
        """Test Adobe Glyph List names with a uniXXXX fallback."""
        assert glyph_name("a") == "a"
        assert glyph_name("&") == "ampersand"
        assert glyph_name("\u4e00") == "uni4E00"
        assert ligature_name("fi") == "f_i"

    def test_standard_and_custom_names(self) -> None:
        """Test standard names use indices and others follow as Pascal strings."""
        data = Post([".notdef", "a", "a_b"]).to_bytes()
        header, rest = data[:32], data[32:]
        assert struct.unpack(">I", header[:4])[0] == 0x00020000
        assert struct.unpack(">4H", rest[:8]) == (3, 0, 68, 258)
        assert rest[8:] == b"\x03a_b"

    def test_name_length_limit(self) -> None:
        """Test a name longer than a Pascal string can hold is refused."""
        assert len(Post([".notdef", "x" * 255]).to_bytes()) == 32 + 2 + 4 + 256
        with pytest.raises(FieldOverflowError) as excinfo:
            Post([".notdef", "x" * 256])
        assert excinfo.value.value == 256
