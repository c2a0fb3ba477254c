"""Tests for domain models to verify they work correctly."""

import pytest

from pixelfont.domain import NOTDEF, Glyph, Ligature, Rect, Sprite


class TestSprite:
    """Tests for Sprite class."""

    def test_from_int_reads_top_row_first(self) -> None:
        """Test that the most significant byte is the top row."""
        sprite = Sprite.from_int(8, 2, 0x8001)
        assert sprite[0, 0]
        assert not sprite[1, 0]
        assert sprite[7, 1]
        assert not sprite[0, 1]

    def test_bits_are_msb_first(self) -> None:
        """Test that the leftmost pixel is the most significant bit."""
        sprite = Sprite(8, 1, bytes([0b01000000]))
        assert [sprite[x, 0] for x in range(8)] == [False, True] + [False] * 6

    def test_rows_are_not_padded(self) -> None:
        """Test that a row can continue in the middle of a byte."""
        # 3x3 with the center pixel filled is bit 4
        sprite = Sprite(3, 3, bytes([0b00001000, 0]))
        assert list(sprite.filled()) == [(1, 1)]

    def test_from_rows(self) -> None:
        """Test building a sprite from text rows."""
        sprite = Sprite.from_rows(["#..", ".#.", "..#"])
        assert sprite.width == 3
        assert sprite.height == 3
        assert list(sprite.filled()) == [(0, 0), (1, 1), (2, 2)]

    def test_from_rows_uneven(self) -> None:
        """Test that rows of different lengths are rejected."""
        with pytest.raises(ValueError, match="same length"):
            Sprite.from_rows(["##", "#"])

    def test_index_out_of_range(self) -> None:
        """Test that reading outside the sprite raises IndexError."""
        sprite = Sprite.from_int(8, 8, 0)
        with pytest.raises(IndexError):
            sprite[8, 0]
        with pytest.raises(IndexError):
            sprite[0, 8]
        with pytest.raises(IndexError):
            sprite[-1, 0]

    def test_data_too_short(self) -> None:
        """Test that a sprite needs enough bytes for its pixels."""
        with pytest.raises(ValueError, match="needs 8 bytes"):
            Sprite(8, 8, b"\0" * 7)

    def test_data_coerced_to_bytes(self) -> None:
        """Test that mutable input cannot change the sprite afterwards."""
        data = bytearray(b"\x80")
        sprite = Sprite(1, 1, data)
        data[0] = 0
        assert sprite[0, 0]

    def test_sprite_immutable(self) -> None:
        """Test that sprite is immutable."""
        sprite = Sprite.from_int(1, 1, 1)
        with pytest.raises(AttributeError):
            sprite.width = 2  # type: ignore[misc]

    def test_is_blank(self) -> None:
        """Test blank detection."""
        assert Sprite.from_int(8, 8, 0).is_blank()
        assert not Sprite.from_int(8, 8, 1).is_blank()


class TestRect:
    """Tests for Rect class."""

    def test_bounding(self) -> None:
        """Test tight bounds of a point set."""
        rect = Rect.bounding([(1, 5), (4, -2), (0, 3)])
        assert rect == Rect(0, -2, 4, 5)
        assert rect.width == 4

    def test_bounding_empty(self) -> None:
        """Test that no points give an all-zero rect."""
        assert Rect.bounding([]) == Rect()

    def test_union(self) -> None:
        """Test union of two rects."""
        assert Rect(0, 0, 2, 2).union(Rect(1, -1, 5, 1)) == Rect(0, -1, 5, 2)


class TestGlyph:
    """Tests for Glyph class."""

    def test_from_contours(self) -> None:
        """Test that the rect covers every contour."""
        glyph = Glyph.from_contours(
            [
                [(0, 1), (1, 1), (1, 0), (0, 0)],
                [(3, 4), (5, 4), (5, 2), (3, 2)],
            ]
        )
        assert glyph.rect == Rect(0, 0, 5, 4)
        assert glyph.contour_count == 2
        assert glyph.point_count == 8
        assert not glyph.is_empty()

    def test_empty_glyph(self) -> None:
        """Test a glyph without outlines."""
        glyph = Glyph.from_contours([])
        assert glyph.is_empty()
        assert glyph.rect == Rect()
        assert glyph.point_count == 0
        assert glyph.instructions == b""


class TestLigature:
    """Tests for Ligature class."""

    def test_first(self) -> None:
        """Test first glyph of the pattern."""
        ligature = Ligature((3, 1, 2), 7)
        assert ligature.first == 3
        assert ligature.replacement == 7

    def test_notdef_is_zero(self) -> None:
        """Test that the missing glyph id is 0."""
        assert NOTDEF == 0
