"""Unit tests for the big-endian field packers."""

import struct

import pytest

from pixelfont.io import packing
from pixelfont.io.packing import fixed, i16, i64, tag, u16, u16_array


class TestPacking:
    """Tests for the packing helpers."""

    def test_integers_are_big_endian(self) -> None:
        """Test multi-byte fields put the high byte first."""
        assert u16(0x1234) == b"\x12\x34"
        assert i16(-2) == b"\xff\xfe"
        assert i64(-1) == b"\xff" * 8

    def test_u16_array(self) -> None:
        """Test arrays pack each value as u16."""
        assert u16_array(iter([1, 0xFFFF])) == b"\x00\x01\xff\xff"
        assert u16_array([]) == b""

    def test_fixed(self) -> None:
        """Test 16.16 fixed point, including negative values."""
        assert fixed(1.0) == b"\x00\x01\x00\x00"
        assert fixed(-1.5) == struct.pack(">i", -0x18000)

    def test_out_of_range(self) -> None:
        """Test values outside the field raise struct.error."""
        with pytest.raises(struct.error):
            u16(0x10000)

    def test_tag(self) -> None:
        """Test tags must be exactly four bytes."""
        assert tag("OS/2") == b"OS/2"
        assert tag(b"liga") == b"liga"
        with pytest.raises(ValueError, match="4 bytes"):
            tag("cmp")

    def test_public_helpers(self) -> None:
        """Test only the packers the encoders use are exported."""
        public = sorted(
            name for name, value in vars(packing).items() if callable(value) and not name.startswith("_")
        )
        assert public == ["fixed", "i16", "i64", "tag", "u16", "u16_array", "u32", "u8"]
