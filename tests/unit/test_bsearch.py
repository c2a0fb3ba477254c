"""Unit tests for binary-search header parameters."""

import pytest

from pixelfont.core.bsearch import BSearch


class TestBSearch:
    """Tests for BSearch.from_count."""

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 7, 8, 9, 10, 15, 16, 17, 100, 255, 256, 1000])
    def test_tightest_power_of_two(self, count: int) -> None:
        """Test the search range is the largest power of two not above count."""
        search = BSearch.from_count(count, 1)
        power = search.search_range
        assert power & (power - 1) == 0
        assert power <= count
        assert power * 2 > count
        assert 1 << search.entry_selector == power
        assert search.search_range + search.range_shift == count

    @pytest.mark.parametrize("record_size", [1, 2, 6, 16])
    def test_scaled_by_record_size(self, record_size: int) -> None:
        """Test every size field is multiplied by the record size."""
        search = BSearch.from_count(11, record_size)
        assert search.len == 11 * record_size
        assert search.search_range == 8 * record_size
        assert search.entry_selector == 3
        assert search.range_shift == 3 * record_size

    def test_table_directory_of_ten(self) -> None:
        """Test the offset table fields for ten tables."""
        assert BSearch.from_count(10, 16) == BSearch(160, 128, 3, 32)

    def test_single_record(self) -> None:
        """Test that one record gives a zero selector and no shift."""
        assert BSearch.from_count(1, 2) == BSearch(2, 2, 0, 0)

    @pytest.mark.parametrize("count", [0, -1])
    def test_no_records(self, count: int) -> None:
        """Test that an empty directory is rejected."""
        with pytest.raises(ValueError, match="at least one record"):
            BSearch.from_count(count, 16)
