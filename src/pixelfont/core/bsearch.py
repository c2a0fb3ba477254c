"""Binary-search header fields for directory-style tables.

The sfnt offset table and the format 4 character map both carry the same
four fields, which let a reader binary-search fixed-size records without
computing powers of two itself.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BSearch:
    """Binary-search parameters, each already scaled by the record size.

    Attributes:
        len: Total size of the records in bytes
        search_range: Largest power of two not above the count, times record size
        entry_selector: log2 of that power of two
        range_shift: Records beyond the power of two, times record size
    """

    len: int
    search_range: int
    entry_selector: int
    range_shift: int

    @classmethod
    def from_count(cls, count: int, record_size: int) -> "BSearch":
        """Compute the parameters for ``count`` records of ``record_size`` bytes.

        Args:
            count: Number of records, at least one
            record_size: Size of a single record in bytes

        Returns:
            BSearch instance

        Raises:
            ValueError: If count is not positive

        Examples:
            >>> BSearch.from_count(10, 16)
            BSearch(len=160, search_range=128, entry_selector=3, range_shift=32)
        """
        if count <= 0:
            raise ValueError(f"binary search parameters need at least one record, got {count}")
        entry_selector = count.bit_length() - 1
        power = 1 << entry_selector
        return cls(
            len=count * record_size,
            search_range=power * record_size,
            entry_selector=entry_selector,
            range_shift=(count - power) * record_size,
        )
