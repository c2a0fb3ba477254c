"""Packed monochrome bitmaps.

A sprite stores one bit per pixel, most significant bit first, in a single
linear run: pixel (x, y) is bit number ``y * width + x`` with row 0 at the
top. Rows are not padded to byte boundaries.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Sprite:
    """An immutable packed bitmap.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: Bit-packed pixels, MSB first, row-major without row padding
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Sprite dimensions must be non-negative, got {self.width}x{self.height}")
        needed = (self.width * self.height + 7) // 8
        if len(self.data) < needed:
            raise ValueError(
                f"Sprite of {self.width}x{self.height} needs {needed} bytes, got {len(self.data)}"
            )
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_int(cls, width: int, height: int, value: int) -> "Sprite":
        """Build a sprite from an integer holding the packed bits big-endian.

        ``Sprite.from_int(8, 8, 0x0000708888986800)`` reads the first byte
        (0x00) as the top row.

        Args:
            width: Width in pixels
            height: Height in pixels
            value: Packed bitmap as a non-negative integer

        Returns:
            Sprite instance
        """
        size = (width * height + 7) // 8
        return cls(width, height, value.to_bytes(size, "big"))

    @classmethod
    def from_rows(cls, rows: Iterable[str], filled: str = "#") -> "Sprite":
        """Build a sprite from text rows, top row first.

        Args:
            rows: Equal-length strings, one per pixel row
            filled: Character marking a filled pixel; anything else is empty

        Returns:
            Sprite instance

        Raises:
            ValueError: If the rows differ in length
        """
        rows = list(rows)
        width = len(rows[0]) if rows else 0
        bits = 0
        for row in rows:
            if len(row) != width:
                raise ValueError("All sprite rows must have the same length")
            for char in row:
                bits = (bits << 1) | (char == filled)
        count = width * len(rows)
        padding = -count % 8
        return cls.from_int(width, len(rows), bits << padding)

    def __getitem__(self, pos: tuple[int, int]) -> bool:
        """Return whether the pixel at ``(x, y)`` is filled.

        Raises:
            IndexError: If the position lies outside the sprite
        """
        x, y = pos
        if not 0 <= x < self.width:
            raise IndexError(f"x: {x} must be in 0..{self.width}")
        if not 0 <= y < self.height:
            raise IndexError(f"y: {y} must be in 0..{self.height}")
        idx = y * self.width + x
        return bool(self.data[idx // 8] & (0x80 >> (idx % 8)))

    def filled(self) -> Iterator[tuple[int, int]]:
        """Yield the ``(x, y)`` position of every filled pixel, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                if self[x, y]:
                    yield x, y

    def is_blank(self) -> bool:
        """Check if no pixel is filled."""
        return next(self.filled(), None) is None
