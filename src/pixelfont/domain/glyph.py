"""Glyph outline and substitution models.

A glyph here is always a simple TrueType glyph: a bounding box plus polygon
contours whose points all lie on the curve.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

GlyphId = int
"""16-bit index into the glyph table. 0 is the missing glyph."""

NOTDEF: GlyphId = 0

Point = tuple[int, int]
Contour = list[Point]


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned bounding box in font units."""

    x_min: int = 0
    y_min: int = 0
    x_max: int = 0
    y_max: int = 0

    @classmethod
    def bounding(cls, points: Iterable[Point]) -> "Rect":
        """Tight bounds of a set of points; empty input gives an all-zero rect."""
        points = list(points)
        if not points:
            return cls()
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return cls(min(xs), min(ys), max(xs), max(ys))

    def union(self, other: "Rect") -> "Rect":
        """Smallest rect containing both rects."""
        return Rect(
            min(self.x_min, other.x_min),
            min(self.y_min, other.y_min),
            max(self.x_max, other.x_max),
            max(self.y_max, other.y_max),
        )

    @property
    def width(self) -> int:
        return self.x_max - self.x_min


@dataclass
class Glyph:
    """A simple glyph with polygon contours.

    Attributes:
        contours: Closed loops of on-curve points, filled area on the right
        rect: Bounding box of all contour points
        instructions: TrueType hinting bytecode (always empty here)
    """

    contours: list[Contour]
    rect: Rect = field(default_factory=Rect)
    instructions: bytes = b""

    @classmethod
    def from_contours(cls, contours: list[Contour]) -> "Glyph":
        """Create a glyph whose rect is the tight bounds of its contours."""
        return cls(contours=contours, rect=Rect.bounding(p for c in contours for p in c))

    def is_empty(self) -> bool:
        """Check if glyph has no outlines (like a space)."""
        return len(self.contours) == 0

    @property
    def point_count(self) -> int:
        return sum(len(contour) for contour in self.contours)

    @property
    def contour_count(self) -> int:
        return len(self.contours)


@dataclass(frozen=True, slots=True)
class Ligature:
    """A substitution of a glyph sequence by a single glyph.

    Attributes:
        pattern: Glyphs to match, in order (at least two)
        replacement: Glyph substituted for the whole pattern
    """

    pattern: tuple[GlyphId, ...]
    replacement: GlyphId

    @property
    def first(self) -> GlyphId:
        return self.pattern[0]
