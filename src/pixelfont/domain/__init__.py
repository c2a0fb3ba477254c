"""Domain models for pixelfont.

This module contains the plain data the compiler works on. All models are
independent of the binary table encoders:

- Sprite: An immutable packed monochrome bitmap
- Rect: A bounding box in font units
- Glyph: A simple glyph made of polygon contours
- Ligature: A glyph-sequence substitution
"""

from pixelfont.domain.glyph import NOTDEF, Contour, Glyph, GlyphId, Ligature, Point, Rect
from pixelfont.domain.sprite import Sprite

__all__: list[str] = [
    "NOTDEF",
    # Aliases
    "Contour",
    "GlyphId",
    "Point",
    # Core types
    "Glyph",
    "Ligature",
    "Rect",
    "Sprite",
]
