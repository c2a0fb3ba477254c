"""Core algorithms for pixelfont.

This module contains the parts of the compiler that are not plain byte
layout:

- Binary-search header parameters shared by directory-style tables
- Contour extraction from packed bitmaps
- The compilation pipeline from bitmaps to a finished font

Key classes:
- BSearch: Binary-search header fields
- FontCompiler: Validates input and builds every table
- Font: A compiled font, ready to write or save
"""

from pixelfont.core.bsearch import BSearch
from pixelfont.core.compiler import Font, FontCompiler, bitmap_font
from pixelfont.core.contours import Direction, Edge, boundary_edges, find_contours

__all__ = [
    # Search parameters
    "BSearch",
    # Contours
    "Direction",
    "Edge",
    "boundary_edges",
    "find_contours",
    # Compilation
    "Font",
    "FontCompiler",
    "bitmap_font",
]
