"""pixelfont - Compile pixel bitmaps into TrueType fonts.

pixelfont traces monochrome glyph bitmaps into polygon outlines and writes them,
together with a character map and optional ligatures, into a TrueType font file.
No font editor or existing font is involved.

Example:
    from pixelfont import Sprite, bitmap_font

    notdef = Sprite.from_int(8, 8, 0xFF818181818181FF)
    a = Sprite.from_int(8, 8, 0x0000708888986800)
    bitmap_font(8, 8, notdef, [("a", a)]).save("tiny.ttf")
"""

from pixelfont.core.compiler import Font, FontCompiler, bitmap_font
from pixelfont.domain.sprite import Sprite

__version__ = "0.1.0"

__all__ = ["Font", "FontCompiler", "Sprite", "__version__", "bitmap_font"]
