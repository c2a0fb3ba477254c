"""sfnt table encoders.

Each table class serializes one TrueType table. The core encoders are glyf
(outlines), cmap (character map) and GSUB (ligatures). The rest are direct
field serializers whose values are derived from the glyph set.
"""

from pixelfont.tables.base import FontTable
from pixelfont.tables.cmap import Cmap, Segment, segments
from pixelfont.tables.glyf import Glyf, compress_flags, encode_glyph, glyph_from_sprite
from pixelfont.tables.gsub import Gsub, LigatureSubst
from pixelfont.tables.head import Head
from pixelfont.tables.hmtx import Hhea, Hmtx
from pixelfont.tables.loca import Loca
from pixelfont.tables.maxp import Maxp
from pixelfont.tables.name import Name
from pixelfont.tables.os2 import Os2
from pixelfont.tables.post import Post

__all__ = [
    "Cmap",
    "FontTable",
    "Glyf",
    "Gsub",
    "Head",
    "Hhea",
    "Hmtx",
    "LigatureSubst",
    "Loca",
    "Maxp",
    "Name",
    "Os2",
    "Post",
    "Segment",
    "compress_flags",
    "encode_glyph",
    "glyph_from_sprite",
    "segments",
]
