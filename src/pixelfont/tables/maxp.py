"""Maximum profile table ('maxp'), version 1.0."""

from dataclasses import dataclass
from typing import BinaryIO

from pixelfont.io.packing import u16, u32
from pixelfont.tables.base import FontTable


@dataclass
class Maxp(FontTable):
    """Glyph count and the per-glyph maxima a rasterizer allocates for.

    Component fields stay at zero because only simple glyphs are produced.
    """

    tag = b"maxp"

    num_glyphs: int
    max_points: int = 0
    max_contours: int = 0
    max_component_points: int = 0
    max_component_contours: int = 0
    max_zones: int = 2
    max_twilight_points: int = 0
    max_storage: int = 0
    max_function_defs: int = 0
    max_instruction_defs: int = 0
    max_stack_elements: int = 0
    max_size_of_instructions: int = 0
    max_component_elements: int = 0
    max_component_depth: int = 0

    def write(self, writer: BinaryIO) -> None:
        writer.write(u32(0x00010000))
        for value in (
            self.num_glyphs,
            self.max_points,
            self.max_contours,
            self.max_component_points,
            self.max_component_contours,
            self.max_zones,
            self.max_twilight_points,
            self.max_storage,
            self.max_function_defs,
            self.max_instruction_defs,
            self.max_stack_elements,
            self.max_size_of_instructions,
            self.max_component_elements,
            self.max_component_depth,
        ):
            writer.write(u16(value))
