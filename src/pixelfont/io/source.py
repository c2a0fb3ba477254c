"""Glyph source files.

A source file is JSON describing a bitmap font::

    {
        "width": 8,
        "height": 8,
        "notdef": "ff818181818181ff",
        "glyphs": {"a": "0000708888986800", "b": "8080f0888888f000"},
        "ligatures": {"ab": "..."}
    }

Every bitmap is a hex string holding the packed pixels big-endian, exactly
as :meth:`Sprite.from_int` reads them.
"""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from pixelfont.domain import Sprite
from pixelfont.exceptions import SourceFileError


def _check_hex(value: str) -> str:
    try:
        int(value, 16)
    except ValueError:
        raise ValueError(f"not a hex bitmap: {value!r}") from None
    return value


class GlyphSource(BaseModel):
    """Parsed glyph source file."""

    width: int = Field(gt=0, le=255, description="Cell width in pixels")
    height: int = Field(gt=0, le=255, description="Cell height in pixels")
    notdef: str = Field(description="Bitmap of the missing-glyph box")
    glyphs: dict[str, str] = Field(default_factory=dict, description="Character to bitmap")
    ligatures: dict[str, str] = Field(default_factory=dict, description="Character sequence to bitmap")

    @field_validator("notdef")
    @classmethod
    def _notdef_hex(cls, value: str) -> str:
        return _check_hex(value)

    @field_validator("glyphs")
    @classmethod
    def _glyphs_valid(cls, value: dict[str, str]) -> dict[str, str]:
        for char, bitmap in value.items():
            if len(char) != 1:
                raise ValueError(f"glyph keys must be single characters, got {char!r}")
            _check_hex(bitmap)
        return value

    @field_validator("ligatures")
    @classmethod
    def _ligatures_valid(cls, value: dict[str, str]) -> dict[str, str]:
        for sequence, bitmap in value.items():
            if len(sequence) < 2:
                raise ValueError(f"ligature keys need at least two characters, got {sequence!r}")
            _check_hex(bitmap)
        return value

    @model_validator(mode="after")
    def _bitmaps_fit(self) -> "GlyphSource":
        limit = 1 << (self.width * self.height)
        bitmaps = [self.notdef, *self.glyphs.values(), *self.ligatures.values()]
        for bitmap in bitmaps:
            if int(bitmap, 16) >= limit:
                raise ValueError(f"bitmap {bitmap!r} has more than {self.width}x{self.height} pixels")
        return self

    def sprite(self, bitmap: str) -> Sprite:
        return Sprite.from_int(self.width, self.height, int(bitmap, 16))

    def notdef_sprite(self) -> Sprite:
        return self.sprite(self.notdef)

    def glyph_sprites(self) -> list[tuple[str, Sprite]]:
        return [(char, self.sprite(bitmap)) for char, bitmap in self.glyphs.items()]

    def ligature_sprites(self) -> list[tuple[str, Sprite]]:
        return [(sequence, self.sprite(bitmap)) for sequence, bitmap in self.ligatures.items()]


def load_source(path: Path) -> GlyphSource:
    """Load and validate a glyph source file.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed source

    Raises:
        SourceFileError: If the file cannot be read or is invalid
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceFileError(str(path), e.strerror or str(e)) from e
    try:
        return GlyphSource.model_validate_json(text)
    except ValidationError as e:
        raise SourceFileError(str(path), str(e)) from e
