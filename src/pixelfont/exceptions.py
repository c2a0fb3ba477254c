"""Exception hierarchy for pixelfont."""


class PixelFontError(Exception):
    """Base exception for all pixelfont errors."""

    pass


class EncodingRangeError(PixelFontError):
    """A value does not fit the field the font format reserves for it."""

    pass


class CharacterRangeError(EncodingRangeError):
    """Character code outside the 16-bit code space of the character map."""

    def __init__(self, char: str) -> None:
        self.char = char
        self.code = ord(char) if len(char) == 1 else None
        super().__init__(f"Character {char!r} cannot be encoded in a 16-bit character map")


class CoordinateRangeError(EncodingRangeError):
    """Coordinate delta outside the signed 16-bit range of the glyph table."""

    def __init__(self, delta: int) -> None:
        self.delta = delta
        super().__init__(f"Coordinate delta {delta} does not fit in a signed 16-bit value")


class OffsetOverflowError(EncodingRangeError):
    """Subtable offset larger than a 16-bit offset field can hold."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"Subtable offset {offset} does not fit in a 16-bit offset field")


class FieldOverflowError(EncodingRangeError):
    """Size or count too large for the field that stores it."""

    def __init__(self, field: str, value: int, limit: int) -> None:
        self.field = field
        self.value = value
        self.limit = limit
        super().__init__(f"{field} is {value}, the font format allows at most {limit}")


class GlyphError(PixelFontError):
    """Errors related to the glyph set supplied by the caller."""

    pass


class MissingCharacterError(GlyphError):
    """Ligature references a character that has no glyph in the font."""

    def __init__(self, sequence: str, char: str) -> None:
        self.sequence = sequence
        self.char = char
        super().__init__(f"Ligature {sequence!r} uses {char!r}, which has no glyph in the font")


class LigatureError(GlyphError):
    """Ligature pattern that cannot be encoded."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid ligature: {reason}")


class ContourError(PixelFontError):
    """Edge set that does not close into loops.

    Edges produced from a pixel grid always close, so this signals a bug in
    the extraction rather than bad input.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class FontSaveError(PixelFontError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class SourceFileError(PixelFontError):
    """Error loading a glyph source file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load glyph source '{path}': {reason}")
