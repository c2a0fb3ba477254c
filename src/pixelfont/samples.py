"""Built-in sample glyphs: a lowercase alphabet in an 8x8 cell."""

from pixelfont.domain import Sprite

SAMPLE_WIDTH = 8
SAMPLE_HEIGHT = 8

# Hollow box for the missing glyph
SAMPLE_NOTDEF = 0x00FC84848484FC00

SAMPLE_GLYPHS: dict[str, int] = {
    "a": 0x0000708888986800,
    "b": 0x8080F0888888F000,
    "c": 0x0000708880887000,
    "d": 0x0808788888887800,
    "e": 0x00007088F8807000,
    "f": 0x1028202070202000,
    "g": 0x0000708888780870,
    "h": 0x808080F088888800,
    "i": 0x0020002020202000,
    "j": 0x002000202020A040,
    "k": 0x4040485060504800,
    "l": 0x4040404040402000,
    "m": 0x000000D0A8A8A800,
    "n": 0x000000E090909000,
    "o": 0x0000708888887000,
    "p": 0x0000E09090E08080,
    "q": 0x0000709090701010,
    "r": 0x0000B0C880808000,
    "s": 0x00007080E010E000,
    "t": 0x0020207020201000,
    "u": 0x0000888888887800,
    "v": 0x0000888850502000,
    "w": 0x0000A4A474682800,
    "x": 0x0000885020508800,
    "y": 0x00009090907010E0,
    "z": 0x0000F8102040F800,
}


def sample_notdef() -> Sprite:
    return Sprite.from_int(SAMPLE_WIDTH, SAMPLE_HEIGHT, SAMPLE_NOTDEF)


def sample_glyphs() -> list[tuple[str, Sprite]]:
    """The sample alphabet as (character, sprite) pairs."""
    return [
        (char, Sprite.from_int(SAMPLE_WIDTH, SAMPLE_HEIGHT, value))
        for char, value in SAMPLE_GLYPHS.items()
    ]
