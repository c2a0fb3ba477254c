"""Big-endian field packing used by every table encoder."""

import struct

_U8 = struct.Struct(">B")
_U16 = struct.Struct(">H")
_I16 = struct.Struct(">h")
_U32 = struct.Struct(">I")
_I32 = struct.Struct(">i")
_I64 = struct.Struct(">q")


def u8(value: int) -> bytes:
    return _U8.pack(value)


def u16(value: int) -> bytes:
    return _U16.pack(value)


def i16(value: int) -> bytes:
    return _I16.pack(value)


def u32(value: int) -> bytes:
    return _U32.pack(value)


def i64(value: int) -> bytes:
    return _I64.pack(value)


def u16_array(values) -> bytes:
    """Pack an iterable of unsigned 16-bit values."""
    values = list(values)
    return struct.pack(f">{len(values)}H", *values)


def fixed(value: float) -> bytes:
    """Pack a 16.16 fixed-point number."""
    return _I32.pack(round(value * 0x10000))


def tag(name: str | bytes) -> bytes:
    """Pack a four-character table, script or feature tag."""
    raw = name.encode("ascii") if isinstance(name, str) else bytes(name)
    if len(raw) != 4:
        raise ValueError(f"tag must be exactly 4 bytes, got {raw!r}")
    return raw
