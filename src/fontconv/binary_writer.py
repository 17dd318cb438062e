"""Fixed-layout binary encoding of a packed font.

All integers are little-endian with no padding::

    int16  atlas width
    int16  atlas height
    bytes  packed bitmap (width * height / 8)
    uint8  line height
    uint8  baseline
    int32  char count, then per char:
           int32 id, uint16 x, uint16 y, uint8 width, uint8 height,
           int8 xoffset, int8 yoffset, int8 xadvance
    int32  kerning count, then per pair:
           int32 first, int32 second, int8 amount

Values wider than their field wrap around (two's complement for signed
fields) rather than raising, so ``xadvance=200`` is stored as ``-56``.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Tuple

from .descriptor import CharInfo, FontDescription, KerningInfo

_DIMENSIONS = struct.Struct("<hh")
_METRICS = struct.Struct("<BB")
_COUNT = struct.Struct("<i")
_CHAR = struct.Struct("<iHHBBbbb")
_KERNING = struct.Struct("<iib")

_FORMAT_BITS = {"b": 8, "B": 8, "h": 16, "H": 16, "i": 32, "I": 32}


def wrap_int(value: int, code: str) -> int:
    """Truncate ``value`` to the range of the struct format ``code``."""
    bits = _FORMAT_BITS[code]
    value &= (1 << bits) - 1
    if code.islower() and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _pack(layout: struct.Struct, *values: int) -> bytes:
    codes = layout.format.lstrip("<")
    return layout.pack(*(wrap_int(v, c) for v, c in zip(values, codes)))


def pack_char(char: CharInfo) -> bytes:
    return _pack(
        _CHAR,
        char.id,
        char.x,
        char.y,
        char.width,
        char.height,
        char.x_offset,
        char.y_offset,
        char.x_advance,
    )


def pack_kerning(kerning: KerningInfo) -> bytes:
    return _pack(_KERNING, kerning.first, kerning.second, kerning.amount)


def serialize(width: int, height: int, packed_bitmap: bytes, font: FontDescription) -> bytes:
    parts = [
        _pack(_DIMENSIONS, width, height),
        bytes(packed_bitmap),
        _pack(_METRICS, font.line_height, font.baseline),
        _pack(_COUNT, len(font.chars)),
    ]
    parts.extend(pack_char(char) for char in font.chars)
    parts.append(_pack(_COUNT, len(font.kernings)))
    parts.extend(pack_kerning(kerning) for kerning in font.kernings)
    return b"".join(parts)


@dataclass(frozen=True)
class FontBlob:
    width: int
    height: int
    bitmap: bytes
    line_height: int
    baseline: int
    chars: Tuple[CharInfo, ...]
    kernings: Tuple[KerningInfo, ...]


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    def take(self, size: int) -> bytes:
        end = self.offset + size
        if size < 0 or end > len(self.data):
            raise ValueError(
                f"blob truncated: need {size} bytes at offset {self.offset}, have {len(self.data) - self.offset}"
            )
        chunk = self.data[self.offset : end]
        self.offset = end
        return chunk

    def unpack(self, layout: struct.Struct) -> Tuple[int, ...]:
        return layout.unpack(self.take(layout.size))


def read_font_blob(data: bytes) -> FontBlob:
    """Parse a blob produced by :func:`serialize`."""
    reader = _Reader(data)
    width, height = reader.unpack(_DIMENSIONS)
    bitmap = reader.take(max(width * height // 8, 0))
    line_height, baseline = reader.unpack(_METRICS)

    (char_count,) = reader.unpack(_COUNT)
    chars = tuple(CharInfo(*reader.unpack(_CHAR)) for _ in range(char_count))

    (kerning_count,) = reader.unpack(_COUNT)
    kernings = tuple(KerningInfo(*reader.unpack(_KERNING)) for _ in range(kerning_count))

    if reader.offset != len(data):
        raise ValueError(f"{len(data) - reader.offset} trailing bytes after kerning table")

    return FontBlob(
        width=width,
        height=height,
        bitmap=bitmap,
        line_height=line_height,
        baseline=baseline,
        chars=chars,
        kernings=kernings,
    )
