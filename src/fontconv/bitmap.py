from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from PIL import Image

Pixel = Tuple[int, ...]

DEFAULT_THRESHOLD = 128


@dataclass(frozen=True)
class Atlas:
    width: int
    height: int
    pixels: List[List[Pixel]]  # pixels[y][x] -> (r, g, b)


def load_atlas(path: Union[str, Path]) -> Atlas:
    """Decode the glyph atlas into an RGB pixel grid."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"missing atlas image at {path}")
    with Image.open(path) as image:
        rgb = image.convert("RGB")
    access = rgb.load()
    width, height = rgb.size
    pixels = [[access[x, y] for x in range(width)] for y in range(height)]
    return Atlas(width=width, height=height, pixels=pixels)


def is_lit(pixel: Pixel, threshold: int = DEFAULT_THRESHOLD) -> bool:
    r, g, b = pixel[:3]
    return r >= threshold and g >= threshold and b >= threshold


def pack_bitmap(
    pixels: Sequence[Sequence[Pixel]],
    width: int,
    height: int,
    threshold: int = DEFAULT_THRESHOLD,
) -> bytes:
    """Pack an RGB grid into 1 bit per pixel, 8 columns per byte.

    Bit ``i`` of a byte holds column ``x0 + i``, least significant first.
    ``width`` must be a multiple of 8; trailing columns of a narrower final
    group are dropped.
    """
    out = bytearray(width * height // 8)
    index = 0
    for y in range(height):
        row = pixels[y]
        for x0 in range(0, width - 7, 8):
            byte = 0
            for i in range(8):
                if is_lit(row[x0 + i], threshold):
                    byte |= 1 << i
            out[index] = byte
            index += 1
    return bytes(out)


def pack_atlas(atlas: Atlas, threshold: int = DEFAULT_THRESHOLD) -> bytes:
    return pack_bitmap(atlas.pixels, atlas.width, atlas.height, threshold)
