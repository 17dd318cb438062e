"""Convert BMFont descriptors and their atlas into an embeddable base64 blob."""

from __future__ import annotations

from .binary_writer import FontBlob, read_font_blob, serialize
from .bitmap import Atlas, load_atlas, pack_bitmap
from .descriptor import (
    CharInfo,
    FontDescription,
    KerningInfo,
    build_font_description,
    parse_lines,
)
from .errors import (
    ConfigError,
    FontConvError,
    MissingArgumentError,
    ParseError,
    ValidationError,
)
from .line_parser import LineArg, LineDescription, parse_line
from .pipeline import ConversionResult, convert
from .text_encoder import decode, encode, wrap

__all__ = [
    "Atlas",
    "CharInfo",
    "ConfigError",
    "ConversionResult",
    "FontBlob",
    "FontConvError",
    "FontDescription",
    "KerningInfo",
    "LineArg",
    "LineDescription",
    "MissingArgumentError",
    "ParseError",
    "ValidationError",
    "build_font_description",
    "convert",
    "decode",
    "encode",
    "load_atlas",
    "pack_bitmap",
    "parse_line",
    "parse_lines",
    "read_font_blob",
    "serialize",
    "wrap",
]
