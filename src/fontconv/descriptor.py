from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .errors import FontConvError, ValidationError
from .line_parser import LineDescription, parse_line


@dataclass(frozen=True)
class CharInfo:
    id: int
    x: int
    y: int
    width: int
    height: int
    x_offset: int
    y_offset: int
    x_advance: int

    @classmethod
    def from_line(cls, line: LineDescription) -> "CharInfo":
        return cls(
            id=line.value("id"),
            x=line.value("x"),
            y=line.value("y"),
            width=line.value("width"),
            height=line.value("height"),
            x_offset=line.value("xoffset"),
            y_offset=line.value("yoffset"),
            x_advance=line.value("xadvance"),
        )


@dataclass(frozen=True)
class KerningInfo:
    first: int
    second: int
    amount: int

    @classmethod
    def from_line(cls, line: LineDescription) -> "KerningInfo":
        return cls(
            first=line.value("first"),
            second=line.value("second"),
            amount=line.value("amount"),
        )


@dataclass(frozen=True)
class FontDescription:
    texture_path: Path
    line_height: int
    baseline: int
    chars: Tuple[CharInfo, ...]
    kernings: Tuple[KerningInfo, ...]


def parse_lines(lines: Iterable[str], base_dir: Path) -> FontDescription:
    """Build a font description from descriptor lines.

    ``base_dir`` is the directory the texture file name is resolved against.
    Unknown directives are skipped; every error is fatal.
    """
    line_height = 0
    baseline = 0
    texture: Optional[str] = None
    chars: List[CharInfo] = []
    kernings: List[KerningInfo] = []

    for number, raw in enumerate(lines, start=1):
        if not raw.strip():
            continue
        try:
            desc = parse_line(raw)
            if desc.operation == "common":
                line_height = desc.value("lineheight")
                baseline = desc.value("base")
                pages = desc.value("pages")
                if pages != 1:
                    raise ValidationError(
                        f"invalid number of texture pages ({pages}); only 1 page is supported"
                    )
            elif desc.operation == "page":
                texture = desc.text("file")
                page_id = desc.value("id")
                if page_id != 0:
                    raise ValidationError(f"invalid page id {page_id}; expected 0")
            elif desc.operation == "char":
                chars.append(CharInfo.from_line(desc))
            elif desc.operation == "kerning":
                kernings.append(KerningInfo.from_line(desc))
        except FontConvError as exc:
            exc.line = number
            raise

    if texture is None:
        raise ValidationError("descriptor has no 'page' directive")

    return FontDescription(
        texture_path=base_dir / texture,
        line_height=line_height,
        baseline=baseline,
        chars=tuple(chars),
        kernings=tuple(kernings),
    )


def build_font_description(path: Union[str, Path]) -> FontDescription:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"descriptor not found at {path}")
    lines = path.read_text(encoding="utf-8-sig").splitlines()
    return parse_lines(lines, path.parent)
