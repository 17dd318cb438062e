from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .binary_writer import serialize
from .bitmap import load_atlas, pack_atlas
from .config import Settings
from .descriptor import build_font_description
from .text_encoder import encode


@dataclass(frozen=True)
class ConversionResult:
    descriptor_path: Path
    texture_path: Path
    output_path: Path
    atlas_width: int
    atlas_height: int
    glyph_count: int
    kerning_count: int
    blob: bytes
    lines: List[str]

    def to_summary(self) -> Dict[str, Any]:
        return {
            "descriptor": str(self.descriptor_path),
            "texture": str(self.texture_path),
            "output": str(self.output_path),
            "atlas_width": self.atlas_width,
            "atlas_height": self.atlas_height,
            "glyphs": self.glyph_count,
            "kernings": self.kerning_count,
            "blob_bytes": len(self.blob),
            "lines": len(self.lines),
        }


def default_output_path(descriptor_path: Path, suffix: str = ".h") -> Path:
    # appended, not substituted: font.fnt -> font.fnt.h
    return descriptor_path.with_name(descriptor_path.name + suffix)


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_lines_atomic(path: Path, lines: List[str]) -> None:
    """Write ``lines`` so that ``path`` is either absent or complete."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w",
        delete=False,
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    ) as tf:
        temp_path = Path(tf.name)
    try:
        with open(temp_path, "w", encoding="utf-8", newline="\n") as f:
            f.writelines(f"{line}\n" for line in lines)
        # NamedTemporaryFile creates 0600; apply the mode a plain open() would get
        os.chmod(temp_path, 0o666 & ~_current_umask())
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink()
        raise


def convert(
    descriptor_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    settings: Optional[Settings] = None,
) -> ConversionResult:
    """Convert a BMFont descriptor and its atlas into a quoted base64 header."""
    settings = settings or Settings()
    descriptor_path = Path(descriptor_path)

    font = build_font_description(descriptor_path)
    atlas = load_atlas(font.texture_path)
    packed = pack_atlas(atlas, settings.threshold)
    blob = serialize(atlas.width, atlas.height, packed, font)
    lines = encode(blob, settings.line_width)

    if output_path is None:
        output_path = default_output_path(descriptor_path, settings.output_suffix)
    output_path = Path(output_path)
    write_lines_atomic(output_path, lines)

    return ConversionResult(
        descriptor_path=descriptor_path,
        texture_path=font.texture_path,
        output_path=output_path,
        atlas_width=atlas.width,
        atlas_height=atlas.height,
        glyph_count=len(font.chars),
        kerning_count=len(font.kernings),
        blob=blob,
        lines=lines,
    )
