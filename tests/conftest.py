from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

DESCRIPTOR = """\
info face="Test Sans" size=12 bold=0 italic=0
common lineHeight=14 base=11 scaleW=16 scaleH=2 pages=1 packed=0
page id=0 file="atlas.png"
chars count=2
char id=65 x=0 y=0 width=8 height=2 xoffset=-1 yoffset=3 xadvance=9 page=0 chnl=15
char id=66 x=8 y=0 width=8 height=2 xoffset=0 yoffset=3 xadvance=200 page=0 chnl=15
kernings count=1
kerning first=65 second=66 amount=-2
"""


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    """A descriptor plus a 16x2 atlas: left half white, right half black."""
    image = Image.new("RGB", (16, 2), color=(0, 0, 0))
    for y in range(2):
        for x in range(8):
            image.putpixel((x, y), (255, 255, 255))
    image.save(tmp_path / "atlas.png")
    (tmp_path / "font.fnt").write_text(DESCRIPTOR, encoding="utf-8")
    return tmp_path
