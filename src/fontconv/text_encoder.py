from __future__ import annotations

import base64
from typing import Iterable, List

DEFAULT_LINE_WIDTH = 120


def wrap(text: str, width: int = DEFAULT_LINE_WIDTH) -> List[str]:
    """Split ``text`` into ``width``-sized chunks; the last may be shorter."""
    if width <= 0:
        raise ValueError(f"line width must be positive, got {width}")
    return [text[i : i + width] for i in range(0, len(text), width)]


def encode(buffer: bytes, width: int = DEFAULT_LINE_WIDTH) -> List[str]:
    """Base64 ``buffer`` and return it as double-quoted string literal lines."""
    payload = base64.b64encode(buffer).decode("ascii")
    return [f'"{chunk}"' for chunk in wrap(payload, width)]


def decode(lines: Iterable[str]) -> bytes:
    payload = "".join(line.strip().strip('"') for line in lines)
    return base64.b64decode(payload, validate=True)
