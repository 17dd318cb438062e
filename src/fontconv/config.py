from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .bitmap import DEFAULT_THRESHOLD
from .errors import ConfigError
from .text_encoder import DEFAULT_LINE_WIDTH


@dataclass(frozen=True)
class Settings:
    line_width: int = DEFAULT_LINE_WIDTH
    output_suffix: str = ".h"
    threshold: int = DEFAULT_THRESHOLD


def _env_int(env: Mapping[str, str], key: str, default: int, minimum: int, maximum: Optional[int] = None) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None
    if value < minimum or (maximum is not None and value > maximum):
        bounds = f">= {minimum}" if maximum is None else f"between {minimum} and {maximum}"
        raise ConfigError(f"{key} must be {bounds}, got {value}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from ``env``, or from the process environment and ``.env``."""
    if env is None:
        load_dotenv()
        env = os.environ
    return Settings(
        line_width=_env_int(env, "FONTCONV_LINE_WIDTH", DEFAULT_LINE_WIDTH, 1),
        output_suffix=env.get("FONTCONV_OUTPUT_SUFFIX") or ".h",
        threshold=_env_int(env, "FONTCONV_THRESHOLD", DEFAULT_THRESHOLD, 0, 256),
    )
