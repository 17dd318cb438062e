"""Command line entry point: ``fontconv font.fnt`` writes ``font.fnt.h``."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .binary_writer import read_font_blob
from .config import load_settings
from .errors import FontConvError
from .pipeline import convert
from .text_encoder import decode


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fontconv",
        description="Convert BMFont output to a single Base64 stream.",
    )
    parser.add_argument(
        "descriptor",
        type=Path,
        help="Path to the BMFont text descriptor (.fnt) with exactly one texture page.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output file (default: <descriptor>.h).",
    )
    parser.add_argument(
        "--line-width",
        type=int,
        default=None,
        help="Characters of base64 per quoted line (default: FONTCONV_LINE_WIDTH or 120).",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Channel value at or above which a pixel is lit (default: FONTCONV_THRESHOLD or 128).",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a JSON summary of the conversion instead of the confirmation line.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Re-read the written file and verify it decodes to the serialized font.",
    )
    return parser.parse_args(argv)


def verify_output(path: Path, blob: bytes) -> None:
    with open(path, encoding="utf-8") as f:
        decoded = decode(f)
    if decoded != blob:
        raise FontConvError(f"{path} does not decode to the serialized font")
    read_font_blob(decoded)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings()
        if args.line_width is not None:
            settings = replace(settings, line_width=args.line_width)
        if args.threshold is not None:
            settings = replace(settings, threshold=args.threshold)

        if not args.descriptor.exists():
            print(f"ERROR: File does not exist: {args.descriptor}", file=sys.stderr)
            return 1

        result = convert(args.descriptor, args.output, settings)
        if args.check:
            verify_output(result.output_path, result.blob)
    except (FontConvError, OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.summary:
        print(json.dumps(result.to_summary()))
    else:
        print(f"Created: {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
