"""Tokenizer for BMFont text descriptor lines.

A line looks like ``char id=65 x=10 y=0 width=8`` or
``page id=0 file="atlas.png"``: an operation keyword followed by
``name=value`` pairs, where values are either bare (ending at the next
space) or double-quoted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict

from .errors import MissingArgumentError, ParseError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class LineArg:
    name: str
    text: str
    value: int = 0


@dataclass
class LineDescription:
    operation: str
    args: Dict[str, LineArg] = field(default_factory=dict)

    def require(self, name: str) -> LineArg:
        arg = self.args.get(name)
        if arg is None:
            raise MissingArgumentError(self.operation, name)
        return arg

    def value(self, name: str) -> int:
        return self.require(name).value

    def text(self, name: str) -> str:
        return self.require(name).text


def parse_int(text: str) -> int:
    """Return ``text`` as a signed 32-bit integer, or 0 when it is not one."""
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        return 0
    value = int(text)
    if value < INT32_MIN or value > INT32_MAX:
        return 0
    return value


def parse_line(line: str) -> LineDescription:
    line = line.strip()

    cursor = line.find(" ")
    if cursor < 0:
        cursor = len(line)
    result = LineDescription(operation=line[:cursor].lower())

    while cursor < len(line):
        eq_pos = line.find("=", cursor)
        if eq_pos < 0:
            break

        name = line[cursor:eq_pos].strip().lower()
        if not name:
            raise ParseError(f"empty argument name at column {eq_pos + 1}: {line!r}")

        if line[eq_pos + 1 : eq_pos + 2] == '"':
            start = eq_pos + 2
            cursor = line.find('"', start)
            if cursor < 0:
                raise ParseError(f"unterminated quoted value for '{name}': {line!r}")
        else:
            start = eq_pos + 1
            cursor = line.find(" ", start)
            if cursor < 0:
                cursor = len(line)

        text = line[start:cursor].strip()
        if name in result.args:
            raise ParseError(f"duplicate argument '{name}': {line!r}")
        result.args[name] = LineArg(name=name, text=text, value=parse_int(text))

        # step over the closing quote or separating space
        cursor += 1

    return result
