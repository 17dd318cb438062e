"""Exception types raised while converting a font."""

from __future__ import annotations

from typing import Optional


class FontConvError(Exception):
    """Base class for conversion failures.

    ``line`` is the 1-based descriptor line the failure belongs to, when known.
    """

    line: Optional[int] = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"line {self.line}: {message}"


class ParseError(FontConvError):
    """A descriptor line could not be tokenized."""


class ValidationError(FontConvError):
    """A descriptor parsed but describes an unsupported font."""


class MissingArgumentError(ValidationError):
    def __init__(self, operation: str, name: str) -> None:
        super().__init__(f"'{operation}' is missing required argument '{name}'")
        self.operation = operation
        self.name = name


class ConfigError(FontConvError):
    """An environment setting has an invalid value."""
