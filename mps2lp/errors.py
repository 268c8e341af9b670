"""Errors raised while reading MPS input."""

from __future__ import annotations


class MPSError(ValueError):
    """Base class for MPS parse errors. Carries the 1-based line number when known."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class FormatError(MPSError):
    """Unrecognized section header keyword."""


class NumericParseError(MPSError):
    """A coefficient or RHS field is not a valid floating-point number."""

    def __init__(self, text: str, *, line_number: int | None = None, line: str | None = None) -> None:
        self.text = text
        super().__init__(f"cannot parse {text!r} as a number", line_number=line_number, line=line)


class InputDecodeError(MPSError):
    """The input file is not valid text in the configured encoding."""

    def __init__(self, path: str, encoding: str, offset: int) -> None:
        self.path = path
        self.encoding = encoding
        self.offset = offset
        super().__init__(f"{path} is not valid {encoding} text (byte offset {offset})")
