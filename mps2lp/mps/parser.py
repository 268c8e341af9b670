"""
Parse a fixed-column MPS file into flat row, column and RHS records.

Sections handled: NAME, ROWS, COLUMNS, RHS. Data lines under BOUNDS and ENDATA
are read and discarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from mps2lp.errors import FormatError, InputDecodeError, NumericParseError
from mps2lp.mps.sections import Section, is_header_line, next_section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowDecl:
    """One declared row. operator is N (objective), E, G or L."""

    operator: str
    name: str


@dataclass(frozen=True)
class ColumnEntry:
    variable: str
    row: str
    coefficient: float


@dataclass(frozen=True)
class RhsEntry:
    label: str
    row: str
    value: float


@dataclass
class ParsedMPS:
    """Everything collected from one MPS file, in file order."""

    name: str = ""
    rows: list[RowDecl] = field(default_factory=list)
    columns: list[ColumnEntry] = field(default_factory=list)
    rhs: list[RhsEntry] = field(default_factory=list)


def _to_float(text: str, line_number: int, line: str) -> float:
    # float() also takes digit separators and non-ASCII digits; MPS numbers are plain ASCII
    if "_" in text or not text.isascii():
        raise NumericParseError(text, line_number=line_number, line=line)
    try:
        return float(text)
    except ValueError:
        raise NumericParseError(text, line_number=line_number, line=line) from None


def _parse_rows_line(tokens: list[str], line_number: int) -> list[RowDecl]:
    if len(tokens) % 2:
        logger.debug("line %d: dropping unpaired ROWS token %r", line_number, tokens[-1])
    return [RowDecl(operator=tokens[i], name=tokens[i + 1]) for i in range(0, len(tokens) - 1, 2)]


def _parse_pairs_line(tokens: list[str], line_number: int, line: str) -> tuple[str, list[tuple[str, float]]]:
    """Split '<label> (<row> <value>)+' into the label and (row, value) pairs."""
    label, rest = tokens[0], tokens[1:]
    if len(rest) % 2:
        logger.debug("line %d: dropping unpaired token %r after %r", line_number, rest[-1], label)
    pairs = [
        (rest[i], _to_float(rest[i + 1], line_number, line))
        for i in range(0, len(rest) - 1, 2)
    ]
    return label, pairs


def parse_mps_lines(lines: Iterable[str], *, strict: bool = False) -> ParsedMPS:
    """
    Run the section state machine over the lines of an MPS file.

    Parameters
    ----------
    lines : iterable of str
        Raw lines, with or without trailing newlines.
    strict : bool
        Raise FormatError on an unknown header keyword instead of logging it
        and staying in the current section.

    Raises
    ------
    NumericParseError
        A COLUMNS coefficient or RHS value is not a number. Nothing is returned.
    """
    result = ParsedMPS()
    section = Section.IDLE

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip() or line.startswith("*"):
            continue

        if is_header_line(line):
            keyword = line.split()[0]
            new_section = next_section(keyword)
            if new_section is None:
                err = FormatError(f"unknown section header {keyword!r}", line_number=line_number, line=line)
                if strict:
                    raise err
                logger.warning("%s; staying in section %s", err, section.value)
                continue
            if keyword == "NAME":
                result.name = line[len(keyword):].strip()
            section = new_section
            continue

        tokens = line.split()
        if section is Section.ROWS:
            result.rows.extend(_parse_rows_line(tokens, line_number))
        elif section is Section.COLUMNS:
            variable, pairs = _parse_pairs_line(tokens, line_number, line)
            result.columns.extend(ColumnEntry(variable, row, coef) for row, coef in pairs)
        elif section is Section.RHS:
            label, pairs = _parse_pairs_line(tokens, line_number, line)
            result.rhs.extend(RhsEntry(label, row, value) for row, value in pairs)
        # IDLE, BOUNDS and ENDATA data lines carry nothing we keep

    return result


def parse_mps_file(mps_path: str | Path, *, encoding: str = "utf-8", strict: bool = False) -> ParsedMPS:
    """
    Parse an .mps file. The file is closed before returning or raising.

    Raises InputDecodeError when the bytes are not valid in `encoding`.
    """
    path = Path(mps_path)
    with open(path, "r", encoding=encoding) as f:
        try:
            return parse_mps_lines(f, strict=strict)
        except UnicodeDecodeError as e:
            raise InputDecodeError(str(path), encoding, _decode_error_offset(path, encoding, e)) from e


def _decode_error_offset(path: Path, encoding: str, err: UnicodeDecodeError) -> int:
    """Byte offset of the first undecodable byte in the whole file (err.start is per read chunk)."""
    try:
        path.read_bytes().decode(encoding)
    except UnicodeDecodeError as whole:
        return whole.start
    return err.start
