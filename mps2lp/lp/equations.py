"""
Join flat MPS records into one equation per row.

Rows keep ROWS declaration order; rows that only appear in COLUMNS are
appended in the order they are first referenced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from mps2lp.mps.parser import ColumnEntry, ParsedMPS, RhsEntry, RowDecl

logger = logging.getLogger(__name__)

Term = tuple[str, float]


@dataclass
class LinearProgram:
    name: str = ""
    equations: dict[str, list[Term]] = field(default_factory=dict)
    row_types: dict[str, str] = field(default_factory=dict)
    rhs: dict[str, float] = field(default_factory=dict)

    def objectives(self) -> list[str]:
        return [r for r in self.equations if self.row_types.get(r) == "N"]

    def constraints(self) -> list[str]:
        return [r for r in self.equations if self.row_types.get(r) != "N"]


def interpret(
    rows: Iterable[RowDecl],
    columns: Iterable[ColumnEntry],
    rhs: Iterable[RhsEntry],
    *,
    name: str = "",
) -> LinearProgram:
    """
    Build equations, row types and RHS values.

    Duplicate (variable, row) pairs stay as separate terms. A later RHS entry
    for the same row overwrites an earlier one.
    """
    program = LinearProgram(name=name)

    for decl in rows:
        program.equations[decl.name] = []
        program.row_types[decl.name] = decl.operator

    for entry in columns:
        if entry.row not in program.equations:
            logger.warning("column %r references undeclared row %r", entry.variable, entry.row)
            program.equations[entry.row] = []
        program.equations[entry.row].append((entry.variable, entry.coefficient))

    for entry in rhs:
        if entry.row not in program.row_types:
            logger.warning("RHS %r references undeclared row %r", entry.label, entry.row)
        program.rhs[entry.row] = entry.value

    return program


def interpret_parsed(parsed: ParsedMPS) -> LinearProgram:
    return interpret(parsed.rows, parsed.columns, parsed.rhs, name=parsed.name)
