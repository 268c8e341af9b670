"""
Render joined equations as LP-format text.

Output layout:

    Optimize
        <row>: <terms>
    Subject To
        <row>: <terms> <op> <rhs>
    Bounds
    End
"""

from __future__ import annotations

from typing import Mapping, Sequence

from mps2lp.lp.equations import LinearProgram, Term

RELATIONAL_OPERATORS = {"E": "=", "G": ">=", "L": "<="}


def format_number(value: float) -> str:
    """Integral values print without a fractional part (2.0 -> "2")."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_terms(terms: Sequence[Term]) -> str:
    """
    Render terms as a signed sum with one leading space.

    The first term gets no sign when positive; magnitudes of exactly 1 are omitted.
    E.g. [("X", 1.0), ("Y", -2.5)] -> " X - 2.5*Y".
    """
    tokens: list[str] = []
    for i, (var, coef) in enumerate(terms):
        if coef < 0:
            tokens.append("-")
        elif i > 0:
            tokens.append("+")
        magnitude = abs(coef)
        tokens.append(var if magnitude == 1 else f"{format_number(magnitude)}*{var}")
    return " " + " ".join(tokens) if tokens else ""


def render(
    equations: Mapping[str, Sequence[Term]],
    row_types: Mapping[str, str],
    rhs_values: Mapping[str, float],
) -> str:
    optimize = ""
    subject_to = ""
    bounds = ""

    for row, terms in equations.items():
        eqn = format_terms(terms)
        etype = row_types.get(row)
        if etype == "N":
            optimize += f"    {row}: {eqn}\n"
        else:
            op = RELATIONAL_OPERATORS.get(etype, "")
            rhs = format_number(rhs_values.get(row, 0.0))
            subject_to += f"    {row}: {eqn} {op} {rhs}\n"

    return f"Optimize\n{optimize}Subject To\n{subject_to}Bounds\n{bounds}End"


def render_program(program: LinearProgram) -> str:
    return render(program.equations, program.row_types, program.rhs)
