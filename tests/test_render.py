"""Test :mod:`mps2lp.lp.render`."""

import pytest

from mps2lp.lp.equations import interpret
from mps2lp.lp.render import format_number, format_terms, render, render_program
from mps2lp.mps.parser import ColumnEntry, RhsEntry, RowDecl


@pytest.mark.parametrize(
    "value, text",
    [(2.0, "2"), (10.0, "10"), (-3.0, "-3"), (0.0, "0"), (1.5, "1.5"), (0.1, "0.1"), (1e20, "100000000000000000000")],
)
def test_format_number(value: float, text: str) -> None:
    assert format_number(value) == text


@pytest.mark.parametrize(
    "terms, text",
    [
        ([], ""),
        ([("X", 1.0)], " X"),
        ([("X", -1.0)], " - X"),
        ([("X", 2.0)], " 2*X"),
        ([("X", -2.5)], " - 2.5*X"),
        ([("X", 1.0), ("Y", 1.0)], " X + Y"),
        ([("X", 3.0), ("Y", -1.0), ("Z", 0.5)], " 3*X - Y + 0.5*Z"),
    ],
)
def test_format_terms(terms, text: str) -> None:
    assert format_terms(terms) == text


def test_objective_line() -> None:
    program = interpret([RowDecl("N", "COST")], [ColumnEntry("X", "COST", 2.0)], [])
    assert render_program(program) == "Optimize\n    COST:  2*X\nSubject To\nBounds\nEnd"


def test_constraint_line() -> None:
    program = interpret(
        [RowDecl("L", "LIM")],
        [ColumnEntry("X", "LIM", 1.0)],
        [RhsEntry("RHS1", "LIM", 10.0)],
    )
    assert render_program(program) == "Optimize\nSubject To\n    LIM:  X <= 10\nBounds\nEnd"


def test_missing_rhs_defaults_to_zero() -> None:
    text = render({"EQ": [("X", 1.0)]}, {"EQ": "E"}, {})
    assert "    EQ:  X = 0\n" in text


def test_greater_equal() -> None:
    text = render({"G1": [("X", -1.0)]}, {"G1": "G"}, {"G1": 2.5})
    assert "    G1:  - X >= 2.5\n" in text


def test_unknown_row_type_rendered_as_constraint() -> None:
    text = render({"GHOST": [("X", 3.0)]}, {}, {})
    assert text == "Optimize\nSubject To\n    GHOST:  3*X  0\nBounds\nEnd"


def test_several_objectives() -> None:
    text = render({"A": [("X", 1.0)], "B": [("Y", 1.0)]}, {"A": "N", "B": "N"}, {})
    assert text.startswith("Optimize\n    A:  X\n    B:  Y\nSubject To\n")


def test_testprob(testprob: str, testprob_lp: str) -> None:
    from mps2lp.convert import convert_mps_lines

    assert convert_mps_lines(testprob.splitlines()) == testprob_lp
