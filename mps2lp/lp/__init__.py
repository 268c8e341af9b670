from .equations import Term, LinearProgram, interpret, interpret_parsed
from .render import RELATIONAL_OPERATORS, format_number, format_terms, render, render_program

__all__ = [
    "Term",
    "LinearProgram",
    "interpret",
    "interpret_parsed",
    "RELATIONAL_OPERATORS",
    "format_number",
    "format_terms",
    "render",
    "render_program",
]
