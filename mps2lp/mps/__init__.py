from .sections import Section, HEADER_KEYWORDS, is_header_line, next_section
from .parser import RowDecl, ColumnEntry, RhsEntry, ParsedMPS, parse_mps_lines, parse_mps_file

__all__ = [
    "Section",
    "HEADER_KEYWORDS",
    "is_header_line",
    "next_section",
    "RowDecl",
    "ColumnEntry",
    "RhsEntry",
    "ParsedMPS",
    "parse_mps_lines",
    "parse_mps_file",
]
