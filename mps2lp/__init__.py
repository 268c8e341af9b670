"""Translate MPS linear programs into LP-format text."""

from .errors import MPSError, FormatError, InputDecodeError, NumericParseError
from .convert import convert_mps_file, convert_mps_lines, write_lp_file

__all__ = [
    "MPSError",
    "FormatError",
    "NumericParseError",
    "InputDecodeError",
    "convert_mps_file",
    "convert_mps_lines",
    "write_lp_file",
]
