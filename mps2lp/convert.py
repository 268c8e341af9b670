"""Parse -> interpret -> render pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from mps2lp.lp.equations import interpret_parsed
from mps2lp.lp.render import render_program
from mps2lp.mps.parser import parse_mps_file, parse_mps_lines


def convert_mps_lines(lines: Iterable[str], *, strict: bool = False) -> str:
    return render_program(interpret_parsed(parse_mps_lines(lines, strict=strict)))


def convert_mps_file(mps_path: str | Path, *, encoding: str = "utf-8", strict: bool = False) -> str:
    """Read an .mps file and return its LP-format text."""
    parsed = parse_mps_file(mps_path, encoding=encoding, strict=strict)
    return render_program(interpret_parsed(parsed))


def write_lp_file(text: str, lp_path: str | Path) -> Path:
    """Write LP text to lp_path (parent directories created). Returns the path."""
    path = Path(lp_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text + "\n")
    return path
