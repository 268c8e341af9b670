"""
Convert an MPS file to LP format.

  python -m mps2lp.scripts.convert_mps problem.mps
  python -m mps2lp.scripts.convert_mps problem.mps -o outputs/problem.lp --summary

Reads MPS2LP_* settings from mps2lp.env (cwd, parents, or config/) if present.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from config.load_settings import get_settings, load_env
from mps2lp.errors import MPSError
from mps2lp.lp.equations import interpret_parsed
from mps2lp.lp.render import render_program
from mps2lp.mps.parser import parse_mps_file
from mps2lp.convert import write_lp_file
from mps2lp.structure import summarize


def main(
    mps_path: str | Path,
    *,
    output_path: str | Path | None = None,
    strict: bool | None = None,
    summary: bool = False,
    verbose: bool = False,
) -> int:
    load_env()
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    strict = settings.strict if strict is None else strict

    try:
        parsed = parse_mps_file(mps_path, encoding=settings.encoding, strict=strict)
    except OSError as e:
        print(f"Cannot read {mps_path}: {e}", file=sys.stderr)
        return 1
    except MPSError as e:
        print(f"{mps_path}: {e}", file=sys.stderr)
        return 1

    program = interpret_parsed(parsed)
    text = render_program(program)

    if output_path is not None:
        print("Wrote", write_lp_file(text, output_path), file=sys.stderr)
    else:
        print(text)

    if summary:
        for key, value in summarize(program).items():
            print(f"  {key:<12}: {value}", file=sys.stderr)
    return 0


def cli(argv: list[str] | None = None) -> int:
    import argparse
    p = argparse.ArgumentParser(description="Convert an MPS file to LP format")
    p.add_argument("mps_path", help="Input .mps file")
    p.add_argument("-o", "--output", default=None, help="Write LP text here instead of stdout")
    p.add_argument("--strict", action="store_true", default=None, help="Fail on unknown section headers")
    p.add_argument("--summary", action="store_true", help="Print problem structure counts to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)
    return main(
        args.mps_path,
        output_path=args.output,
        strict=args.strict,
        summary=args.summary,
        verbose=args.verbose,
    )


if __name__ == "__main__":
    sys.exit(cli())
