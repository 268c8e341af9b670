"""
Load converter settings from mps2lp.env into os.environ.
Call load_env() at the start of scripts; get_settings() reads the result.

Recognized keys (all optional):

  MPS2LP_ENCODING=utf-8      text encoding of input .mps files
  MPS2LP_LOG_LEVEL=WARNING   DEBUG, INFO, WARNING, ERROR or CRITICAL
  MPS2LP_STRICT=false        1/true/yes/on: unknown section headers are fatal
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_TRUE_VALUES = ("1", "true", "yes", "on")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    encoding: str = "utf-8"
    log_level: str = "WARNING"
    strict: bool = False


def load_env(env_file: str = "mps2lp.env", search_parents: bool = True) -> Path | None:
    """
    Load KEY=VALUE lines from env_file into os.environ.
    If env_file is a relative path, search from cwd and then parent directories
    until the file is found. Also tries config/<env_file>.
    Variables already set in the environment are not overridden.
    Returns the file that was loaded, or None.
    """
    path = Path(env_file)
    if not path.is_absolute():
        start = Path.cwd()
        candidates = [start / env_file]
        if search_parents:
            candidates += [d / env_file for d in start.parents]
        candidates += [start / "config" / path.name]
        if search_parents:
            candidates += [d / "config" / path.name for d in start.parents]
        for candidate in candidates:
            if candidate.exists():
                path = candidate
                break
    if not path.exists():
        return None
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key, value = key.strip(), value.strip()
                if key and value and key not in os.environ:
                    os.environ[key] = value
    return path


def get_settings() -> Settings:
    """
    Read MPS2LP_ENCODING, MPS2LP_LOG_LEVEL and MPS2LP_STRICT from the environment.
    An unrecognized log level falls back to WARNING.
    """
    log_level = os.environ.get("MPS2LP_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "WARNING"
    return Settings(
        encoding=os.environ.get("MPS2LP_ENCODING", "utf-8"),
        log_level=log_level,
        strict=os.environ.get("MPS2LP_STRICT", "").strip().lower() in _TRUE_VALUES,
    )
