"""Test :mod:`config.load_settings`."""

import os

import pytest

from config.load_settings import get_settings, load_env


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for key in ("MPS2LP_ENCODING", "MPS2LP_LOG_LEVEL", "MPS2LP_STRICT"):
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    settings = get_settings()
    assert settings.encoding == "utf-8"
    assert settings.log_level == "WARNING"
    assert settings.strict is False


def test_load_env_from_config_dir(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "config").mkdir()
    env = tmp_path / "config" / "mps2lp.env"
    env.write_text("# settings\n\nMPS2LP_STRICT = yes\nMPS2LP_LOG_LEVEL=debug\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_env() == env
    settings = get_settings()
    assert settings.strict is True
    assert settings.log_level == "DEBUG"


def test_load_env_does_not_override(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    env = tmp_path / "custom.env"
    env.write_text("MPS2LP_ENCODING=latin-1\n", encoding="utf-8")
    monkeypatch.setenv("MPS2LP_ENCODING", "utf-16")
    load_env(str(env))
    assert get_settings().encoding == "utf-16"


def test_load_env_missing(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert load_env("nothing-here.env", search_parents=False) is None


@pytest.mark.parametrize("value, expected", [("info", "INFO"), (" error ", "ERROR"), ("LOUD", "WARNING"), ("", "WARNING")])
def test_log_level(monkeypatch: pytest.MonkeyPatch, value: str, expected: str) -> None:
    monkeypatch.setenv("MPS2LP_LOG_LEVEL", value)
    assert get_settings().log_level == expected
