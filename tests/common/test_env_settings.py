from __future__ import annotations

import pytest

from common import env_bool, env_int, env_str
from common import settings


def test_env_int_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WMS_X", raising=False)
    assert env_int("WMS_X", 5) == 5
    monkeypatch.setenv("WMS_X", " 12 ")
    assert env_int("WMS_X", 5) == 12
    monkeypatch.setenv("WMS_X", "abc")
    assert env_int("WMS_X", 5) == 5
    monkeypatch.setenv("WMS_X", "-3")
    assert env_int("WMS_X", 5, min_value=1) == 1


def test_env_bool_words(monkeypatch: pytest.MonkeyPatch) -> None:
    for raw, want in [("1", True), ("0", False), ("on", True), ("No", False), ("??", True)]:
        monkeypatch.setenv("WMS_B", raw)
        assert env_bool("WMS_B", True) is want


def test_env_str_blank_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WMS_S", "   ")
    assert env_str("WMS_S", "d") == "d"


def test_settings_reload(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
    s = settings.get()
    assert s.LOG_LEVEL == "INFO"
    assert s.SEED is None and s.TICK_MS is None and s.SHOW_HUD is True

    monkeypatch.setenv("WMS_LOG_LEVEL", "debug")
    monkeypatch.setenv("WMS_SEED", "42")
    monkeypatch.setenv("WMS_TICK_MS", "0")
    monkeypatch.setenv("WMS_SHOW_HUD", "off")
    settings.reload_from_env()
    s = settings.get()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.SEED == 42
    assert s.TICK_MS == 1
    assert s.SHOW_HUD is False
