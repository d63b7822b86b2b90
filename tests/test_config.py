import os
from decimal import Decimal
from fractions import Fraction

import pytest

from event_emitter.config import (
    EmitterSettings,
    apply_settings,
    coerce_max_listeners,
    defaults,
    load_settings,
)


def test_load_settings_creates_paths(tmp_path, monkeypatch):
    monkeypatch.setenv("EVENT_EMITTER_HOME", str(tmp_path / "emitter-home"))
    monkeypatch.delenv("EVENT_EMITTER_DEFAULT_MAX_LISTENERS", raising=False)
    settings = load_settings(tmp_path / "missing.env")
    assert isinstance(settings, EmitterSettings)
    for required in (settings.paths.base_dir, settings.paths.logs_dir):
        assert required.exists()


def test_settings_defaults():
    settings = EmitterSettings()
    assert settings.default_max_listeners == 10
    assert settings.log_level == "INFO"


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("EVENT_EMITTER_HOME", str(tmp_path))
    monkeypatch.setenv("EVENT_EMITTER_DEFAULT_MAX_LISTENERS", "25")
    monkeypatch.setenv("EVENT_EMITTER_LOG_LEVEL", "debug")
    settings = load_settings(tmp_path / "missing.env")
    assert settings.default_max_listeners == 25
    assert settings.log_level == "DEBUG"


def test_env_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.setenv("EVENT_EMITTER_HOME", str(tmp_path))
    monkeypatch.delenv("EVENT_EMITTER_DEFAULT_MAX_LISTENERS", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("EVENT_EMITTER_DEFAULT_MAX_LISTENERS=-4\n")
    try:
        settings = load_settings(env_file)
    finally:
        os.environ.pop("EVENT_EMITTER_DEFAULT_MAX_LISTENERS", None)
    assert settings.default_max_listeners == 0


def test_loading_does_not_touch_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("EVENT_EMITTER_HOME", str(tmp_path))
    monkeypatch.setenv("EVENT_EMITTER_DEFAULT_MAX_LISTENERS", "3")
    settings = load_settings(tmp_path / "missing.env")
    assert defaults.default_max_listeners == 10
    apply_settings(settings)
    assert defaults.default_max_listeners == 3


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (20, 20),
        (-100, 0),
        (2.9, 2),
        (Fraction(11, 2), 5),
        (Decimal("5"), 5),
        (Decimal("-3"), 0),
        (Decimal("NaN"), 0),
        (True, 1),
        ("12", 12),
        (" 7.5 ", 7),
        ("foobar", 0),
        ("", 0),
        (float("inf"), 0),
        (None, 0),
        ([], 0),
    ],
)
def test_coerce_max_listeners(value, expected):
    assert coerce_max_listeners(value) == expected


def test_defaults_coerce_on_assignment():
    defaults.default_max_listeners = "foobar"
    assert defaults.default_max_listeners == 0
    defaults.default_max_listeners = 20
    assert defaults.default_max_listeners == 20
