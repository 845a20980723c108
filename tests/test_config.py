from __future__ import annotations

import importlib

import pytest

from config import get_settings_module
from src.fingerprint_clock.fingerprint_clock.container import ClockOptions
from src.fingerprint_clock.fingerprint_clock.core.enums import TemplateFormat


@pytest.mark.parametrize(
    "env,module",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("test", "config.testing"),
        ("development", "config.development"),
        ("whatever", "config.development"),
    ],
)
def test_settings_module_selection(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_options_from_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = importlib.import_module(get_settings_module())

    options = ClockOptions.from_settings(settings)

    assert options.confirmation_pause_ms == 0
    assert options.use_db_locks is False
    assert options.template_format == TemplateFormat.PNG
    assert options.match_threshold == settings.MATCH_THRESHOLD
