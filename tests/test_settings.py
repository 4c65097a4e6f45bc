from __future__ import annotations

import pytest

from settings import (
    DEFAULT_ENDPOINT, DEFAULT_TIMEOUT, ConfigError, get_settings, load_settings,
)


def test_defaults_when_environment_is_empty():
    s = load_settings({})
    assert s.api_key is None
    assert s.endpoint == DEFAULT_ENDPOINT
    assert s.timeout == DEFAULT_TIMEOUT
    assert s.log_level == "INFO"


def test_reads_values_from_environment():
    s = load_settings({
        "GOOGLE_SAFEBROWSING_KEY": "  abc  ",
        "SAFEBROWSING_ENDPOINT": "http://localhost:9000/find",
        "SAFEBROWSING_TIMEOUT": "2.5",
        "LOG_LEVEL": "debug",
    })
    assert s.api_key == "abc"
    assert s.endpoint == "http://localhost:9000/find"
    assert s.timeout == 2.5
    assert s.log_level == "DEBUG"


def test_blank_key_is_treated_as_missing():
    assert load_settings({"GOOGLE_SAFEBROWSING_KEY": "   "}).api_key is None


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_invalid_timeout_raises(raw):
    with pytest.raises(ConfigError):
        load_settings({"SAFEBROWSING_TIMEOUT": raw})


def test_get_settings_is_loaded_once(monkeypatch):
    monkeypatch.setenv("GOOGLE_SAFEBROWSING_KEY", "first")
    first = get_settings()
    monkeypatch.setenv("GOOGLE_SAFEBROWSING_KEY", "second")
    assert get_settings() is first
    assert get_settings().api_key == "first"


def test_settings_are_immutable():
    s = load_settings({})
    with pytest.raises(AttributeError):
        s.api_key = "changed"
