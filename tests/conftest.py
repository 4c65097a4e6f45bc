"""Shared fixtures: configuration comes from the environment, so every test
starts from a clean, known set of variables and an empty settings cache."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

import settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("GOOGLE_SAFEBROWSING_KEY", "SAFEBROWSING_ENDPOINT",
                 "SAFEBROWSING_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings.get_settings.cache_clear()
    yield
    settings.get_settings.cache_clear()


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("GOOGLE_SAFEBROWSING_KEY", "test-key")
    settings.get_settings.cache_clear()
    return "test-key"


def mock_response(json_data=None, status_code: int = 200) -> MagicMock:
    """Build a mock requests.Response-like object."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = json_data if json_data is not None else {}
    return resp


MATCH = {
    "threatType": "SOCIAL_ENGINEERING",
    "platformType": "ANY_PLATFORM",
    "threatEntryType": "URL",
    "threat": {"url": "http://phish.example/"},
    "cacheDuration": "300s",
}


SECRET_KEY = "SUPERSECRET123"


def leaky_connection_error() -> Exception:
    """A ConnectionError worded the way urllib3 words it, request URL and key included."""
    return requests.ConnectionError(
        "HTTPConnectionPool(host='127.0.0.1', port=1): Max retries exceeded with url: "
        f"/find?key={SECRET_KEY} (Caused by NewConnectionError('Connection refused'))"
    )
