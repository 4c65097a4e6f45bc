# src/settings.py
import logging
import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_ENDPOINT = "https://safebrowsing.googleapis.com/v4/threatMatches:find"
DEFAULT_TIMEOUT = 10.0


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def _parse_timeout(raw):
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"SAFEBROWSING_TIMEOUT must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"SAFEBROWSING_TIMEOUT must be positive, got {raw!r}")
    return value


def load_settings(environ=None) -> Settings:
    """
    Reads the configuration from environment variables.
    GOOGLE_SAFEBROWSING_KEY is a secret: keep it out of the source and the logs.
    """
    env = os.environ if environ is None else environ
    return Settings(
        api_key=(env.get("GOOGLE_SAFEBROWSING_KEY") or "").strip() or None,
        endpoint=env.get("SAFEBROWSING_ENDPOINT") or DEFAULT_ENDPOINT,
        timeout=_parse_timeout(env.get("SAFEBROWSING_TIMEOUT")),
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # loaded once per process
    return load_settings()


def configure_logging(settings: Settings | None = None):
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
