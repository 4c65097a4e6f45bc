# src/safebrowsing.py
import logging

import requests

from settings import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

CLIENT_ID = "url-safety-checker"
CLIENT_VERSION = "1.0"
THREAT_TYPES = ("MALWARE", "SOCIAL_ENGINEERING")
PLATFORM_TYPES = ("ANY_PLATFORM",)
THREAT_ENTRY_TYPES = ("URL",)


class SafeBrowsingError(Exception):
    """The lookup did not produce a usable answer."""


class MissingApiKeyError(SafeBrowsingError):
    pass


def build_request_payload(url: str) -> dict:
    return {
        "client": {"clientId": CLIENT_ID, "clientVersion": CLIENT_VERSION},
        "threatInfo": {
            "threatTypes": list(THREAT_TYPES),
            "platformTypes": list(PLATFORM_TYPES),
            "threatEntryTypes": list(THREAT_ENTRY_TYPES),
            "threatEntries": [{"url": url}],
        },
    }


# ---------- google safe browsing single-lookup ----------
def find_threat_matches(url: str, api_key: str | None, endpoint: str = DEFAULT_ENDPOINT,
                        timeout: float = DEFAULT_TIMEOUT) -> list:
    """
    Calls the Google Safe Browsing API v4 (threatMatches.find) for one URL.
    Returns the list of match entries; an empty list means no known threat.
    Raises SafeBrowsingError when the answer cannot be trusted.
    """
    if not api_key:
        raise MissingApiKeyError("no API key configured")

    body = build_request_payload(url)
    try:
        r = requests.post(endpoint, params={"key": api_key}, json=body, timeout=timeout)
    except requests.RequestException as e:
        # the exception text carries the request URL, key included
        logger.warning("Safe Browsing request failed: %s", type(e).__name__)
        raise SafeBrowsingError(f"request failed: {type(e).__name__}") from None

    if r.status_code != 200:
        logger.warning("Safe Browsing answered HTTP %s", r.status_code)
        raise SafeBrowsingError(f"http_{r.status_code}")

    try:
        data = r.json()
    except ValueError as e:
        raise SafeBrowsingError("response is not valid JSON") from e
    if not isinstance(data, dict):
        raise SafeBrowsingError("response is not a JSON object")

    matches = data.get("matches") or []
    if not isinstance(matches, list):
        raise SafeBrowsingError("'matches' is not a list")
    logger.debug("Safe Browsing returned %d match(es)", len(matches))
    return matches
