# src/analyser.py
import logging
from dataclasses import dataclass, field
from enum import Enum

from safebrowsing import MissingApiKeyError, SafeBrowsingError, find_threat_matches
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

THREAT_MESSAGE = "Warning: this URL has been flagged as unsafe (malware or social engineering)."
SAFE_MESSAGE = "This URL appears to be safe."
PROMPT_MESSAGE = "Please enter a URL to check."
CHECK_FAILED_MESSAGE = "The URL check failed. Please try again later."
NOT_CONFIGURED_MESSAGE = "URL checking is not configured (set GOOGLE_SAFEBROWSING_KEY)."


class Outcome(str, Enum):
    THREAT_DETECTED = "THREAT_DETECTED"
    SAFE = "SAFE"


OUTCOME_MESSAGES = {
    Outcome.THREAT_DETECTED: THREAT_MESSAGE,
    Outcome.SAFE: SAFE_MESSAGE,
}


class EmptyUrlError(ValueError):
    pass


@dataclass(frozen=True)
class CheckResult:
    url: str
    outcome: Outcome
    matches: list = field(default_factory=list)

    @property
    def message(self):
        return OUTCOME_MESSAGES[self.outcome]

    def to_dict(self):
        return {
            "url": self.url,
            "outcome": self.outcome.value,
            "message": self.message,
            "matches": self.matches,
        }


@dataclass(frozen=True)
class FormReply:
    """What the form shows after a submission. level is warning, error or success."""
    level: str
    message: str
    result: CheckResult | None = None


# ---------------------------------------------------------------------
# Check
# ---------------------------------------------------------------------
def outcome_for(matches) -> Outcome:
    return Outcome.THREAT_DETECTED if matches else Outcome.SAFE


def check_url(url, settings: Settings | None = None) -> CheckResult:
    url = (url or "").strip()
    if not url:
        raise EmptyUrlError(PROMPT_MESSAGE)
    settings = settings or get_settings()
    matches = find_threat_matches(url, settings.api_key,
                                  endpoint=settings.endpoint, timeout=settings.timeout)
    result = CheckResult(url=url, outcome=outcome_for(matches), matches=matches)
    logger.info("checked %s -> %s", url, result.outcome.value)
    return result


# ---------------------------------------------------------------------
# Form submission
# ---------------------------------------------------------------------
def submit(url, settings: Settings | None = None) -> FormReply:
    try:
        result = check_url(url, settings)
    except EmptyUrlError:
        return FormReply("warning", PROMPT_MESSAGE)
    except MissingApiKeyError:
        logger.warning("GOOGLE_SAFEBROWSING_KEY not set; skipping lookup")
        return FormReply("warning", NOT_CONFIGURED_MESSAGE)
    except SafeBrowsingError:
        logger.exception("URL check failed")
        return FormReply("error", CHECK_FAILED_MESSAGE)

    if result.outcome is Outcome.THREAT_DETECTED:
        return FormReply("error", result.message, result)
    return FormReply("success", result.message, result)
