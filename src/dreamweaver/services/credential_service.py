"""API key format validation and live testing."""

import logging

from dreamweaver.config import Settings, get_settings
from dreamweaver.llm.base import LLMClient
from dreamweaver.llm.errors import FailureKind, LLMStatusError, classify_failure
from dreamweaver.models import KeyTestResult, KeyTestStatus, KeyValidation

logger = logging.getLogger(__name__)

KEY_PREFIX = "sk-"
MIN_KEY_LENGTH = 20

TEST_PROMPT = "Say 'test' only"
TEST_MAX_TOKENS = 5


def validate_api_key(raw: str) -> KeyValidation:
    """Check key shape only. First failing check wins; no network access."""
    key = (raw or "").strip()
    if not key:
        return KeyValidation.EMPTY
    if not key.startswith(KEY_PREFIX):
        return KeyValidation.INVALID_FORMAT
    if len(key) < MIN_KEY_LENGTH:
        return KeyValidation.TOO_SHORT
    if any(ch.isspace() for ch in key):
        return KeyValidation.CONTAINS_SPACES
    return KeyValidation.VALID


_TEST_STATUS = {
    FailureKind.INVALID_KEY: KeyTestStatus.INVALID_KEY,
    FailureKind.RATE_LIMITED: KeyTestStatus.RATE_LIMITED,
    FailureKind.ACCESS_DENIED: KeyTestStatus.INSUFFICIENT_PERMISSIONS,
    FailureKind.NO_INTERNET: KeyTestStatus.NO_INTERNET,
    FailureKind.TIMEOUT: KeyTestStatus.TIMEOUT,
}


def key_test_result_for(exc: Exception) -> KeyTestResult:
    """Translate a failed probe into a KeyTestResult."""
    kind = classify_failure(exc)
    status = _TEST_STATUS.get(kind)
    if status is not None:
        return KeyTestResult(status=status)
    if isinstance(exc, LLMStatusError):
        return KeyTestResult.api_error(f"HTTP {exc.status_code}: {exc.message}")
    return KeyTestResult.api_error(f"Network error: {exc}")


class CredentialService:
    """Probes an API key against the live endpoint."""

    def __init__(self, llm: LLMClient, settings: Settings | None = None) -> None:
        self._llm = llm
        self._settings = settings or get_settings()

    async def test_api_key(self, key: str) -> KeyTestResult:
        """One minimal completion. Never raises; every failure becomes a result."""
        messages = [{"role": "user", "content": TEST_PROMPT}]
        try:
            await self._llm.chat(
                messages,
                api_key=key.strip(),
                model=self._settings.llm_model,
                max_tokens=TEST_MAX_TOKENS,
                temperature=0.0,
                timeout=self._settings.llm_test_timeout,
            )
        except Exception as e:
            result = key_test_result_for(e)
            logger.info("API key test failed: %s", result.status.value)
            return result
        return KeyTestResult(status=KeyTestStatus.SUCCESS)
