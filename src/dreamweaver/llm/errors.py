"""Transport error taxonomy and failure classification."""

from enum import Enum


class LLMError(Exception):
    """Base class for chat completion failures."""


class LLMStatusError(LLMError):
    """The endpoint answered with an HTTP error status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class LLMConnectionError(LLMError):
    """The request never got a response."""


class LLMHostUnreachableError(LLMConnectionError):
    """Host name could not be resolved (usually no internet)."""


class LLMTimeoutError(LLMConnectionError):
    """Connect or read timed out."""


class FailureKind(str, Enum):
    """Why a remote story request failed."""

    INVALID_KEY = "invalid_key"
    RATE_LIMITED = "rate_limited"
    ACCESS_DENIED = "access_denied"
    API_ERROR = "api_error"
    NO_INTERNET = "no_internet"
    TIMEOUT = "timeout"
    UNEXPECTED = "unexpected"


_STATUS_KINDS = {
    401: FailureKind.INVALID_KEY,
    403: FailureKind.ACCESS_DENIED,
    429: FailureKind.RATE_LIMITED,
}


def classify_failure(exc: BaseException) -> FailureKind:
    """Map a failure to its category. Pure; no I/O."""
    if isinstance(exc, LLMStatusError):
        return _STATUS_KINDS.get(exc.status_code, FailureKind.API_ERROR)
    if isinstance(exc, LLMHostUnreachableError):
        return FailureKind.NO_INTERNET
    if isinstance(exc, LLMTimeoutError):
        return FailureKind.TIMEOUT
    return FailureKind.UNEXPECTED
