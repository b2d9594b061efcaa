"""API key validation and live test outcomes."""

from enum import Enum

from pydantic import BaseModel, Field


class KeyValidation(str, Enum):
    """Offline format check result. Exactly one holds for any input."""

    EMPTY = "empty"
    INVALID_FORMAT = "invalid_format"
    TOO_SHORT = "too_short"
    CONTAINS_SPACES = "contains_spaces"
    VALID = "valid"


class KeyTestStatus(str, Enum):
    """Outcome category of a live API key probe."""

    SUCCESS = "success"
    INVALID_KEY = "invalid_key"
    RATE_LIMITED = "rate_limited"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"
    NO_INTERNET = "no_internet"
    TIMEOUT = "timeout"
    API_ERROR = "api_error"


class KeyTestResult(BaseModel):
    """Live API key probe result. `message` is only set for API_ERROR."""

    status: KeyTestStatus
    message: str | None = Field(default=None, description="Error detail for api_error")

    @classmethod
    def api_error(cls, message: str) -> "KeyTestResult":
        return cls(status=KeyTestStatus.API_ERROR, message=message)

    @property
    def ok(self) -> bool:
        return self.status is KeyTestStatus.SUCCESS
