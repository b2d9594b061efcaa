"""Data models."""

from dreamweaver.models.credential import KeyTestResult, KeyTestStatus, KeyValidation
from dreamweaver.models.story import (
    StoryError,
    StoryMode,
    StoryRequest,
    StoryResult,
    StorySuccess,
)

__all__ = [
    "KeyTestResult",
    "KeyTestStatus",
    "KeyValidation",
    "StoryError",
    "StoryMode",
    "StoryRequest",
    "StoryResult",
    "StorySuccess",
]
