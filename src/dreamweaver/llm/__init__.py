"""LLM abstraction - OpenAI-compatible."""

from dreamweaver.llm.base import LLMClient
from dreamweaver.llm.errors import (
    FailureKind,
    LLMConnectionError,
    LLMError,
    LLMHostUnreachableError,
    LLMStatusError,
    LLMTimeoutError,
    classify_failure,
)
from dreamweaver.llm.openai_client import OpenAIClient

__all__ = [
    "FailureKind",
    "LLMClient",
    "LLMConnectionError",
    "LLMError",
    "LLMHostUnreachableError",
    "LLMStatusError",
    "LLMTimeoutError",
    "OpenAIClient",
    "classify_failure",
]
