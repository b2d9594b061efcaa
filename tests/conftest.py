"""Shared fixtures: settings without env leakage and a fake LLM transport."""

import pytest

from dreamweaver.config import Settings
from dreamweaver.llm.base import LLMClient

VALID_KEY = "sk-" + "a" * 20


class FakeLLMClient(LLMClient):
    """Records chat calls; returns `content` or raises `error`."""

    def __init__(self, content: str = "", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict] = []

    async def chat(
        self,
        messages,
        *,
        api_key,
        model=None,
        max_tokens=1024,
        temperature=0.7,
        timeout=None,
    ):
        self.calls.append(
            {
                "messages": messages,
                "api_key": api_key,
                "model": model,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "timeout": timeout,
            }
        )
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def settings():
    """Defaults only; ignores the developer's .env and LLM_API_KEY."""
    return Settings(_env_file=None, llm_api_key="")


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def valid_key():
    return VALID_KEY
