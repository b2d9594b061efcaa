"""Tests for the OpenAI client: SDK error translation and request shape."""

import socket
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from dreamweaver.llm.errors import (
    LLMConnectionError,
    LLMHostUnreachableError,
    LLMStatusError,
    LLMTimeoutError,
)
from dreamweaver.llm.openai_client import OpenAIClient, translate_error

URL = "https://api.openai.com/v1/chat/completions"


def _request() -> httpx.Request:
    return httpx.Request("POST", URL)


def _status_error(cls, status: int, message: str):
    response = httpx.Response(status, request=_request())
    return cls(message, response=response, body=None)


def _completion(content):
    message = SimpleNamespace(role="assistant", content=content)
    return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message, finish_reason="stop")])


class TestTranslateError:
    @pytest.mark.parametrize(
        "cls, status",
        [
            (openai.AuthenticationError, 401),
            (openai.PermissionDeniedError, 403),
            (openai.RateLimitError, 429),
            (openai.InternalServerError, 500),
        ],
    )
    def test_status_errors(self, cls, status):
        err = translate_error(_status_error(cls, status, "nope"))
        assert isinstance(err, LLMStatusError)
        assert err.status_code == status
        assert err.message == "nope"

    def test_timeout(self):
        assert isinstance(translate_error(openai.APITimeoutError(request=_request())), LLMTimeoutError)

    def test_dns_failure(self):
        exc = openai.APIConnectionError(request=_request())
        connect = httpx.ConnectError("[Errno -2] Name or service not known")
        connect.__cause__ = socket.gaierror(-2, "Name or service not known")
        exc.__cause__ = connect

        assert isinstance(translate_error(exc), LLMHostUnreachableError)

    def test_other_connection_failure(self):
        exc = openai.APIConnectionError(request=_request())
        exc.__cause__ = httpx.ConnectError("Connection refused")

        err = translate_error(exc)
        assert type(err) is LLMConnectionError


class TestHttpClientOwnership:
    @pytest.mark.asyncio
    async def test_injected_client_left_open(self):
        http_client = httpx.AsyncClient()
        client = OpenAIClient(model="gpt-4o-mini", http_client=http_client)

        await client.aclose()

        assert http_client.is_closed is False
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_own_client_uses_sdk_defaults_and_is_closed(self):
        client = OpenAIClient(model="gpt-4o-mini")
        http_client = client._get_http_client()

        assert isinstance(http_client, httpx.AsyncClient)
        assert http_client.follow_redirects is True

        await client.aclose()
        assert http_client.is_closed is True


class TestOpenAIClientChat:
    @pytest.fixture
    def sdk(self):
        create = AsyncMock(return_value=_completion("  A story  "))
        instance = MagicMock()
        instance.chat.completions.create = create
        with patch("dreamweaver.llm.openai_client.AsyncOpenAI", return_value=instance) as cls:
            yield cls, create

    @pytest.mark.asyncio
    async def test_returns_content_and_disables_retries(self, sdk):
        cls, create = sdk
        client = OpenAIClient(model="gpt-4o-mini", base_url="https://example.test/v1")

        content = await client.chat(
            [{"role": "user", "content": "hi"}],
            api_key="sk-test",
            max_tokens=600,
            temperature=0.8,
            timeout=60.0,
        )

        assert content == "  A story  "
        kwargs = cls.call_args.kwargs
        assert kwargs["api_key"] == "sk-test"
        assert kwargs["max_retries"] == 0
        assert kwargs["base_url"] == "https://example.test/v1"
        sent = create.call_args.kwargs
        assert sent["model"] == "gpt-4o-mini"
        assert sent["max_tokens"] == 600
        assert sent["temperature"] == 0.8
        assert sent["stream"] is False
        assert sent["timeout"].read == 60.0
        await client.aclose()

    @pytest.mark.asyncio
    async def test_none_content_is_empty_string(self, sdk):
        _, create = sdk
        create.return_value = _completion(None)
        client = OpenAIClient(model="gpt-4o-mini")
        assert await client.chat([], api_key="sk-test") == ""
        await client.aclose()

    @pytest.mark.asyncio
    async def test_no_choices_is_empty_string(self, sdk):
        _, create = sdk
        create.return_value = SimpleNamespace(choices=[])
        client = OpenAIClient(model="gpt-4o-mini")
        assert await client.chat([], api_key="sk-test") == ""
        await client.aclose()

    @pytest.mark.asyncio
    async def test_sdk_error_translated(self, sdk):
        _, create = sdk
        create.side_effect = _status_error(openai.RateLimitError, 429, "slow down")
        client = OpenAIClient(model="gpt-4o-mini")

        with pytest.raises(LLMStatusError) as exc_info:
            await client.chat([], api_key="sk-test")

        assert exc_info.value.status_code == 429
        assert isinstance(exc_info.value.__cause__, openai.RateLimitError)
        await client.aclose()
