"""OpenAI-compatible LLM client implementation."""

import logging
import socket
from typing import Any

import httpx
import openai
from openai import AsyncOpenAI

from dreamweaver.config import get_settings
from dreamweaver.llm.base import LLMClient
from dreamweaver.llm.errors import (
    LLMConnectionError,
    LLMError,
    LLMHostUnreachableError,
    LLMStatusError,
    LLMTimeoutError,
)

logger = logging.getLogger(__name__)


def _caused_by_dns_failure(exc: BaseException) -> bool:
    """Walk the exception chain looking for a name resolution error."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, socket.gaierror):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False


def translate_error(exc: openai.OpenAIError) -> LLMError:
    """Map an openai SDK exception onto the package error taxonomy."""
    if isinstance(exc, openai.APITimeoutError):
        return LLMTimeoutError(str(exc))
    if isinstance(exc, openai.APIStatusError):
        return LLMStatusError(exc.status_code, exc.message)
    if isinstance(exc, openai.APIConnectionError):
        if _caused_by_dns_failure(exc):
            return LLMHostUnreachableError(str(exc))
        return LLMConnectionError(str(exc))
    return LLMError(str(exc))


class OpenAIClient(LLMClient):
    """OpenAI API client - works with OpenAI or compatible endpoints (e.g. LiteLLM).

    One httpx connection pool is shared by every call; the API key is
    supplied per call and never stored.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        connect_timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = get_settings()
        self._base_url = base_url or settings.llm_base_url
        self._model = model or settings.llm_model
        self._timeout = timeout or settings.llm_timeout
        self._connect_timeout = connect_timeout or settings.llm_connect_timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = openai.DefaultAsyncHttpxClient()
            self._owns_client = True
        return self._http_client

    async def aclose(self) -> None:
        """Release pooled connections. An injected client is left to its owner."""
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    async def chat(
        self,
        messages: list[dict[str, str]],
        *,
        api_key: str,
        model: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        timeout: float | None = None,
    ) -> str:
        """Call OpenAI-compatible chat completion. No retries."""
        client_kwargs: dict[str, Any] = {
            "api_key": api_key,
            "max_retries": 0,
            "http_client": self._get_http_client(),
        }
        if self._base_url:
            client_kwargs["base_url"] = self._base_url

        client = AsyncOpenAI(**client_kwargs)
        m = model or self._model
        read_timeout = timeout or self._timeout

        try:
            response = await client.chat.completions.create(
                model=m,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
                stream=False,
                timeout=httpx.Timeout(read_timeout, connect=min(self._connect_timeout, read_timeout)),
            )
        except openai.OpenAIError as e:
            err = translate_error(e)
            logger.debug("Chat completion failed: %s", err)
            raise err from e

        if not response.choices:
            return ""
        content = response.choices[0].message.content
        return content or ""
