"""LLM client abstract interface - OpenAI-compatible API."""

from abc import ABC, abstractmethod


class LLMClient(ABC):
    """OpenAI-compatible chat completion transport.

    Implementations raise `dreamweaver.llm.errors.LLMError` subclasses for
    transport and HTTP failures.
    """

    @abstractmethod
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
        """
        Send chat completion request and return assistant message content.
        messages: [{"role": "system"|"user"|"assistant", "content": "..."}]
        Returns "" when the response has no content.
        """
        ...
