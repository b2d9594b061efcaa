"""Story service - AI stories with template fallback."""

import logging

from dreamweaver.config import Settings, get_settings
from dreamweaver.llm.base import LLMClient
from dreamweaver.llm.errors import FailureKind, classify_failure
from dreamweaver.models import (
    KeyValidation,
    StoryError,
    StoryRequest,
    StoryResult,
    StorySuccess,
)
from dreamweaver.services.credential_service import validate_api_key
from dreamweaver.services.prompts import build_story_prompt
from dreamweaver.services.templates import generate_template_story

logger = logging.getLogger(__name__)

MISSING_CHILD_NAMES = "Please enter at least one child's name."
MISSING_CHARACTERS = "Please choose at least one character."

INVALID_FORMAT_WARNING = "Invalid API key format. Used template story instead."
EMPTY_RESPONSE_WARNING = "AI returned empty response. Used template story instead."

FALLBACK_WARNINGS = {
    FailureKind.INVALID_KEY: "Invalid API key. Used template story instead.",
    FailureKind.RATE_LIMITED: "Rate limit exceeded. Used template story instead.",
    FailureKind.ACCESS_DENIED: "API access denied. Used template story instead.",
    FailureKind.API_ERROR: "API error. Used template story instead.",
    FailureKind.NO_INTERNET: "No internet connection. Used template story instead.",
    FailureKind.TIMEOUT: "Request timeout. Used template story instead.",
    FailureKind.UNEXPECTED: "Unexpected error. Used template story instead.",
}


class StoryService:
    """Orchestrates story generation.

    Every remote failure falls back to a template story with a warning;
    `generate` only returns StoryError for blank child names or characters.
    """

    def __init__(self, llm: LLMClient, settings: Settings | None = None) -> None:
        self._llm = llm
        self._settings = settings or get_settings()

    def _template(self, request: StoryRequest, warning: str | None = None) -> StorySuccess:
        story = generate_template_story(
            request.mode,
            request.child_names,
            request.characters,
            request.holiday,
        )
        return StorySuccess(story=story, is_ai_generated=False, warning=warning)

    async def generate(
        self,
        request: StoryRequest,
        api_key: str | None = None,
    ) -> StoryResult:
        """
        Generate a story. `api_key` overrides the configured key; a blank
        key means template stories only, with no warning.
        """
        if not request.child_names.strip():
            return StoryError(message=MISSING_CHILD_NAMES)
        if not request.characters.strip():
            return StoryError(message=MISSING_CHARACTERS)

        key = (self._settings.llm_api_key if api_key is None else api_key).strip()
        if not key:
            return self._template(request)

        if validate_api_key(key) is not KeyValidation.VALID:
            logger.warning("API key failed format check, using template story")
            return self._template(request, INVALID_FORMAT_WARNING)

        prompt = build_story_prompt(
            request.mode,
            request.child_names,
            request.characters,
            request.holiday,
        )
        messages = [{"role": "user", "content": prompt}]
        try:
            content = await self._llm.chat(
                messages,
                api_key=key,
                model=self._settings.llm_model,
                max_tokens=self._settings.story_max_tokens,
                temperature=self._settings.story_temperature,
                timeout=self._settings.llm_timeout,
            )
        except Exception as e:
            kind = classify_failure(e)
            if kind is FailureKind.UNEXPECTED:
                logger.exception("Story generation failed unexpectedly: %s", e)
            else:
                logger.warning("Story generation failed (%s), using template story", kind.value)
            return self._template(request, FALLBACK_WARNINGS[kind])

        story = (content or "").strip()
        if not story:
            logger.warning("AI returned empty story, using template story")
            return self._template(request, EMPTY_RESPONSE_WARNING)
        return StorySuccess(story=story, is_ai_generated=True)
