"""FastAPI application - story generation and API key endpoints."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Header
from pydantic import BaseModel, Field

from dreamweaver.catalog import Catalog, get_catalog
from dreamweaver.llm import OpenAIClient
from dreamweaver.models import KeyTestResult, KeyValidation, StoryRequest, StoryResult, StorySuccess
from dreamweaver.services import CredentialService, StoryService, validate_api_key
from dreamweaver.services.formatting import join_characters, join_child_names, story_title

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Dependency injection - created at startup
_llm: OpenAIClient | None = None


def _get_llm() -> OpenAIClient:
    global _llm
    if _llm is None:
        _llm = OpenAIClient()
    return _llm


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup."""
    global _llm
    _get_llm()
    yield
    if _llm is not None:
        await _llm.aclose()
    _llm = None


def get_story_service() -> StoryService:
    return StoryService(_get_llm())


def get_credential_service() -> CredentialService:
    return CredentialService(_get_llm())


class ApiKeyBody(BaseModel):
    api_key: str = Field(default="", description="Key to check")


class ValidationResponse(BaseModel):
    validation: KeyValidation


class CreateStoryBody(BaseModel):
    """Form input from the app. Names are joined server-side for display."""

    child_names: list[str] = Field(default_factory=list, max_length=3)
    characters: list[str] | str = Field(default_factory=list)
    mode: str = Field(default="playful")
    holiday: str | None = Field(default=None)


class StoryResponse(BaseModel):
    title: str
    result: StoryResult


app = FastAPI(
    title="Dreamweaver",
    description="Personalized children's stories with AI and template fallback",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check for load balancers."""
    return {"status": "ok"}


@app.get("/catalog", response_model=Catalog)
async def catalog() -> Catalog:
    """Story modes and popular characters for the form."""
    return get_catalog()


@app.post("/api-key/validate", response_model=ValidationResponse)
async def api_key_validate(body: ApiKeyBody) -> ValidationResponse:
    """Offline format check, called on every keystroke."""
    return ValidationResponse(validation=validate_api_key(body.api_key))


@app.post("/api-key/test", response_model=KeyTestResult)
async def api_key_test(
    body: ApiKeyBody,
    credentials: CredentialService = Depends(get_credential_service),
) -> KeyTestResult:
    """Live probe with a minimal completion."""
    return await credentials.test_api_key(body.api_key)


@app.post("/stories", response_model=StoryResponse)
async def create_story(
    body: CreateStoryBody,
    x_api_key: str | None = Header(default=None),
    stories: StoryService = Depends(get_story_service),
) -> StoryResponse:
    """
    Generate a story. X-API-Key overrides the configured key; failures come
    back as template stories with a warning, never as HTTP errors.
    """
    names_text = join_child_names(body.child_names)
    has_names = any(n.strip() for n in body.child_names)
    request = StoryRequest(
        child_names=names_text if has_names else "",
        characters=join_characters(body.characters),
        mode=body.mode,
        holiday=body.holiday,
    )
    result = await stories.generate(request, api_key=x_api_key)
    if isinstance(result, StorySuccess):
        logger.info("Story created: mode=%s ai=%s", body.mode, result.is_ai_generated)
    else:
        logger.info("Story rejected: %s", result.message)
    return StoryResponse(
        title=story_title(body.mode, names_text, body.holiday),
        result=result,
    )
