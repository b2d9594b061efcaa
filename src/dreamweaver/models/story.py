"""Story request and result data models."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class StoryMode(str, Enum):
    """Kind of story requested."""

    PLAYFUL = "playful"
    BATH_TIME = "bath time"
    BEDTIME = "bedtime"
    HOLIDAY = "holiday"

    @classmethod
    def parse(cls, raw: str | None) -> "StoryMode | None":
        """Case-insensitive lookup. Returns None for unknown modes."""
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class StoryRequest(BaseModel):
    """Inputs for one story. Names and characters are already joined for display."""

    child_names: str = Field(..., description="e.g. 'Mia and Leo'")
    characters: str = Field(..., description="e.g. 'Pikachu and Bluey'")
    mode: str = Field(default=StoryMode.PLAYFUL.value, description="playful, bath time, bedtime or holiday")
    holiday: str | None = Field(default=None, description="Holiday name for holiday mode")


class StorySuccess(BaseModel):
    """A usable story, AI-written or from a template."""

    kind: Literal["success"] = "success"
    story: str
    is_ai_generated: bool
    warning: str | None = Field(default=None, description="Why a template was used instead of AI")


class StoryError(BaseModel):
    """Local input problem; no story was produced."""

    kind: Literal["error"] = "error"
    message: str


StoryResult = Annotated[Union[StorySuccess, StoryError], Field(discriminator="kind")]
