"""Story mode and character franchise catalog, loaded from YAML config."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field

from dreamweaver.config import DATA_DIR, load_yaml_config
from dreamweaver.models import StoryMode

logger = logging.getLogger(__name__)


class ModeOption(BaseModel):
    """Selectable story mode."""

    id: StoryMode
    name: str


class Franchise(BaseModel):
    """Popular characters grouped by franchise."""

    name: str
    icon: str = ""
    characters: list[str] = Field(default_factory=list)


class Catalog(BaseModel):
    story_modes: list[ModeOption] = Field(default_factory=list)
    franchises: list[Franchise] = Field(default_factory=list)


def load_catalog(path: Path | None = None) -> Catalog:
    """Load catalog YAML. Missing file yields an empty catalog."""
    path = path or DATA_DIR / "catalog.yaml"
    raw = load_yaml_config(path)
    if not raw:
        logger.warning("Catalog not found or empty: %s", path)
    return Catalog.model_validate(raw)


@lru_cache
def get_catalog() -> Catalog:
    """Cached default catalog."""
    return load_catalog()
