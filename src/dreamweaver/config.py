"""Configuration management - config-driven architecture."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, description="Bind port")

    # LLM (OpenAI-compatible)
    llm_base_url: str | None = Field(default=None, description="OpenAI-compatible API base URL")
    llm_api_key: str = Field(default="", description="Default API key; blank means template stories only")
    llm_model: str = Field(default="gpt-4o-mini", description="Model name")
    llm_timeout: float = Field(default=60.0, description="Read timeout in seconds for story generation")
    llm_connect_timeout: float = Field(default=30.0, description="Connect timeout in seconds")
    llm_test_timeout: float = Field(default=15.0, description="Timeout in seconds for the API key test call")

    # Story generation
    story_max_tokens: int = Field(default=600, description="Max output tokens for a story")
    story_temperature: float = Field(default=0.8, description="Sampling temperature for a story")


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
