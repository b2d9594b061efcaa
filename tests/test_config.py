"""Tests for settings, YAML loading and the catalog."""

from dreamweaver.catalog import load_catalog
from dreamweaver.config import Settings, load_yaml_config
from dreamweaver.models import StoryMode


def test_settings_defaults():
    settings = Settings(_env_file=None, llm_api_key="")
    assert settings.llm_model == "gpt-4o-mini"
    assert settings.llm_timeout == 60.0
    assert settings.llm_test_timeout < settings.llm_timeout
    assert settings.story_max_tokens == 600
    assert settings.story_temperature == 0.8


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("LLM_MODEL", "gpt-4o")
    monkeypatch.setenv("LLM_TIMEOUT", "45")
    settings = Settings(_env_file=None)
    assert settings.llm_model == "gpt-4o"
    assert settings.llm_timeout == 45.0


def test_load_yaml_missing_file(tmp_path):
    assert load_yaml_config(tmp_path / "nope.yaml") == {}


def test_default_catalog():
    catalog = load_catalog()
    assert {m.id for m in catalog.story_modes} == set(StoryMode)
    assert len(catalog.franchises) == 6


def test_custom_catalog(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "story_modes:\n  - id: bedtime\n    name: Sleepy\nfranchises: []\n",
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert catalog.story_modes[0].id is StoryMode.BEDTIME
