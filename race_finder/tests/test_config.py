"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from race_finder import config
from race_finder.config import DEFAULT_LLM_MODEL, ConfigError, Settings


def test_from_env_reads_variables():
    settings = Settings.from_env({
        "SUPABASE_URL": "https://x.supabase.co",
        "SUPABASE_SERVICE_KEY": "key",
        "EXA_API_KEY": "exa",
        "GEOCODE_DELAY": "0.5",
    })
    assert settings.supabase_url == "https://x.supabase.co"
    assert settings.supabase_key == "key"
    assert settings.exa_api_key == "exa"
    assert settings.geocode_delay == 0.5
    assert settings.llm_model == DEFAULT_LLM_MODEL


def test_blank_values_fall_back_to_defaults():
    settings = Settings.from_env({"LLM_MODEL": "  ", "GEOCODE_DELAY": ""})
    assert settings.llm_model == DEFAULT_LLM_MODEL
    assert settings.geocode_delay == 1.0


def test_bad_delay_rejected():
    with pytest.raises(ConfigError, match="GEOCODE_DELAY"):
        Settings.from_env({"GEOCODE_DELAY": "soon"})


def test_require_names_every_missing_variable():
    settings = Settings(supabase_url="https://x.supabase.co")
    with pytest.raises(ConfigError) as exc:
        settings.require("supabase_url", "supabase_key", "firecrawl_api_key")
    message = str(exc.value)
    assert "SUPABASE_SERVICE_KEY" in message
    assert "FIRECRAWL_API_KEY" in message
    assert "SUPABASE_URL" not in message


def test_require_returns_settings():
    settings = Settings(supabase_url="u", supabase_key="k")
    assert settings.require("supabase_url", "supabase_key") is settings


def test_dotenv_read_from_repo_root():
    assert config.REPO_ROOT == Path(config.__file__).resolve().parent.parent
    assert (config.REPO_ROOT / "pyproject.toml").exists()
