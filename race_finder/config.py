"""Race Finder configuration — loaded from environment variables."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from dotenv import load_dotenv

# Root of the repo
REPO_ROOT = Path(__file__).resolve().parent.parent

load_dotenv(REPO_ROOT / ".env")

# Jinja2 templates for the web UI
WEB_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent / "static"

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

DEFAULT_LLM_MODEL = "claude-sonnet-4-20250514"
DEFAULT_USER_AGENT = "RaceFinder/1.0 (race discovery geocoding)"

# Settings field → environment variable
ENV_VARS = {
    "supabase_url": "SUPABASE_URL",
    "supabase_key": "SUPABASE_SERVICE_KEY",
    "exa_api_key": "EXA_API_KEY",
    "anthropic_api_key": "ANTHROPIC_API_KEY",
    "firecrawl_api_key": "FIRECRAWL_API_KEY",
    "mapbox_token": "MAPBOX_TOKEN",
    "llm_model": "LLM_MODEL",
    "geocoder_user_agent": "GEOCODER_USER_AGENT",
    "geocode_delay": "GEOCODE_DELAY",
}


class ConfigError(RuntimeError):
    """Raised when required environment variables are missing."""


@dataclass(frozen=True)
class Settings:
    """Credentials and endpoints for one process.

    Built once at start-up and handed to each component that needs it.
    """

    supabase_url: str = ""
    supabase_key: str = ""
    exa_api_key: str = ""
    anthropic_api_key: str = ""
    firecrawl_api_key: str = ""
    mapbox_token: str = ""
    llm_model: str = DEFAULT_LLM_MODEL
    geocoder_user_agent: str = DEFAULT_USER_AGENT
    geocode_delay: float = 1.0

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            raw = env.get(ENV_VARS[f.name], "").strip()
            if not raw:
                continue
            if f.name == "geocode_delay":
                try:
                    values[f.name] = float(raw)
                except ValueError:
                    raise ConfigError(f"GEOCODE_DELAY must be a number, got {raw!r}")
            else:
                values[f.name] = raw
        return cls(**values)

    def require(self, *names: str) -> "Settings":
        """Raise ConfigError unless every named setting is non-empty."""
        missing = [ENV_VARS[n] for n in names if not getattr(self, n)]
        if missing:
            raise ConfigError(
                "Missing required environment variables: " + ", ".join(missing)
            )
        return self


def configure_logging(verbose: bool = False) -> None:
    """Console logging for the command-line scripts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
