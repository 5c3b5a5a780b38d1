"""Runtime settings read from environment variables."""

import os
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_HOST = "github.com"

# Most recently updated repositories sampled for language statistics
LANGUAGE_SAMPLE_SIZE = 10
LANGUAGE_FETCH_CONCURRENCY = 10


class Settings(BaseModel):
    """Settings for the GitHub client, the extractor and the skill-set store."""

    github_token: Optional[str] = None
    github_api_url: str = DEFAULT_API_URL
    github_host: str = DEFAULT_HOST
    github_timeout: float = Field(default=10.0, gt=0)
    language_sample_size: int = Field(default=LANGUAGE_SAMPLE_SIZE, ge=0)
    language_fetch_concurrency: int = Field(default=LANGUAGE_FETCH_CONCURRENCY, ge=1)
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None


def load_settings() -> Settings:
    """
    Build settings from the current environment.

    Unset or empty variables fall back to the defaults above.
    """
    values = {
        "github_token": os.environ.get("GITHUB_TOKEN"),
        "github_api_url": os.environ.get("GITHUB_API_URL"),
        "github_host": os.environ.get("GITHUB_HOST"),
        "github_timeout": os.environ.get("GITHUB_TIMEOUT"),
        "language_sample_size": os.environ.get("LANGUAGE_SAMPLE_SIZE"),
        "language_fetch_concurrency": os.environ.get("LANGUAGE_FETCH_CONCURRENCY"),
        "supabase_url": os.environ.get("SUPABASE_URL"),
        "supabase_key": os.environ.get("SUPABASE_KEY"),
    }
    return Settings(**{key: value for key, value in values.items() if value})
