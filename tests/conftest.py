"""
Pytest configuration and fixtures
"""
import os
import sys
import threading
from pathlib import Path

import pytest

# Keep test runs from writing log files
os.environ["LOG_TO_FILE"] = "false"

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from models.skill_candidate import RepositorySummary  # noqa: E402
from tools.github_tools import GithubApiError  # noqa: E402
from utils.config import Settings  # noqa: E402


def make_repo(name, language=None, topics=None):
    return RepositorySummary(
        name=name,
        primary_language=language,
        topics=topics or [],
        language_stats_locator=f"https://api.github.com/repos/octocat/{name}/languages",
    )


class FakeGithubTools:
    """In-memory stand-in for GithubTools."""

    def __init__(self, repos=None, languages=None, missing_user=False, listing_error=None):
        self.repos = list(repos or [])
        # locator -> dict or exception instance
        self.languages = dict(languages or {})
        self.missing_user = missing_user
        self.listing_error = listing_error
        self.calls = []
        self._lock = threading.Lock()

    def _record(self, call):
        with self._lock:
            self.calls.append(call)

    def fetch_user_profile(self, username):
        self._record(("profile", username))
        if self.missing_user:
            raise GithubApiError("GitHub API error: 404 - Not Found", status_code=404)
        return {"login": username}

    def fetch_user_repos(self, username, per_page=100):
        self._record(("repos", username, per_page))
        if self.listing_error is not None:
            raise self.listing_error
        return list(self.repos)

    def fetch_repo_languages(self, languages_url):
        self._record(("languages", languages_url))
        result = self.languages.get(languages_url, {})
        if isinstance(result, Exception):
            raise result
        return result

    def language_calls(self):
        return [call[1] for call in self.calls if call[0] == "languages"]


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def repo_factory():
    return make_repo


@pytest.fixture
def fake_github_factory():
    return FakeGithubTools
