import json
import os
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from models.skill_candidate import RepositorySummary
from tools.logger import get_tool_logger as get_logger
from utils.config import DEFAULT_API_URL


class GithubApiError(Exception):
    """Raised when a GitHub API request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GithubTools:
    """Read-only client for the GitHub REST API."""

    def __init__(
        self,
        github_token: Optional[str] = None,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
    ):
        self.github_token = github_token or os.environ.get("GITHUB_TOKEN")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _make_api_request(self, endpoint: str) -> Any:
        """
        Make a GitHub API request.

        Args:
            endpoint: API endpoint (e.g., '/users/username/repos') or an absolute
                      URL returned by a previous response (e.g. a repo's languages_url)

        Returns:
            Decoded JSON response.

        Raises:
            GithubApiError: on HTTP errors, transport errors and undecodable bodies.
        """
        logger = get_logger("github_api")
        url = endpoint if endpoint.startswith(("http://", "https://")) else f"{self.base_url}{endpoint}"
        headers = {"Accept": "application/vnd.github.v3+json"}

        # Never send the token to hosts other than the configured API
        if self.github_token and url.startswith(self.base_url):
            headers["Authorization"] = f"token {self.github_token}"

        logger.info(f"Making API request to: {url}")

        req = urllib.request.Request(url, headers=headers)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                return json.loads(response.read().decode())
        except urllib.error.HTTPError as e:
            error_msg = f"GitHub API error: {e.code} - {e.reason}"
            if e.code == 404:
                error_msg += " (User or resource not found)"
            elif e.code == 403:
                error_msg += " (Rate limit exceeded or forbidden - consider using GITHUB_TOKEN)"
            logger.error(error_msg)
            raise GithubApiError(error_msg, status_code=e.code) from e
        except (urllib.error.URLError, OSError) as e:
            logger.error(f"Error making API request: {e}")
            raise GithubApiError(f"GitHub API unreachable: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise GithubApiError(f"Invalid JSON from GitHub API: {e}") from e

    def fetch_user_profile(self, username: str) -> Dict[str, Any]:
        """
        Fetch the public profile of a GitHub user.

        Args:
            username: GitHub username

        Returns:
            The user object as returned by GitHub.
        """
        logger = get_logger("fetch_user_profile")
        logger.info(f"Fetching profile for user: {username}")
        return self._make_api_request(f"/users/{urllib.parse.quote(username, safe='')}")

    def fetch_user_repos(self, username: str, per_page: int = 100) -> List[RepositorySummary]:
        """
        Fetch public repositories for a GitHub user, most recently updated first.

        Args:
            username: GitHub username
            per_page: Number of repos to request (max 100)

        Returns:
            Repository summaries in the order GitHub returned them.
        """
        logger = get_logger("fetch_user_repos")
        logger.info(f"Fetching repositories for user: {username}")

        endpoint = f"/users/{urllib.parse.quote(username, safe='')}/repos?sort=updated&per_page={per_page}"
        repos_data = self._make_api_request(endpoint)

        if not isinstance(repos_data, list):
            raise GithubApiError(f"Unexpected repository listing payload for {username}")

        try:
            repos = [RepositorySummary.from_api(repo) for repo in repos_data]
        except (ValidationError, AttributeError, TypeError) as e:
            logger.error(f"Unexpected repository entry for {username}: {e}")
            raise GithubApiError(f"Unexpected repository entry for {username}: {e}") from e
        logger.info(f"Found {len(repos)} repositories for {username}")
        return repos

    def fetch_repo_languages(self, languages_url: str) -> Dict[str, int]:
        """
        Fetch the language byte breakdown for a repository.

        Args:
            languages_url: The repository's languages_url

        Returns:
            Mapping of language name to bytes of code.
        """
        logger = get_logger("fetch_repo_languages")
        logger.debug(f"Fetching languages from {languages_url}")

        languages_data = self._make_api_request(languages_url)
        if not isinstance(languages_data, dict):
            raise GithubApiError(f"Unexpected language payload from {languages_url}")
        return languages_data
