"""Skill extraction from a GitHub profile: list, aggregate, score, assemble."""

import asyncio
from typing import List, Optional

from extractor.errors import ProfileNotFound, UpstreamUnavailable
from extractor.languages import aggregate_languages, count_primary_languages, detected_languages
from extractor.profile import parse_profile_url
from extractor.scoring import language_candidates, topic_candidates
from extractor.topics import aggregate_topics
from models.skill_candidate import RepositorySummary, SkillCandidate
from tools.github_tools import GithubApiError, GithubTools
from tools.logger import get_tool_logger as get_logger
from utils.config import Settings, load_settings

logger = get_logger("skill_extractor")

REPO_PAGE_SIZE = 100


class SkillExtractor:
    """
    Extracts skill candidates from a GitHub user's public repositories.

    The extractor keeps no state between calls; one instance can serve
    concurrent requests.
    """

    def __init__(self, github: Optional[GithubTools] = None, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()
        self.github = github or GithubTools(
            github_token=self.settings.github_token,
            base_url=self.settings.github_api_url,
            timeout=self.settings.github_timeout,
        )

    def list_repositories(self, username: str) -> List[RepositorySummary]:
        """
        Look up the profile and list its repositories, most recently updated first.

        Raises:
            ProfileNotFound: if GitHub answers 404 for the user.
            UpstreamUnavailable: for any other failure.
        """
        try:
            self.github.fetch_user_profile(username)
            return self.github.fetch_user_repos(username, per_page=REPO_PAGE_SIZE)
        except GithubApiError as e:
            if e.status_code == 404:
                raise ProfileNotFound(username) from e
            raise UpstreamUnavailable(str(e), status_code=e.status_code) from e

    async def extract_skills_async(self, username: str) -> List[SkillCandidate]:
        """
        Extract skills for a GitHub username.

        Language candidates come first, in histogram order, followed by
        topic candidates in first-seen order.
        """
        logger.info(f"Extracting skills for GitHub user: {username}")
        repos = await asyncio.to_thread(self.list_repositories, username)

        histogram = await aggregate_languages(
            self.github.fetch_repo_languages,
            repos,
            sample_size=self.settings.language_sample_size,
            max_concurrency=self.settings.language_fetch_concurrency,
        )
        # Topics use every repository, languages only the most recent sample
        topics = aggregate_topics(repos, exclude=detected_languages(histogram))

        skills = language_candidates(histogram, count_primary_languages(repos))
        skills.extend(topic_candidates(topics))

        logger.info(
            f"Extracted {len(skills)} skills for {username} "
            f"({len(skills) - len(topics)} languages, {len(topics)} topics)"
        )
        return skills

    def extract_skills(self, username: str) -> List[SkillCandidate]:
        """Blocking wrapper around extract_skills_async."""
        return asyncio.run(self.extract_skills_async(username))

    def extract_skills_from_url(self, url: str) -> List[SkillCandidate]:
        """
        Resolve a profile URL and extract skills for it.

        Raises:
            InvalidProfileUrl: before any network call if the URL is unusable.
        """
        username = parse_profile_url(url, host=self.settings.github_host)
        return self.extract_skills(username)


def extract_skills(username: str, github: Optional[GithubTools] = None) -> List[SkillCandidate]:
    """Extract skills for a GitHub username with default settings."""
    return SkillExtractor(github=github).extract_skills(username)
