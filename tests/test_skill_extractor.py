"""Tests for the end-to-end extraction pipeline (extractor/pipeline.py)."""

import asyncio
from unittest.mock import patch

import pytest

from extractor.errors import InvalidProfileUrl, ProfileNotFound, UpstreamUnavailable
from extractor.pipeline import SkillExtractor
from models.skill_candidate import SkillCategory, SkillLevel, SkillSource
from tools.github_tools import GithubApiError, GithubTools


def _summary(skills):
    return [(s.name, s.level, s.level_score, s.source, s.category) for s in skills]


class TestExtractSkills:

    def test_reference_scenario(self, repo_factory, fake_github_factory, settings):
        r1 = repo_factory("r1", "Python", topics=["machine-learning"])
        r2 = repo_factory("r2", "JavaScript")
        github = fake_github_factory(repos=[r1, r2], languages={
            r1.language_stats_locator: {"Python": 800, "JavaScript": 200},
            r2.language_stats_locator: {"JavaScript": 1000},
        })

        skills = SkillExtractor(github=github, settings=settings).extract_skills("octocat")

        assert _summary(skills) == [
            ("Python", SkillLevel.ADVANCED, 80, SkillSource.LANGUAGE, SkillCategory.PROGRAMMING),
            ("JavaScript", SkillLevel.ADVANCED, 90, SkillSource.LANGUAGE, SkillCategory.PROGRAMMING),
            ("Machine Learning", SkillLevel.BEGINNER, 30, SkillSource.TOPIC, SkillCategory.DATA_SCIENCE),
        ]
        assert skills[0].description == "Extracted from GitHub repositories. Used in 1 repositories."
        assert skills[2].description == "Used in 1 GitHub repositories as a topic."

    def test_calls_profile_then_listing(self, fake_github_factory, settings):
        github = fake_github_factory()
        SkillExtractor(github=github, settings=settings).extract_skills("octocat")
        assert github.calls[:2] == [("profile", "octocat"), ("repos", "octocat", 100)]

    def test_zero_repositories(self, fake_github_factory, settings):
        github = fake_github_factory(repos=[])
        assert SkillExtractor(github=github, settings=settings).extract_skills("octocat") == []

    def test_topic_matching_language_appears_once(self, repo_factory, fake_github_factory, settings):
        repo = repo_factory("api", "Go", topics=["go", "docker"])
        github = fake_github_factory(repos=[repo], languages={repo.language_stats_locator: {"Go": 100}})

        skills = SkillExtractor(github=github, settings=settings).extract_skills("octocat")

        assert [s.name for s in skills] == ["Go", "Docker"]
        assert skills[0].source == SkillSource.LANGUAGE

    def test_topic_matching_undetected_language_is_kept(self, repo_factory, fake_github_factory, settings):
        repo = repo_factory("notes", topics=["python"])
        github = fake_github_factory(repos=[repo], languages={repo.language_stats_locator: {"Python": 0}})

        skills = SkillExtractor(github=github, settings=settings).extract_skills("octocat")

        assert _summary(skills) == [
            ("Python", SkillLevel.BEGINNER, 30, SkillSource.TOPIC, SkillCategory.OTHER),
        ]

    def test_all_language_calls_fail(self, repo_factory, fake_github_factory, settings):
        repos = [repo_factory(f"r{i}", "Python", topics=["docker"]) for i in range(3)]
        github = fake_github_factory(repos=repos, languages={
            repo.language_stats_locator: GithubApiError("GitHub API error: 502", status_code=502)
            for repo in repos
        })

        skills = SkillExtractor(github=github, settings=settings).extract_skills("octocat")

        assert _summary(skills) == [
            ("Docker", SkillLevel.INTERMEDIATE, 50, SkillSource.TOPIC, SkillCategory.DEVOPS),
        ]

    def test_topics_use_full_list_but_languages_use_sample(self, repo_factory, fake_github_factory, settings):
        repos = [repo_factory(f"r{i}", "Rust", topics=["kubernetes"]) for i in range(12)]
        github = fake_github_factory(repos=repos, languages={
            repo.language_stats_locator: {"Rust": 10} for repo in repos
        })

        skills = SkillExtractor(github=github, settings=settings).extract_skills("octocat")

        assert len(github.language_calls()) == 10
        rust, kubernetes = skills
        assert rust.description == "Extracted from GitHub repositories. Used in 12 repositories."
        assert kubernetes.description == "Used in 12 GitHub repositories as a topic."
        assert kubernetes.level_score == 75

    def test_deterministic(self, repo_factory, fake_github_factory, settings):
        repos = [
            repo_factory("a", "Python", topics=["ui", "react"]),
            repo_factory("b", "TypeScript", topics=["react"]),
            repo_factory("c", "Shell"),
        ]
        languages = {
            repos[0].language_stats_locator: {"Python": 500, "Shell": 30},
            repos[1].language_stats_locator: {"TypeScript": 900, "CSS": 70},
            repos[2].language_stats_locator: {"Shell": 120},
        }
        first = SkillExtractor(github=fake_github_factory(repos=repos, languages=languages), settings=settings)
        second = SkillExtractor(github=fake_github_factory(repos=repos, languages=languages), settings=settings)

        one = [s.model_dump_json() for s in first.extract_skills("octocat")]
        two = [s.model_dump_json() for s in second.extract_skills("octocat")]
        assert one == two

    def test_async_entry_point(self, repo_factory, fake_github_factory, settings):
        repo = repo_factory("a", "C")
        github = fake_github_factory(repos=[repo], languages={repo.language_stats_locator: {"C": 1}})
        skills = asyncio.run(SkillExtractor(github=github, settings=settings).extract_skills_async("octocat"))
        assert [s.name for s in skills] == ["C"]


class TestExtractionErrors:

    def test_profile_not_found(self, fake_github_factory, settings):
        github = fake_github_factory(missing_user=True)
        with pytest.raises(ProfileNotFound):
            SkillExtractor(github=github, settings=settings).extract_skills("ghost")
        assert not github.language_calls()

    def test_listing_404_is_not_found(self, fake_github_factory, settings):
        github = fake_github_factory(listing_error=GithubApiError("gone", status_code=404))
        with pytest.raises(ProfileNotFound):
            SkillExtractor(github=github, settings=settings).extract_skills("ghost")

    @pytest.mark.parametrize("status_code", [403, 500, None])
    def test_upstream_unavailable(self, fake_github_factory, settings, status_code):
        github = fake_github_factory(listing_error=GithubApiError("nope", status_code=status_code))
        with pytest.raises(UpstreamUnavailable) as exc_info:
            SkillExtractor(github=github, settings=settings).extract_skills("octocat")
        assert exc_info.value.status_code == status_code

    @pytest.mark.parametrize("entry", [
        {"name": "a", "languages_url": None},
        {"name": None, "languages_url": "https://api.github.com/repos/o/a/languages"},
        "not-a-dict",
    ])
    def test_malformed_listing_entry_is_upstream_unavailable(self, settings, entry):
        def api(endpoint):
            if endpoint == "/users/octocat":
                return {"login": "octocat"}
            return [entry]

        github = GithubTools(github_token="")
        with patch.object(github, "_make_api_request", side_effect=api):
            with pytest.raises(UpstreamUnavailable):
                SkillExtractor(github=github, settings=settings).extract_skills("octocat")

    def test_invalid_url_makes_no_calls(self, fake_github_factory, settings):
        github = fake_github_factory()
        with pytest.raises(InvalidProfileUrl):
            SkillExtractor(github=github, settings=settings).extract_skills_from_url("https://example.com/octocat")
        assert github.calls == []

    def test_extract_from_url(self, fake_github_factory, settings):
        github = fake_github_factory()
        SkillExtractor(github=github, settings=settings).extract_skills_from_url("https://github.com/octocat")
        assert github.calls[0] == ("profile", "octocat")
