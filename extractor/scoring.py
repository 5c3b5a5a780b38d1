"""Convert language shares and topic counts into skill candidates."""

import math
from typing import Dict, List, Mapping

from models.skill_candidate import SkillCandidate, SkillCategory, SkillLevel, SkillSource

TOPIC_CATEGORIES: Dict[SkillCategory, frozenset] = {
    SkillCategory.PROGRAMMING: frozenset({"React", "Vue", "Angular", "Frontend", "Backend", "Fullstack"}),
    SkillCategory.DATA_SCIENCE: frozenset({"Machine Learning", "Data Science", "Analytics", "Big Data"}),
    SkillCategory.DEVOPS: frozenset({"Kubernetes", "Docker", "CI/CD", "DevOps"}),
    SkillCategory.DESIGN: frozenset({"Design", "UI", "UX"}),
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_language_share(percentage: float) -> tuple:
    """
    Map a language's share of all bytes to (level, score).

    30% and up: Advanced, 75-110 before clamping. 10% up to 30%:
    Intermediate, 40-80. Below 10%: Beginner, 20-40. Each band starts at
    the floor of its own formula, so exactly 30% scores 75 and exactly 10%
    scores 40.
    """
    if percentage >= 30:
        level, score = SkillLevel.ADVANCED, 75 + (percentage - 30) / 2
    elif percentage >= 10:
        level, score = SkillLevel.INTERMEDIATE, 40 + (percentage - 10) * 2
    else:
        level, score = SkillLevel.BEGINNER, 20 + percentage * 2
    return level, min(_round_half_up(score), 100)


def score_topic_count(count: int) -> int:
    if count >= 5:
        return 75
    if count >= 2:
        return 50
    return 30


def level_for_score(score: int) -> SkillLevel:
    if score >= 75:
        return SkillLevel.ADVANCED
    if score >= 40:
        return SkillLevel.INTERMEDIATE
    return SkillLevel.BEGINNER


def categorize_topic(topic: str) -> SkillCategory:
    for category, members in TOPIC_CATEGORIES.items():
        if topic in members:
            return category
    return SkillCategory.OTHER


def language_shares(histogram: Mapping[str, int]) -> Dict[str, float]:
    """Percentage of total bytes per language with a non-zero count."""
    total = sum(histogram.values())
    if total <= 0:
        return {}
    return {language: 100 * size / total for language, size in histogram.items() if size > 0}


def language_candidates(
    histogram: Mapping[str, int],
    primary_counts: Mapping[str, int],
) -> List[SkillCandidate]:
    """
    Build one candidate per detected language, in histogram order.

    Args:
        histogram: Global language histogram
        primary_counts: Repositories per primary language, over all repositories
    """
    candidates = []
    for language, percentage in language_shares(histogram).items():
        level, score = score_language_share(percentage)
        candidates.append(SkillCandidate(
            name=language,
            level=level,
            level_score=score,
            source=SkillSource.LANGUAGE,
            category=SkillCategory.PROGRAMMING,
            verified=True,
            description=(
                "Extracted from GitHub repositories. "
                f"Used in {primary_counts.get(language, 0)} repositories."
            ),
        ))
    return candidates


def topic_candidates(frequencies: Mapping[str, int]) -> List[SkillCandidate]:
    """Build one candidate per topic, in first-seen order."""
    candidates = []
    for topic, count in frequencies.items():
        score = score_topic_count(count)
        candidates.append(SkillCandidate(
            name=topic,
            level=level_for_score(score),
            level_score=score,
            source=SkillSource.TOPIC,
            category=categorize_topic(topic),
            verified=True,
            description=f"Used in {count} GitHub repositories as a topic.",
        ))
    return candidates
