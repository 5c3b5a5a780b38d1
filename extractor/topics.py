"""Topic tag normalization and frequency counting."""

from typing import Dict, Iterable, Sequence

from models.skill_candidate import RepositorySummary


def normalize_topic(topic: str) -> str:
    """
    Turn a topic slug into a skill name.

    Example:
        "machine-learning" -> "Machine Learning"
    """
    return " ".join(word[:1].upper() + word[1:] for word in topic.split("-"))


def aggregate_topics(
    repos: Sequence[RepositorySummary],
    exclude: Iterable[str] = (),
) -> Dict[str, int]:
    """
    Count normalized topics across all repositories.

    Args:
        repos: Full repository list (not just the language sample)
        exclude: Names to drop after counting, typically detected languages.
                 Matching is case-sensitive.

    Returns:
        Topic name -> number of occurrences, in first-seen order.
    """
    frequencies: Dict[str, int] = {}
    for repo in repos:
        for topic in repo.topics:
            name = normalize_topic(topic)
            if not name.strip():
                continue
            frequencies[name] = frequencies.get(name, 0) + 1

    excluded = set(exclude)
    return {name: count for name, count in frequencies.items() if name not in excluded}
