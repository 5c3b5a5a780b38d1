"""Language histogram aggregation across a user's repositories."""

import asyncio
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Mapping, Sequence

from models.skill_candidate import RepositorySummary
from tools.logger import get_tool_logger as get_logger
from utils.config import LANGUAGE_FETCH_CONCURRENCY, LANGUAGE_SAMPLE_SIZE

logger = get_logger("language_aggregator")

LanguageFetcher = Callable[[str], Mapping[str, int]]


def _coerce_histogram(repo_name: str, languages: Mapping) -> Dict[str, int]:
    histogram = {}
    for language, size in languages.items():
        if not isinstance(language, str) or isinstance(size, bool) or not isinstance(size, int):
            raise ValueError(f"malformed language entry {language!r}: {size!r} in {repo_name}")
        if size < 0:
            raise ValueError(f"negative byte count for {language} in {repo_name}")
        histogram[language] = size
    return histogram


async def aggregate_languages(
    fetch_languages: LanguageFetcher,
    repos: Sequence[RepositorySummary],
    sample_size: int = LANGUAGE_SAMPLE_SIZE,
    max_concurrency: int = LANGUAGE_FETCH_CONCURRENCY,
) -> Dict[str, int]:
    """
    Sum language byte counts over the most recently updated repositories.

    Each repository's statistics are fetched on a dedicated thread pool; at most
    ``max_concurrency`` fetches run at once. A failed fetch only removes that
    repository from the sum and is logged as a warning.

    Args:
        fetch_languages: Blocking callable taking a languages_url
        repos: Repositories, most recently updated first
        sample_size: Number of leading repositories to sample
        max_concurrency: Upper bound on simultaneous fetches

    Returns:
        Global language histogram, merged in repository order.
    """
    sampled = list(repos[:sample_size])
    if not sampled:
        return {}

    semaphore = asyncio.Semaphore(max_concurrency)
    loop = asyncio.get_running_loop()

    async def fetch(repo: RepositorySummary, executor: ThreadPoolExecutor) -> Dict[str, int]:
        async with semaphore:
            languages = await loop.run_in_executor(executor, fetch_languages, repo.language_stats_locator)
        return _coerce_histogram(repo.name, languages)

    # Own pool so the cap is not limited by the default executor's size
    with ThreadPoolExecutor(max_workers=max_concurrency, thread_name_prefix="languages") as executor:
        results = await asyncio.gather(*(fetch(repo, executor) for repo in sampled), return_exceptions=True)

    histogram: Dict[str, int] = {}
    failures = 0
    for repo, result in zip(sampled, results):
        if isinstance(result, Exception):
            failures += 1
            logger.warning(f"Error fetching languages for repo {repo.name}: {result}")
            continue
        if isinstance(result, BaseException):
            raise result
        for language, size in result.items():
            histogram[language] = histogram.get(language, 0) + size

    logger.info(
        f"Language statistics merged from {len(sampled) - failures}/{len(sampled)} repositories "
        f"({len(histogram)} languages)"
    )
    return histogram


def count_primary_languages(repos: Sequence[RepositorySummary]) -> Dict[str, int]:
    """Number of repositories per primary language, over the full list."""
    return dict(Counter(repo.primary_language for repo in repos if repo.primary_language))


def detected_languages(histogram: Mapping[str, int]) -> List[str]:
    """Languages with a non-zero byte count."""
    return [language for language, size in histogram.items() if size > 0]
