"""Turn a GitHub profile URL into a username."""

from typing import Optional
from urllib.parse import urlparse

from extractor.errors import InvalidProfileUrl
from utils.config import DEFAULT_HOST


def parse_profile_url(url: str, host: str = DEFAULT_HOST) -> str:
    """
    Extract the username from a profile URL such as https://github.com/octocat.

    Args:
        url: Free-form profile URL
        host: Canonical platform domain the URL must point at

    Returns:
        The first non-empty path segment.

    Raises:
        InvalidProfileUrl: if the URL cannot be parsed, points at another host
                           or has no path segment.
    """
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
    except (AttributeError, ValueError) as e:
        raise InvalidProfileUrl(str(url), f"cannot parse URL ({e})") from e

    if not parsed.scheme or hostname is None:
        raise InvalidProfileUrl(url, "not an absolute URL")
    if hostname != host:
        raise InvalidProfileUrl(url, f"host {hostname!r} is not {host!r}")

    segments = [segment for segment in parsed.path.split("/") if segment]
    if not segments:
        raise InvalidProfileUrl(url, "no username in path")
    return segments[0]


def resolve_identifier(url: str, host: str = DEFAULT_HOST) -> Optional[str]:
    """Like parse_profile_url, but returns None instead of raising."""
    try:
        return parse_profile_url(url, host=host)
    except InvalidProfileUrl:
        return None
