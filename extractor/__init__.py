"""Skill extraction from public GitHub profiles."""

from extractor.errors import (
    InvalidProfileUrl,
    ProfileNotFound,
    SkillExtractionError,
    UpstreamUnavailable,
)
from extractor.pipeline import SkillExtractor, extract_skills
from extractor.profile import parse_profile_url, resolve_identifier

__all__ = [
    "InvalidProfileUrl",
    "ProfileNotFound",
    "SkillExtractionError",
    "SkillExtractor",
    "UpstreamUnavailable",
    "extract_skills",
    "parse_profile_url",
    "resolve_identifier",
]
