"""Pydantic models for repositories and extracted skill candidates."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class SkillLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class SkillSource(str, Enum):
    LANGUAGE = "language"
    TOPIC = "topic"


class SkillCategory(str, Enum):
    PROGRAMMING = "Programming"
    DATA_SCIENCE = "Data Science"
    DEVOPS = "DevOps"
    DESIGN = "Design"
    OTHER = "Other"


class RepositorySummary(BaseModel):
    """One repository from a user's repository listing."""

    name: str
    """Repository name."""

    primary_language: Optional[str] = None
    """Language GitHub reports as the repository's main language, if any."""

    topics: List[str] = Field(default_factory=list)
    """Topic tags in the order GitHub returns them."""

    language_stats_locator: str
    """URL of the repository's language byte histogram (``languages_url``)."""

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "RepositorySummary":
        """Build a summary from a GitHub ``/users/{user}/repos`` entry."""
        return cls(
            name=payload.get("name", ""),
            primary_language=payload.get("language"),
            topics=payload.get("topics") or [],
            language_stats_locator=payload.get("languages_url", ""),
        )


class SkillCandidate(BaseModel):
    """A scored, categorized skill extracted from a GitHub profile."""

    name: str
    level: SkillLevel
    level_score: int = Field(ge=0, le=100)
    """Proficiency estimate from 0-100."""
    source: SkillSource
    category: SkillCategory
    verified: bool = True
    description: str

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("skill name must not be blank")
        return value

    def to_record(self) -> Dict[str, Any]:
        """Row shape used by the ``skills`` table."""
        return {
            "name": self.name,
            "level": self.level.value,
            "levelScore": self.level_score,
            "source": self.source.value,
            "category": self.category.value,
            "verified": self.verified,
            "description": self.description,
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "SkillCandidate":
        return cls(
            name=record["name"],
            level=record["level"],
            level_score=record["levelScore"],
            source=record["source"],
            category=record["category"],
            verified=record.get("verified", False),
            description=record.get("description") or "",
        )


class SkillSet(BaseModel):
    """A persisted batch of skills produced by one extraction."""

    id: str
    user_id: str
    created_at: Optional[datetime] = None
    skills: List[SkillCandidate] = Field(default_factory=list)
