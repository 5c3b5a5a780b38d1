"""Database utilities for saving extracted skills with Supabase."""

import os
from typing import Optional, Sequence

from database.db import DatabaseManager
from database.logger import get_db_logger
from models.skill_candidate import SkillCandidate

logger = get_db_logger("db_utils")


def save_skill_set_to_db(
    user_id: str,
    skills: Sequence[SkillCandidate],
    supabase_url: Optional[str] = None,
    supabase_key: Optional[str] = None
) -> bool:
    """
    Save extracted skills as a new skill set.

    Failures are logged and reported as False so callers can carry on
    without stored skills.

    Args:
        user_id: Owner of the skill set
        skills: Candidates returned by the extractor
        supabase_url: Supabase project URL (optional, uses SUPABASE_URL env var if not provided)
        supabase_key: Supabase service role key (optional, uses SUPABASE_KEY env var if not provided)

    Returns:
        True if successful, False otherwise
    """
    if not skills:
        logger.warning("No skills extracted, skipping database save")
        return False

    if not supabase_url and not os.environ.get("SUPABASE_URL"):
        logger.warning("SUPABASE_URL not set, skipping database save")
        return False

    if not supabase_key and not os.environ.get("SUPABASE_KEY"):
        logger.warning("SUPABASE_KEY not set, skipping database save")
        return False

    try:
        logger.info(f"Attempting to save skill set - User: {user_id}, Skills: {len(skills)}")
        db = DatabaseManager(supabase_url=supabase_url, supabase_key=supabase_key)
        skill_set = db.create_skill_set(user_id, skills)
        logger.info(f"Successfully saved skill set! ID: {skill_set.id if skill_set else None}")
        return skill_set is not None

    except Exception as e:
        logger.error(f"Error saving skill set to database: {e}", exc_info=True)

        error_str = str(e).lower()
        if "connection" in error_str or "network" in error_str:
            logger.info("Tip: Check your network connection and SUPABASE_URL")
        elif "does not exist" in error_str or "relation" in error_str:
            logger.info("Tip: Ensure the 'skill_sets' and 'skills' tables exist in Supabase")
        elif "row-level" in error_str or "permission" in error_str:
            logger.info("Tip: Row Level Security might be blocking the insert - use the service_role key")

        return False
