"""Skill-set storage using the Supabase Python client."""

import os
from typing import List, Optional, Sequence

from supabase import create_client, Client

from database.logger import get_db_logger
from models.skill_candidate import SkillCandidate, SkillSet

# Initialize logger immediately when module is imported
logger = get_db_logger("db")

SKILL_SETS_TABLE = "skill_sets"
SKILLS_TABLE = "skills"


class DatabaseManager:
    """Stores extracted skills as skill sets using the Supabase client."""

    def __init__(
        self,
        supabase_url: Optional[str] = None,
        supabase_key: Optional[str] = None,
        client: Optional[Client] = None,
    ):
        """
        Initialize database manager with Supabase client.

        Args:
            supabase_url: Supabase project URL (e.g., https://<project>.supabase.co)
                         If None, reads from SUPABASE_URL environment variable.
            supabase_key: Supabase service role key (for server-side operations)
                         If None, reads from SUPABASE_KEY environment variable.
            client: Already constructed client; skips credential lookup.
        """
        if client is not None:
            self.client = client
            return

        if supabase_url is None:
            supabase_url = os.environ.get("SUPABASE_URL")
            if not supabase_url:
                error_msg = "SUPABASE_URL environment variable not set"
                logger.error(error_msg)
                raise ValueError(
                    f"{error_msg}. "
                    "Format: https://<project-ref>.supabase.co"
                )

        if supabase_key is None:
            supabase_key = os.environ.get("SUPABASE_KEY")
            if not supabase_key:
                error_msg = "SUPABASE_KEY environment variable not set"
                logger.error(error_msg)
                raise ValueError(
                    f"{error_msg}. "
                    "Get it from Supabase Dashboard -> Settings -> API -> service_role key"
                )

        try:
            self.client: Client = create_client(supabase_url, supabase_key)
            logger.info(f"Initialized Supabase client for: {supabase_url}")
        except Exception as e:
            logger.error(f"Failed to create Supabase client: {e}", exc_info=True)
            raise

    def create_skill_set(self, user_id: str, skills: Sequence[SkillCandidate]) -> Optional[SkillSet]:
        """
        Persist skills as a new skill set for a user.

        Previous skill sets are left untouched; the newest one is the current one.

        Args:
            user_id: Owner of the skill set
            skills: Candidates returned by the extractor

        Returns:
            The stored skill set, or None if there was nothing to store.
        """
        if not skills:
            logger.info(f"No skills to store for user {user_id}, skipping skill set creation")
            return None

        logger.info(f"Creating skill set - User: {user_id}, Skills: {len(skills)}")
        try:
            set_response = self.client.table(SKILL_SETS_TABLE).insert({"user_id": user_id}).execute()
            skill_set_row = set_response.data[0]
            skill_set_id = skill_set_row["id"]

            rows = [dict(skill.to_record(), skillSetId=skill_set_id) for skill in skills]
            self.client.table(SKILLS_TABLE).insert(rows).execute()
        except Exception as e:
            logger.error(f"Error creating skill set for user {user_id}: {e}", exc_info=True)
            raise

        logger.info(f"✓ Skill set created! ID: {skill_set_id}, Skills: {len(rows)}")
        return SkillSet(
            id=str(skill_set_id),
            user_id=user_id,
            created_at=skill_set_row.get("created_at"),
            skills=list(skills),
        )

    def get_latest_skill_set(self, user_id: str) -> Optional[SkillSet]:
        """
        Get the most recent skill set for a user.

        Args:
            user_id: Owner of the skill sets

        Returns:
            The newest skill set with its skills, or None if the user has none.
        """
        try:
            response = (
                self.client.table(SKILL_SETS_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .limit(1)
                .execute()
            )
            if not response.data:
                return None

            row = response.data[0]
            skills_response = self.client.table(SKILLS_TABLE).select("*").eq("skillSetId", row["id"]).execute()
        except Exception as e:
            logger.error(f"Error getting latest skill set for user {user_id}: {e}", exc_info=True)
            raise

        return SkillSet(
            id=str(row["id"]),
            user_id=row["user_id"],
            created_at=row.get("created_at"),
            skills=[SkillCandidate.from_record(record) for record in skills_response.data or []],
        )

    def list_skill_sets(self, user_id: str, limit: int = 20) -> List[dict]:
        """
        List skill-set rows for a user, newest first, without their skills.

        Args:
            user_id: Owner of the skill sets
            limit: Maximum number of rows

        Returns:
            Raw skill_sets rows
        """
        try:
            response = (
                self.client.table(SKILL_SETS_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
            return response.data or []
        except Exception as e:
            logger.error(f"Error listing skill sets for user {user_id}: {e}", exc_info=True)
            raise
