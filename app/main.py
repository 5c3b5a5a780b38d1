import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from extractor.errors import InvalidProfileUrl, SkillExtractionError
from extractor.pipeline import SkillExtractor
from extractor.profile import parse_profile_url
from models.skill_candidate import SkillCandidate
from tools.logger import get_tool_logger
from utils.config import load_settings

logger = get_tool_logger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SkillScan - Extract skills from a GitHub profile")
    parser.add_argument("url", help="GitHub profile URL, e.g. https://github.com/octocat")
    parser.add_argument("--json", action="store_true", help="Print skills as JSON")
    parser.add_argument("--save", action="store_true", help="Store the skills as a new skill set in Supabase")
    parser.add_argument("--user-id", help="Owner of the stored skill set (required with --save)")
    return parser


def format_skills(username: str, skills: List[SkillCandidate]) -> str:
    if not skills:
        return f"No skills extracted for {username}"
    lines = [f"Skills for {username}:"]
    for skill in skills:
        lines.append(
            f"  {skill.name}: {skill.level.value} ({skill.level_score}) "
            f"[{skill.category.value}, {skill.source.value}]"
        )
    return "\n".join(lines)


async def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.save and not args.user_id:
        parser.error("--user-id is required with --save")

    settings = load_settings()
    try:
        username = parse_profile_url(args.url, host=settings.github_host)
    except InvalidProfileUrl as e:
        logger.error(str(e))
        return 2

    logger.info(f"Arguments - URL: {args.url}, Username: {username}")

    extractor = SkillExtractor(settings=settings)
    try:
        skills = await extractor.extract_skills_async(username)
    except SkillExtractionError as e:
        logger.error(f"Skill extraction failed: {e}")
        return 1

    if args.json:
        print(json.dumps([skill.model_dump(mode="json") for skill in skills], indent=2))
    else:
        print(format_skills(username, skills))

    if args.save:
        # Imported lazily so the supabase client is only needed when saving
        from utils.db_utils import save_skill_set_to_db

        saved = save_skill_set_to_db(
            user_id=args.user_id,
            skills=skills,
            supabase_url=settings.supabase_url,
            supabase_key=settings.supabase_key,
        )
        if not saved:
            logger.warning("Skill set was not saved - check logs/database_*.log for details")

    return 0


def run() -> None:
    # Load environment variables from .env file in project root
    load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
