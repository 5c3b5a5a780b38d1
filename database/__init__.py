"""Database package for skill-set storage with Supabase."""

from database.db import DatabaseManager

__all__ = ["DatabaseManager"]
