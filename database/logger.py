"""Database-specific logger that saves to file for debugging."""

import logging

from tools.logger import configure_logger


def get_db_logger(name: str = "database") -> logging.Logger:
    """
    Get a database logger that logs to both console and file.

    Log files are written to logs/database_YYYY-MM-DD.log.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    return configure_logger(logging.getLogger(f"database.{name}"), "database")
