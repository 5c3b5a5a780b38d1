"""Logger factory shared by the GitHub tools and the extraction pipeline."""

import logging
import os
from pathlib import Path
from datetime import datetime


def _log_dir() -> Path:
    return Path(os.environ.get("LOG_DIR") or Path(__file__).parent.parent / "logs")


def _file_logging_enabled() -> bool:
    return os.environ.get("LOG_TO_FILE", "true").strip().lower() not in ("0", "false", "no")


def configure_logger(logger: logging.Logger, file_prefix: str) -> logging.Logger:
    """
    Attach a dated file handler and a console handler to a logger.

    Args:
        logger: Logger to configure
        file_prefix: Prefix of the log file name (e.g. "tools" -> tools_YYYY-MM-DD.log)

    Returns:
        The same logger, configured
    """
    # Don't add handlers if they already exist (prevents duplicate logs)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    if _file_logging_enabled():
        log_dir = _log_dir()
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            date_str = datetime.now().strftime("%Y-%m-%d")
            log_file = log_dir / f"{file_prefix}_{date_str}.log"
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)
        except OSError as e:
            # Console logging still works without a log file
            print(f"⚠ Warning: Could not create log file in {log_dir}: {e}")

    # Console handler - only shows INFO and above
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    logger.addHandler(console_handler)

    # Prevent propagation to root logger (avoids duplicate logs)
    logger.propagate = False

    return logger


def get_tool_logger(name: str = "tools") -> logging.Logger:
    """
    Get a logger for GitHub tools and pipeline stages.

    Args:
        name: Logger name, e.g. "github_api" or "language_aggregator"

    Returns:
        Configured logger instance
    """
    return configure_logger(logging.getLogger(f"tools.{name}"), "tools")
