"""
Environment configuration for the study scheduler.
Values are read once at import time from the process environment or a .env file.
"""

import os
import logging
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./study_scheduler.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LEARNING_DAILY_MINUTES = os.getenv("LEARNING_DAILY_MINUTES")
LEARNING_MAX_DAILY_BLOCKS = os.getenv("LEARNING_MAX_DAILY_BLOCKS")
LEARNING_PREFERRED_HOURS = os.getenv("LEARNING_PREFERRED_HOURS")


def configure_logging(level: Optional[str] = None):
    """Set up root logging for the API process."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _parse_int(name: str, raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer")
        return None


def _parse_hours(raw: Optional[str]) -> Optional[List[int]]:
    if raw is None or raw.strip() == "":
        return None
    hours = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            hours.append(int(part))
        except ValueError:
            logger.warning(f"Ignoring LEARNING_PREFERRED_HOURS={raw!r}: {part!r} is not an hour")
            return None
    return hours


def get_default_learning_config():
    """
    Build the default LearningConfig, applying any LEARNING_* overrides
    found in the environment.
    """
    from .schemas import LearningConfig

    overrides = {}

    daily_minutes = _parse_int("LEARNING_DAILY_MINUTES", LEARNING_DAILY_MINUTES)
    if daily_minutes is not None:
        overrides["daily_learning_minutes"] = daily_minutes

    max_blocks = _parse_int("LEARNING_MAX_DAILY_BLOCKS", LEARNING_MAX_DAILY_BLOCKS)
    if max_blocks is not None:
        overrides["max_daily_blocks"] = max_blocks

    hours = _parse_hours(LEARNING_PREFERRED_HOURS)
    if hours is not None:
        overrides["preferred_hours"] = hours

    return LearningConfig(**overrides)
