"""Environment variables configuration."""

import os
from typing import Optional


def get_db_path() -> Optional[str]:
    """Returns the SQLite database path, or None to use the default location."""
    return os.getenv("BANDCAL_DB_PATH") or None


def get_group_name() -> str:
    """Returns the display name of the group."""
    return os.getenv("BANDCAL_GROUP_NAME", "The Band")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "debug").lower()
