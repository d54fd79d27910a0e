"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path
from typing import Optional


def get_database_path() -> str:
    """Get database file path from env or default."""
    return os.getenv("DATABASE_URL", "sqlite:///").replace("sqlite:///", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "catalog.db"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_sql_echo() -> bool:
    """Whether to log every SQL statement."""
    return os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
