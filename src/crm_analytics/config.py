"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the analytics configuration from the environment (and a project-root
`.env` file), checking that leaderboard limits are positive integers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_LEADERBOARD_SIZE = 10


@dataclass(frozen=True)
class Settings:
    """Container for analytics configuration read from the environment.

    Attributes:
        data_path: Optional JSON dataset used when the CLI is given no `--data`.
        recent_deals_limit: Size of the recent-deals leaderboard.
        top_companies_limit: Size of the top-companies leaderboard.
        log_path: File the CLI writes logs to.
    """
    data_path: Path | None
    recent_deals_limit: int
    top_companies_limit: int
    log_path: Path


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from None
    if value < 1:
        raise RuntimeError(f"{name} must be at least 1, got {value}.")
    return value


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if a leaderboard limit is not a positive integer.
    """
    data_path_raw = os.getenv("CRM_DATA_PATH", "").strip()
    data_path = Path(data_path_raw) if data_path_raw else None
    log_path = Path(os.getenv("CRM_LOG_PATH", "logs/analytics.log"))

    return Settings(
        data_path=data_path,
        recent_deals_limit=_positive_int("CRM_RECENT_DEALS_LIMIT", DEFAULT_LEADERBOARD_SIZE),
        top_companies_limit=_positive_int("CRM_TOP_COMPANIES_LIMIT", DEFAULT_LEADERBOARD_SIZE),
        log_path=log_path,
    )
