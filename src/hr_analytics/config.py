"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings`, which
reads the roster source and analytics defaults from the environment after
loading `.env` from the project root.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")


@dataclass(frozen=True)
class Settings:
    """Container for configuration read from the environment.

    Attributes:
        roster_source: Path or http(s) URL of the roster CSV.
        cache_dir: Local directory for downloaded rosters.
        window_months: Number of months in the monthly trend series.
        page_size: Rows per page in the roster table.
        log_path: File the CLI writes logs to.
    """
    roster_source: str
    cache_dir: Path
    window_months: int
    page_size: int
    log_path: Path


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise RuntimeError(f"{name} must be at least 1, got {value}")
    return value


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `HR_ROSTER_SOURCE` is set but blank, or an integer
            setting is malformed.
    """
    roster_source = os.getenv("HR_ROSTER_SOURCE", "data/hr-data.csv").strip()
    if not roster_source:
        raise RuntimeError(
            "HR_ROSTER_SOURCE is empty. Set it in .env to a CSV path or URL "
            "(example: 'data/hr-data.csv')."
        )

    return Settings(
        roster_source=roster_source,
        cache_dir=Path(os.getenv("HR_CACHE_DIR", "data/roster_cache")),
        window_months=_positive_int("HR_WINDOW_MONTHS", 24),
        page_size=_positive_int("HR_PAGE_SIZE", 10),
        log_path=Path(os.getenv("HR_LOG_PATH", "logs/hr_analytics.log")),
    )
