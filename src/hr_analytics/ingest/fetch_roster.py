"""Download the roster CSV over HTTP with a local file cache."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlparse

import requests

from hr_analytics.exceptions import RosterLoadError

log = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "roster.csv"


def is_remote(source: str | Path) -> bool:
    """Return True when `source` is an http(s) URL rather than a local path."""
    return urlparse(str(source)).scheme in ("http", "https")


def cache_path_for(url: str, cache_dir: Path) -> Path:
    """Return the cache location for `url` (its final path segment)."""
    name = Path(urlparse(url).path).name or DEFAULT_FILE_NAME
    return cache_dir / name


def fetch_roster_csv(
    url: str,
    cache_dir: Path,
    timeout: float = 60.0,
    force: bool = False,
) -> Path:
    """Download or return the cached roster CSV for `url`.

    Args:
        url: HTTP(S) location of the roster CSV.
        cache_dir: Local directory used to cache the download.
        timeout: Request timeout in seconds.
        force: Re-download even when a cached copy exists.

    Returns:
        Path to the downloaded (or cached) CSV file.

    Raises:
        RosterLoadError: if the request fails or returns a non-2xx status.
    """
    cache_dir.mkdir(parents=True, exist_ok=True)
    out_path = cache_path_for(url, cache_dir)

    if not force and out_path.exists() and out_path.stat().st_size > 0:
        log.info("Cache hit: %s", out_path)
        return out_path

    log.info("Downloading %s", url)
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as exc:
        log.error("Roster download failed: %s", exc)
        raise RosterLoadError(
            "Unable to download roster", source=url, original_error=exc
        ) from exc

    out_path.write_bytes(r.content)
    log.info("Saved: %s (%d bytes)", out_path, out_path.stat().st_size)
    return out_path
