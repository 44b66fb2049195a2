"""Entry point that turns a roster source into a `RosterSnapshot`."""

from __future__ import annotations

import logging
from pathlib import Path

from hr_analytics.ingest.fetch_roster import fetch_roster_csv, is_remote
from hr_analytics.ingest.parse_roster import parse_roster_csv
from hr_analytics.snapshot import RosterSnapshot

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path("data/roster_cache")


def load_roster(
    source: str | Path,
    cache_dir: Path = DEFAULT_CACHE_DIR,
    force_download: bool = False,
) -> RosterSnapshot:
    """Load a roster from a local CSV path or an http(s) URL.

    Args:
        source: File path or URL of the roster CSV.
        cache_dir: Download cache used for URL sources.
        force_download: Ignore any cached download.

    Returns:
        Immutable `RosterSnapshot` of the parsed employees.

    Raises:
        RosterLoadError: if the roster cannot be fetched, read or validated.
    """
    if is_remote(source):
        path = fetch_roster_csv(str(source), cache_dir, force=force_download)
    else:
        path = Path(source)

    snapshot = RosterSnapshot(parse_roster_csv(path))
    log.info("Loaded roster snapshot with %d employees", len(snapshot))
    return snapshot
