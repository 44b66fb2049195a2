"""Roster loading helpers.

Fetches the roster CSV (local path or HTTP download with a file cache), maps
its headers onto `Employee` fields and returns a `RosterSnapshot`. All failures
at this boundary surface as `RosterLoadError`.
"""

from hr_analytics.ingest.loader import load_roster

__all__ = ["load_roster"]
