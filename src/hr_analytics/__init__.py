"""hr_analytics package.

Contains the roster analytics engine behind the HR dashboard: an immutable
roster snapshot, the aggregation components that derive KPIs, breakdowns,
tenure buckets, monthly trends, manager rollups and the paginated roster view,
plus the loader and CLI that sit around it.

Architecture:
- Loader (CSV file or HTTP download) -> RosterSnapshot -> analytics components
- The analytics components are pure functions of the snapshot; they do no I/O
- Pydantic models describe both the input records and the derived outputs
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
