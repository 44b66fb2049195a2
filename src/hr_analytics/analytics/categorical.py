"""Group-by tallies over a single roster field.

Output ordering is part of the contract: count descending, then key ascending,
so charts and tests see the same order on every run.
"""

from __future__ import annotations

import logging
from typing import Callable

import pandas as pd

from hr_analytics.models import CategoryTally, Employee, FilterOptions
from hr_analytics.snapshot import RosterSnapshot

log = logging.getLogger(__name__)

FieldSelector = str | Callable[[Employee], str | None]
Predicate = Callable[[Employee], bool]


def _as_selector(field: FieldSelector) -> Callable[[Employee], str | None]:
    if callable(field):
        return field
    if field not in Employee.model_fields:
        raise ValueError(f"Unknown employee field: {field!r}")
    return lambda e: getattr(e, field)


def tally(
    roster: RosterSnapshot,
    field: FieldSelector,
    predicate: Predicate | None = None,
) -> list[CategoryTally]:
    """Count employees per value of `field`.

    Args:
        roster: Snapshot to aggregate.
        field: `Employee` attribute name or a callable returning the key.
        predicate: Optional filter applied before grouping.

    Returns:
        List of `CategoryTally` ordered by count descending, key ascending.
        Records whose key is empty or missing are not counted.
    """
    selector = _as_selector(field)
    keys: list[str] = []
    for e in roster:
        if predicate is not None and not predicate(e):
            continue
        key = selector(e)
        if key is None:
            continue
        key = str(key).strip()
        if key:
            keys.append(key)

    if not keys:
        log.debug("No non-empty keys to tally")
        return []

    counts = (
        pd.Series(keys, dtype=object)
        .value_counts()
        .rename_axis("key")
        .reset_index(name="count")
        .sort_values(["count", "key"], ascending=[False, True], kind="mergesort")
    )
    return [
        CategoryTally(key=str(row["key"]), count=int(row["count"]))
        for row in counts.to_dict("records")
    ]


def tally_field(
    roster: RosterSnapshot,
    field: str,
    active_only: bool = False,
) -> list[CategoryTally]:
    """Tally a named field, optionally restricted to active employees."""
    predicate: Predicate | None = (lambda e: e.is_active) if active_only else None
    return tally(roster, field, predicate)


def exit_type_breakdown(roster: RosterSnapshot) -> list[CategoryTally]:
    """Tally exited employees by Voluntary / Involuntary / Unknown."""
    return tally(roster, lambda e: e.exit_category, lambda e: not e.is_active)


def filter_options(roster: RosterSnapshot) -> FilterOptions:
    """Return the sorted distinct departments and locations in the roster."""
    return FilterOptions(
        departments=sorted({e.department for e in roster if e.department}),
        locations=sorted({e.location for e in roster if e.location}),
    )
