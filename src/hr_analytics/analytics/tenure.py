"""Tenure-at-exit bucketing for the exit analysis charts."""

from __future__ import annotations

import logging
import math

import pandas as pd

from hr_analytics.analytics._common import round1, years_between
from hr_analytics.models import (
    INVOLUNTARY,
    UNKNOWN,
    VOLUNTARY,
    ExitTenureRecord,
    TenureBucket,
)
from hr_analytics.snapshot import RosterSnapshot

log = logging.getLogger(__name__)

# Half-open [lower, upper) ranges in years, evaluated in order.
TENURE_RANGES: tuple[tuple[float, float, str], ...] = (
    (0.0, 0.5, "0-6 months"),
    (0.5, 1.0, "6-12 months"),
    (1.0, 2.0, "1-2 years"),
    (2.0, 3.0, "2-3 years"),
    (3.0, 5.0, "3-5 years"),
    (5.0, math.inf, "5+ years"),
)
TENURE_LABELS = [label for _, _, label in TENURE_RANGES]
# Negative tenure (join after exit) lands in the first range.
_TENURE_BINS = [-math.inf] + [upper for _, upper, _ in TENURE_RANGES]


def _exits_with_tenure(roster: RosterSnapshot) -> pd.DataFrame:
    """Exited employees with both dates parseable, plus tenure and bucket columns."""
    pdf = roster.frame()
    exited = pdf[
        ~pdf["is_active"] & pdf["join_date"].notna() & pdf["exit_date"].notna()
    ].copy()
    skipped = int((~pdf["is_active"]).sum()) - len(exited)
    if skipped:
        log.debug("Skipping %d exits without parseable join/exit dates", skipped)

    exited["tenure_years"] = years_between(exited["join_date"], exited["exit_date"]).astype(float)
    exited["bucket"] = pd.cut(
        exited["tenure_years"],
        bins=_TENURE_BINS,
        right=False,
        labels=TENURE_LABELS,
    ).astype(object)
    return exited


def bucket_tenure_at_exit(roster: RosterSnapshot) -> list[TenureBucket]:
    """Count exits per tenure range, split by exit type.

    Returns:
        One `TenureBucket` per range in `TENURE_RANGES` order, including
        ranges with no exits.
    """
    exited = _exits_with_tenure(roster)

    counts: dict[str, dict[str, int]] = {
        label: {VOLUNTARY: 0, INVOLUNTARY: 0, UNKNOWN: 0} for label in TENURE_LABELS
    }
    for bucket, category in zip(exited["bucket"], exited["exit_category"]):
        counts[bucket][category] += 1

    return [
        TenureBucket(
            label=label,
            voluntary=c[VOLUNTARY],
            involuntary=c[INVOLUNTARY],
            unknown=c[UNKNOWN],
            total=sum(c.values()),
        )
        for label, c in counts.items()
    ]


def exit_tenure_records(roster: RosterSnapshot) -> list[ExitTenureRecord]:
    """Per-employee tenure rows for exits, shortest tenure first."""
    exited = _exits_with_tenure(roster).sort_values(
        ["tenure_years", "id"], kind="mergesort"
    )
    return [
        ExitTenureRecord(
            id=row["id"],
            full_name=row["full_name"],
            tenure_years=round1(max(0.0, row["tenure_years"])),
            exit_type=row["exit_category"],
            department=row["department"],
            designation=row["designation"],
            bucket=row["bucket"],
        )
        for row in exited.to_dict("records")
    ]
