"""Helpers shared by the analytics components."""

from __future__ import annotations

import math
from datetime import date, datetime

import numpy as np
import pandas as pd

DAYS_PER_YEAR = 365.25

AsOf = pd.Timestamp | datetime | date | str | None


def resolve_as_of(as_of: AsOf = None) -> pd.Timestamp:
    """Return `as_of` as a naive timestamp, defaulting to the current time."""
    if as_of is None:
        return pd.Timestamp.now()
    ts = pd.Timestamp(as_of)
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    return ts


def years_between(start: pd.Series, end: pd.Series | pd.Timestamp) -> pd.Series:
    """Elapsed years from `start` to `end` on a 365.25-day year; NaT gives NaN."""
    return (end - start) / pd.Timedelta(days=DAYS_PER_YEAR)


def round1(value: float) -> float:
    """Round half-up to one decimal place (2.25 -> 2.3)."""
    return math.floor(value * 10 + 0.5) / 10


def safe_mean(values: pd.Series) -> float:
    """Mean of the non-null values, or 0.0 when there is nothing finite to average."""
    values = values.dropna()
    if values.empty:
        return 0.0
    mean = float(values.mean())
    if not np.isfinite(mean):
        return 0.0
    return mean
