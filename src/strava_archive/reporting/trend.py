"""Per-metric trend tables for one activity type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import tzinfo
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ..archive import Archive
from ..schema import ActivitySummary, ActivityType
from .format import (
    format_distance,
    format_duration,
    format_elevation,
    format_heart_rate,
    format_optional,
    format_pace,
    format_timestamp,
)

DATE_COLUMN = "Date"
DATE_WIDTH = 16
DEFAULT_COLUMN_WIDTH = 10


class Metric(str, Enum):
    DURATION = "duration"
    DISTANCE = "distance"
    HEART_RATE = "heart-rate"
    ELEVATION = "elevation"


class TrendReporter(ABC):
    """Column labels for a metric and how to fill them from one activity."""

    metric: ClassVar[Metric]
    columns: ClassVar[Tuple[str, ...]]

    @abstractmethod
    def derive(self, activity: ActivitySummary) -> Optional[List[str]]:
        """Return one cell per column, or None to leave the activity out."""


class DurationReporter(TrendReporter):
    metric = Metric.DURATION
    columns = ("moving", "elapsed")

    def derive(self, activity: ActivitySummary) -> Optional[List[str]]:
        return [
            format_optional(format_duration, activity.moving_seconds),
            format_duration(activity.elapsed_seconds),
        ]


class DistanceReporter(TrendReporter):
    metric = Metric.DISTANCE
    columns = ("distance", "duration", "avg pace", "fastest")

    def derive(self, activity: ActivitySummary) -> Optional[List[str]]:
        return [
            format_distance(activity.distance),
            format_optional(format_duration, activity.moving_seconds),
            format_pace(activity.avg_speed),
            format_pace(activity.max_speed),
        ]


class HeartRateReporter(TrendReporter):
    metric = Metric.HEART_RATE
    columns = ("avg hr", "max hr", "avg pace", "max pace")

    def derive(self, activity: ActivitySummary) -> Optional[List[str]]:
        if activity.avg_heart_rate is None or activity.max_heart_rate is None:
            return None
        return [
            format_heart_rate(activity.avg_heart_rate),
            format_heart_rate(activity.max_heart_rate),
            format_pace(activity.avg_speed),
            format_pace(activity.max_speed),
        ]


class ElevationReporter(TrendReporter):
    metric = Metric.ELEVATION
    columns = ("low", "high")

    def derive(self, activity: ActivitySummary) -> Optional[List[str]]:
        return [
            format_optional(format_elevation, activity.elevation_low),
            format_optional(format_elevation, activity.elevation_high),
        ]


REPORTERS: Dict[Metric, TrendReporter] = {
    reporter.metric: reporter
    for reporter in (DurationReporter(), DistanceReporter(), HeartRateReporter(), ElevationReporter())
}


def build_trend(
    archive: Archive,
    activity_type: ActivityType,
    metric: Metric,
    *,
    tz: Optional[tzinfo] = None,
) -> pd.DataFrame:
    """Formatted trend rows for ``activity_type``, oldest first.

    The sort is stable, so activities sharing a start time keep their export order.
    """
    reporter = REPORTERS[Metric(metric)]
    matching = sorted(
        (activity for activity in archive.activities if activity.activity_type == activity_type),
        key=lambda activity: activity.date,
    )
    rows = []
    for activity in matching:
        cells = reporter.derive(activity)
        if cells is None:
            continue
        rows.append([format_timestamp(activity.date, tz), *cells])
    return pd.DataFrame(rows, columns=[DATE_COLUMN, *reporter.columns])


def render_trend(frame: pd.DataFrame, *, column_width: int = DEFAULT_COLUMN_WIDTH) -> List[str]:
    """Text table lines: a header row, then one line per trend row."""
    widths: Sequence[int] = [DATE_WIDTH] + [column_width] * (len(frame.columns) - 1)
    lines = [" ".join(str(label).rjust(width) for label, width in zip(frame.columns, widths))]
    for row in frame.itertuples(index=False, name=None):
        lines.append(" ".join(str(cell).rjust(width) for cell, width in zip(row, widths)))
    return lines
