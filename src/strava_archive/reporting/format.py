"""Cell formatting for trend tables."""

from __future__ import annotations

import math
from datetime import datetime, tzinfo
from typing import Optional

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def format_duration(seconds: float) -> str:
    """Seconds as ``M:SS``; minutes are not folded into hours."""
    minutes, secs = divmod(int(round(seconds)), 60)
    return f"{minutes}:{secs:02d}"


def format_distance(kilometres: float) -> str:
    return f"{kilometres:.2f}km"


def format_elevation(metres: float) -> str:
    return f"{metres:.0f}m"


def format_heart_rate(bpm: float) -> str:
    return f"{bpm:.0f}"


def format_pace(speed: Optional[float]) -> str:
    """Pace per kilometre for a speed in m/s, blank when there is no usable speed."""
    if speed is None or not math.isfinite(speed) or speed <= 0:
        return ""
    return f"{format_duration(1000 / speed)}/km"


def format_optional(formatter, value: Optional[float]) -> str:
    return "" if value is None else formatter(value)


def format_timestamp(value: datetime, tz: Optional[tzinfo] = None) -> str:
    """Render in ``tz``, or the process's local zone when ``tz`` is None."""
    return value.astimezone(tz).strftime(TIMESTAMP_FORMAT)
