"""Trend reporting over decoded archives."""

from .format import format_distance, format_duration, format_elevation, format_pace, format_timestamp
from .trend import REPORTERS, Metric, TrendReporter, build_trend, render_trend

__all__ = [
    "REPORTERS",
    "Metric",
    "TrendReporter",
    "build_trend",
    "format_distance",
    "format_duration",
    "format_elevation",
    "format_pace",
    "format_timestamp",
    "render_trend",
]
