#!/usr/bin/env python3
"""Command-line interface for exploring a Strava bulk export."""
from __future__ import annotations

import argparse
import logging
import sys
import time
from datetime import tzinfo
from pathlib import Path
from typing import List, Optional

from .archive import Archive, activities_frame, load_archive
from .config import Settings, load_settings
from .reporting import Metric, build_trend, format_timestamp, render_trend
from .schema import ActivitySummary, ActivityType
from .telemetry import log_run

EXPORT_DIR_HELP = (
    "Directory extracted from the archive downloaded from "
    "https://www.strava.com/athlete/delete_your_account"
)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a settings YAML file (defaults to config/settings.yaml)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Strava archive explorer")
    subparsers = parser.add_subparsers(dest="command", required=True)

    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify that the archive can be parsed",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    verify_parser.add_argument("dir", help=EXPORT_DIR_HELP)
    _add_common_arguments(verify_parser)

    trend_parser = subparsers.add_parser(
        "trend",
        help="Show a metric for an activity over time",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    trend_parser.add_argument("-d", "--dir", required=True, help=EXPORT_DIR_HELP)
    trend_parser.add_argument(
        "-a",
        "--activity",
        required=True,
        choices=[activity_type.slug for activity_type in ActivityType],
        help="The activity to inspect",
    )
    trend_parser.add_argument(
        "-m",
        "--metric",
        required=True,
        choices=[metric.value for metric in Metric],
        help="The metric to inspect",
    )
    trend_parser.add_argument(
        "--format",
        choices=["table", "csv"],
        default="table",
        help="Aligned text table or CSV on stdout",
    )
    _add_common_arguments(trend_parser)

    return parser


def parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(args=args)


def configure_logging(verbose: bool, level: str = "INFO") -> None:
    resolved = logging.DEBUG if verbose else getattr(logging, level, logging.INFO)
    logging.basicConfig(level=resolved, format="%(levelname)s: %(message)s")


def _describe_activity(activity: ActivitySummary, tz: Optional[tzinfo]) -> str:
    return (
        f"{format_timestamp(activity.date, tz)} {activity.activity_type.value} "
        f"#{activity.id} {activity.name!r}"
    )


def describe_archive(directory: str | Path, archive: Archive, tz: Optional[tzinfo] = None) -> List[str]:
    """Summary lines printed by ``verify`` for a successfully loaded archive."""
    lines = [f"{directory}: OK!"]
    for category, count in archive.counts().items():
        lines.append(f"{category}: {count}")
    if not archive.activities:
        return lines

    frame = activities_frame(archive.activities)
    lines.append("activity types:")
    for label, count in frame["activity_type"].value_counts().sort_index().items():
        lines.append(f"  {label}: {count}")

    ordered = sorted(archive.activities, key=lambda activity: activity.date)
    lines.append(
        f"span: {format_timestamp(ordered[0].date, tz)} .. {format_timestamp(ordered[-1].date, tz)}"
    )
    lines.append(f"first: {_describe_activity(archive.activities[0], tz)}")
    lines.append(f"last: {_describe_activity(archive.activities[-1], tz)}")
    return lines


def _record_run(settings: Settings, event: str, start: float, **kwargs) -> None:
    if settings.telemetry_enabled:
        log_run(event, start_time=start, output_dir=settings.telemetry_output_dir, **kwargs)


def _load_or_report(directory: str, settings: Settings, event: str, start: float) -> Optional[Archive]:
    try:
        return load_archive(directory)
    except (OSError, ValueError) as exc:
        logging.debug("Loading %s failed", directory, exc_info=True)
        print(f"{directory}: error: {exc}", file=sys.stderr)
        _record_run(settings, event, start, status="error", error=str(exc), metadata={"dir": directory})
        return None


def run_verify(args: argparse.Namespace, settings: Settings, tz: Optional[tzinfo]) -> int:
    start = time.time()
    archive = _load_or_report(args.dir, settings, "verify", start)
    if archive is None:
        return 1
    for line in describe_archive(args.dir, archive, tz):
        print(line)
    _record_run(
        settings,
        "verify",
        start,
        counts=archive.counts(),
        metadata={"dir": args.dir},
    )
    return 0


def run_trend(args: argparse.Namespace, settings: Settings, tz: Optional[tzinfo]) -> int:
    start = time.time()
    archive = _load_or_report(args.dir, settings, "trend", start)
    if archive is None:
        return 1
    activity_type = ActivityType.from_slug(args.activity)
    metric = Metric(args.metric)
    frame = build_trend(archive, activity_type, metric, tz=tz)
    logging.info("%d %s activities in the %s trend", len(frame), activity_type.value, metric.value)
    if args.format == "csv":
        frame.to_csv(sys.stdout, index=False)
    else:
        for line in render_trend(frame, column_width=settings.column_width):
            print(line)
    _record_run(
        settings,
        "trend",
        start,
        records_processed=len(frame),
        counts=archive.counts(),
        metadata={"dir": args.dir, "activity": activity_type.value, "metric": metric.value},
    )
    return 0


def main(args: Optional[list[str]] = None) -> int:
    namespace = parse_args(args=args)
    settings = load_settings(Path(namespace.config) if namespace.config else None)
    configure_logging(namespace.verbose, settings.log_level)
    try:
        tz = settings.display_timezone
    except ValueError as exc:
        print(f"{namespace.dir}: error: {exc}", file=sys.stderr)
        return 1
    if namespace.command == "trend":
        return run_trend(namespace, settings, tz)
    return run_verify(namespace, settings, tz)


if __name__ == "__main__":
    raise SystemExit(main())
