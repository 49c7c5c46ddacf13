from __future__ import annotations

import csv
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import pytest

from strava_archive.parsers import normalize_headers

# Column layout of a real export, trimmed; the repeated names are intentional.
RAW_ACTIVITY_HEADER = [
    "Activity ID",
    "Activity Date",
    "Activity Name",
    "Activity Type",
    "Activity Description",
    "Elapsed Time",
    "Distance",
    "Max Heart Rate",
    "Commute",
    "Filename",
    "Elapsed Time",
    "Moving Time",
    "Distance",
    "Max Speed",
    "Average Speed",
    "Elevation Low",
    "Elevation High",
    "Average Heart Rate",
]

DEFAULT_ACTIVITY: Dict[str, str] = {
    "Activity ID": "12345",
    "Activity Date": "Dec 26, 2014, 8:02:53 PM",
    "Activity Name": "Morning Run",
    "Activity Type": "Run",
    "Activity Description": "",
    "Elapsed Time": "1800",
    "Distance": "5.00",
    "Max Heart Rate": "171.0",
    "Commute": "false",
    "Filename": "activities/12345.fit.gz",
    "Elapsed Time (2)": "1800.0",
    "Moving Time": "1750.0",
    "Distance (2)": "5000.0",
    "Max Speed": "4.0",
    "Average Speed": "2.0",
    "Elevation Low": "10.0",
    "Elevation High": "42.4",
    "Average Heart Rate": "150.2",
}


@pytest.fixture
def raw_activity_header() -> List[str]:
    return list(RAW_ACTIVITY_HEADER)


@pytest.fixture
def activity_header() -> List[str]:
    return normalize_headers(RAW_ACTIVITY_HEADER)


@pytest.fixture
def activity_row(activity_header: List[str]) -> Callable[..., List[str]]:
    """Build a data row aligned with the normalized header, overriding cells by label."""

    def build(overrides: Optional[Dict[str, str]] = None) -> List[str]:
        values = {**DEFAULT_ACTIVITY, **(overrides or {})}
        return [values[label] for label in activity_header]

    return build


@pytest.fixture
def write_csv() -> Callable[[Path, Sequence[str], Sequence[Sequence[str]]], Path]:
    def write(path: Path, header: Sequence[str], rows: Sequence[Sequence[str]]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle)
            writer.writerow(header)
            writer.writerows(rows)
        return path

    return write


@pytest.fixture
def export_dir(tmp_path: Path, activity_row, write_csv) -> Path:
    """Export directory holding one Run and one Ride."""
    directory = tmp_path / "export"
    write_csv(
        directory / "activities.csv",
        RAW_ACTIVITY_HEADER,
        [
            activity_row(),
            activity_row(
                {
                    "Activity ID": "12346",
                    "Activity Date": "Jan 7, 2024, 1:34:17 AM",
                    "Activity Name": "Lunch Ride",
                    "Activity Type": "Ride",
                    "Distance": "20.50",
                }
            ),
        ],
    )
    return directory
