"""Parsing and formatting of the export's ``Dec 26, 2014, 8:02:53 PM`` timestamps."""

from __future__ import annotations

import re
from datetime import datetime, timezone

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Day and hour carry no padding; month names are the English abbreviations whatever the
# process locale is.
DATE_PATTERN = re.compile(
    r"(?P<month>[A-Z][a-z]{2}) (?P<day>[1-9]\d?), (?P<year>\d{4}), "
    r"(?P<hour>[1-9]\d?):(?P<minute>\d{2}):(?P<second>\d{2}) (?P<meridiem>AM|PM)"
)


def parse_activity_date(value: str) -> datetime:
    """Parse an export timestamp, reading the wall-clock digits as UTC."""
    match = DATE_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f"'{value}' does not match the 'Mon D, YYYY, H:MM:SS AM' date format")
    month = match["month"]
    if month not in MONTHS:
        raise ValueError(f"'{value}' has an unknown month abbreviation '{month}'")

    hour = int(match["hour"])
    if hour > 12:
        raise ValueError(f"'{value}' has a 12-hour clock hour outside 1-12")
    hour %= 12
    if match["meridiem"] == "PM":
        hour += 12

    try:
        return datetime(
            int(match["year"]),
            MONTHS.index(month) + 1,
            int(match["day"]),
            hour,
            int(match["minute"]),
            int(match["second"]),
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise ValueError(f"'{value}' is not a valid calendar date: {exc}") from exc


def format_activity_date(value: datetime) -> str:
    """Render a timestamp back into the export format (UTC wall clock)."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    hour = value.hour % 12 or 12
    meridiem = "PM" if value.hour >= 12 else "AM"
    return (
        f"{MONTHS[value.month - 1]} {value.day}, {value.year:04d}, "
        f"{hour}:{value.minute:02d}:{value.second:02d} {meridiem}"
    )
