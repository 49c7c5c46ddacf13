from __future__ import annotations

from datetime import datetime, timezone

from hypothesis import given, settings, strategies as st

from strava_archive.dates import format_activity_date
from strava_archive.parsers import decode_row
from strava_archive.schema import ActivitySummary, ActivityType

HEADER = [
    "Activity ID",
    "Activity Date",
    "Activity Name",
    "Activity Type",
    "Elapsed Time",
    "Distance",
    "Filename",
    "Distance (2)",
]

dates = st.datetimes(min_value=datetime(2000, 1, 1), max_value=datetime(2099, 12, 31)).map(
    lambda value: value.replace(microsecond=0, tzinfo=timezone.utc)
)


@settings(max_examples=50)
@given(
    activity_id=st.integers(min_value=0, max_value=2**64),
    date=dates,
    activity_type=st.sampled_from(list(ActivityType)),
)
def test_id_and_date_reserialize_to_raw_cells(activity_id: int, date: datetime, activity_type: ActivityType) -> None:
    raw_id = str(activity_id)
    raw_date = format_activity_date(date)
    row = [raw_id, raw_date, "name", activity_type.value, "60", "1.00", "", "1000.0"]

    record = decode_row(HEADER, row, ActivitySummary)

    assert str(record.id) == raw_id
    assert format_activity_date(record.date) == raw_date
    assert record.activity_type is activity_type
