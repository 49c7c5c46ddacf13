from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from strava_archive.parsers import RecordDecodeError, parse_flags, parse_media

FLAG_HEADER = ["Category", "Flagged Type", "Flagged ID", "Comment", "Timestamp"]
MEDIA_HEADER = ["Media Filename", "Media Caption"]


def test_parse_flags(tmp_path: Path, write_csv) -> None:
    path = write_csv(
        tmp_path / "flags.csv",
        FLAG_HEADER,
        [["spam", "Activity", "12345", "", "Mar 3, 2021, 9:15:00 AM"]],
    )
    (flag,) = parse_flags(path)
    assert flag.category == "spam"
    assert flag.flagged_type == "Activity"
    assert flag.flagged_id == 12345
    assert flag.comment == ""
    assert flag.timestamp == datetime(2021, 3, 3, 9, 15, tzinfo=timezone.utc)


def test_parse_flags_rejects_bad_id(tmp_path: Path, write_csv) -> None:
    path = write_csv(
        tmp_path / "flags.csv",
        FLAG_HEADER,
        [["spam", "Activity", "not-an-id", "", "Mar 3, 2021, 9:15:00 AM"]],
    )
    with pytest.raises(RecordDecodeError) as excinfo:
        parse_flags(path)
    assert excinfo.value.column == "Flagged ID"
    assert excinfo.value.index == 2


def test_parse_media(tmp_path: Path, write_csv) -> None:
    path = write_csv(
        tmp_path / "media.csv",
        MEDIA_HEADER,
        [["media/1.jpg", "Summit, finally"], ["media/2.jpg", ""]],
    )
    media = parse_media(path)
    assert [item.filename for item in media] == ["media/1.jpg", "media/2.jpg"]
    assert media[0].caption == "Summit, finally"
    assert media[1].caption == ""


def test_parse_flags_rejects_signed_id(tmp_path: Path, write_csv) -> None:
    path = write_csv(
        tmp_path / "flags.csv",
        FLAG_HEADER,
        [["spam", "Activity", "+12345", "", "Mar 3, 2021, 9:15:00 AM"]],
    )
    with pytest.raises(RecordDecodeError) as excinfo:
        parse_flags(path)
    assert excinfo.value.column == "Flagged ID"
