from __future__ import annotations

import json
import time
from pathlib import Path

from strava_archive.telemetry import log_run


def test_log_run_totals_category_counts(tmp_path: Path) -> None:
    path = log_run(
        "verify",
        start_time=time.time(),
        counts={"activities": 3, "flags": 1, "media": 0},
        output_dir=tmp_path,
    )
    payload = json.loads(path.read_text().splitlines()[-1])
    assert payload["records_processed"] == 4
    assert payload["counts"] == {"activities": 3, "flags": 1, "media": 0}
    assert "error" not in payload


def test_log_run_appends_and_keeps_explicit_total(tmp_path: Path) -> None:
    log_run("verify", start_time=time.time(), output_dir=tmp_path)
    path = log_run(
        "trend",
        start_time=time.time(),
        counts={"activities": 10},
        records_processed=2,
        status="error",
        error="boom",
        output_dir=tmp_path,
    )
    entries = [json.loads(line) for line in path.read_text().splitlines()]
    assert [entry["event"] for entry in entries] == ["verify", "trend"]
    assert entries[0]["records_processed"] == 0
    assert "counts" not in entries[0]
    assert entries[1]["records_processed"] == 2
    assert entries[1]["error"] == "boom"
