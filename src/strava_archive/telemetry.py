"""Opt-in run telemetry appended as JSON lines."""

from __future__ import annotations

import json
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_OUTPUT = Path("analysis_output")
TELEMETRY_FILE = "telemetry.jsonl"


def log_run(
    event: str,
    *,
    start_time: float,
    counts: Optional[Dict[str, int]] = None,
    records_processed: Optional[int] = None,
    status: str = "success",
    error: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    output_dir: Path | str = DEFAULT_OUTPUT,
) -> Path:
    """Append one entry for a CLI command and return the telemetry file path.

    ``counts`` holds records per archive category; ``records_processed`` defaults to
    their total when not given.
    """

    if records_processed is None:
        records_processed = sum(counts.values()) if counts else 0
    payload: Dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "duration_ms": int((time.time() - start_time) * 1000),
        "records_processed": records_processed,
        "status": status,
    }
    if counts:
        payload["counts"] = dict(counts)
    if metadata:
        payload["metadata"] = metadata
    if error:
        payload["error"] = error

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    telemetry_path = output_path / TELEMETRY_FILE
    with telemetry_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(payload, default=str) + "\n")
    return telemetry_path
