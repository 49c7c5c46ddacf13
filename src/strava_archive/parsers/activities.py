"""Parser for the ``activities.csv`` summary export."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..schema import ActivitySummary
from .base import decode_csv


def parse_activities(path: str | Path) -> List[ActivitySummary]:
    """Parse ``activities.csv``, keeping the file's row order."""
    return decode_csv(path, ActivitySummary, source="activities")
