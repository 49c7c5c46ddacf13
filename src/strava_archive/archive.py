"""Loading a whole export directory into an in-memory archive."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

import pandas as pd

from .parsers import parse_activities, parse_flags, parse_media
from .schema import ActivitySummary, ActivityType, Flag, Media

logger = logging.getLogger(__name__)

# File name -> (archive category, parser). Any other directory entry is skipped.
ARCHIVE_FILES: Dict[str, Tuple[str, Callable[[Path], List]]] = {
    "activities.csv": ("activities", parse_activities),
    "flags.csv": ("flags", parse_flags),
    "media.csv": ("media", parse_media),
}


@dataclass(frozen=True)
class Archive:
    activities: Tuple[ActivitySummary, ...] = ()
    flags: Tuple[Flag, ...] = ()
    media: Tuple[Media, ...] = ()

    def counts(self) -> Dict[str, int]:
        return {
            "activities": len(self.activities),
            "flags": len(self.flags),
            "media": len(self.media),
        }


def load_archive(directory: str | Path) -> Archive:
    """Parse every recognized file directly inside ``directory``.

    Unrecognized entries, sub-directories included, are ignored. The first file that
    fails to decode aborts the load.
    """
    directory = Path(directory)
    categories: Dict[str, List] = {category: [] for category, _ in ARCHIVE_FILES.values()}
    for entry in sorted(directory.iterdir(), key=lambda path: path.name):
        target = ARCHIVE_FILES.get(entry.name)
        if target is None or not entry.is_file():
            logger.debug("Skipping archive entry %s", entry)
            continue
        category, parser_fn = target
        categories[category].extend(parser_fn(entry))
    return Archive(**{category: tuple(records) for category, records in categories.items()})


def activities_frame(activities: Sequence[ActivitySummary]) -> pd.DataFrame:
    """Tabular view of activities with one column per field."""
    columns = list(ActivitySummary.model_fields)
    frame = pd.DataFrame([activity.model_dump() for activity in activities], columns=columns)
    frame["activity_type"] = frame["activity_type"].map(lambda value: ActivityType(value).value)
    return frame
