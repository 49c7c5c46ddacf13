"""Parser for ``media.csv``."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..schema import Media
from .base import decode_csv


def parse_media(path: str | Path) -> List[Media]:
    return decode_csv(path, Media, source="media")
