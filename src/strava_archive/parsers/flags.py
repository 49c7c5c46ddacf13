"""Parser for ``flags.csv``."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..schema import Flag
from .base import decode_csv


def parse_flags(path: str | Path) -> List[Flag]:
    return decode_csv(path, Flag, source="flags")
