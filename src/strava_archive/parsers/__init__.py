"""Parsers that turn export CSV files into typed records."""

from .activities import parse_activities
from .base import EmptyFileError, MissingColumnsError, RecordDecodeError, decode_csv, decode_row
from .flags import parse_flags
from .headers import normalize_headers
from .media import parse_media

__all__ = [
    "EmptyFileError",
    "MissingColumnsError",
    "RecordDecodeError",
    "decode_csv",
    "decode_row",
    "normalize_headers",
    "parse_activities",
    "parse_flags",
    "parse_media",
]
