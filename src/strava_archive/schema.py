"""Typed records decoded from a Strava bulk export."""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .dates import parse_activity_date

MAX_ACTIVITY_ID = 2**128
DIGITS = re.compile(r"[0-9]+")


class ActivityType(str, Enum):
    """Activity labels exactly as they appear in the export."""

    ALPINE_SKI = "Alpine Ski"
    HIKE = "Hike"
    ICE_SKATE = "Ice Skate"
    RIDE = "Ride"
    RUN = "Run"
    WALK = "Walk"
    WEIGHT_TRAINING = "Weight Training"
    WORKOUT = "Workout"
    YOGA = "Yoga"

    @property
    def slug(self) -> str:
        return self.value.lower().replace(" ", "-")

    @classmethod
    def from_slug(cls, slug: str) -> "ActivityType":
        for member in cls:
            if member.slug == slug:
                return member
        raise ValueError(f"Unknown activity type '{slug}'")


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value == "":
        return None
    return value


def _parse_date(value: Any) -> Any:
    if isinstance(value, str):
        return parse_activity_date(value)
    return value


def _digits_only(value: Any) -> Any:
    if isinstance(value, str) and DIGITS.fullmatch(value) is None:
        raise ValueError(f"'{value}' is not a plain unsigned integer")
    return value


def _check_id(value: int) -> int:
    if not 0 <= value < MAX_ACTIVITY_ID:
        raise ValueError("must be an unsigned 128-bit integer")
    return value


class ExportRecord(BaseModel):
    """Base for export rows: fields bind to column labels through their alias."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class ActivitySummary(ExportRecord):
    """One row of ``activities.csv``."""

    id: int = Field(..., alias="Activity ID")
    date: datetime = Field(..., alias="Activity Date", description="Start time, UTC.")
    name: str = Field(..., alias="Activity Name")
    activity_type: ActivityType = Field(..., alias="Activity Type")
    elapsed_seconds: int = Field(..., alias="Elapsed Time", ge=0)
    distance: float = Field(..., alias="Distance", description="Kilometres.")
    max_heart_rate: Optional[float] = Field(None, alias="Max Heart Rate")
    avg_heart_rate: Optional[float] = Field(None, alias="Average Heart Rate")
    filename: str = Field(..., alias="Filename")
    elapsed_seconds_secondary: Optional[float] = Field(None, alias="Elapsed Time (2)")
    moving_seconds: Optional[float] = Field(None, alias="Moving Time")
    distance_secondary: float = Field(..., alias="Distance (2)")
    max_speed: Optional[float] = Field(None, alias="Max Speed", description="Metres per second.")
    avg_speed: Optional[float] = Field(None, alias="Average Speed", description="Metres per second.")
    elevation_low: Optional[float] = Field(None, alias="Elevation Low", description="Metres.")
    elevation_high: Optional[float] = Field(None, alias="Elevation High", description="Metres.")

    @field_validator("date", mode="before")
    @staticmethod
    def parse_date(value: Any) -> Any:
        return _parse_date(value)

    @field_validator("id", "elapsed_seconds", mode="before")
    @staticmethod
    def integer_digits(value: Any) -> Any:
        return _digits_only(value)

    @field_validator("id")
    @staticmethod
    def id_fits(value: int) -> int:
        return _check_id(value)

    @field_validator(
        "max_heart_rate",
        "avg_heart_rate",
        "elapsed_seconds_secondary",
        "moving_seconds",
        "max_speed",
        "avg_speed",
        "elevation_low",
        "elevation_high",
        mode="before",
    )
    @staticmethod
    def blank_is_absent(value: Any) -> Any:
        return _blank_to_none(value)


class Flag(ExportRecord):
    """One row of ``flags.csv``."""

    category: str = Field(..., alias="Category")
    flagged_type: str = Field(..., alias="Flagged Type")
    flagged_id: int = Field(..., alias="Flagged ID")
    comment: str = Field(..., alias="Comment")
    timestamp: datetime = Field(..., alias="Timestamp")

    @field_validator("timestamp", mode="before")
    @staticmethod
    def parse_timestamp(value: Any) -> Any:
        return _parse_date(value)

    @field_validator("flagged_id", mode="before")
    @staticmethod
    def flagged_id_digits(value: Any) -> Any:
        return _digits_only(value)

    @field_validator("flagged_id")
    @staticmethod
    def flagged_id_fits(value: int) -> int:
        return _check_id(value)


class Media(ExportRecord):
    """One row of ``media.csv``."""

    filename: str = Field(..., alias="Media Filename")
    caption: str = Field(..., alias="Media Caption")
