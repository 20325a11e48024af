from datetime import datetime
from typing import List, Literal, Optional

import pytz
from pydantic import BaseModel, Field, field_validator

from .astro.constants import ALL_BODIES, CLASSICAL_PLANETS
from .astro.utils import parse_birth_date, parse_clock_time


def _check_timezone(v):
    if v is None:
        return v
    if v not in pytz.all_timezones_set:
        raise ValueError(f"Invalid timezone: {v}")
    return v


class Location(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    elevation: float = Field(default=0.0, ge=0)


class TransitLocation(Location):
    timezone: Optional[str] = None

    @field_validator("timezone")
    @classmethod
    def _tz(cls, v):
        return _check_timezone(v)


class ChartRequest(BaseModel):
    dob: str
    time: str
    location: Location
    timezone: Optional[str] = None
    language: Literal["en", "si"] = "en"

    @field_validator("dob")
    @classmethod
    def _dob(cls, v):
        try:
            parse_birth_date(v)
        except ValueError:
            raise ValueError("dob must be in YYYY-MM-DD format")
        return v

    @field_validator("time")
    @classmethod
    def _time(cls, v):
        try:
            parse_clock_time(v)
        except ValueError:
            raise ValueError("time must be in HH:MM or HH:MM:SS format")
        return v

    @field_validator("timezone")
    @classmethod
    def _tz(cls, v):
        return _check_timezone(v)


class DashaRequest(ChartRequest):
    atDate: Optional[str] = None  # ISO-8601 (e.g., 2024-03-25T04:16:00Z)

    @field_validator("atDate")
    @classmethod
    def _at(cls, v):
        if v is None:
            return v
        try:
            datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError("atDate must be in ISO-8601 format")
        return v


class TransitRequest(BaseModel):
    startDate: str
    endDate: str
    location: TransitLocation
    planets: List[str] = Field(default_factory=lambda: list(CLASSICAL_PLANETS))
    language: Literal["en", "si"] = "en"

    @field_validator("startDate", "endDate")
    @classmethod
    def _dates(cls, v):
        try:
            datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError("must be an ISO-8601 date or date-time")
        return v

    @field_validator("planets")
    @classmethod
    def _planets(cls, v):
        unknown = [p for p in v if p not in ALL_BODIES]
        if unknown:
            raise ValueError(f"Unsupported planets: {', '.join(unknown)}")
        if not v:
            raise ValueError("planets must not be empty")
        # de-duplicate, keep order
        return list(dict.fromkeys(v))
