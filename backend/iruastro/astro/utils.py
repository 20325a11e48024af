import logging
from datetime import date, datetime, time, timezone
from typing import Dict, Optional, Tuple

import pytz
from timezonefinder import TimezoneFinder

from ..errors import InvalidDateTime
# Vedic astrology constants
from .constants import (
    NAKSHATRA_GANA,
    NAKSHATRA_LINGA,
    NAKSHATRA_NADI,
    NAKSHATRA_NAMES,
    NAKSHATRA_RULERS,
    NAKSHATRA_YONI,
    SIGN_SPAN_DEG,
)

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMATS = ("%H:%M", "%H:%M:%S")

# Initialize timezone finder (expensive operation, so do it once)
_tf = TimezoneFinder()


def detect_timezone_from_coordinates(latitude: float, longitude: float) -> str:
    """Detect timezone from latitude and longitude coordinates using timezonefinder library"""
    try:
        detected_tz = _tf.timezone_at(lat=latitude, lng=longitude)
    except ValueError as e:
        logger.warning(f"timezonefinder failed ({e}), defaulting to UTC")
        return "UTC"
    # Open ocean has no zone polygon
    return detected_tz or "UTC"


def _localize(naive: datetime, tz_name: str) -> datetime:
    try:
        tz_obj = pytz.timezone(tz_name)
    except pytz.exceptions.UnknownTimeZoneError:
        raise InvalidDateTime(f"Unknown timezone: {tz_name}")
    try:
        # is_dst=None refuses to guess on DST gaps and overlaps
        return tz_obj.localize(naive, is_dst=None).astimezone(pytz.UTC)
    except pytz.exceptions.AmbiguousTimeError:
        raise InvalidDateTime(f"Ambiguous local time {naive.isoformat()} in {tz_name}")
    except pytz.exceptions.NonExistentTimeError:
        raise InvalidDateTime(f"Non-existent local time {naive.isoformat()} in {tz_name}")


def parse_birth_date(value: str) -> date:
    """Parse a YYYY-MM-DD date; raises ValueError for any other shape."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_clock_time(value: str) -> time:
    """Parse a naive HH:MM or HH:MM:SS wall-clock time; offsets are rejected."""
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"time must be HH:MM or HH:MM:SS, got {value!r}")


def to_utc(dob: str, time_str: str, tz: str) -> datetime:
    """Convert a local birth date (YYYY-MM-DD) and time (HH:MM[:SS]) in ``tz`` to UTC."""
    try:
        local_date = parse_birth_date(dob)
    except (TypeError, ValueError):
        raise InvalidDateTime(f"dob must be YYYY-MM-DD, got {dob!r}")
    try:
        local_time = parse_clock_time(time_str)
    except (TypeError, ValueError):
        raise InvalidDateTime(f"time must be HH:MM or HH:MM:SS, got {time_str!r}")
    return _localize(datetime.combine(local_date, local_time), tz)


def local_to_utc(value: str, tz: str) -> datetime:
    """Convert an ISO date or date-time string to UTC.

    Values carrying their own offset (or a trailing Z) are taken as absolute;
    naive values are interpreted as local time in ``tz``.
    """
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        raise InvalidDateTime(f"Invalid date: {value!r}")
    if parsed.tzinfo is not None:
        return parsed.astimezone(timezone.utc)
    return _localize(parsed, tz)


def iso_z(dt: datetime) -> str:
    """Format an aware UTC datetime as ISO-8601 with a trailing Z."""
    return dt.astimezone(timezone.utc).replace(tzinfo=None).isoformat(timespec="seconds") + "Z"


def norm360(x: float) -> float:
    """Normalize longitude to [0, 360) range"""
    r = x % 360.0
    # float modulo of a tiny negative rounds up to exactly 360.0
    return 0.0 if r >= 360.0 else r


def angular_separation(a: float, b: float) -> float:
    """Shortest arc between two longitudes, in [0, 180]."""
    d = norm360(a - b)
    return 360.0 - d if d > 180.0 else d


def sign_index(longitude: float) -> int:
    """Get zodiac sign index (0-11) from longitude"""
    return min(int(norm360(longitude) // SIGN_SPAN_DEG), 11)


def degree_in_sign(longitude: float) -> float:
    return norm360(longitude) - sign_index(longitude) * SIGN_SPAN_DEG


def house_from_sign(planet_sign: int, asc_sign: int) -> int:
    """Calculate house number for whole sign system"""
    return ((planet_sign - asc_sign + 12) % 12) + 1


def house_of(longitude: float, reference_longitude: float) -> int:
    """Whole-sign house of ``longitude`` counted from the sign of ``reference_longitude``."""
    return house_from_sign(sign_index(longitude), sign_index(reference_longitude))


# ------------------------- Vedic computations -------------------------

def get_nakshatra_and_pada(longitude_sidereal: float) -> Tuple[str, int, int]:
    """Return (nakshatra_name, nakshatra_index_0based, pada_1to4) from sidereal longitude.

    longitude_sidereal: degrees, any real value (normalized here)
    """
    position = norm360(longitude_sidereal) * 27.0 / 360.0
    nak_index_0 = min(int(position), 26)
    pada = int((position - nak_index_0) * 4.0) + 1
    # exact mansion boundaries can overshoot by one ulp
    pada = max(1, min(pada, 4))
    return NAKSHATRA_NAMES[nak_index_0], nak_index_0, pada


def nakshatra_attributes(index: int) -> Dict[str, object]:
    """Static associations of a lunar mansion (0-based index)."""
    animal, gender = NAKSHATRA_YONI[index]
    return {
        "ruler": NAKSHATRA_RULERS[index],
        "linga": NAKSHATRA_LINGA[index],
        "yoni": {"animal": animal, "gender": gender},
        "gana": NAKSHATRA_GANA[index],
        "nadi": NAKSHATRA_NADI[index],
    }


def resolve_timezone(tz: Optional[str], latitude: float, longitude: float) -> str:
    """Explicit timezone if given, otherwise the zone containing the coordinates."""
    if tz:
        return tz
    return detect_timezone_from_coordinates(latitude, longitude)
