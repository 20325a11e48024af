from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

from .constants import DAYS_PER_YEAR
from .utils import iso_z, norm360

# Core Vimshottari constants
DASHA_LORDS: Tuple[str, ...] = (
    "Ketu",
    "Venus",
    "Sun",
    "Moon",
    "Mars",
    "Rahu",
    "Jupiter",
    "Saturn",
    "Mercury",
)

DASHA_YEARS: Dict[str, int] = {
    "Ketu": 7,
    "Venus": 20,
    "Sun": 6,
    "Moon": 10,
    "Mars": 7,
    "Rahu": 18,
    "Jupiter": 16,
    "Saturn": 19,
    "Mercury": 17,
}

TOTAL_CYCLE_YEARS = 120


def _nakshatra_index_and_fraction(longitude_sidereal: float) -> Tuple[int, float]:
    position = norm360(longitude_sidereal) * 27.0 / 360.0
    idx0 = min(int(position), 26)  # 0..26
    return idx0, position - idx0  # fraction 0..1


def _add_days(dt: datetime, days: float) -> datetime:
    return dt + timedelta(days=days)


def _seq_from(start_index: int, items: Tuple[str, ...]) -> List[str]:
    return [items[(start_index + i) % len(items)] for i in range(len(items))]


def _period(lord: str, level: int, start: datetime, end: datetime, at_dt: Optional[datetime]) -> Dict[str, object]:
    entry: Dict[str, object] = {
        "lord": lord,
        "level": level,
        "start": iso_z(start),
        "end": iso_z(end),
        "durationDays": (end - start).total_seconds() / 86400.0,
        "years": (end - start).total_seconds() / 86400.0 / DAYS_PER_YEAR,
        "yearsShare": DASHA_YEARS[lord],
    }
    if at_dt is not None:
        entry["active"] = bool(start <= at_dt < end)
    return entry


def _subdivide(parent_start: datetime, parent_end: datetime, parent_lord: str,
               at_dt: Optional[datetime]) -> List[Dict[str, object]]:
    """Split a Mahadasha into nine Antardashas proportional to the parent's actual span."""
    duration_days = (parent_end - parent_start).total_seconds() / 86400.0
    # Antardasha sequence starts from parent lord and follows 9-lord cycle
    sub_lords = _seq_from(DASHA_LORDS.index(parent_lord), DASHA_LORDS)

    out: List[Dict[str, object]] = []
    cursor = parent_start
    for i, sub_lord in enumerate(sub_lords):
        sub_days = duration_days * DASHA_YEARS[sub_lord] / TOTAL_CYCLE_YEARS
        # Close the last child exactly on the parent boundary
        sub_end = parent_end if i == len(sub_lords) - 1 else _add_days(cursor, sub_days)
        out.append(_period(sub_lord, 2, cursor, sub_end, at_dt))
        cursor = sub_end
    return out


def calculate_vimshottari(
    birth_utc: datetime,
    moon_longitude_sidereal: float,
    *,
    at_date: Optional[datetime] = None,
) -> Tuple[List[Dict[str, object]], Dict[str, object]]:
    """
    Compute the Vimshottari Mahadasha/Antardasha schedule from birth.

    - birth_utc: naive (taken as UTC) or aware datetime
    - moon_longitude_sidereal: Moon's sidereal longitude at birth, degrees
    - at_date: when given, every period carries an ``active`` flag

    The first Mahadasha is only the unconsumed balance of the birth
    nakshatra lord's period; the remaining eight run their full length.
    Every Mahadasha is split into nine Antardashas starting with its own
    lord. Returns (timeline, metadata).
    """
    def as_utc(dt: datetime) -> datetime:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    birth_utc = as_utc(birth_utc)
    at_dt = as_utc(at_date) if at_date is not None else None

    nak_idx0, frac = _nakshatra_index_and_fraction(moon_longitude_sidereal)
    start_index = nak_idx0 % 9
    start_lord = DASHA_LORDS[start_index]
    balance_years = (1.0 - frac) * DASHA_YEARS[start_lord]

    timeline: List[Dict[str, object]] = []
    cursor = birth_utc
    for k, lord in enumerate(_seq_from(start_index, DASHA_LORDS)):
        years = balance_years if k == 0 else float(DASHA_YEARS[lord])
        end_dt = _add_days(cursor, years * DAYS_PER_YEAR)
        node = _period(lord, 1, cursor, end_dt, at_dt)
        node["antardasha"] = _subdivide(cursor, end_dt, lord, at_dt)
        timeline.append(node)
        cursor = end_dt

    metadata = {
        "system": "vimshottari",
        "depth": 2,
        "birthNakshatraIndex": nak_idx0,
        "birthNakshatraLord": start_lord,
        "balanceYears": balance_years,
        "consumedYears": DASHA_YEARS[start_lord] - balance_years,
        "fromDate": iso_z(birth_utc),
        "toDate": iso_z(cursor),
    }
    return timeline, metadata
