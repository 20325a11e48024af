"""
Transit event scanner.

Steps through a time range one day at a time and reports sign ingresses
(refined by bisection), retrograde/direct stations and aspect formation or
dissolution between every pair of tracked bodies.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

from ..errors import InvalidRange
from .constants import ASPECT_ANGLES, ASPECT_ORB_DEG, NON_RETROGRADE_BODIES, SIGN_SPAN_DEG
from .engine import calculate_ayanamsa, sidereal_longitude
from .utils import angular_separation, norm360, sign_index

logger = logging.getLogger(__name__)

STEP = timedelta(days=1)
INGRESS_RESOLUTION = timedelta(seconds=1)
INGRESS_TOLERANCE_DEG = 0.01
# Finest step the boundary fine-tune will take
MIN_RESOLUTION = timedelta(milliseconds=1)


@dataclass(frozen=True)
class AspectContact:
    type: str
    planet: str
    longitude: float
    phase: str  # "formed" or "broken"


@dataclass(frozen=True)
class TransitEvent:
    planet: str
    event_type: str  # "ingress", "retrograde", "direct" or "aspect"
    instant: datetime
    longitude: float
    sign_index: int
    is_retrograde: Optional[bool] = None
    aspect: Optional[AspectContact] = None


def check_aspect(lon1: float, lon2: float, orb: float = ASPECT_ORB_DEG) -> Optional[str]:
    """Classify the separation of two longitudes, or None outside every orb."""
    sep = angular_separation(lon1, lon2)
    for name, angle in ASPECT_ANGLES.items():
        if abs(sep - angle) < orb:
            return name
    return None


def daily_motion(lon_from: float, lon_to: float) -> float:
    """Signed longitude change, corrected for wraparound at 0°/360°."""
    delta = lon_to - lon_from
    if delta > 180.0:
        delta -= 360.0
    elif delta < -180.0:
        delta += 360.0
    return delta


def _distance_to_boundary(longitude: float) -> float:
    within = norm360(longitude) % SIGN_SPAN_DEG
    return min(within, SIGN_SPAN_DEG - within)


def _interpolate_crossing(lo: datetime, lo_lon: float, hi: datetime, hi_lon: float,
                          start_sign: int) -> Optional[datetime]:
    """Linear estimate of the boundary crossing inside (lo, hi), if motion allows one."""
    span = daily_motion(lo_lon, hi_lon)
    if span == 0:
        return None
    # Edge of the starting sign in the direction of travel
    boundary = (start_sign + 1) * SIGN_SPAN_DEG if span > 0 else start_sign * SIGN_SPAN_DEG
    fraction = daily_motion(lo_lon, boundary) / span
    if not 0.0 < fraction < 1.0:
        return None
    return lo + (hi - lo) * fraction


def find_precise_ingress(
    body: str,
    t0: datetime,
    t1: datetime,
    ephemeris,
    ayanamsa: float,
    resolution: timedelta = INGRESS_RESOLUTION,
    tolerance: float = INGRESS_TOLERANCE_DEG,
) -> Tuple[datetime, float]:
    """
    Locate the instant a body leaves the sign it occupies at ``t0``.

    Narrows [t0, t1] on "still in the starting sign" down to ``resolution``.
    Each round probes a linearly interpolated estimate of the crossing and
    then the midpoint, so the bracket at least halves. The search then keeps
    refining until the longitude sits within ``tolerance`` of the sign
    boundary. Returns (instant, sidereal longitude) of the first sampled
    instant inside the new sign.
    """
    def lon_at(t: datetime) -> float:
        return sidereal_longitude(body, t, ephemeris, ayanamsa)

    lo, hi = t0, t1
    lo_lon, hi_lon = lon_at(lo), lon_at(hi)
    start_sign = sign_index(lo_lon)
    if sign_index(hi_lon) == start_sign:
        raise ValueError(f"{body} does not change sign between {t0.isoformat()} and {t1.isoformat()}")

    def split(probe, lo, lo_lon, hi, hi_lon):
        probe_lon = lon_at(probe)
        if sign_index(probe_lon) == start_sign:
            return probe, probe_lon, hi, hi_lon
        return lo, lo_lon, probe, probe_lon

    limit = resolution
    while True:
        while hi - lo > limit:
            guess = _interpolate_crossing(lo, lo_lon, hi, hi_lon, start_sign)
            if guess is not None and lo < guess < hi:
                lo, lo_lon, hi, hi_lon = split(guess, lo, lo_lon, hi, hi_lon)
            if hi - lo > limit:
                lo, lo_lon, hi, hi_lon = split(lo + (hi - lo) / 2, lo, lo_lon, hi, hi_lon)
        if _distance_to_boundary(hi_lon) <= tolerance or limit <= MIN_RESOLUTION:
            break
        limit = max(limit / 1000, MIN_RESOLUTION)
    return hi, hi_lon


def _sample_instants(start: datetime, end: datetime) -> List[datetime]:
    instants = []
    current = start
    while current < end:
        instants.append(current)
        current += STEP
    instants.append(end)
    return instants


def scan_transits(
    bodies: Sequence[str],
    start: datetime,
    end: datetime,
    ephemeris,
    ayanamsa: Optional[float] = None,
    max_days: Optional[int] = None,
) -> List[TransitEvent]:
    """
    Scan [start, end] for transit events, sorted ascending by instant.

    The ayanamsa is fixed at its value for ``start`` across the whole scan.
    Raises InvalidRange when ``end`` is not after ``start`` or the range
    exceeds ``max_days``.
    """
    if end <= start:
        raise InvalidRange("endDate must be after startDate")
    if max_days is not None and end - start > timedelta(days=max_days):
        raise InvalidRange(f"Transit range may not exceed {max_days} days")
    if ayanamsa is None:
        ayanamsa = calculate_ayanamsa(start)

    instants = _sample_instants(start, end)
    # One sample before start so the first day has a previous motion to compare
    lead_in = start - STEP
    longitudes: Dict[str, List[float]] = {
        body: [sidereal_longitude(body, t, ephemeris, ayanamsa) for t in [lead_in] + instants]
        for body in bodies
    }

    events: List[TransitEvent] = []
    for i in range(len(instants) - 1):
        today, tomorrow = instants[i], instants[i + 1]

        for body in bodies:
            prev_lon, lon, next_lon = longitudes[body][i:i + 3]

            if sign_index(lon) != sign_index(next_lon):
                instant, exact_lon = find_precise_ingress(body, today, tomorrow, ephemeris, ayanamsa)
                events.append(TransitEvent(body, "ingress", instant, exact_lon, sign_index(exact_lon)))

            if body not in NON_RETROGRADE_BODIES:
                is_retrograde = daily_motion(lon, next_lon) < 0
                was_retrograde = daily_motion(prev_lon, lon) < 0
                if is_retrograde != was_retrograde:
                    events.append(TransitEvent(
                        body,
                        "retrograde" if is_retrograde else "direct",
                        today,
                        lon,
                        sign_index(lon),
                        is_retrograde=is_retrograde,
                    ))

        for body1, body2 in combinations(bodies, 2):
            lon1, lon2 = longitudes[body1][i + 1], longitudes[body2][i + 1]
            next1, next2 = longitudes[body1][i + 2], longitudes[body2][i + 2]
            current = check_aspect(lon1, lon2)
            upcoming = check_aspect(next1, next2)
            if current == upcoming:
                continue
            if current:
                events.append(TransitEvent(
                    body1, "aspect", today, lon1, sign_index(lon1),
                    aspect=AspectContact(current, body2, lon2, "broken"),
                ))
            if upcoming:
                events.append(TransitEvent(
                    body1, "aspect", tomorrow, next1, sign_index(next1),
                    aspect=AspectContact(upcoming, body2, next2, "formed"),
                ))

    events.sort(key=lambda e: e.instant)
    logger.debug(f"Transit scan {start.isoformat()}..{end.isoformat()} produced {len(events)} events")
    return events
