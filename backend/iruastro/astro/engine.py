import logging
import math
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Tuple

import swisseph as swe

from .constants import (
    ALL_BODIES,
    AYANAMSA_AT_EPOCH,
    DAYS_PER_JULIAN_CENTURY,
    DAYS_PER_YEAR,
    J2000_JD,
    MEAN_OBLIQUITY_DEG,
    PRECESSION_ARCSEC_PER_YEAR,
)
from .utils import norm360

# Module-level logger
logger = logging.getLogger(__name__)

AYANAMSA_EPOCH = datetime(1950, 1, 1, tzinfo=timezone.utc)

BODY_CODES = {
    "Sun": swe.SUN,
    "Moon": swe.MOON,
    "Mercury": swe.MERCURY,
    "Venus": swe.VENUS,
    "Mars": swe.MARS,
    "Jupiter": swe.JUPITER,
    "Saturn": swe.SATURN,
}


def julian_day_utc(dt_utc: datetime) -> float:
    """Convert UTC datetime to Julian Day"""
    dt_utc = dt_utc.astimezone(timezone.utc)
    ut = dt_utc.hour + dt_utc.minute/60 + dt_utc.second/3600 + dt_utc.microsecond/3.6e9
    return swe.julday(dt_utc.year, dt_utc.month, dt_utc.day, ut)


class SwissEphemeris:
    """
    Tropical body positions and sidereal time from the Swiss Ephemeris.

    Any object exposing the same three methods can stand in for this one
    (the test suite uses analytic fakes):

    - ``ecliptic(body, instant) -> (longitude, latitude)``: geocentric,
      apparent, tropical ecliptic coordinates in degrees
    - ``sidereal_time(instant) -> hours``: Greenwich sidereal time
    - ``julian_day_tt(instant) -> float``: Julian Day in Terrestrial Time

    Without an ephemeris path the built-in Moshier theory is used, which
    needs no data files.
    """

    def __init__(self, ephe_path: Optional[str] = None):
        if ephe_path:
            swe.set_ephe_path(ephe_path)
            self.flags = swe.FLG_SWIEPH
        else:
            self.flags = swe.FLG_MOSEPH
        self.ephe_path = ephe_path

    def ecliptic(self, body: str, instant: datetime) -> Tuple[float, float]:
        try:
            code = BODY_CODES[body]
        except KeyError:
            raise ValueError(f"Unsupported body for ephemeris lookup: {body}")
        try:
            # result[0] = (longitude, latitude, distance, ...), result[1] = return flag
            result = swe.calc_ut(julian_day_utc(instant), code, self.flags)
        except swe.Error as e:
            raise RuntimeError(f"Failed to calculate {body} position: {e}")
        return norm360(float(result[0][0])), float(result[0][1])

    def sidereal_time(self, instant: datetime) -> float:
        return swe.sidtime(julian_day_utc(instant))

    def julian_day_tt(self, instant: datetime) -> float:
        jd_ut = julian_day_utc(instant)
        return jd_ut + swe.deltat(jd_ut)


def calculate_ayanamsa(instant: datetime) -> float:
    """Linear precession offset: 23.15° at 1950-01-01T00:00Z plus 50.2388475″ per year."""
    years = (instant - AYANAMSA_EPOCH).total_seconds() / 86400.0 / DAYS_PER_YEAR
    return AYANAMSA_AT_EPOCH + (PRECESSION_ARCSEC_PER_YEAR / 3600.0) * years


def to_sidereal(tropical_longitude: float, ayanamsa: float) -> float:
    return norm360(tropical_longitude - ayanamsa)


def local_sidereal_degrees(gst_hours: float, longitude: float) -> float:
    return norm360((gst_hours + longitude / 15.0) * 15.0)


def ascendant_from_lst(lst_deg: float, latitude: float, obliquity: float = MEAN_OBLIQUITY_DEG) -> float:
    """Closed-form ecliptic longitude rising on the eastern horizon."""
    lst = math.radians(lst_deg)
    eps = math.radians(obliquity)
    phi = math.radians(latitude)
    asc = math.atan2(
        math.cos(lst),
        -(math.sin(lst) * math.cos(eps) + math.tan(phi) * math.sin(eps)),
    )
    return norm360(math.degrees(asc))


def calculate_ascendant(instant: datetime, latitude: float, longitude: float, ephemeris) -> float:
    """Tropical ascendant longitude for an instant and observer location."""
    lst_deg = local_sidereal_degrees(ephemeris.sidereal_time(instant), longitude)
    return ascendant_from_lst(lst_deg, latitude)


def mean_lunar_node(jd_tt: float) -> float:
    """Mean ascending node polynomial with its small periodic term, wrapped."""
    t = (jd_tt - J2000_JD) / DAYS_PER_JULIAN_CENTURY
    node = (
        251.0445479
        - 1934.1362891 * t
        + 0.0020754 * t * t
        + t ** 3 / 467441.0
        + 0.00256 * math.cos(math.radians(198.867398 + 0.0090019 * t))
    )
    return norm360(node)


def calculate_lunar_nodes(instant: datetime, ephemeris) -> Tuple[float, float]:
    """Return tropical (rahu, ketu); Ketu is always Rahu + 180°."""
    rahu = mean_lunar_node(ephemeris.julian_day_tt(instant))
    return rahu, norm360(rahu + 180.0)


def tropical_longitude(body: str, instant: datetime, ephemeris) -> Tuple[float, float]:
    """(longitude, latitude) for a classical planet or a lunar node."""
    if body in ("Rahu", "Ketu"):
        rahu, ketu = calculate_lunar_nodes(instant, ephemeris)
        return (rahu if body == "Rahu" else ketu), 0.0
    return ephemeris.ecliptic(body, instant)


def sidereal_longitude(body: str, instant: datetime, ephemeris, ayanamsa: float) -> float:
    lon, _ = tropical_longitude(body, instant, ephemeris)
    return to_sidereal(lon, ayanamsa)


def compute_positions(
    instant: datetime,
    latitude: float,
    longitude: float,
    ephemeris,
    bodies: Iterable[str] = ALL_BODIES,
    ayanamsa: Optional[float] = None,
) -> Dict[str, Dict[str, float]]:
    """
    Compute tropical and sidereal longitudes for the requested bodies and the Ascendant.

    Returns a dict keyed by body name (plus "Ascendant") with:
      - tropicalLongitude: ephemeris-native longitude [0, 360)
      - longitude: sidereal longitude [0, 360)
      - latitude: ecliptic latitude (0 for nodes and the Ascendant)
    """
    if ayanamsa is None:
        ayanamsa = calculate_ayanamsa(instant)

    out: Dict[str, Dict[str, float]] = {}
    nodes = None
    for body in bodies:
        if body in ("Rahu", "Ketu"):
            if nodes is None:
                nodes = calculate_lunar_nodes(instant, ephemeris)
            trop, lat = (nodes[0] if body == "Rahu" else nodes[1]), 0.0
        else:
            trop, lat = ephemeris.ecliptic(body, instant)
        out[body] = {
            "tropicalLongitude": trop,
            "longitude": to_sidereal(trop, ayanamsa),
            "latitude": lat,
        }

    asc = calculate_ascendant(instant, latitude, longitude, ephemeris)
    out["Ascendant"] = {
        "tropicalLongitude": asc,
        "longitude": to_sidereal(asc, ayanamsa),
        "latitude": 0.0,
    }
    logger.debug(f"Computed {len(out)} positions at {instant.isoformat()} (ayanamsa {ayanamsa:.6f})")
    return out
