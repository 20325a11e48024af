"""
Yoga (planetary combination) detection.

Every predicate is evaluated independently against the same snapshot of
sidereal longitudes, so any number of yogas may fire for one chart. Houses
are whole-sign houses; orbs are shortest-arc separations.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Tuple

from .constants import (
    BENEFICS,
    CLASSICAL_PLANETS,
    DUSTHANA_HOUSES,
    KENDRA_HOUSES,
    SIGN_LORDS,
    TRIKONA_HOUSES,
    WEALTH_HOUSES,
)
from .dignity import DEBILITATED, DIGNITY_TABLE, EXALTED, DignityTable, get_dignity, is_strong_placement
from .utils import angular_separation, house_of, sign_index

logger = logging.getLogger(__name__)

STRONG = "Strong"
MEDIUM = "Medium"
WEAK = "Weak"

# Pancha Mahapurusha yogas keyed by their defining planet
MAHAPURUSHA_YOGAS = (
    ("Mars", "RuchakaYoga"),
    ("Mercury", "BhadraYoga"),
    ("Jupiter", "HamsaYoga"),
    ("Venus", "MalavyaYoga"),
    ("Saturn", "SashaYoga"),
)

RAJA_ORB = 10.0
MAHABHAGYA_ORB = 10.0
LAKSHMI_ORB = 10.0
GAJA_KESARI_ORB = 120.0
GAJA_KESARI_STRONG_ORB = 30.0
BUDHA_ADITYA_ORB = 15.0
BUDHA_ADITYA_STRONG_ORB = 5.0


@dataclass(frozen=True)
class Yoga:
    key: str
    strength: str
    planets: Tuple[str, ...]


class ChartSnapshot:
    """Read-only view over sidereal longitudes keyed by body name (plus "Ascendant")."""

    def __init__(self, longitudes: Mapping[str, float], table: DignityTable = DIGNITY_TABLE):
        missing = [b for b in CLASSICAL_PLANETS + ("Ascendant",) if b not in longitudes]
        if missing:
            raise ValueError(f"Missing longitudes for: {', '.join(missing)}")
        self.longitudes = longitudes
        self.table = table
        self.asc_sign = sign_index(longitudes["Ascendant"])

    def sign(self, body: str) -> int:
        return sign_index(self.longitudes[body])

    def house(self, body: str) -> int:
        return house_of(self.longitudes[body], self.longitudes["Ascendant"])

    def house_from_moon(self, body: str) -> int:
        return house_of(self.longitudes[body], self.longitudes["Moon"])

    def separation(self, a: str, b: str) -> float:
        return angular_separation(self.longitudes[a], self.longitudes[b])

    def dignity(self, body: str) -> str:
        return get_dignity(body, self.sign(body), self.table)

    def lord_of_house(self, house: int) -> str:
        return SIGN_LORDS[(self.asc_sign + house - 1) % 12]


def _mahapurusha(chart: ChartSnapshot) -> List[Yoga]:
    found = []
    for planet, key in MAHAPURUSHA_YOGAS:
        if not is_strong_placement(planet, chart.sign(planet), chart.table):
            continue
        if chart.house(planet) not in KENDRA_HOUSES:
            continue
        strength = STRONG if chart.dignity(planet) == EXALTED else MEDIUM
        found.append(Yoga(key, strength, (planet,)))
    return found


def _mahabhagya(chart: ChartSnapshot) -> Optional[Yoga]:
    if chart.separation("Venus", "Jupiter") >= MAHABHAGYA_ORB:
        return None
    if chart.house("Venus") not in KENDRA_HOUSES | TRIKONA_HOUSES:
        return None
    return Yoga("MahabhagyaYoga", STRONG, ("Venus", "Jupiter"))


def _kesari(chart: ChartSnapshot) -> Optional[Yoga]:
    if chart.house_from_moon("Jupiter") in KENDRA_HOUSES:
        return Yoga("KesariYoga", MEDIUM, ("Jupiter", "Moon"))
    return None


def _amala(chart: ChartSnapshot) -> Optional[Yoga]:
    for planet in BENEFICS:
        if planet != "Moon" and chart.house_from_moon(planet) == 10:
            return Yoga("AmalaYoga", MEDIUM, (planet, "Moon"))
    return None


def _raja(chart: ChartSnapshot) -> Optional[Yoga]:
    if chart.separation("Jupiter", "Saturn") < RAJA_ORB:
        return Yoga("RajaYoga", STRONG, ("Jupiter", "Saturn"))
    return None


def _gaja_kesari(chart: ChartSnapshot) -> Optional[Yoga]:
    sep = chart.separation("Jupiter", "Moon")
    if sep >= GAJA_KESARI_ORB:
        return None
    strength = STRONG if sep < GAJA_KESARI_STRONG_ORB else MEDIUM
    return Yoga("GajaKesariYoga", strength, ("Jupiter", "Moon"))


def _budha_aditya(chart: ChartSnapshot) -> Optional[Yoga]:
    sep = chart.separation("Mercury", "Sun")
    if sep >= BUDHA_ADITYA_ORB:
        return None
    strength = STRONG if sep < BUDHA_ADITYA_STRONG_ORB else MEDIUM
    return Yoga("BudhaAdityaYoga", strength, ("Mercury", "Sun"))


def _dhana(chart: ChartSnapshot) -> Optional[Yoga]:
    placed = tuple(p for p in BENEFICS if chart.house(p) in WEALTH_HOUSES)
    if not placed:
        return None
    return Yoga("DhanaYoga", WEAK if len(placed) == 1 else MEDIUM, placed)


def _neecha_bhanga(chart: ChartSnapshot) -> Optional[Yoga]:
    involved: List[str] = []
    for planet in CLASSICAL_PLANETS:
        if chart.dignity(planet) != DEBILITATED:
            continue
        fallen_sign = chart.sign(planet)
        cancellers = [SIGN_LORDS[fallen_sign]]
        cancellers += [p for p, s in chart.table.exaltation.items() if s == fallen_sign]
        for canceller in cancellers:
            if canceller == planet or canceller not in chart.longitudes:
                continue
            if chart.house(canceller) in KENDRA_HOUSES or chart.house_from_moon(canceller) in KENDRA_HOUSES:
                involved.extend(p for p in (planet, canceller) if p not in involved)
                break
    if not involved:
        return None
    return Yoga("NeechaBhangaRajaYoga", STRONG, tuple(involved))


def _viparita(chart: ChartSnapshot) -> Optional[Yoga]:
    lords = [chart.lord_of_house(h) for h in sorted(DUSTHANA_HOUSES)]
    placed = tuple(lord for lord in lords if chart.house(lord) in DUSTHANA_HOUSES)
    if len(placed) < 2:
        return None
    return Yoga("ViparitaRajaYoga", STRONG if len(placed) == 3 else MEDIUM, placed)


def _lakshmi(chart: ChartSnapshot) -> Optional[Yoga]:
    ninth_lord = chart.lord_of_house(9)
    for benefic in BENEFICS:
        if benefic != ninth_lord and chart.separation(ninth_lord, benefic) < LAKSHMI_ORB:
            return Yoga("LakshmiYoga", STRONG, (ninth_lord, benefic))
    return None


_SINGLE_CHECKS: Tuple[Callable[[ChartSnapshot], Optional[Yoga]], ...] = (
    _mahabhagya,
    _kesari,
    _amala,
    _raja,
    _gaja_kesari,
    _budha_aditya,
    _dhana,
    _neecha_bhanga,
    _viparita,
    _lakshmi,
)


def detect_yogas(longitudes: Mapping[str, float], table: DignityTable = DIGNITY_TABLE) -> List[Yoga]:
    """Return every yoga whose predicate holds for the given sidereal longitudes."""
    chart = ChartSnapshot(longitudes, table)
    yogas = _mahapurusha(chart)
    for check in _SINGLE_CHECKS:
        yoga = check(chart)
        if yoga is not None:
            yogas.append(yoga)
    logger.debug(f"Detected {len(yogas)} yogas: {[y.key for y in yogas]}")
    return yogas
