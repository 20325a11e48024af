from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping

from .constants import SIGN_LORDS

EXALTED = "Exalted"
DEBILITATED = "Debilitated"
OWN_SIGN = "Own Sign"
FRIENDLY = "Friendly"
ENEMY = "Enemy"
NEUTRAL = "Neutral"


@dataclass(frozen=True)
class DignityTable:
    """Per-planet reference signs (0=Aries ... 11=Pisces) and friendships."""

    exaltation: Mapping[str, int]
    debilitation: Mapping[str, int]
    own_signs: Mapping[str, FrozenSet[int]]
    friends: Mapping[str, FrozenSet[str]]
    sign_lords: tuple = field(default=SIGN_LORDS)


DIGNITY_TABLE = DignityTable(
    exaltation=MappingProxyType({
        "Sun": 0, "Moon": 1, "Mars": 9, "Mercury": 5,
        "Jupiter": 3, "Venus": 11, "Saturn": 6,
    }),
    debilitation=MappingProxyType({
        "Sun": 6, "Moon": 7, "Mars": 3, "Mercury": 11,
        "Jupiter": 9, "Venus": 5, "Saturn": 0,
    }),
    own_signs=MappingProxyType({
        "Sun": frozenset({4}),
        "Moon": frozenset({3}),
        "Mars": frozenset({0, 7}),
        "Mercury": frozenset({2, 5}),
        "Jupiter": frozenset({8, 11}),
        "Venus": frozenset({1, 6}),
        "Saturn": frozenset({9, 10}),
    }),
    friends=MappingProxyType({
        "Sun": frozenset({"Moon", "Mars", "Jupiter"}),
        "Moon": frozenset({"Sun", "Mercury"}),
        "Mars": frozenset({"Sun", "Moon", "Jupiter"}),
        "Mercury": frozenset({"Sun", "Venus"}),
        "Jupiter": frozenset({"Sun", "Moon", "Mars"}),
        "Venus": frozenset({"Mercury", "Saturn"}),
        "Saturn": frozenset({"Mercury", "Venus"}),
    }),
)


def get_dignity(planet: str, sign_index: int, table: DignityTable = DIGNITY_TABLE) -> str:
    """Classify a planet's strength in a sign.

    Checks run in strict priority order and the first match wins:
    Exalted, Debilitated, Own Sign, Friendly, then Enemy. Bodies without
    table entries (the lunar nodes) are Neutral.
    """
    if planet not in table.exaltation:
        return NEUTRAL
    sign_index %= 12
    if table.exaltation[planet] == sign_index:
        return EXALTED
    if table.debilitation.get(planet) == sign_index:
        return DEBILITATED
    if sign_index in table.own_signs.get(planet, frozenset()):
        return OWN_SIGN
    if table.sign_lords[sign_index] in table.friends.get(planet, frozenset()):
        return FRIENDLY
    return ENEMY


def is_strong_placement(planet: str, sign_index: int, table: DignityTable = DIGNITY_TABLE) -> bool:
    """Own sign or exaltation, the condition behind the five great-person yogas."""
    return get_dignity(planet, sign_index, table) in (EXALTED, OWN_SIGN)
