from typing import Dict, Tuple

from .constants import (
    AIR_SIGNS,
    EARTH_SIGNS,
    FIRE_SIGNS,
    NAVAMSHA_SPAN_DEG,
    SIGN_SPAN_DEG,
    WATER_SIGNS,
    ZODIAC_SIGNS,
)
from .utils import norm360


def _navamsha_start_sign_index_for_element(sign_index_0: int) -> int:
    """Return starting navamsha sign index for a base sign's element.

    - Fire (Aries, Leo, Sagittarius): Aries (0)
    - Earth (Taurus, Virgo, Capricorn): Capricorn (9)
    - Air (Gemini, Libra, Aquarius): Libra (6)
    - Water (Cancer, Scorpio, Pisces): Cancer (3)
    """
    if sign_index_0 in FIRE_SIGNS:
        return 0
    if sign_index_0 in EARTH_SIGNS:
        return 9
    if sign_index_0 in AIR_SIGNS:
        return 6
    if sign_index_0 in WATER_SIGNS:
        return 3
    raise ValueError(f"Sign index out of range: {sign_index_0}")


def navamsha_position(longitude_sidereal: float) -> Dict[str, object]:
    """Map a sidereal longitude into the D9 frame.

    Returns dict with keys:
      - signIndex: 0..11 navamsha sign
      - sign: navamsha sign name
      - ordinal: 1..9 (navamsha number within the base sign)
      - degree: position inside the navamsha rescaled to a full 30° sign
    """
    lon = norm360(longitude_sidereal)
    base_sign_index = min(int(lon // SIGN_SPAN_DEG), 11)
    deg_in_sign = lon - base_sign_index * SIGN_SPAN_DEG
    ordinal_1to9 = min(int(deg_in_sign // NAVAMSHA_SPAN_DEG), 8) + 1
    within = deg_in_sign - (ordinal_1to9 - 1) * NAVAMSHA_SPAN_DEG

    start_sign = _navamsha_start_sign_index_for_element(base_sign_index)
    nav_sign_index = (start_sign + ordinal_1to9 - 1) % 12

    return {
        "signIndex": nav_sign_index,
        "sign": ZODIAC_SIGNS[nav_sign_index],
        "ordinal": ordinal_1to9,
        "degree": within * 9.0,
    }


def node_navamsha_positions(ketu_sidereal: float) -> Tuple[Dict[str, object], Dict[str, object]]:
    """Return (rahu, ketu) D9 positions.

    Ketu is derived from its own longitude like any other body. Rahu is then
    placed exactly six signs from Ketu at the same degree so the nodal axis
    stays intact in the divisional frame. Opposite base signs belong to
    elements whose start signs are also six apart (fire/air, earth/water),
    so this agrees with deriving Rahu directly.
    """
    ketu = navamsha_position(ketu_sidereal)
    rahu_index = (ketu["signIndex"] + 6) % 12
    rahu = {
        "signIndex": rahu_index,
        "sign": ZODIAC_SIGNS[rahu_index],
        "ordinal": ketu["ordinal"],
        "degree": ketu["degree"],
    }
    return rahu, ketu
