"""
Payload builders shared by the API routes.

Each ``build_*`` function takes a validated request model, an ephemeris and
the relevant configuration, and returns the JSON-ready response body.
"""

from datetime import date, datetime, timedelta
from typing import Dict, Optional, Tuple

import pytz

from . import i18n
from .astro.constants import ALL_BODIES, CLASSICAL_PLANETS
from .astro.dasha import calculate_vimshottari
from .astro.dignity import NEUTRAL, get_dignity
from .astro.divisional import navamsha_position, node_navamsha_positions
from .astro.engine import calculate_ayanamsa, compute_positions, to_sidereal
from .astro.transit import scan_transits
from .astro.utils import (
    degree_in_sign,
    get_nakshatra_and_pada,
    house_of,
    iso_z,
    local_to_utc,
    nakshatra_attributes,
    resolve_timezone,
    sign_index,
    to_utc,
)
from .astro.yogas import detect_yogas


def birth_instant(payload, default_timezone: str) -> Tuple[datetime, str]:
    tz = payload.timezone or default_timezone
    return to_utc(payload.dob, payload.time, tz), tz


def _envelope(message_key: str, language: str, dt_utc: datetime, payload, tz: str, ayanamsa: float) -> Dict[str, object]:
    return {
        "message": i18n.message(message_key, language),
        "date": iso_z(dt_utc),
        "location": payload.location.model_dump(),
        "timezone": tz,
        "ayanamsa": ayanamsa,
    }


def describe_nakshatra(longitude_sidereal: float, language: str) -> Dict[str, object]:
    _, index, pada = get_nakshatra_and_pada(longitude_sidereal)
    attrs = nakshatra_attributes(index)
    return {
        "nakshatra": i18n.nakshatra_name(index, language),
        "index": index,
        "pada": pada,
        "ruler": i18n.label("planet", attrs["ruler"], language),
        "linga": i18n.label("linga", attrs["linga"], language),
        "yoni": {
            "animal": i18n.label("yoni", attrs["yoni"]["animal"], language),
            "gender": i18n.label("gender", attrs["yoni"]["gender"], language),
        },
        "gana": i18n.label("gana", attrs["gana"], language),
        "nadi": i18n.label("nadi", attrs["nadi"], language),
    }


def build_birthchart(payload, ephemeris, default_timezone: str) -> Dict[str, object]:
    language = payload.language
    dt_utc, tz = birth_instant(payload, default_timezone)
    ayanamsa = calculate_ayanamsa(dt_utc)
    loc = payload.location
    positions = compute_positions(dt_utc, loc.latitude, loc.longitude, ephemeris, ALL_BODIES, ayanamsa)
    asc = positions["Ascendant"]["longitude"]

    planetary_positions = {}
    for body in ALL_BODIES:
        lon = positions[body]["longitude"]
        sign = sign_index(lon)
        nak = describe_nakshatra(lon, language)
        planetary_positions[body] = {
            "rashi": i18n.rashi_name(sign, language),
            "rashiIndex": sign,
            "degree": lon,
            "degreeInSign": degree_in_sign(lon),
            "house": house_of(lon, asc),
            "nakshatra": nak["nakshatra"],
            "pada": nak["pada"],
            "linga": nak["linga"],
            "ruler": nak["ruler"],
            "dignity": i18n.label("dignity", get_dignity(body, sign), language),
        }

    out = _envelope("birthchart", language, dt_utc, payload, tz, ayanamsa)
    out["lagna"] = {
        "rashi": i18n.rashi_name(sign_index(asc), language),
        "rashiIndex": sign_index(asc),
        "degree": asc,
        "degreeInSign": degree_in_sign(asc),
        "tropicalDegree": positions["Ascendant"]["tropicalLongitude"],
    }
    out["moonNakshatra"] = describe_nakshatra(positions["Moon"]["longitude"], language)
    out["planetaryPositions"] = planetary_positions
    return out


def _d9_entry(position: Dict[str, object], dignity: str, language: str) -> Dict[str, object]:
    return {
        "rashi": i18n.rashi_name(position["signIndex"], language),
        "rashiIndex": position["signIndex"],
        "degree": position["degree"],
        "ordinal": position["ordinal"],
        "dignity": i18n.label("dignity", dignity, language),
    }


def build_navamsha(payload, ephemeris, default_timezone: str) -> Dict[str, object]:
    language = payload.language
    dt_utc, tz = birth_instant(payload, default_timezone)
    ayanamsa = calculate_ayanamsa(dt_utc)
    loc = payload.location
    positions = compute_positions(dt_utc, loc.latitude, loc.longitude, ephemeris, ALL_BODIES, ayanamsa)

    d9_positions = {}
    for body in CLASSICAL_PLANETS:
        d9 = navamsha_position(positions[body]["longitude"])
        d9_positions[body] = _d9_entry(d9, get_dignity(body, d9["signIndex"]), language)

    rahu_d9, ketu_d9 = node_navamsha_positions(positions["Ketu"]["longitude"])
    d9_positions["Rahu"] = _d9_entry(rahu_d9, NEUTRAL, language)
    d9_positions["Ketu"] = _d9_entry(ketu_d9, NEUTRAL, language)

    d9_lagna = navamsha_position(positions["Ascendant"]["longitude"])
    out = _envelope("navamsha", language, dt_utc, payload, tz, ayanamsa)
    out["d9Lagna"] = {
        "rashi": i18n.rashi_name(d9_lagna["signIndex"], language),
        "rashiIndex": d9_lagna["signIndex"],
        "degree": d9_lagna["degree"],
    }
    out["planetaryD9Positions"] = d9_positions
    return out


def build_yoga(payload, ephemeris, default_timezone: str) -> Dict[str, object]:
    language = payload.language
    dt_utc, tz = birth_instant(payload, default_timezone)
    ayanamsa = calculate_ayanamsa(dt_utc)
    loc = payload.location
    positions = compute_positions(dt_utc, loc.latitude, loc.longitude, ephemeris, ALL_BODIES, ayanamsa)
    longitudes = {body: p["longitude"] for body, p in positions.items()}

    yogas = []
    for yoga in detect_yogas(longitudes):
        entry = {"key": yoga.key}
        entry.update(i18n.yoga_text(yoga.key, language))
        entry["strength"] = i18n.label("strength", yoga.strength, language)
        entry["planets"] = [i18n.label("planet", p, language) for p in yoga.planets]
        yogas.append(entry)

    out = _envelope("yoga", language, dt_utc, payload, tz, ayanamsa)
    out["yogas"] = yogas
    out["planetaryPositions"] = longitudes
    out["planetaryZodiacSigns"] = {
        body: i18n.rashi_name(sign_index(lon), language) for body, lon in longitudes.items()
    }
    return out


def build_dasha(payload, ephemeris, default_timezone: str) -> Dict[str, object]:
    language = payload.language
    dt_utc, tz = birth_instant(payload, default_timezone)
    ayanamsa = calculate_ayanamsa(dt_utc)
    moon_lon, _ = ephemeris.ecliptic("Moon", dt_utc)
    moon_sidereal = to_sidereal(moon_lon, ayanamsa)

    at_date = local_to_utc(payload.atDate, tz) if payload.atDate else None
    timeline, metadata = calculate_vimshottari(dt_utc, moon_sidereal, at_date=at_date)

    def localize(period):
        entry = dict(period)
        entry["planet"] = i18n.label("planet", period["lord"], language)
        return entry

    main_dasha = []
    for maha in timeline:
        node = localize(maha)
        node.update(i18n.dasha_text(maha["lord"], language))
        node["antardasha"] = [localize(sub) for sub in maha["antardasha"]]
        main_dasha.append(node)

    out = _envelope("dasha", language, dt_utc, payload, tz, ayanamsa)
    out["moonNakshatra"] = describe_nakshatra(moon_sidereal, language)
    out["mainDasha"] = main_dasha
    out["metadata"] = metadata
    return out


def _range_bound(value: str, tz: str, is_end: bool) -> datetime:
    """Date-only values cover the whole day, so an end date runs to the next midnight."""
    try:
        day = date.fromisoformat(value)
    except ValueError:
        return local_to_utc(value, tz)
    if is_end:
        day += timedelta(days=1)
    return local_to_utc(day.isoformat(), tz)


def _format_local(instant: datetime, tz: str) -> str:
    return instant.astimezone(pytz.timezone(tz)).isoformat(timespec="seconds")


def build_transits(payload, ephemeris, max_days: Optional[int] = None) -> Dict[str, object]:
    language = payload.language
    loc = payload.location
    tz = resolve_timezone(loc.timezone, loc.latitude, loc.longitude)
    start = _range_bound(payload.startDate, tz, is_end=False)
    end = _range_bound(payload.endDate, tz, is_end=True)
    ayanamsa = calculate_ayanamsa(start)
    events = scan_transits(payload.planets, start, end, ephemeris, ayanamsa=ayanamsa, max_days=max_days)

    transits = []
    for event in events:
        entry = {
            "planet": event.planet,
            "planetName": i18n.label("planet", event.planet, language),
            "eventType": event.event_type,
            "eventName": i18n.label("event", event.event_type, language),
            "date": _format_local(event.instant, tz),
            "utcDate": iso_z(event.instant),
            "degree": event.longitude,
            "rashi": i18n.rashi_name(event.sign_index, language),
            "rashiIndex": event.sign_index,
        }
        if event.is_retrograde is not None:
            entry["isRetrograde"] = event.is_retrograde
        if event.aspect is not None:
            entry["aspect"] = {
                "type": i18n.label("aspect", event.aspect.type, language),
                "key": event.aspect.type,
                "planet": event.aspect.planet,
                "degree": event.aspect.longitude,
                "phase": event.aspect.phase,
            }
        transits.append(entry)

    return {
        "message": i18n.message("transit", language),
        "startDate": iso_z(start),
        "endDate": iso_z(end),
        "location": loc.model_dump(),
        "timezone": tz,
        "ayanamsa": ayanamsa,
        "planets": list(payload.planets),
        "transits": transits,
    }
