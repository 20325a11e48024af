"""
Tests for the coordinate engine: ayanamsa, ascendant, lunar nodes and the
longitude helpers everything else is built on.
"""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import FakeEphemeris
from iruastro.astro.constants import ALL_BODIES, NAKSHATRA_RULERS
from iruastro.astro.dasha import calculate_vimshottari
from iruastro.astro.engine import (
    AYANAMSA_EPOCH,
    SwissEphemeris,
    ascendant_from_lst,
    calculate_ascendant,
    calculate_ayanamsa,
    calculate_lunar_nodes,
    compute_positions,
    local_sidereal_degrees,
    mean_lunar_node,
    to_sidereal,
)
from iruastro.astro.utils import (
    angular_separation,
    get_nakshatra_and_pada,
    house_of,
    norm360,
    sign_index,
    to_utc,
)


def approx_equal(a, b, tolerance=1e-6):
    """Check if two floats are approximately equal"""
    return abs(a - b) < tolerance


@pytest.mark.parametrize("value", [-720.5, -1e-17, 0.0, 359.999, 360.0, 725.25, 1e6])
def test_norm360_range(value):
    result = norm360(value)
    assert 0.0 <= result < 360.0


def test_ayanamsa_at_epoch():
    assert calculate_ayanamsa(AYANAMSA_EPOCH) == pytest.approx(23.15, abs=1e-12)


def test_ayanamsa_is_monotonic():
    earlier = calculate_ayanamsa(datetime(1900, 1, 1, tzinfo=timezone.utc))
    later = calculate_ayanamsa(datetime(2050, 1, 1, tzinfo=timezone.utc))
    assert earlier < 23.15 < later


def test_ayanamsa_for_colombo_birth():
    """1990-06-15 12:00 in Colombo is 06:30 UTC, ayanamsa about 23.71°"""
    instant = to_utc("1990-06-15", "12:00", "Asia/Colombo")
    assert instant == datetime(1990, 6, 15, 6, 30, tzinfo=timezone.utc)
    assert calculate_ayanamsa(instant) == pytest.approx(23.71, abs=0.01)


def test_to_sidereal_wraps():
    assert approx_equal(to_sidereal(10.0, 23.5), 346.5)
    assert approx_equal(to_sidereal(100.0, 23.5), 76.5)


def test_sign_index_periodicity():
    for lon in (0.0, 29.999, 30.0, 187.3, 359.99):
        assert sign_index(lon) == sign_index(lon + 360.0) == sign_index(lon - 720.0)
    assert sign_index(30.0) == 1
    assert sign_index(359.9999999) == 11


def test_ascendant_is_first_house():
    for asc in (0.0, 45.0, 200.0, 359.0):
        assert house_of(asc, asc) == 1
    # Whole-sign: next sign is the 2nd house, previous sign the 12th
    assert house_of(35.0, 5.0) == 2
    assert house_of(340.0, 5.0) == 12


def test_ascendant_at_equator_zero_lst():
    """With LST 0° on the equator the rising point is 90°"""
    assert approx_equal(ascendant_from_lst(0.0, 0.0), 90.0)
    assert approx_equal(ascendant_from_lst(90.0, 0.0), 180.0)


def test_local_sidereal_time_adds_longitude():
    assert approx_equal(local_sidereal_degrees(0.0, 0.0), 0.0)
    assert approx_equal(local_sidereal_degrees(6.0, 15.0), 105.0)
    assert approx_equal(local_sidereal_degrees(23.0, 30.0), 15.0)


def test_calculate_ascendant_uses_ephemeris_sidereal_time():
    eph = FakeEphemeris(sidereal_hours=0.0)
    instant = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert approx_equal(calculate_ascendant(instant, 0.0, 0.0, eph), 90.0)


def test_ascendant_in_range_at_high_latitude():
    for lst in range(0, 360, 15):
        asc = ascendant_from_lst(float(lst), 65.0)
        assert 0.0 <= asc < 360.0


def test_mean_node_at_j2000():
    # 251.0445479 plus the periodic term at T = 0
    assert mean_lunar_node(2451545.0) == pytest.approx(251.04213, abs=1e-4)


def test_nodes_are_opposite():
    eph = FakeEphemeris()
    start = datetime(1990, 1, 1, tzinfo=timezone.utc)
    for k in range(0, 12000, 997):
        rahu, ketu = calculate_lunar_nodes(start + timedelta(days=k), eph)
        assert approx_equal(angular_separation(rahu, ketu), 180.0, 1e-9)
        assert 0.0 <= rahu < 360.0
        assert 0.0 <= ketu < 360.0


def test_mean_node_moves_backwards():
    jd = 2451545.0
    assert angular_separation(mean_lunar_node(jd), mean_lunar_node(jd + 1.0)) < 0.06
    # About -19.3° per year
    delta = norm360(mean_lunar_node(jd + 365.25) - mean_lunar_node(jd))
    assert 340.0 < delta < 341.5


def test_compute_positions_shape():
    eph = FakeEphemeris()
    instant = datetime(2024, 1, 1, tzinfo=timezone.utc)
    positions = compute_positions(instant, 6.9271, 79.8612, eph, ayanamsa=24.0)
    assert set(positions) == set(ALL_BODIES) | {"Ascendant"}
    for body, position in positions.items():
        assert 0.0 <= position["longitude"] < 360.0
        assert approx_equal(position["longitude"], to_sidereal(position["tropicalLongitude"], 24.0))
    # Fake Sun sits at 280° tropical on its epoch
    assert approx_equal(positions["Sun"]["longitude"], 256.0)
    assert positions["Rahu"]["latitude"] == 0.0


def test_swiss_ephemeris_sun_at_j2000():
    """Moshier Sun at 2000-01-01 12:00 UTC is near 280.37° tropical"""
    eph = SwissEphemeris()
    lon, lat = eph.ecliptic("Sun", datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc))
    assert lon == pytest.approx(280.37, abs=0.05)
    assert abs(lat) < 0.01


def test_swiss_ephemeris_rejects_nodes():
    eph = SwissEphemeris()
    with pytest.raises(ValueError):
        eph.ecliptic("Rahu", datetime(2000, 1, 1, tzinfo=timezone.utc))


def test_swiss_ephemeris_is_deterministic():
    eph = SwissEphemeris()
    instant = to_utc("1990-06-15", "12:00", "Asia/Colombo")
    first = compute_positions(instant, 6.9271, 79.8612, eph)
    second = compute_positions(instant, 6.9271, 79.8612, eph)
    assert first == second


def test_moon_nakshatra_for_colombo_birth():
    """1990-06-15 12:00 Colombo: sidereal Moon near 318.5°, Shatabhisha pada 4"""
    eph = SwissEphemeris()
    instant = to_utc("1990-06-15", "12:00", "Asia/Colombo")
    moon = compute_positions(instant, 6.9271, 79.8612, eph)["Moon"]["longitude"]
    assert moon == pytest.approx(318.5, abs=1.0)

    name, index, pada = get_nakshatra_and_pada(moon)
    assert (name, index, pada) == ("Shatabhisha", 23, 4)
    assert NAKSHATRA_RULERS[index] == "Rahu"

    _, meta = calculate_vimshottari(instant, moon)
    assert meta["birthNakshatraIndex"] == 23
    assert meta["birthNakshatraLord"] == "Rahu"
