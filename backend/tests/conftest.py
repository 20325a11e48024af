from datetime import datetime, timezone

import pytest

from iruastro import create_app

TEST_TOKEN = "test-access-token"

FAKE_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)
J2000_UTC = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)

# (tropical longitude at FAKE_EPOCH, degrees per day)
DEFAULT_MOTIONS = {
    "Sun": (280.0, 0.9856),
    "Moon": (120.0, 13.1764),
    "Mercury": (270.0, 1.2),
    "Venus": (250.0, 1.1),
    "Mars": (300.0, 0.6),
    "Jupiter": (35.0, 0.08),
    "Saturn": (340.0, 0.03),
}


class FakeEphemeris:
    """Analytic ephemeris: every body moves linearly (or along a supplied function of days)."""

    def __init__(self, motions=None, sidereal_hours=0.0):
        self.motions = dict(DEFAULT_MOTIONS)
        self.motions.update(motions or {})
        self.sidereal_hours = sidereal_hours
        self.calls = 0

    @staticmethod
    def days(instant):
        return (instant - FAKE_EPOCH).total_seconds() / 86400.0

    def ecliptic(self, body, instant):
        self.calls += 1
        motion = self.motions[body]
        d = self.days(instant)
        lon = motion(d) if callable(motion) else motion[0] + motion[1] * d
        return lon % 360.0, 0.0

    def sidereal_time(self, instant):
        return self.sidereal_hours

    def julian_day_tt(self, instant):
        return 2451545.0 + (instant - J2000_UTC).total_seconds() / 86400.0


@pytest.fixture
def fake_ephemeris():
    return FakeEphemeris()


@pytest.fixture
def app(fake_ephemeris):
    """Create test app instance with an explicit token and the fake ephemeris"""
    app = create_app(
        config={"EPHE_PATH": None, "FLASK_ENV": "testing", "TRANSIT_MAX_DAYS": 400},
        access_token=TEST_TOKEN,
        ephemeris=fake_ephemeris,
    )
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
