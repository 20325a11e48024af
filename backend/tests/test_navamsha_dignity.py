import pytest

from iruastro.astro.constants import NAVAMSHA_SPAN_DEG
from iruastro.astro.dignity import (
    DEBILITATED,
    DIGNITY_TABLE,
    ENEMY,
    EXALTED,
    FRIENDLY,
    NEUTRAL,
    OWN_SIGN,
    DignityTable,
    get_dignity,
    is_strong_placement,
)
from iruastro.astro.divisional import navamsha_position, node_navamsha_positions


class TestNavamsha:
    @pytest.mark.parametrize("longitude, expected_sign", [
        (0.5, 0),     # Aries starts from Aries
        (30.5, 9),    # Taurus starts from Capricorn
        (60.5, 6),    # Gemini starts from Libra
        (90.5, 3),    # Cancer starts from Cancer
        (120.5, 0),   # Leo
        (150.5, 9),   # Virgo
        (210.5, 3),   # Scorpio
        (270.5, 9),   # Capricorn
        (330.5, 3),   # Pisces
    ])
    def test_first_navamsha_of_each_element(self, longitude, expected_sign):
        position = navamsha_position(longitude)
        assert position["ordinal"] == 1
        assert position["signIndex"] == expected_sign

    def test_second_navamsha_of_aries_is_taurus(self):
        position = navamsha_position(NAVAMSHA_SPAN_DEG + 0.01)
        assert position["ordinal"] == 2
        assert position["sign"] == "Taurus"

    def test_last_navamsha_of_pisces(self):
        position = navamsha_position(359.99)
        assert position["ordinal"] == 9
        assert position["signIndex"] == (3 + 8) % 12

    def test_degree_rescaled_to_full_sign(self):
        assert navamsha_position(1.0)["degree"] == pytest.approx(9.0)
        assert navamsha_position(NAVAMSHA_SPAN_DEG + 1.0)["degree"] == pytest.approx(9.0)

    def test_deterministic(self):
        for k in range(0, 3600, 7):
            lon = k / 10.0
            assert navamsha_position(lon) == navamsha_position(lon)
            here, wrapped = navamsha_position(lon), navamsha_position(lon + 360.0)
            assert wrapped["signIndex"] == here["signIndex"]
            assert wrapped["sign"] == here["sign"]
            assert wrapped["ordinal"] == here["ordinal"]
            assert wrapped["degree"] == pytest.approx(here["degree"], abs=1e-9)

    def test_nodes_stay_opposite(self):
        for ketu in (0.5, 47.3, 123.0, 211.9, 300.1, 359.9):
            rahu_d9, ketu_d9 = node_navamsha_positions(ketu)
            assert rahu_d9["signIndex"] == (ketu_d9["signIndex"] + 6) % 12
            assert ketu_d9 == navamsha_position(ketu)
            # Same as deriving Rahu from its own longitude
            assert rahu_d9["signIndex"] == navamsha_position(ketu + 180.0)["signIndex"]


class TestDignity:
    def test_exaltation_and_debilitation(self):
        assert get_dignity("Sun", 0) == EXALTED
        assert get_dignity("Sun", 6) == DEBILITATED
        assert get_dignity("Mercury", 5) == EXALTED
        assert get_dignity("Saturn", 0) == DEBILITATED

    def test_own_sign(self):
        assert get_dignity("Mars", 7) == OWN_SIGN
        assert get_dignity("Venus", 6) == OWN_SIGN

    def test_friend_and_enemy(self):
        # Cancer is ruled by the Moon, a friend of the Sun
        assert get_dignity("Sun", 3) == FRIENDLY
        # Taurus is ruled by Venus
        assert get_dignity("Sun", 1) == ENEMY

    def test_nodes_are_neutral(self):
        for sign in range(12):
            assert get_dignity("Rahu", sign) == NEUTRAL
            assert get_dignity("Ketu", sign) == NEUTRAL

    def test_priority_when_categories_overlap(self):
        """Exaltation beats own sign when a table places both in one sign"""
        table = DignityTable(
            exaltation={"Mercury": 5},
            debilitation={"Mercury": 11},
            own_signs={"Mercury": frozenset({2, 5})},
            friends={"Mercury": frozenset({"Mercury"})},
        )
        assert get_dignity("Mercury", 5, table) == EXALTED
        assert get_dignity("Mercury", 2, table) == OWN_SIGN
        # Own sign beats friendship even though Mercury rules Gemini
        assert get_dignity("Mercury", 2, table) != FRIENDLY

    def test_every_planet_has_one_class_per_sign(self):
        for planet in DIGNITY_TABLE.exaltation:
            for sign in range(12):
                assert get_dignity(planet, sign) in {EXALTED, DEBILITATED, OWN_SIGN, FRIENDLY, ENEMY}

    def test_strong_placement(self):
        assert is_strong_placement("Jupiter", 3)
        assert is_strong_placement("Jupiter", 8)
        assert not is_strong_placement("Jupiter", 9)
