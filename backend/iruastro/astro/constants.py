from types import MappingProxyType

# Shared reference tables. Everything here is immutable after import so that
# concurrent requests can read it without coordination.

CLASSICAL_PLANETS = ("Sun", "Moon", "Mercury", "Venus", "Mars", "Jupiter", "Saturn")
NODES = ("Rahu", "Ketu")
ALL_BODIES = CLASSICAL_PLANETS + NODES

# Ordered lists and mappings used for Vedic computations
ZODIAC_SIGNS = (
    "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
    "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
)

NAKSHATRA_NAMES = (
    "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira", "Ardra",
    "Punarvasu", "Pushya", "Ashlesha", "Magha", "Purva Phalguni", "Uttara Phalguni",
    "Hasta", "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
    "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana", "Dhanishta", "Shatabhisha",
    "Purva Bhadrapada", "Uttara Bhadrapada", "Revati",
)

# Sign element indices for navamsha calculation (0=Aries ... 11=Pisces)
FIRE_SIGNS = frozenset({0, 4, 8})    # Aries, Leo, Sagittarius
EARTH_SIGNS = frozenset({1, 5, 9})   # Taurus, Virgo, Capricorn
AIR_SIGNS = frozenset({2, 6, 10})    # Gemini, Libra, Aquarius
WATER_SIGNS = frozenset({3, 7, 11})  # Cancer, Scorpio, Pisces

# Geometric spans in degrees
SIGN_SPAN_DEG = 30.0
NAKSHATRA_SPAN_DEG = 360.0 / 27.0
PADA_SPAN_DEG = NAKSHATRA_SPAN_DEG / 4.0  # 3°20'
NAVAMSHA_SPAN_DEG = SIGN_SPAN_DEG / 9.0   # 3°20'

# Ayanamsa model: linear precession from a fixed epoch
AYANAMSA_AT_EPOCH = 23.15
PRECESSION_ARCSEC_PER_YEAR = 50.2388475
DAYS_PER_YEAR = 365.25

# Fixed mean obliquity used by the closed-form ascendant
MEAN_OBLIQUITY_DEG = 23.4367

J2000_JD = 2451545.0
DAYS_PER_JULIAN_CENTURY = 36525.0

# House classes (whole-sign houses, 1-indexed)
KENDRA_HOUSES = frozenset({1, 4, 7, 10})
TRIKONA_HOUSES = frozenset({1, 5, 9})
DUSTHANA_HOUSES = frozenset({6, 8, 12})
WEALTH_HOUSES = frozenset({2, 5, 9, 11})

BENEFICS = ("Jupiter", "Venus", "Mercury", "Moon")

# Lord of each sign, indexed by sign (0=Aries ... 11=Pisces)
SIGN_LORDS = (
    "Mars", "Venus", "Mercury", "Moon", "Sun", "Mercury",
    "Venus", "Mars", "Jupiter", "Saturn", "Saturn", "Jupiter",
)

# Nakshatra attributes, indexed by nakshatra (0=Ashwini ... 26=Revati)
NAKSHATRA_RULERS = tuple(
    ("Ketu", "Venus", "Sun", "Moon", "Mars", "Rahu", "Jupiter", "Saturn", "Mercury")[i % 9]
    for i in range(27)
)

NAKSHATRA_LINGA = (
    "Male", "Female", "Female", "Female", "Male", "Neutral",
    "Male", "Male", "Neutral", "Male", "Female", "Male",
    "Female", "Female", "Neutral", "Male", "Female", "Female",
    "Male", "Male", "Female", "Female", "Female", "Neutral",
    "Male", "Female", "Female",
)

# (animal, gender) pairs
NAKSHATRA_YONI = (
    ("Horse", "Male"), ("Elephant", "Female"), ("Sheep", "Female"),
    ("Snake", "Female"), ("Snake", "Male"), ("Dog", "Female"),
    ("Cat", "Female"), ("Sheep", "Male"), ("Cat", "Male"),
    ("Rat", "Female"), ("Rat", "Male"), ("Cow", "Female"),
    ("Buffalo", "Female"), ("Tiger", "Female"), ("Buffalo", "Male"),
    ("Tiger", "Male"), ("Deer", "Female"), ("Deer", "Male"),
    ("Dog", "Male"), ("Monkey", "Female"), ("Monkey", "Male"),
    ("Lion", "Female"), ("Lion", "Male"), ("Horse", "Female"),
    ("Elephant", "Male"), ("Cow", "Male"), ("Elephant", "Female"),
)

NAKSHATRA_GANA = (
    "Deva", "Manushya", "Rakshasa", "Manushya", "Deva", "Manushya",
    "Deva", "Deva", "Rakshasa", "Rakshasa", "Manushya", "Manushya",
    "Deva", "Rakshasa", "Deva", "Rakshasa", "Deva", "Rakshasa",
    "Rakshasa", "Manushya", "Manushya", "Deva", "Rakshasa", "Rakshasa",
    "Manushya", "Manushya", "Deva",
)

NAKSHATRA_NADI = tuple(
    ("Adi", "Madhya", "Anthya")[i % 3]
    for i in range(27)
)

# Aspect targets in degrees and the orb applied around each
ASPECT_ANGLES = MappingProxyType({
    "conjunction": 0.0,
    "sextile": 60.0,
    "square": 90.0,
    "trine": 120.0,
    "opposition": 180.0,
})
ASPECT_ORB_DEG = 8.0

# Sun and Moon never station
NON_RETROGRADE_BODIES = frozenset({"Sun", "Moon"})
