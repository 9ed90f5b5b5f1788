"""
Constants used throughout the application
"""
import json
import logging
import os

from models.aircraft_type import AircraftType, WakeCategory

logger = logging.getLogger(__name__)


# Config loader
def _load_config(config_path: str = None):
    """Load config.json from the application root"""
    if config_path is None:
        # Get the path to config.json (one level up from utils/)
        current_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(os.path.dirname(current_dir), 'config.json')

    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
            logger.info(f"Loaded configuration from {config_path}")
            return config
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid config file {config_path}: {e}. Using default configuration.")
        return {}

# Load config once on module import
_CONFIG = _load_config()

L = WakeCategory.LIGHT
M = WakeCategory.MEDIUM
H = WakeCategory.HEAVY

# Aircraft type catalogs
VFR_TYPES = [
    AircraftType("Cessna 172", "C172", L, 95, 125, 1500, 4500),
    AircraftType("Piper PA-28", "PA28", L, 90, 120, 1500, 4500),
    AircraftType("Robinson R44", "R44", L, 85, 105, 1000, 2500),
    AircraftType("Cessna 152", "C152", L, 80, 100, 1200, 3500),
    AircraftType("Diamond DA40", "DA40", L, 115, 145, 1500, 5500),
]

IFR_TYPES = [
    AircraftType("Boeing 737", "B737", M, 250, 290, 5000, 41000),
    AircraftType("Airbus A320", "A320", M, 250, 290, 5000, 39000),
    AircraftType("Boeing 777", "B777", H, 250, 300, 10000, 43000),
    AircraftType("Embraer 190", "E190", M, 230, 270, 5000, 41000),
    AircraftType("Bombardier CRJ900", "CRJ9", M, 220, 260, 5000, 41000),
    AircraftType("ATR 72", "AT72", M, 180, 220, 5000, 25000),
]

MIL_TYPES = [
    AircraftType("F-16", "F16", L, 200, 400, 1000, 50000),
    AircraftType("C-130", "C130", M, 150, 250, 1000, 30000),
    AircraftType("UH-60", "H60", L, 80, 150, 500, 8000),
    AircraftType("F/A-18", "F18", M, 200, 500, 1000, 50000),
    AircraftType("KC-135", "K35R", H, 200, 300, 5000, 41000),
]

# Callsign reference data
MILITARY_CALLSIGNS = [
    "REDARROW", "ANGE", "LHOB", "MILAN", "REF", "BENGA", "VOLPE", "FIAMM",
    "HKY", "RRR", "HR", "VVAJ", "BAF", "RCH", "CFC", "SPARTA", "BRK", "ROF",
    "OR", "COBRA", "SRA", "RNGR", "BOMR", "WOLF", "TRITN", "RESQ"
]

# Country prefix and registration template. Template letters:
# Z = A-Z, P = A-P, K = K-Z, W = A-W
VFR_REGISTRATIONS = [
    ("OO", "PZZ"),    # Belgium
    ("OE", "KZZ"),    # Austria
    ("LZ", "ZZZ"),    # Bulgaria
    ("OK", "ZZZ"),    # Czech Republic
    ("OM", "ZZZ"),    # Slovakia
    ("ES", "ZZZ"),    # Estonia
    ("M", "ZZZZ"),    # Isle of Man
    ("OH", "ZZZ"),    # Finland
    ("DE", "ZZZ"),    # Germany
    ("F", "ZZZZ"),    # France
    ("I", "ZZZZ"),    # Italy
    ("HA", "ZZZ"),    # Hungary
    ("IE", "ZZZ"),    # Ireland
    ("YL", "ZZZ"),    # Latvia
    ("LY", "ZZZ"),    # Lithuania
    ("LX", "ZZZ"),    # Luxembourg
    ("PH", "ZZZ"),    # Netherlands
    ("LN", "ZZZ"),    # Norway
    ("SP", "ZZZ"),    # Poland
    ("CR", "ZZZ"),    # Portugal
    ("EC", "WZZ"),    # Spain
    ("SE", "ZZZ"),    # Sweden
    ("HB", "ZZZ"),    # Switzerland
    ("YU", "ZZZ"),    # Serbia
    ("G", "ZZZZ"),    # United Kingdom
    ("N", "1AA-999ZZ"),  # United States (numeric grammar)
    ("OY", "ZZZ"),    # Denmark
]

# Registration prefix that uses the numeric N-number grammar
NUMERIC_REGISTRATION_PREFIX = "N"

REGISTRATION_LETTER_RANGES = {
    "Z": ("A", "Z"),
    "P": ("A", "P"),
    "K": ("K", "Z"),
    "W": ("A", "W"),
}

# ICAO airline designator -> radiotelephony designator
AIRLINES = {
    "AAL": "american", "ACA": "air canada", "AFR": "air france", "AUA": "austrian",
    "BAW": "speedbird", "BTI": "air baltic", "AAB": "abelag", "AIC": "air india",
    "ANA": "all nippon", "ASL": "air serbia", "BEL": "beeline", "BLX": "bluescan",
    "CAI": "corendon", "CAO": "airchina freight", "CES": "china eastern", "CHH": "hainan",
    "CLG": "challair", "CTN": "croatia", "CYP": "cyprair", "DAL": "delta",
    "DLA": "dolomiti", "DLH": "lufthansa", "EDW": "edelweiss", "EIN": "shamrock",
    "EJA": "execjet", "EJU": "alpine", "ETD": "etihad", "ETH": "ethiopian",
    "EWG": "eurowings", "EXS": "channex", "EZY": "easy", "FDX": "fedex",
    "FIN": "finnair", "IBE": "iberia", "ICE": "iceair", "ITY": "itarrow",
    "JAF": "beauty", "JBU": "jetblue", "JIA": "blue streak", "KAL": "korean air",
    "KLM": "klm", "LGL": "luxair", "LOT": "lot", "MAC": "arabia maroc",
    "MXY": "moxy", "NFA": "north flying", "NJE": "fraction", "NOZ": "nordic",
    "NSZ": "rednose", "OCN": "ocean", "PGT": "sunturk", "QTR": "qatari",
    "RJA": "jordanian", "ROT": "tarom", "RPA": "brickyard", "ROU": "rouge",
    "RYR": "ryanair", "SAS": "scandinavian", "SIA": "singapore", "SVA": "saudia",
    "SWA": "southwest", "SWR": "swiss", "TAP": "air portugal", "THA": "thai",
    "THY": "turkish", "TOM": "tom jet", "TRA": "transavia", "TSC": "air transat",
    "TUI": "tui jet", "TVS": "skytravel", "UAE": "emirates", "UAL": "united",
    "UPS": "ups", "VIR": "virgin", "VKG": "viking", "VLG": "vueling",
    "VOE": "volotea", "WIF": "wideroe", "WJA": "westjet", "WZZ": "wizzair",
}

# Weighted length tables: (selection, weight)
N_NUMBER_DIGIT_WEIGHTS = [(1, 100), (2, 200), (3, 150)]
IFR_SUFFIX_LENGTH_WEIGHTS = [(3, 150), (4, 45), (2, 20), (1, 10)]

# Chance that an IFR flight number character becomes a letter after a digit
IFR_SUFFIX_LETTER_PROBABILITY = 0.25

# Traffic pattern distribution (phraseology text -> weight)
DIRECTION_WEIGHTS = _CONFIG.get('direction_weights', {
    "crossing left to right": 28,
    "crossing right to left": 28,
    "converging": 28,
    "opposite direction": 11,
    "overtaking": 5,
})

FLIGHT_RULE_WEIGHTS = _CONFIG.get('flight_rule_weights', {"VFR": 75, "IFR": 25})

# Probability that a VFR intruder is drawn from the military catalog
MILITARY_PROBABILITY = _CONFIG.get('military_probability', 0.10)

# Probability that an IFR intruder is shown climbing/descending through the target's level
LEVEL_CHANGE_PROBABILITY = _CONFIG.get('level_change_probability', 0.3)

# Per-pattern attempt caps for rejection sampling
MAX_ATTEMPTS = _CONFIG.get('max_attempts', {})

# Altitude rules (feet)
VFR_MIN_ALTITUDE = 500
VFR_MAX_ALTITUDE = 17500
IFR_MIN_ALTITUDE = 1000
IFR_MAX_ALTITUDE = 41000
TRANSITION_LEVEL = 18000
ALTITUDE_OFFSETS = [-1000, -500, 0, 500, 1000]

# How far from the adjacent edge altitudes are drawn when two envelopes do not overlap
ALTITUDE_FALLBACK_BAND = 3000

# Level change geometry
LEVEL_CHANGE_MIN_OVERSHOOT = 500
LEVEL_CHANGE_MAX_OVERSHOOT = 1500
LEVEL_CHANGE_FLOOR = 1000
LEVEL_CHANGE_CEILING = 41000

# Vertical difference at or below which traffic is reported as "same level"
SAME_LEVEL_THRESHOLD = 200

# Intersection validation (nautical miles)
MIN_INTERSECTION_RANGE = 2.0
MAX_INTERSECTION_RANGE = 6.0
PARALLEL_TOLERANCE = 0.001

# Radar history trail
HISTORY_LENGTH = 5
HISTORY_INTERVAL_SECONDS = 12
