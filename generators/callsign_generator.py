"""
Callsign generation for civil VFR, airline IFR and military traffic
"""
import random
import string

from models.aircraft_type import FlightRule
from scenarios.errors import ReferenceDataError
from utils.constants import (
    MILITARY_CALLSIGNS, VFR_REGISTRATIONS, NUMERIC_REGISTRATION_PREFIX, REGISTRATION_LETTER_RANGES,
    AIRLINES, N_NUMBER_DIGIT_WEIGHTS, IFR_SUFFIX_LENGTH_WEIGHTS, IFR_SUFFIX_LETTER_PROBABILITY
)
from utils.weighted_selection import weighted_choice

TARGET = "target"
INTRUDER = "intruder"


def _random_letter(rng: random.Random, first: str = "A", last: str = "Z") -> str:
    return chr(rng.randint(ord(first), ord(last)))


def _random_digit(rng: random.Random, first: int = 0) -> str:
    return str(rng.randint(first, 9))


def generate_military_callsign(rng: random.Random) -> str:
    """Military tactical callsign: base word plus two digits (e.g., "COBRA07")"""
    if not MILITARY_CALLSIGNS:
        raise ReferenceDataError("Military callsign list is empty")
    base = rng.choice(MILITARY_CALLSIGNS)
    return f"{base}{_random_digit(rng)}{_random_digit(rng)}"


def generate_vfr_callsign(rng: random.Random) -> str:
    """
    Civil registration for a VFR aircraft

    US registrations use the N-number grammar (N + 1-3 digits + 2-3 letters).
    Every other country is letters only, each template character restricting the
    letter range allowed at that position.
    """
    if not VFR_REGISTRATIONS:
        raise ReferenceDataError("VFR registration table is empty")

    prefix, template = rng.choice(VFR_REGISTRATIONS)

    if prefix == NUMERIC_REGISTRATION_PREFIX:
        digit_count = weighted_choice(N_NUMBER_DIGIT_WEIGHTS, rng)
        # N-numbers never start with zero
        digits = _random_digit(rng, 1) + ''.join(_random_digit(rng) for _ in range(digit_count - 1))
        letters = ''.join(_random_letter(rng) for _ in range(rng.choice([2, 3])))
        return f"{prefix}{digits}{letters}"

    letters = []
    for char in template:
        try:
            first, last = REGISTRATION_LETTER_RANGES[char]
        except KeyError:
            raise ReferenceDataError(f"Unknown registration template character '{char}' for prefix {prefix}")
        letters.append(_random_letter(rng, first, last))
    return prefix + ''.join(letters)


def generate_ifr_callsign(rng: random.Random) -> str:
    """
    Airline callsign: ICAO designator plus flight number (e.g., "KLM1234", "EZY85KP")

    The flight number always starts with a digit. After a digit each character has a
    small chance of being a letter, and once a letter appears the rest stay letters.
    """
    if not AIRLINES:
        raise ReferenceDataError("Airline table is empty")

    airline = rng.choice(sorted(AIRLINES))
    length = weighted_choice(IFR_SUFFIX_LENGTH_WEIGHTS, rng)

    suffix = _random_digit(rng, 1)
    for _ in range(length - 1):
        if suffix[-1] in string.ascii_uppercase or rng.random() < IFR_SUFFIX_LETTER_PROBABILITY:
            suffix += _random_letter(rng)
        else:
            suffix += _random_digit(rng)

    return f"{airline}{suffix}"


def generate_callsign(flight_rule: FlightRule, role: str, military: bool, rng: random.Random) -> str:
    """
    Generate a callsign appropriate to an aircraft's role and flight rules

    Args:
        flight_rule: VFR or IFR
        role: "target" or "intruder"
        military: Military flag (only meaningful for a VFR intruder)
        rng: Random source

    Returns:
        Callsign string
    """
    if role not in (TARGET, INTRUDER):
        raise ValueError(f"Invalid role: {role}. Must be one of {[TARGET, INTRUDER]}")
    if military and role == TARGET:
        raise ValueError("Target aircraft cannot be military")

    if military and role == INTRUDER and flight_rule == FlightRule.VFR:
        return generate_military_callsign(rng)
    if flight_rule == FlightRule.VFR:
        return generate_vfr_callsign(rng)
    return generate_ifr_callsign(rng)
