"""
Realistic altitude pairs for target and intruder
"""
import random
import logging
from typing import Tuple

from generators.compatibility_selector import AircraftPairing
from models.aircraft_type import AircraftType, FlightRule
from utils.altitude_utils import round_altitude
from utils.constants import ALTITUDE_OFFSETS, ALTITUDE_FALLBACK_BAND

logger = logging.getLogger(__name__)


def _clamp(value: float, aircraft_type: AircraftType) -> float:
    return min(max(value, aircraft_type.min_altitude), aircraft_type.max_altitude)


def _round(value: float, aircraft_type: AircraftType, flight_rule: FlightRule) -> int:
    return round_altitude(_clamp(value, aircraft_type), flight_rule,
                          aircraft_type.min_altitude, aircraft_type.max_altitude)


def generate_altitudes(pairing: AircraftPairing, rng: random.Random) -> Tuple[int, int]:
    """
    Generate target and intruder altitudes from the two operating envelopes

    When the envelopes overlap both aircraft start from a shared base altitude and
    the intruder is offset by a small vertical step. Otherwise each aircraft is placed
    near the edge of its own envelope that faces the other one.

    Args:
        pairing: Aircraft types and flight rules of the exercise
        rng: Random source

    Returns:
        (target_altitude, intruder_altitude), rounded to each aircraft's altitude rule
    """
    target_type = pairing.target_type
    intruder_type = pairing.intruder_type

    overlap_min = max(target_type.min_altitude, intruder_type.min_altitude)
    overlap_max = min(target_type.max_altitude, intruder_type.max_altitude)

    if overlap_min <= overlap_max:
        target_base = intruder_base = rng.uniform(overlap_min, overlap_max)
    else:
        # Envelopes are disjoint: stay close to the gap between them
        if target_type.max_altitude < intruder_type.min_altitude:
            target_base = rng.uniform(max(target_type.min_altitude, target_type.max_altitude - ALTITUDE_FALLBACK_BAND),
                                      target_type.max_altitude)
            intruder_base = rng.uniform(intruder_type.min_altitude,
                                        min(intruder_type.max_altitude, intruder_type.min_altitude + ALTITUDE_FALLBACK_BAND))
        else:
            target_base = rng.uniform(target_type.min_altitude,
                                      min(target_type.max_altitude, target_type.min_altitude + ALTITUDE_FALLBACK_BAND))
            intruder_base = rng.uniform(max(intruder_type.min_altitude, intruder_type.max_altitude - ALTITUDE_FALLBACK_BAND),
                                        intruder_type.max_altitude)
        logger.debug(f"No altitude overlap between {target_type.designator} and {intruder_type.designator}, "
                     f"using adjacent edges")

    offset = rng.choice(ALTITUDE_OFFSETS)

    target_altitude = _round(target_base, target_type, pairing.target_rule)
    intruder_altitude = _round(intruder_base + offset, intruder_type, pairing.intruder_rule)

    return target_altitude, intruder_altitude
