"""
Data-driven geometry solver shared by all traffic patterns
"""
import random
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from generators.altitude_generator import generate_altitudes
from generators.callsign_generator import TARGET, INTRUDER, generate_callsign
from generators.compatibility_selector import select_compatible_aircraft
from models.aircraft import Aircraft, ORIGIN
from models.aircraft_type import AircraftType
from scenarios.intersection import Intersection, validate_intersection
from scenarios.traffic_patterns import PatternGeometry, HEADING_PLUS, HEADING_MINUS
from utils.geo_utils import (
    normalize_heading, calculate_destination, clock_to_relative_bearing, generate_history
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncounterCandidate:
    """Aircraft pair that passed every geometric check"""
    target: Aircraft
    intruder: Aircraft
    clock: int
    intersection: Intersection


def _heading_sign(rule: str, relative_bearing: float, rng: random.Random) -> int:
    """
    Sign applied to the convergence angle

    For the closing rule an intruder on the target's right turns left onto the
    target's track and one on the left turns right. Dead ahead or astern either way works.
    """
    if rule == HEADING_PLUS:
        return 1
    if rule == HEADING_MINUS:
        return -1

    relative_bearing = normalize_heading(relative_bearing)
    if 0 < relative_bearing < 180:
        return -1
    if 180 < relative_bearing < 360:
        return 1
    return rng.choice((-1, 1))


class GeometrySolver:
    """Draws one candidate encounter for a pattern and checks it"""

    def __init__(self, rng: random.Random,
                 flight_rule_weights: Dict[str, int] = None,
                 military_probability: float = None,
                 match_flight_rules: bool = False):
        """
        Initialize the solver

        Args:
            rng: Random source, owned by the caller
            flight_rule_weights: {"VFR": weight, "IFR": weight}, defaults to configuration
            military_probability: Chance that a VFR intruder is military
            match_flight_rules: If True the intruder always flies the target's flight rules
        """
        self.rng = rng
        self.flight_rule_weights = flight_rule_weights
        self.military_probability = military_probability
        self.match_flight_rules = match_flight_rules

    def _draw_speed(self, aircraft_type: AircraftType, minimum: int = None) -> Optional[int]:
        low = aircraft_type.min_speed if minimum is None else max(aircraft_type.min_speed, minimum)
        if low > aircraft_type.max_speed:
            return None
        return self.rng.randint(low, aircraft_type.max_speed)

    def solve(self, geometry: PatternGeometry) -> Optional[EncounterCandidate]:
        """
        Run one rejection sampling attempt for a pattern

        Every draw is fresh: heading, range, clock, convergence angle, aircraft
        pairing, altitudes and speeds.

        Args:
            geometry: Placement and heading contract of the pattern

        Returns:
            EncounterCandidate, or None if the attempt was rejected
        """
        rng = self.rng

        target_heading = rng.randrange(360)
        initial_range = rng.uniform(geometry.min_range, geometry.max_range)
        clock = rng.choice(geometry.clock_positions)

        relative_bearing = clock_to_relative_bearing(clock)
        if geometry.bearing_jitter:
            relative_bearing += rng.uniform(-geometry.bearing_jitter, geometry.bearing_jitter)

        intruder_position = calculate_destination(
            ORIGIN, normalize_heading(target_heading + relative_bearing), initial_range
        )

        angle = rng.uniform(geometry.min_angle, geometry.max_angle)
        sign = _heading_sign(geometry.heading_rule, relative_bearing, rng)
        intruder_heading = normalize_heading(target_heading + sign * angle)

        pairing = select_compatible_aircraft(
            rng,
            flight_rule_weights=self.flight_rule_weights,
            military_probability=self.military_probability,
            match_flight_rules=self.match_flight_rules
        )

        target_altitude, intruder_altitude = generate_altitudes(pairing, rng)
        if target_altitude == intruder_altitude:
            logger.debug(f"Rejected candidate: both aircraft at {target_altitude} ft")
            return None

        target_speed = self._draw_speed(pairing.target_type)
        if geometry.min_speed_margin is None:
            intruder_speed = self._draw_speed(pairing.intruder_type)
        else:
            intruder_speed = self._draw_speed(pairing.intruder_type, target_speed + geometry.min_speed_margin)
            if intruder_speed is None:
                logger.debug(f"Rejected candidate: {pairing.intruder_type.designator} cannot outrun "
                             f"{pairing.target_type.designator} at {target_speed} kt "
                             f"by {geometry.min_speed_margin} kt")
                return None

        target = Aircraft(
            callsign=generate_callsign(pairing.target_rule, TARGET, False, rng),
            aircraft_type=pairing.target_type,
            flight_rule=pairing.target_rule,
            heading=float(target_heading),
            altitude=target_altitude,
            ground_speed=target_speed,
            position=ORIGIN,
            history=generate_history(ORIGIN, target_heading, target_speed)
        )
        intruder = Aircraft(
            callsign=generate_callsign(pairing.intruder_rule, INTRUDER, pairing.intruder_military, rng),
            aircraft_type=pairing.intruder_type,
            flight_rule=pairing.intruder_rule,
            heading=intruder_heading,
            altitude=intruder_altitude,
            ground_speed=intruder_speed,
            position=intruder_position,
            military=pairing.intruder_military,
            history=generate_history(intruder_position, intruder_heading, intruder_speed)
        )

        intersection = validate_intersection(target, intruder, geometry.asymmetry_tolerance)
        if intersection is None:
            return None

        return EncounterCandidate(target=target, intruder=intruder, clock=clock, intersection=intersection)
