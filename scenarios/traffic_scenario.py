"""
Traffic information scenario orchestrator
"""
import random
import logging
from typing import Dict

from generators.compatibility_selector import flight_rule_weights_table
from generators.exercise_assembler import assemble_exercise
from generators.level_change import assign_level_change
from models.exercise import Exercise
from models.traffic_pattern import TrafficPattern
from scenarios.errors import PatternExhaustedError, ReferenceDataError
from scenarios.geometry_solver import GeometrySolver
from scenarios.traffic_patterns import PATTERN_GEOMETRY, PatternGeometry, pattern_weights
from utils.weighted_selection import weighted_choice

logger = logging.getLogger(__name__)


class TrafficScenarioGenerator:
    """Generates two-aircraft traffic information exercises"""

    def __init__(self, rng: random.Random = None,
                 direction_weights: Dict[str, int] = None,
                 flight_rule_weights: Dict[str, int] = None,
                 military_probability: float = None,
                 level_change_probability: float = None,
                 match_flight_rules: bool = False,
                 geometry: Dict[TrafficPattern, PatternGeometry] = None):
        """
        Initialize the generator

        Args:
            rng: Random source; seed it for reproducible exercises
            direction_weights: {pattern text: weight}, defaults to configuration
            flight_rule_weights: {"VFR": weight, "IFR": weight}, defaults to configuration
            military_probability: Chance that a VFR intruder is military
            level_change_probability: Chance that an IFR intruder is cleared through the target's level
            match_flight_rules: If True the intruder always flies the target's flight rules
            geometry: Pattern geometry table, defaults to PATTERN_GEOMETRY
        """
        self.rng = rng if rng is not None else random.Random()
        self.level_change_probability = level_change_probability
        self.geometry = geometry if geometry is not None else PATTERN_GEOMETRY

        # Validate the weight tables up front
        self.pattern_weights = pattern_weights(direction_weights)
        flight_rule_weights_table(flight_rule_weights)

        missing = [pattern.value for pattern, _ in self.pattern_weights if pattern not in self.geometry]
        if missing:
            raise ReferenceDataError(f"No geometry configured for weighted patterns: {missing}")

        self.solver = GeometrySolver(
            self.rng,
            flight_rule_weights=flight_rule_weights,
            military_probability=military_probability,
            match_flight_rules=match_flight_rules
        )

    def select_pattern(self) -> TrafficPattern:
        """Draw a traffic pattern from the direction weight table"""
        return weighted_choice(self.pattern_weights, self.rng)

    def generate(self) -> Exercise:
        """
        Generate one exercise with a randomly selected pattern

        Raises:
            PatternExhaustedError: If the selected pattern could not be solved
        """
        pattern = self.select_pattern()
        logger.info(f"Selected pattern: {pattern.value}")
        return self.generate_for_pattern(pattern)

    def generate_for_pattern(self, pattern: TrafficPattern) -> Exercise:
        """
        Generate one exercise for a fixed pattern

        Args:
            pattern: Traffic pattern to solve

        Returns:
            Exercise

        Raises:
            PatternExhaustedError: If no valid candidate was found within the pattern's attempt cap
            ReferenceDataError: If the pattern has no geometry record
        """
        try:
            geometry = self.geometry[pattern]
        except KeyError:
            raise ReferenceDataError(f"No geometry configured for pattern '{pattern.value}'") from None

        for attempt in range(1, geometry.max_attempts + 1):
            candidate = self.solver.solve(geometry)
            if candidate is None:
                continue

            intruder = assign_level_change(
                candidate.intruder, candidate.target.altitude, self.rng, self.level_change_probability
            )
            exercise = assemble_exercise(candidate.target, intruder, pattern)

            logger.info(f"Generated {pattern.value} exercise after {attempt} attempt(s): "
                        f"{exercise.situation.clock} o'clock, {exercise.situation.range_nm} miles, "
                        f"{exercise.situation.vertical}")
            return exercise

        logger.error(f"Failed to generate valid scenario for '{pattern.value}' "
                     f"after {geometry.max_attempts} attempts")
        raise PatternExhaustedError(pattern, geometry.max_attempts)


def generate_exercise(rng: random.Random = None) -> Exercise:
    """Generate a single exercise with a freshly constructed generator"""
    return TrafficScenarioGenerator(rng=rng).generate()
