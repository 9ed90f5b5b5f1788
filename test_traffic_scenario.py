"""
Tests for the traffic scenario generator
"""
import random
import re

import pytest

from models.aircraft import ORIGIN
from models.traffic_pattern import TrafficPattern
from scenarios.errors import PatternExhaustedError, ReferenceDataError
from scenarios.intersection import find_intersection
from scenarios.traffic_patterns import PATTERN_GEOMETRY, PatternGeometry, HEADING_CLOSING, classify_encounter
from scenarios.traffic_scenario import TrafficScenarioGenerator, generate_exercise
from utils.altitude_utils import is_valid_altitude
from utils.constants import DIRECTION_WEIGHTS, SAME_LEVEL_THRESHOLD
from generators.level_change import crosses_level

CALLSIGN_PATTERN = re.compile(r"^[A-Z0-9-]+$")


def _exercises(pattern, count, seed):
    generator = TrafficScenarioGenerator(rng=random.Random(seed))
    return [generator.generate_for_pattern(pattern) for _ in range(count)]


@pytest.mark.parametrize("pattern", list(TrafficPattern))
def test_exercise_invariants(pattern):
    """Every generated exercise honours the pattern's geometry"""
    geometry = PATTERN_GEOMETRY[pattern]

    for exercise in _exercises(pattern, 40, seed=list(TrafficPattern).index(pattern)):
        target, intruder, situation = exercise.target, exercise.intruder, exercise.situation

        assert target.position == ORIGIN
        assert not target.military
        assert target.level_change is None
        assert CALLSIGN_PATTERN.match(intruder.callsign)
        assert CALLSIGN_PATTERN.match(target.callsign)

        assert is_valid_altitude(target.altitude, target.flight_rule)
        assert is_valid_altitude(intruder.altitude, intruder.flight_rule)
        assert target.altitude != intruder.altitude

        assert situation.pattern == pattern
        assert situation.clock in geometry.clock_positions

        intersection = find_intersection(target, intruder)
        assert intersection is not None
        assert 2.0 <= intersection.range_from_target <= 6.0
        assert intersection.asymmetry <= geometry.asymmetry_tolerance

        assert len(target.history) == len(intruder.history) == 5

        if pattern == TrafficPattern.OVERTAKING:
            assert intruder.ground_speed > target.ground_speed


@pytest.mark.parametrize("pattern", list(TrafficPattern))
def test_heading_based_classification_agrees(pattern):
    for exercise in _exercises(pattern, 20, seed=7):
        assert classify_encounter(exercise.target, exercise.intruder) == pattern


def test_solution_contents():
    generator = TrafficScenarioGenerator(rng=random.Random(99))
    for _ in range(150):
        exercise = generator.generate()
        situation = exercise.situation
        solution = exercise.solution

        assert solution.startswith(f"{exercise.target.callsign}, traffic, ")
        assert f"{situation.clock} o'clock" in solution
        assert f"{situation.range_nm} miles" in solution
        assert situation.pattern.value in solution
        assert situation.vertical in solution
        assert exercise.intruder.aircraft_type.designator in solution
        assert solution.endswith(", heavy") == exercise.intruder.aircraft_type.is_heavy

        through = crosses_level(exercise.intruder.altitude, exercise.intruder.level_change,
                                exercise.target.altitude)
        same_level = abs(situation.vertical_difference) <= SAME_LEVEL_THRESHOLD and not through
        assert ("same level" in solution) == same_level
        assert ("through your level" in solution) == through


def test_level_changes_only_for_ifr_intruders():
    generator = TrafficScenarioGenerator(rng=random.Random(5), level_change_probability=1.0)
    exercises = [generator.generate_for_pattern(TrafficPattern.CROSSING_LEFT_TO_RIGHT) for _ in range(60)]

    for exercise in exercises:
        if exercise.intruder.is_vfr:
            assert exercise.intruder.level_change is None
    assert any(exercise.intruder.level_change for exercise in exercises)


def test_same_seed_is_deterministic():
    first = TrafficScenarioGenerator(rng=random.Random(1234))
    second = TrafficScenarioGenerator(rng=random.Random(1234))

    for _ in range(20):
        assert first.generate() == second.generate()


def test_generate_exercise_with_seed():
    assert generate_exercise(random.Random(8)).to_dict() == generate_exercise(random.Random(8)).to_dict()


def test_pattern_frequencies():
    """Pattern draws follow the direction weights"""
    generator = TrafficScenarioGenerator(rng=random.Random(3))
    draws = [generator.select_pattern() for _ in range(10000)]
    total_weight = sum(DIRECTION_WEIGHTS.values())

    for label, weight in DIRECTION_WEIGHTS.items():
        share = draws.count(TrafficPattern.from_label(label)) / len(draws)
        assert abs(share - weight / total_weight) < 0.03


def test_custom_direction_weights():
    generator = TrafficScenarioGenerator(rng=random.Random(4), direction_weights={"overtaking": 1})
    exercise = generator.generate()
    assert exercise.situation.pattern == TrafficPattern.OVERTAKING


def test_invalid_direction_weights():
    with pytest.raises(ReferenceDataError):
        TrafficScenarioGenerator(direction_weights={})
    with pytest.raises(ReferenceDataError):
        TrafficScenarioGenerator(direction_weights={"sideways": 10})
    # Rejected at construction, not on the first draw
    with pytest.raises(ReferenceDataError):
        TrafficScenarioGenerator(direction_weights={"overtaking": 0, "converging": 5})
    with pytest.raises(ReferenceDataError):
        TrafficScenarioGenerator(direction_weights={"converging": -2})


def test_invalid_flight_rule_weights():
    """An explicit empty table is an error, not a request for the defaults"""
    with pytest.raises(ReferenceDataError):
        TrafficScenarioGenerator(flight_rule_weights={})
    with pytest.raises(ReferenceDataError):
        TrafficScenarioGenerator(flight_rule_weights={"VFR": 10})
    with pytest.raises(ReferenceDataError):
        TrafficScenarioGenerator(flight_rule_weights={"VFR": 10, "IFR": 0})


def test_geometry_table_must_cover_weighted_patterns():
    with pytest.raises(ReferenceDataError):
        TrafficScenarioGenerator(
            direction_weights={"converging": 1, "overtaking": 1},
            geometry={TrafficPattern.CONVERGING: PATTERN_GEOMETRY[TrafficPattern.CONVERGING]}
        )

    generator = TrafficScenarioGenerator(
        rng=random.Random(0),
        direction_weights={"converging": 1},
        geometry={TrafficPattern.CONVERGING: PATTERN_GEOMETRY[TrafficPattern.CONVERGING]}
    )
    with pytest.raises(ReferenceDataError):
        generator.generate_for_pattern(TrafficPattern.OVERTAKING)


def test_overtaking_from_dead_astern_never_validates():
    """An intruder at 6 o'clock sits on the target's track, so its crossing point is behind the target"""
    base = PATTERN_GEOMETRY[TrafficPattern.OVERTAKING]
    astern = PatternGeometry(
        pattern=TrafficPattern.OVERTAKING,
        clock_positions=(6,),
        min_range=base.min_range, max_range=base.max_range,
        min_angle=base.min_angle, max_angle=base.max_angle,
        heading_rule=base.heading_rule,
        asymmetry_tolerance=base.asymmetry_tolerance,
        max_attempts=200,
        min_speed_margin=base.min_speed_margin,
    )
    generator = TrafficScenarioGenerator(
        rng=random.Random(1),
        direction_weights={"overtaking": 1},
        geometry={TrafficPattern.OVERTAKING: astern}
    )
    with pytest.raises(PatternExhaustedError):
        generator.generate()

    for exercise in _exercises(TrafficPattern.OVERTAKING, 30, seed=12):
        assert exercise.situation.clock in (5, 7)
        assert exercise.situation.range_nm == 2


def test_military_share_of_generated_exercises():
    """About one VFR intruder in ten is military across generated exercises"""
    generator = TrafficScenarioGenerator(rng=random.Random(2024))
    exercises = [generator.generate() for _ in range(3000)]
    vfr_intruders = [exercise.intruder for exercise in exercises if exercise.intruder.is_vfr]

    assert not any(exercise.target.military for exercise in exercises)
    share = sum(1 for intruder in vfr_intruders if intruder.military) / len(vfr_intruders)
    assert 0.06 < share < 0.15


def test_match_flight_rules():
    generator = TrafficScenarioGenerator(rng=random.Random(6), match_flight_rules=True)
    for _ in range(40):
        exercise = generator.generate()
        assert exercise.target.flight_rule == exercise.intruder.flight_rule


def test_pattern_exhaustion():
    """An unsatisfiable geometry fails with a typed error instead of switching pattern"""
    unreachable = PatternGeometry(
        pattern=TrafficPattern.CONVERGING,
        clock_positions=(2, 3),
        min_range=20.0, max_range=30.0,
        min_angle=5.0, max_angle=39.0,
        heading_rule=HEADING_CLOSING,
        asymmetry_tolerance=2.0,
        max_attempts=25,
    )
    generator = TrafficScenarioGenerator(
        rng=random.Random(0),
        direction_weights={"converging": 1},
        geometry={TrafficPattern.CONVERGING: unreachable}
    )

    with pytest.raises(PatternExhaustedError) as excinfo:
        generator.generate()

    assert excinfo.value.pattern == TrafficPattern.CONVERGING
    assert excinfo.value.attempts == 25
    assert "converging" in str(excinfo.value)


def test_invalid_geometry_rejected():
    with pytest.raises(ReferenceDataError):
        PatternGeometry(
            pattern=TrafficPattern.OVERTAKING,
            clock_positions=(13,),
            min_range=2.0, max_range=6.0,
            min_angle=3.0, max_angle=15.0,
            heading_rule=HEADING_CLOSING,
            asymmetry_tolerance=2.0,
            max_attempts=10,
        )
