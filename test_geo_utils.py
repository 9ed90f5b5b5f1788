"""
Tests for planar geometry helpers and encounter classification
"""
import pytest

from models.aircraft import Aircraft, Position, ORIGIN
from models.aircraft_type import FlightRule
from models.traffic_pattern import TrafficPattern
from scenarios.traffic_patterns import classify_encounter
from utils.constants import VFR_TYPES
from utils.geo_utils import (
    normalize_heading, heading_difference, signed_heading_difference, calculate_bearing,
    calculate_destination, clock_position, ray_intersection, closest_point_of_approach,
    generate_history
)


def test_normalize_heading():
    assert normalize_heading(-90) == 270
    assert normalize_heading(360) == 0
    assert normalize_heading(725) == 5
    assert 0 <= normalize_heading(-1e-15) < 360


def test_heading_differences():
    assert heading_difference(350, 10) == 20
    assert heading_difference(0, 180) == 180
    assert signed_heading_difference(350, 10) == 20
    assert signed_heading_difference(10, 350) == -20


def test_bearing_and_destination():
    assert calculate_bearing(ORIGIN, Position(1, 0)) == pytest.approx(90)
    assert calculate_bearing(ORIGIN, Position(0, -1)) == pytest.approx(180)

    point = calculate_destination(ORIGIN, 270, 4)
    assert point.x == pytest.approx(-4)
    assert point.y == pytest.approx(0, abs=1e-9)


def test_clock_position():
    assert clock_position(ORIGIN, 0, Position(0, 5)) == 12
    assert clock_position(ORIGIN, 0, Position(5, 0)) == 3
    assert clock_position(ORIGIN, 0, Position(-5, 0)) == 9
    assert clock_position(ORIGIN, 0, Position(0, -5)) == 6
    # Heading east, traffic to the north is off the left wing
    assert clock_position(ORIGIN, 90, Position(0, 5)) == 9


def test_ray_intersection_ahead():
    result = ray_intersection(ORIGIN, 0, Position(-3, 3), 90)
    assert result is not None

    point, s1, s2 = result
    assert point.x == pytest.approx(0, abs=1e-9)
    assert point.y == pytest.approx(3)
    assert s1 == pytest.approx(3)
    assert s2 == pytest.approx(3)


def test_ray_intersection_behind_or_parallel():
    # Lines cross at (0, -3), behind the first aircraft
    assert ray_intersection(ORIGIN, 0, Position(3, -3), 270) is None
    # Intruder moving away from the crossing point
    assert ray_intersection(ORIGIN, 0, Position(-3, 3), 270) is None
    assert ray_intersection(ORIGIN, 0, Position(1, 0), 0) is None


def test_closest_point_of_approach():
    minutes, separation = closest_point_of_approach(ORIGIN, 0, 120, Position(0, 10), 180, 120)
    assert minutes == pytest.approx(2.5)
    assert separation == pytest.approx(0, abs=1e-9)

    # Already diverging
    minutes, separation = closest_point_of_approach(ORIGIN, 0, 120, Position(0, -10), 180, 120)
    assert minutes == 0
    assert separation == pytest.approx(10)


def test_history_trail():
    """One return per sweep along the reciprocal track, most recent first"""
    history = generate_history(ORIGIN, 0, 300)
    assert len(history) == 5
    for step, point in enumerate(history, 1):
        assert point.x == pytest.approx(0, abs=1e-9)
        assert point.y == pytest.approx(-step)

    slow = generate_history(ORIGIN, 90, 150, length=3)
    assert [round(p.x, 6) for p in slow] == [-0.5, -1.0, -1.5]


def _aircraft(heading, position=ORIGIN):
    return Aircraft("OOABC", VFR_TYPES[0], FlightRule.VFR, heading, 3500, 110, position)


@pytest.mark.parametrize("heading,position,expected", [
    (90, Position(-3, 3), TrafficPattern.CROSSING_LEFT_TO_RIGHT),
    (270, Position(3, 3), TrafficPattern.CROSSING_RIGHT_TO_LEFT),
    (180, Position(0, 6), TrafficPattern.OPPOSITE_DIRECTION),
    (10, Position(0, -3), TrafficPattern.OVERTAKING),
    (340, Position(3, 0), TrafficPattern.CONVERGING),
])
def test_classify_encounter(heading, position, expected):
    assert classify_encounter(_aircraft(0), _aircraft(heading, position)) == expected
