"""
Planar geometry utilities for heading, bearing and track calculations

Positions are in nautical miles on a flat plane centred on the target,
x pointing east and y pointing north. Headings are degrees true, clockwise from north.
"""
import math
from typing import Optional, Tuple

from models.aircraft import Position
from utils.constants import HISTORY_LENGTH, HISTORY_INTERVAL_SECONDS, PARALLEL_TOLERANCE


def normalize_heading(heading: float) -> float:
    """
    Wrap a heading into [0, 360)

    Args:
        heading: Heading in degrees, any range

    Returns:
        Equivalent heading in [0, 360)
    """
    heading = heading % 360.0
    # -1e-15 % 360 evaluates to 360.0
    return 0.0 if heading >= 360.0 else heading


def heading_to_vector(heading: float) -> Tuple[float, float]:
    """Unit direction vector (east, north) for a heading"""
    heading_rad = math.radians(heading)
    return (math.sin(heading_rad), math.cos(heading_rad))


def heading_difference(heading1: float, heading2: float) -> float:
    """Absolute angle between two headings, in [0, 180]"""
    diff = abs(normalize_heading(heading1) - normalize_heading(heading2))
    if diff > 180:
        diff = 360 - diff
    return diff


def signed_heading_difference(from_heading: float, to_heading: float) -> float:
    """Turn from one heading to another in (-180, 180], positive clockwise"""
    diff = normalize_heading(to_heading - from_heading)
    return diff - 360 if diff > 180 else diff


def calculate_bearing(origin: Position, destination: Position) -> float:
    """
    Calculate bearing between two points

    Returns:
        Bearing in degrees [0, 360)
    """
    return normalize_heading(math.degrees(math.atan2(destination.x - origin.x, destination.y - origin.y)))


def calculate_destination(origin: Position, bearing: float, distance_nm: float) -> Position:
    """Project a point along a bearing"""
    east, north = heading_to_vector(bearing)
    return Position(origin.x + east * distance_nm, origin.y + north * distance_nm)


def clock_to_relative_bearing(clock: int) -> int:
    """Relative bearing of a clock position (12 o'clock = dead ahead)"""
    return (clock % 12) * 30


def relative_bearing_to_clock(relative_bearing: float) -> int:
    """Quantize a relative bearing to the nearest clock position (1-12)"""
    clock = int(math.floor(normalize_heading(relative_bearing) / 30.0 + 0.5)) % 12
    return 12 if clock == 0 else clock


def clock_position(observer: Position, observer_heading: float, other: Position) -> int:
    """Clock position of another aircraft as seen from an observer"""
    return relative_bearing_to_clock(calculate_bearing(observer, other) - observer_heading)


def ray_intersection(position1: Position, heading1: float,
                     position2: Position, heading2: float) -> Optional[Tuple[Position, float, float]]:
    """
    Forward intersection of two ground tracks

    Solves position1 + s1 * d1 = position2 + s2 * d2 for the track distances s1 and s2.

    Returns:
        (intersection point, s1, s2), or None if the tracks are near parallel or
        the intersection lies behind either aircraft
    """
    d1x, d1y = heading_to_vector(heading1)
    d2x, d2y = heading_to_vector(heading2)

    det = d1x * d2y - d1y * d2x
    if abs(det) < PARALLEL_TOLERANCE:
        return None

    dx = position2.x - position1.x
    dy = position2.y - position1.y
    s1 = (dx * d2y - dy * d2x) / det
    s2 = (dx * d1y - dy * d1x) / det

    if s1 < 0 or s2 < 0:
        return None

    point = Position(position1.x + s1 * d1x, position1.y + s1 * d1y)
    return (point, s1, s2)


def closest_point_of_approach(position1: Position, heading1: float, speed1: float,
                              position2: Position, heading2: float, speed2: float) -> Tuple[float, float]:
    """
    Straight-line closest point of approach of two aircraft

    Args:
        speed1, speed2: Ground speeds in knots

    Returns:
        (minutes until CPA, separation at CPA in nautical miles). Time is 0 when
        the aircraft are already diverging or have no relative motion.
    """
    v1x, v1y = heading_to_vector(heading1)
    v2x, v2y = heading_to_vector(heading2)

    # Relative motion in NM per minute
    rel_vx = (v2x * speed2 - v1x * speed1) / 60.0
    rel_vy = (v2y * speed2 - v1y * speed1) / 60.0
    rel_x = position2.x - position1.x
    rel_y = position2.y - position1.y

    rel_speed_sq = rel_vx ** 2 + rel_vy ** 2
    if rel_speed_sq == 0:
        return (0.0, math.hypot(rel_x, rel_y))

    time_to_cpa = max(0.0, -(rel_x * rel_vx + rel_y * rel_vy) / rel_speed_sq)
    separation = math.hypot(rel_x + rel_vx * time_to_cpa, rel_y + rel_vy * time_to_cpa)
    return (time_to_cpa, separation)


def generate_history(position: Position, heading: float, ground_speed: float,
                     length: int = HISTORY_LENGTH,
                     interval_seconds: float = HISTORY_INTERVAL_SECONDS) -> Tuple[Position, ...]:
    """
    Build the radar history trail behind an aircraft

    One return per radar sweep, spaced by the distance flown in one sweep interval.

    Returns:
        Past positions, most recent first
    """
    spacing = ground_speed * interval_seconds / 3600.0
    reciprocal = normalize_heading(heading + 180)
    return tuple(
        calculate_destination(position, reciprocal, spacing * step)
        for step in range(1, length + 1)
    )
