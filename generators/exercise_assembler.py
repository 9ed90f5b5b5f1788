"""
Exercise assembly and traffic information phraseology
"""
import math
from typing import Tuple

from generators.level_change import crosses_level
from models.aircraft import Aircraft
from models.exercise import Exercise, Situation
from models.traffic_pattern import TrafficPattern
from utils.constants import SAME_LEVEL_THRESHOLD
from utils.geo_utils import clock_position


def describe_vertical(target: Aircraft, intruder: Aircraft) -> Tuple[str, int]:
    """
    Render the vertical relationship of the intruder as seen from the target

    Returns:
        (text, intruder altitude minus target altitude)
        e.g. ("same level", 0), ("1000 feet below", -1000),
        ("2000 feet above, descending through your level", 2000)
    """
    difference = intruder.altitude - target.altitude
    through = crosses_level(intruder.altitude, intruder.level_change, target.altitude)

    if abs(difference) <= SAME_LEVEL_THRESHOLD and not through:
        return "same level", difference

    text = f"{abs(difference)} feet {'above' if difference > 0 else 'below'}"
    if through:
        text += f", {intruder.level_change.direction.verb} through your level"
    return text, difference


def build_solution(target: Aircraft, intruder: Aircraft, situation: Situation) -> str:
    """Expected traffic information call for the trainee"""
    parts = [
        target.callsign,
        "traffic",
        f"{situation.clock} o'clock",
        f"{situation.range_nm} miles",
        situation.pattern.value,
        situation.vertical,
        intruder.aircraft_type.designator,
    ]
    if intruder.aircraft_type.is_heavy:
        parts.append("heavy")
    return ", ".join(parts)


def assemble_exercise(target: Aircraft, intruder: Aircraft, pattern: TrafficPattern) -> Exercise:
    """
    Compose the final exercise from a validated aircraft pair

    Clock position and range are measured from the final positions so the
    solution matches what is displayed.
    """
    vertical, difference = describe_vertical(target, intruder)
    range_nm = int(math.floor(target.position.distance_to(intruder.position) + 0.5))

    situation = Situation(
        clock=clock_position(target.position, target.heading, intruder.position),
        range_nm=range_nm,
        pattern=pattern,
        vertical=vertical,
        vertical_difference=difference
    )

    return Exercise(
        target=target,
        intruder=intruder,
        situation=situation,
        solution=build_solution(target, intruder, situation)
    )
