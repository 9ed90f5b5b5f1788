"""
Climbing/descending-through assignment for IFR intruders
"""
import random
import logging
from dataclasses import replace
from typing import Optional

from models.aircraft import Aircraft, LevelChange, LevelChangeDirection
from utils.altitude_utils import round_ifr_altitude
from utils.constants import (
    LEVEL_CHANGE_PROBABILITY, LEVEL_CHANGE_MIN_OVERSHOOT, LEVEL_CHANGE_MAX_OVERSHOOT,
    LEVEL_CHANGE_FLOOR, LEVEL_CHANGE_CEILING
)

logger = logging.getLogger(__name__)


def crosses_level(current_altitude: int, level_change: Optional[LevelChange], level: int) -> bool:
    """True if the level change takes an aircraft from one side of `level` strictly to the other"""
    if level_change is None:
        return False
    if level_change.direction == LevelChangeDirection.DESCEND:
        return current_altitude > level > level_change.altitude
    return current_altitude < level < level_change.altitude


def assign_level_change(intruder: Aircraft, target_altitude: int, rng: random.Random,
                        probability: float = None) -> Aircraft:
    """
    Possibly clear an IFR intruder through the target's altitude

    Args:
        intruder: Intruder aircraft
        target_altitude: Target altitude in feet
        rng: Random source
        probability: Chance of a level change, defaults to configuration

    Returns:
        The intruder, with a level change if one was assigned
    """
    if probability is None:
        probability = LEVEL_CHANGE_PROBABILITY

    if intruder.is_vfr or intruder.altitude == target_altitude:
        return intruder
    if rng.random() >= probability:
        return intruder

    overshoot = rng.randint(LEVEL_CHANGE_MIN_OVERSHOOT, LEVEL_CHANGE_MAX_OVERSHOOT)
    if intruder.altitude > target_altitude:
        direction = LevelChangeDirection.DESCEND
        cleared = target_altitude - overshoot
    else:
        direction = LevelChangeDirection.CLIMB
        cleared = target_altitude + overshoot

    cleared = round_ifr_altitude(cleared, LEVEL_CHANGE_FLOOR, LEVEL_CHANGE_CEILING)
    level_change = LevelChange(altitude=cleared, direction=direction)

    if not crosses_level(intruder.altitude, level_change, target_altitude):
        logger.debug(f"Discarded level change for {intruder.callsign}: {intruder.altitude} -> {cleared} "
                     f"does not cross {target_altitude}")
        return intruder

    logger.debug(f"{intruder.callsign} {direction.verb} from {intruder.altitude} to {cleared} "
                 f"through {target_altitude}")
    return replace(intruder, level_change=level_change)
