"""
Track intersection validation for candidate encounters
"""
import logging
from dataclasses import dataclass
from typing import Optional

from models.aircraft import Aircraft, Position
from utils.constants import MIN_INTERSECTION_RANGE, MAX_INTERSECTION_RANGE
from utils.geo_utils import ray_intersection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Intersection:
    """Forward crossing point of the target's and intruder's ground tracks"""
    point: Position
    target_distance: float
    intruder_distance: float
    range_from_target: float

    @property
    def asymmetry(self) -> float:
        """Difference between the two aircraft's distances to the crossing point (NM)"""
        return abs(self.target_distance - self.intruder_distance)


def find_intersection(target: Aircraft, intruder: Aircraft) -> Optional[Intersection]:
    """Intersect both ground tracks, or None if they never meet ahead of both aircraft"""
    result = ray_intersection(target.position, target.heading, intruder.position, intruder.heading)
    if result is None:
        return None

    point, target_distance, intruder_distance = result
    return Intersection(
        point=point,
        target_distance=target_distance,
        intruder_distance=intruder_distance,
        range_from_target=target.position.distance_to(point)
    )


def validate_intersection(target: Aircraft, intruder: Aircraft, asymmetry_tolerance: float,
                          min_range: float = MIN_INTERSECTION_RANGE,
                          max_range: float = MAX_INTERSECTION_RANGE) -> Optional[Intersection]:
    """
    Accept or reject a candidate encounter by where the tracks cross

    Args:
        target: Target aircraft
        intruder: Intruder aircraft
        asymmetry_tolerance: Max allowed difference between the distances each aircraft
                             must fly to the crossing point (NM)
        min_range / max_range: Allowed distance of the crossing point from the target (NM)

    Returns:
        The intersection if the candidate is acceptable, None otherwise
    """
    intersection = find_intersection(target, intruder)
    if intersection is None:
        logger.debug("Rejected candidate: tracks do not intersect ahead of both aircraft")
        return None

    if not min_range <= intersection.range_from_target <= max_range:
        logger.debug(f"Rejected candidate: intersection {intersection.range_from_target:.2f} NM from target "
                     f"outside [{min_range}, {max_range}]")
        return None

    if intersection.asymmetry > asymmetry_tolerance:
        logger.debug(f"Rejected candidate: arrival asymmetry {intersection.asymmetry:.2f} NM "
                     f"exceeds {asymmetry_tolerance} NM")
        return None

    return intersection
