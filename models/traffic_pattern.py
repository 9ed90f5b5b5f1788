"""
Traffic pattern enumeration
"""
from enum import Enum


class TrafficPattern(Enum):
    """The five traffic directions used in traffic information phraseology"""
    CROSSING_LEFT_TO_RIGHT = "crossing left to right"
    CROSSING_RIGHT_TO_LEFT = "crossing right to left"
    CONVERGING = "converging"
    OPPOSITE_DIRECTION = "opposite direction"
    OVERTAKING = "overtaking"

    @classmethod
    def from_label(cls, label: str) -> 'TrafficPattern':
        """Look up a pattern by its phraseology text (e.g., "converging")"""
        for pattern in cls:
            if pattern.value == label:
                return pattern
        raise ValueError(f"Unknown traffic pattern: {label}. Must be one of {[p.value for p in cls]}")
