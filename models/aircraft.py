"""
Aircraft data model
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from models.aircraft_type import AircraftType, FlightRule, WakeCategory


class LevelChangeDirection(Enum):
    """Vertical direction of a cleared level change"""
    CLIMB = "climb"
    DESCEND = "descend"

    @property
    def verb(self) -> str:
        """Present participle used in phraseology ("climbing", "descending")"""
        return "climbing" if self == LevelChangeDirection.CLIMB else "descending"


@dataclass(frozen=True)
class Position:
    """Planar position in nautical miles (x = east, y = north) relative to the target"""
    x: float
    y: float

    def distance_to(self, other: 'Position') -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


ORIGIN = Position(0.0, 0.0)


@dataclass(frozen=True)
class LevelChange:
    """Cleared level an aircraft is climbing or descending to"""
    altitude: int
    direction: LevelChangeDirection

    def to_dict(self) -> dict:
        return {"altitude": self.altitude, "direction": self.direction.value}


@dataclass(frozen=True)
class Aircraft:
    """Represents one aircraft (target or intruder) of a traffic exercise"""
    callsign: str
    aircraft_type: AircraftType
    flight_rule: FlightRule
    heading: float
    altitude: int
    ground_speed: int
    position: Position = ORIGIN

    # Only ever set on the intruder
    military: bool = False
    level_change: Optional[LevelChange] = None

    # Radar returns, most recent first
    history: Tuple[Position, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.callsign:
            raise ValueError("callsign cannot be empty")
        if not 0 <= self.heading < 360:
            raise ValueError(f"Heading {self.heading} outside [0, 360)")
        if self.ground_speed <= 0:
            raise ValueError(f"Ground speed must be positive, got {self.ground_speed}")

    @property
    def wake_category(self) -> WakeCategory:
        return self.aircraft_type.wake_category

    @property
    def is_vfr(self) -> bool:
        return self.flight_rule == FlightRule.VFR

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            "callsign": self.callsign,
            "type": self.aircraft_type.name,
            "designator": self.aircraft_type.designator,
            "wake_category": self.wake_category.value,
            "flight_rule": self.flight_rule.name,
            "military": self.military,
            "heading": self.heading,
            "altitude": self.altitude,
            "level_change": self.level_change.to_dict() if self.level_change else None,
            "ground_speed": self.ground_speed,
            "position": self.position.to_dict(),
            "history": [point.to_dict() for point in self.history]
        }
