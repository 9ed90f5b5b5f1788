"""
Aircraft type reference model
"""
from dataclasses import dataclass
from enum import Enum


class WakeCategory(Enum):
    """ICAO wake turbulence category"""
    LIGHT = "L"
    MEDIUM = "M"
    HEAVY = "H"


class FlightRule(Enum):
    """Flight rules an aircraft operates under"""
    VFR = "V"
    IFR = "I"


@dataclass(frozen=True)
class AircraftType:
    """
    Static performance data for one aircraft type

    Attributes:
        name: Full type name (e.g., "Boeing 737")
        designator: ICAO type designator used in phraseology (e.g., "B737")
        wake_category: Wake turbulence category
        min_speed / max_speed: Ground speed envelope in knots
        min_altitude / max_altitude: Operating altitude envelope in feet
    """
    name: str
    designator: str
    wake_category: WakeCategory
    min_speed: int
    max_speed: int
    min_altitude: int
    max_altitude: int

    def __post_init__(self):
        if not self.name or not self.designator:
            raise ValueError("Aircraft type requires a name and a designator")
        if self.min_speed <= 0 or self.min_speed > self.max_speed:
            raise ValueError(f"Invalid speed envelope for {self.name}: {self.min_speed}-{self.max_speed}")
        if self.min_altitude < 0 or self.min_altitude > self.max_altitude:
            raise ValueError(f"Invalid altitude envelope for {self.name}: {self.min_altitude}-{self.max_altitude}")

    @property
    def is_heavy(self) -> bool:
        return self.wake_category == WakeCategory.HEAVY

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            "name": self.name,
            "designator": self.designator,
            "wake_category": self.wake_category.value,
            "speed": {"min": self.min_speed, "max": self.max_speed},
            "altitude": {"min": self.min_altitude, "max": self.max_altitude}
        }
