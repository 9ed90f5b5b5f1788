"""
Traffic exercise data model
"""
from dataclasses import dataclass

from models.aircraft import Aircraft, ORIGIN
from models.traffic_pattern import TrafficPattern


@dataclass(frozen=True)
class Situation:
    """
    Traffic situation as seen from the target

    Attributes:
        clock: Clock position of the intruder relative to the target's heading (1-12)
        range_nm: Current distance between the aircraft, rounded to whole miles
        pattern: Traffic direction classification
        vertical: Rendered vertical relationship (e.g., "1000 feet above")
        vertical_difference: Intruder altitude minus target altitude in feet
    """
    clock: int
    range_nm: int
    pattern: TrafficPattern
    vertical: str
    vertical_difference: int

    def __post_init__(self):
        if not 1 <= self.clock <= 12:
            raise ValueError(f"Clock position must be between 1 and 12, got {self.clock}")

    def to_dict(self) -> dict:
        return {
            "clock": self.clock,
            "range_nm": self.range_nm,
            "pattern": self.pattern.value,
            "vertical": self.vertical,
            "vertical_difference": self.vertical_difference
        }


@dataclass(frozen=True)
class Exercise:
    """One traffic information exercise: the aircraft pair, the situation and the expected answer"""
    target: Aircraft
    intruder: Aircraft
    situation: Situation
    solution: str

    def __post_init__(self):
        if self.target.position != ORIGIN:
            raise ValueError(f"Target must be at the origin, got {self.target.position}")
        if self.target.military:
            raise ValueError("Target aircraft cannot be military")
        if self.target.level_change is not None:
            raise ValueError("Target aircraft cannot carry a level change")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            "target": self.target.to_dict(),
            "intruder": self.intruder.to_dict(),
            "situation": self.situation.to_dict(),
            "solution": self.solution
        }
