"""
Scenario generation errors
"""


class ScenarioGenerationError(RuntimeError):
    """Base class for failures surfaced by the scenario generator"""


class PatternExhaustedError(ScenarioGenerationError):
    """No valid geometry was found for a traffic pattern within its attempt budget"""

    def __init__(self, pattern, attempts: int):
        self.pattern = pattern
        self.attempts = attempts
        super().__init__(f"Failed to generate valid scenario for '{pattern.value}' after {attempts} attempts")


class ReferenceDataError(ValueError):
    """Reference tables or configuration are unusable (empty catalog, bad weights, unknown label)"""
