"""
Aircraft type and flight rule pairing for target and intruder
"""
import random
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from models.aircraft_type import AircraftType, FlightRule
from scenarios.errors import ReferenceDataError
from utils.constants import VFR_TYPES, IFR_TYPES, MIL_TYPES, FLIGHT_RULE_WEIGHTS, MILITARY_PROBABILITY
from utils.weighted_selection import weighted_choice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AircraftPairing:
    """Concrete types and flight rules chosen for one exercise"""
    target_type: AircraftType
    intruder_type: AircraftType
    target_rule: FlightRule
    intruder_rule: FlightRule
    intruder_military: bool = False

    @property
    def target_is_vfr(self) -> bool:
        return self.target_rule == FlightRule.VFR

    @property
    def intruder_is_vfr(self) -> bool:
        return self.intruder_rule == FlightRule.VFR


def _pick_type(catalog: List[AircraftType], rng: random.Random, catalog_name: str) -> AircraftType:
    if not catalog:
        raise ReferenceDataError(f"{catalog_name} aircraft catalog is empty")
    return rng.choice(catalog)


def flight_rule_weights_table(flight_rule_weights: Dict[str, int] = None) -> List[Tuple[FlightRule, int]]:
    """
    Convert a {"VFR": weight, "IFR": weight} table into ordered (rule, weight) pairs

    Raises:
        ReferenceDataError: On an empty table, a missing rule or a non-positive weight
    """
    weights = FLIGHT_RULE_WEIGHTS if flight_rule_weights is None else flight_rule_weights
    if not weights:
        raise ReferenceDataError("Flight rule weight table is empty")

    table = []
    for rule in FlightRule:
        try:
            weight = int(weights[rule.name])
        except KeyError as e:
            raise ReferenceDataError(f"Flight rule weights missing entry for {e}") from e
        if weight <= 0:
            raise ReferenceDataError(f"Flight rule weight for {rule.name} must be positive, got {weight}")
        table.append((rule, weight))
    return table


def select_flight_rule(rng: random.Random, flight_rule_weights: Dict[str, int] = None) -> FlightRule:
    """Draw VFR or IFR with the configured weighting"""
    return weighted_choice(flight_rule_weights_table(flight_rule_weights), rng)


def select_compatible_aircraft(rng: random.Random,
                               flight_rule_weights: Dict[str, int] = None,
                               military_probability: float = None,
                               match_flight_rules: bool = False) -> AircraftPairing:
    """
    Choose flight rules and aircraft types for target and intruder

    The target is always civilian. A VFR intruder is drawn from the military
    catalog with the configured probability; IFR intruders are always airliners.

    Args:
        rng: Random source
        flight_rule_weights: {"VFR": weight, "IFR": weight}, defaults to configuration
        military_probability: Chance that a VFR intruder is military
        match_flight_rules: If True the intruder always flies the target's flight rules

    Returns:
        AircraftPairing
    """
    if military_probability is None:
        military_probability = MILITARY_PROBABILITY

    target_rule = select_flight_rule(rng, flight_rule_weights)
    if target_rule == FlightRule.VFR:
        target_type = _pick_type(VFR_TYPES, rng, "VFR")
    else:
        target_type = _pick_type(IFR_TYPES, rng, "IFR")

    if match_flight_rules:
        intruder_rule = target_rule
    else:
        intruder_rule = select_flight_rule(rng, flight_rule_weights)

    intruder_military = False
    if intruder_rule == FlightRule.VFR:
        intruder_military = rng.random() < military_probability
        if intruder_military:
            intruder_type = _pick_type(MIL_TYPES, rng, "Military")
        else:
            intruder_type = _pick_type(VFR_TYPES, rng, "VFR")
    else:
        intruder_type = _pick_type(IFR_TYPES, rng, "IFR")

    logger.debug(f"Selected pairing: target {target_type.designator} ({target_rule.name}), "
                 f"intruder {intruder_type.designator} ({intruder_rule.name}"
                 f"{', military' if intruder_military else ''})")

    return AircraftPairing(
        target_type=target_type,
        intruder_type=intruder_type,
        target_rule=target_rule,
        intruder_rule=intruder_rule,
        intruder_military=intruder_military
    )
