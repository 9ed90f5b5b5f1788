"""
Tests for weighted selection, flight rule draws and aircraft pairing
"""
import random

import pytest

from generators.compatibility_selector import select_compatible_aircraft, select_flight_rule
from models.aircraft_type import FlightRule
from scenarios.errors import ReferenceDataError
from utils.constants import VFR_TYPES, IFR_TYPES, MIL_TYPES
from utils.weighted_selection import weighted_choice


def test_single_entry_always_selected():
    """A one-entry table always returns its label"""
    rng = random.Random(0)
    assert all(weighted_choice([("only", 3)], rng) == "only" for _ in range(50))


def test_empty_table_rejected():
    with pytest.raises(ReferenceDataError):
        weighted_choice([], random.Random(0))


def test_non_positive_weight_rejected():
    with pytest.raises(ReferenceDataError):
        weighted_choice([("a", 5), ("b", 0)], random.Random(0))
    with pytest.raises(ReferenceDataError):
        weighted_choice([("a", -1)], random.Random(0))


def test_frequencies_follow_weights():
    """Empirical frequencies match the configured weights"""
    rng = random.Random(1)
    draws = [weighted_choice([("a", 75), ("b", 20), ("c", 5)], rng) for _ in range(20000)]

    assert abs(draws.count("a") / len(draws) - 0.75) < 0.02
    assert abs(draws.count("b") / len(draws) - 0.20) < 0.02
    assert abs(draws.count("c") / len(draws) - 0.05) < 0.01


def test_flight_rule_weights_missing_entry():
    with pytest.raises(ReferenceDataError):
        select_flight_rule(random.Random(0), {"VFR": 1})


def test_pairing_uses_matching_catalogs():
    """Targets are civil, military types only ever fly VFR as intruder"""
    rng = random.Random(2)
    for _ in range(2000):
        pairing = select_compatible_aircraft(rng)

        expected_target = VFR_TYPES if pairing.target_is_vfr else IFR_TYPES
        assert pairing.target_type in expected_target

        if pairing.intruder_military:
            assert pairing.intruder_is_vfr
            assert pairing.intruder_type in MIL_TYPES
        elif pairing.intruder_is_vfr:
            assert pairing.intruder_type in VFR_TYPES
        else:
            assert pairing.intruder_type in IFR_TYPES


def test_military_share_among_vfr_intruders():
    """About one VFR intruder in ten is military"""
    rng = random.Random(3)
    pairings = [select_compatible_aircraft(rng) for _ in range(20000)]
    vfr_intruders = [p for p in pairings if p.intruder_rule == FlightRule.VFR]

    share = sum(1 for p in vfr_intruders if p.intruder_military) / len(vfr_intruders)
    assert 0.08 < share < 0.12


def test_match_flight_rules():
    rng = random.Random(4)
    for _ in range(500):
        pairing = select_compatible_aircraft(rng, match_flight_rules=True)
        assert pairing.target_rule == pairing.intruder_rule


def test_independent_flight_rules_produce_mixed_pairs():
    rng = random.Random(5)
    pairings = [select_compatible_aircraft(rng) for _ in range(2000)]
    assert any(p.target_rule != p.intruder_rule for p in pairings)
