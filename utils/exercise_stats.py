"""
Distribution report for a sample of generated exercises
"""
from collections import Counter
from typing import Dict, List

from models.exercise import Exercise
from scenarios.traffic_patterns import classify_encounter
from utils.geo_utils import closest_point_of_approach


def _share(count: int, total: int) -> float:
    return count / total if total else 0.0


def summarize_exercises(exercises: List[Exercise]) -> Dict:
    """
    Summarize a sample of exercises

    Args:
        exercises: Generated exercises

    Returns:
        Dictionary with counts per pattern and clock position, flight rule mix,
        military share among VFR intruders, level change and heavy shares, mean CPA
        separation and the share of exercises whose heading-based classification
        agrees with the generated pattern
    """
    total = len(exercises)
    patterns = Counter(exercise.situation.pattern.value for exercise in exercises)
    clocks = Counter(exercise.situation.clock for exercise in exercises)
    flight_rules = Counter(
        f"{exercise.target.flight_rule.name}/{exercise.intruder.flight_rule.name}" for exercise in exercises
    )

    vfr_intruders = [exercise.intruder for exercise in exercises if exercise.intruder.is_vfr]
    military = sum(1 for intruder in vfr_intruders if intruder.military)
    level_changes = sum(1 for exercise in exercises if exercise.intruder.level_change is not None)
    heavies = sum(1 for exercise in exercises if exercise.intruder.aircraft_type.is_heavy)

    separations = []
    agreements = 0
    for exercise in exercises:
        target, intruder = exercise.target, exercise.intruder
        _, separation = closest_point_of_approach(
            target.position, target.heading, target.ground_speed,
            intruder.position, intruder.heading, intruder.ground_speed
        )
        separations.append(separation)
        if classify_encounter(target, intruder) == exercise.situation.pattern:
            agreements += 1

    return {
        "total": total,
        "patterns": dict(patterns),
        "clock_positions": dict(sorted(clocks.items())),
        "flight_rules": dict(flight_rules),
        "military_share": _share(military, len(vfr_intruders)),
        "level_change_share": _share(level_changes, total),
        "heavy_share": _share(heavies, total),
        "mean_cpa_nm": sum(separations) / total if total else 0.0,
        "classification_agreement": _share(agreements, total),
    }


def format_summary(summary: Dict) -> str:
    """Render a summary as plain text lines for the console"""
    total = summary["total"]
    lines = [f"Exercises: {total}", "", "Patterns:"]
    for pattern, count in sorted(summary["patterns"].items(), key=lambda item: -item[1]):
        lines.append(f"  {pattern:<25} {count:>6}  {_share(count, total):6.1%}")

    lines.append("")
    lines.append("Clock positions:")
    for clock, count in summary["clock_positions"].items():
        lines.append(f"  {clock:>2} o'clock {count:>6}")

    lines.append("")
    lines.append("Flight rules (target/intruder):")
    for rules, count in sorted(summary["flight_rules"].items()):
        lines.append(f"  {rules:<9} {count:>6}  {_share(count, total):6.1%}")

    lines.append("")
    lines.append(f"Military VFR intruders:   {summary['military_share']:.1%}")
    lines.append(f"Level changes:            {summary['level_change_share']:.1%}")
    lines.append(f"Heavy intruders:          {summary['heavy_share']:.1%}")
    lines.append(f"Mean CPA separation:      {summary['mean_cpa_nm']:.2f} NM")
    lines.append(f"Classification agreement: {summary['classification_agreement']:.1%}")
    return "\n".join(lines)
