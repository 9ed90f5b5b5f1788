"""
Traffic Information Trainer - Scenario Generator

Command line entry point: generate, print, summarize and export exercises
"""
import sys
import random
import logging
import argparse
from pathlib import Path

from generators.exercise_exporter import ExerciseJSONExporter
from models.traffic_pattern import TrafficPattern
from scenarios.errors import ScenarioGenerationError
from scenarios.traffic_scenario import TrafficScenarioGenerator
from utils.exercise_stats import summarize_exercises, format_summary

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate two-aircraft traffic information exercises"
    )
    parser.add_argument("--count", "-n", type=int, default=1,
                        help="Number of exercises to generate (default: 1)")
    parser.add_argument("--seed", "-s", type=int,
                        help="Random seed for reproducible exercises")
    parser.add_argument("--pattern", "-p", choices=[pattern.value for pattern in TrafficPattern],
                        help="Generate only this traffic pattern")
    parser.add_argument("--report", "-r", action="store_true",
                        help="Print a distribution summary instead of every exercise")
    parser.add_argument("--output", "-o", type=str,
                        help="Directory to export the exercises to as JSON")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def print_exercise(index: int, exercise) -> None:
    target = exercise.target
    intruder = exercise.intruder
    situation = exercise.situation

    print(f"Exercise {index}: {situation.pattern.value}")
    print("-" * 60)
    print(f"  Target:   {target.callsign:<10} {target.aircraft_type.designator:<5} {target.flight_rule.name} "
          f"hdg {target.heading:05.1f} {target.altitude} ft {target.ground_speed} kt")

    level = ""
    if intruder.level_change:
        level = f" -> {intruder.level_change.altitude} ft"
    military = " (military)" if intruder.military else ""
    print(f"  Intruder: {intruder.callsign:<10} {intruder.aircraft_type.designator:<5} {intruder.flight_rule.name} "
          f"hdg {intruder.heading:05.1f} {intruder.altitude} ft{level} {intruder.ground_speed} kt{military}")
    print(f"  Solution: {exercise.solution}")
    print()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(message)s'
    )

    if args.count < 1:
        print("ERROR: --count must be at least 1")
        return 2

    rng = random.Random(args.seed)
    generator = TrafficScenarioGenerator(rng=rng)
    pattern = TrafficPattern.from_label(args.pattern) if args.pattern else None

    exercises = []
    try:
        for _ in range(args.count):
            if pattern:
                exercises.append(generator.generate_for_pattern(pattern))
            else:
                exercises.append(generator.generate())
    except ScenarioGenerationError as e:
        logger.error(f"Error generating exercise: {e}")
        print(f"ERROR generating exercise: {e}")
        return 1

    if args.report:
        print("=" * 60)
        print("Traffic Exercise Summary")
        print("=" * 60)
        print(format_summary(summarize_exercises(exercises)))
    else:
        for index, exercise in enumerate(exercises, 1):
            print_exercise(index, exercise)

    if args.output:
        output_dir = Path(args.output)
        output_dir.mkdir(parents=True, exist_ok=True)
        filepath = ExerciseJSONExporter.export(exercises, output_dir=str(output_dir), seed=args.seed)
        print(f"Output file: {filepath}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
