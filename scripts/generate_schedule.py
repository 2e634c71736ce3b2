#!/usr/bin/env python3
"""
Generate a mixed doubles schedule and export it as TSV.

Usage:
    python scripts/generate_schedule.py --men 5 --women 6 --courts 3 --seed 42
"""

import argparse
import logging
import random
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mixed_doubles_scheduler.export import export_schedule_tsv, export_sightings_table
from mixed_doubles_scheduler.generator import generate_schedule
from mixed_doubles_scheduler.metrics import calculate_metrics
from mixed_doubles_scheduler.models import (
    DEFAULT_COURTS,
    DEFAULT_NUM_MEN,
    DEFAULT_NUM_WOMEN,
    SchedulerError,
)
from mixed_doubles_scheduler.validator import validate_schedule

LOG_FMT = "LVL: %(levelname)s | FUN: %(funcName)s | msg: %(message)s"
OUTPUT_FILE = Path(__file__).parent / "schedule.tsv"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--men", type=int, default=DEFAULT_NUM_MEN, help="number of men")
    parser.add_argument("--women", type=int, default=DEFAULT_NUM_WOMEN, help="number of women")
    parser.add_argument("--courts", type=int, default=DEFAULT_COURTS, help="courts per round")
    parser.add_argument("--seed", type=int, default=None, help="seed for repeatable output")
    parser.add_argument("--output", type=Path, default=OUTPUT_FILE, help="schedule TSV path")
    parser.add_argument("--sightings", type=Path, default=None, help="optional sightings TSV path")
    parser.add_argument("--debug", action="store_true", help="log every committed game")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO, format=LOG_FMT
    )

    print(f"Generating schedule: {args.men} men, {args.women} women, {args.courts} courts...")
    print("=" * 50)

    try:
        schedule = generate_schedule(
            args.men, args.women, args.courts, random.Random(args.seed)
        )
    except SchedulerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"\nGames: {len(schedule.games)}")
    print(f"Rounds: {len(schedule.rounds)}")

    # Validate
    report = validate_schedule(schedule)
    print(f"\n{report}")

    if not report.all_passed:
        print("\n⚠️  Schedule has validation issues!")
        return 1

    # Metrics
    metrics = calculate_metrics(schedule)
    print(f"\n{metrics}")

    # Export
    export_schedule_tsv(schedule, str(args.output))
    print(f"\n✓ Schedule exported to: {args.output}")
    if args.sightings is not None:
        export_sightings_table(schedule, str(args.sightings))
        print(f"✓ Sightings table exported to: {args.sightings}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
