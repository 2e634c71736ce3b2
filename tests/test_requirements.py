"""
Test that the schedule generator produces a valid schedule.
"""

import random

from mixed_doubles_scheduler import generate_schedule
from mixed_doubles_scheduler.validator import validate_schedule


def test_generated_schedule_is_valid() -> None:
    """Generate a schedule and verify all requirements are met."""
    schedule = generate_schedule(rng=random.Random(0))
    report = validate_schedule(schedule)

    # Print the report for visibility
    print(f"\n{report}")

    # Assert each check individually for clear test output
    for name, result in report.results.items():
        assert result.passed, f"{name}: {result.message}"
