"""
Schedule validation logic.

These checks verify that a schedule satisfies the hard constraints on games
and rounds. They can be run at test time or after generating any schedule.
"""

from collections import Counter
from dataclasses import dataclass

from .models import Game, Player, Pool, Schedule


@dataclass
class ValidationResult:
    """Result of a validation check."""
    passed: bool
    message: str


@dataclass
class ValidationReport:
    """Full validation report for a schedule."""
    results: dict[str, ValidationResult]

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results.values())

    def __str__(self) -> str:
        lines = ["Schedule Validation Report", "=" * 40]
        for name, result in self.results.items():
            status = "✓ PASS" if result.passed else "✗ FAIL"
            lines.append(f"{status}: {name}")
            if not result.passed:
                lines.append(f"       {result.message}")
        lines.append("=" * 40)
        lines.append(f"Overall: {'PASSED' if self.all_passed else 'FAILED'}")
        return "\n".join(lines)


def _result(errors: list[str]) -> ValidationResult:
    return ValidationResult(
        passed=len(errors) == 0,
        message="; ".join(errors[:3]) + (f" (+{len(errors)-3} more)" if len(errors) > 3 else "")
    )


def _pair_name(pair: frozenset[Player]) -> str:
    return "/".join(p.name for p in sorted(pair, key=lambda p: p.id))


def check_no_repeat_teammates(schedule: Schedule) -> ValidationResult:
    """No two players should be teammates more than once."""
    counts = Counter(
        team.players for game in schedule.games for team in (game.team1, game.team2)
    )
    errors = [
        f"{_pair_name(pair)} teamed up {count} times"
        for pair, count in counts.items()
        if count > 1
    ]
    return _result(errors)


def check_no_repeat_opponents(schedule: Schedule) -> ValidationResult:
    """No two players should face each other in more than one game."""
    counts = Counter(pair for game in schedule.games for pair in game.opposing_pairs)
    errors = [
        f"{_pair_name(pair)} opposed {count} times"
        for pair, count in counts.items()
        if count > 1
    ]
    return _result(errors)


def check_no_self_opposition(schedule: Schedule) -> ValidationResult:
    """Each game should have four distinct players."""
    errors = []
    for i, game in enumerate(schedule.games, start=1):
        count = len(game.all_players)
        if count != 4:
            errors.append(f"Game {i} ({game}) has {count} distinct players")
    return _result(errors)


def check_team_pools(schedule: Schedule) -> ValidationResult:
    """Every team should be one man and one woman."""
    errors = []
    for i, game in enumerate(schedule.games, start=1):
        for team in (game.team1, game.team2):
            if team.man.pool is not Pool.MEN or team.woman.pool is not Pool.WOMEN:
                errors.append(f"Game {i}: team {team} is not one man and one woman")
    return _result(errors)


def check_round_capacity(schedule: Schedule) -> ValidationResult:
    """No round should use more courts than are available."""
    errors = [
        f"Round {r.number} has {len(r.games)} games on {schedule.courts} courts"
        for r in schedule.rounds
        if len(r.games) > schedule.courts
    ]
    return _result(errors)


def check_round_disjointness(schedule: Schedule) -> ValidationResult:
    """Nobody should play two games in the same round."""
    errors = []
    for r in schedule.rounds:
        counts = Counter(p for game in r.games for p in game.all_players)
        for player, count in counts.items():
            if count > 1:
                errors.append(f"Round {r.number}: {player.name} plays {count} games")
    return _result(errors)


def check_partition_completeness(schedule: Schedule) -> ValidationResult:
    """
    The rounds should hold every game exactly once.

    Within a round, games must also keep the order they had in the game list.
    """
    errors = []
    packed = [game for r in schedule.rounds for game in r.games]
    if Counter(packed) != Counter(schedule.games):
        errors.append(
            f"Rounds hold {len(packed)} games, game list has {len(schedule.games)}"
        )

    position: dict[Game, int] = {}
    for i, game in enumerate(schedule.games):
        position.setdefault(game, i)
    for r in schedule.rounds:
        indices = [position[game] for game in r.games if game in position]
        if indices != sorted(indices):
            errors.append(f"Round {r.number} reorders its games")
    return _result(errors)


def check_bye_completeness(schedule: Schedule) -> ValidationResult:
    """Byes and players of a round should together be everyone who plays."""
    everyone = frozenset(p for game in schedule.games for p in game.all_players)
    errors = []
    for r in schedule.rounds:
        byes = set(r.byes)
        playing = r.all_players
        if byes & playing:
            errors.append(f"Round {r.number}: players both on court and on a bye")
        if byes | playing != everyone:
            errors.append(f"Round {r.number}: byes and players do not cover everyone")
    return _result(errors)


def validate_schedule(schedule: Schedule) -> ValidationReport:
    """
    Run all validation checks on a schedule.

    Returns a ValidationReport with results for each check.
    """
    checks = {
        "no_repeat_teammates": check_no_repeat_teammates,
        "no_repeat_opponents": check_no_repeat_opponents,
        "no_self_opposition": check_no_self_opposition,
        "team_pools": check_team_pools,
        "round_capacity": check_round_capacity,
        "round_disjointness": check_round_disjointness,
        "partition_completeness": check_partition_completeness,
        "bye_completeness": check_bye_completeness,
    }

    results = {name: check(schedule) for name, check in checks.items()}
    return ValidationReport(results=results)
