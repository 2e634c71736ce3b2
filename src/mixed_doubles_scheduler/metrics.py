"""Schedule quality metrics."""

from dataclasses import dataclass
from math import comb

from .models import Player, Schedule


@dataclass
class ScheduleMetrics:
    """Quality metrics for a schedule."""

    total_games: int
    total_rounds: int
    max_possible_games: int

    # Games per player
    min_games: int
    max_games: int
    avg_games: float
    idle_players: int  # Never scheduled

    # Byes per player
    min_byes: int
    max_byes: int

    # Partners and opponents
    min_unique_teammates: int
    max_unique_teammates: int
    min_unique_opponents: int
    max_unique_opponents: int

    def __str__(self) -> str:
        lines = [
            "Schedule Quality Metrics",
            "=" * 40,
            f"Games: {self.total_games} of at most {self.max_possible_games}, "
            f"in {self.total_rounds} rounds",
            f"Games per player:",
            f"  Min: {self.min_games}, Max: {self.max_games}, Avg: {self.avg_games:.1f}",
            f"  Never scheduled: {self.idle_players}",
            f"Byes per player:",
            f"  Min: {self.min_byes}, Max: {self.max_byes}",
            f"Teammates:",
            f"  Unique teammates: min={self.min_unique_teammates}, max={self.max_unique_teammates}",
            f"Opponents:",
            f"  Unique opponents: min={self.min_unique_opponents}, max={self.max_unique_opponents}",
            "=" * 40,
        ]
        return "\n".join(lines)


def max_possible_games(num_men: int, num_women: int) -> int:
    """
    Upper bound on the number of games any valid schedule can contain.

    Every game uses two of the num_men * num_women teams, one pair of men
    facing each other and one pair of women facing each other, and none of
    these may repeat.
    """
    return min(num_men * num_women // 2, comb(num_men, 2), comb(num_women, 2))


def compute_unique_teammates(schedule: Schedule, player: Player) -> int:
    """Count distinct partners of a player."""
    return len(set(schedule.get_teammates_for_player(player)))


def compute_unique_opponents(schedule: Schedule, player: Player) -> int:
    """Count distinct opponents faced by a player."""
    return len(set(schedule.get_opponents_for_player(player)))


def calculate_metrics(schedule: Schedule) -> ScheduleMetrics:
    """Calculate all quality metrics for a schedule."""
    games_played = []
    byes = []
    unique_teammates = []
    unique_opponents = []

    for player in schedule.players:
        games_played.append(len(schedule.get_games_for_player(player)))
        byes.append(len(schedule.get_byes_for_player(player)))
        unique_teammates.append(compute_unique_teammates(schedule, player))
        unique_opponents.append(compute_unique_opponents(schedule, player))

    return ScheduleMetrics(
        total_games=len(schedule.games),
        total_rounds=len(schedule.rounds),
        max_possible_games=max_possible_games(len(schedule.men), len(schedule.women)),
        min_games=min(games_played, default=0),
        max_games=max(games_played, default=0),
        avg_games=sum(games_played) / len(games_played) if games_played else 0.0,
        idle_players=games_played.count(0),
        min_byes=min(byes, default=0),
        max_byes=max(byes, default=0),
        min_unique_teammates=min(unique_teammates, default=0),
        max_unique_teammates=max(unique_teammates, default=0),
        min_unique_opponents=min(unique_opponents, default=0),
        max_unique_opponents=max(unique_opponents, default=0),
    )
