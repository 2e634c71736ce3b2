"""Data models for the mixed doubles scheduler."""

from dataclasses import dataclass, field
from enum import Enum


class SchedulerError(Exception):
    """Base class for scheduler errors."""


class InvalidArgumentError(SchedulerError, ValueError):
    """A player count or court capacity was not a positive integer."""


class RegistryError(SchedulerError, LookupError):
    """Candidate state was requested for a player that is no longer active."""


def check_positive_int(name: str, value: object) -> None:
    """Raise InvalidArgumentError unless value is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")


class Pool(Enum):
    """The two disjoint player pools."""
    MEN = "M"
    WOMEN = "W"


@dataclass(frozen=True)
class Player:
    """A player in the tournament."""
    id: int
    name: str
    pool: Pool

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.id == other.id


@dataclass(frozen=True)
class Team:
    """A man and a woman playing on the same side."""
    man: Player
    woman: Player

    @property
    def players(self) -> frozenset[Player]:
        return frozenset({self.man, self.woman})

    def __hash__(self) -> int:
        return hash(self.players)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Team):
            return NotImplemented
        return self.players == other.players

    def __str__(self) -> str:
        return f"{self.man.name}/{self.woman.name}"


@dataclass(frozen=True)
class Game:
    """A single game between two teams."""
    team1: Team
    team2: Team

    def __post_init__(self) -> None:
        if self.team1.players & self.team2.players:
            raise InvalidArgumentError(
                f"Teams {self.team1} and {self.team2} share a player"
            )

    @property
    def teams(self) -> frozenset[Team]:
        return frozenset({self.team1, self.team2})

    @property
    def all_players(self) -> frozenset[Player]:
        return self.team1.players | self.team2.players

    def __hash__(self) -> int:
        return hash(self.teams)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self.teams == other.teams

    @property
    def opposing_pairs(self) -> list[frozenset[Player]]:
        """The four cross-team pairs of players in this game."""
        return [
            frozenset({a, b})
            for a in (self.team1.man, self.team1.woman)
            for b in (self.team2.man, self.team2.woman)
        ]

    def __str__(self) -> str:
        return f"{self.team1} v {self.team2}"


@dataclass
class Round:
    """Games played simultaneously on the available courts."""
    number: int
    games: list[Game]
    byes: list[Player]

    @property
    def all_players(self) -> frozenset[Player]:
        return frozenset(p for game in self.games for p in game.all_players)


@dataclass
class Schedule:
    """A complete mixed doubles schedule."""
    players: list[Player]
    games: list[Game]
    rounds: list[Round] = field(default_factory=list)
    courts: int = 0

    @property
    def men(self) -> list[Player]:
        return [p for p in self.players if p.pool is Pool.MEN]

    @property
    def women(self) -> list[Player]:
        return [p for p in self.players if p.pool is Pool.WOMEN]

    def get_games_for_player(self, player: Player) -> list[Game]:
        """Get all games that a specific player takes part in."""
        return [game for game in self.games if player in game.all_players]

    def get_teammates_for_player(self, player: Player) -> list[Player]:
        """Get every teammate of a player, one entry per game played together."""
        teammates = []
        for game in self.get_games_for_player(player):
            for team in [game.team1, game.team2]:
                if player in team.players:
                    teammates.extend(p for p in team.players if p != player)
        return teammates

    def get_opponents_for_player(self, player: Player) -> list[Player]:
        """Get every opponent of a player, one entry per game played against them."""
        opponents = []
        for game in self.get_games_for_player(player):
            if player in game.team1.players:
                opponents.extend(game.team2.players)
            else:
                opponents.extend(game.team1.players)
        return opponents

    def get_byes_for_player(self, player: Player) -> list[int]:
        """Get the numbers of the rounds a player sits out, sorted."""
        return sorted(r.number for r in self.rounds if player in r.byes)


# Pool sizes and court count of a typical club night
DEFAULT_NUM_MEN = 5
DEFAULT_NUM_WOMEN = 6
DEFAULT_COURTS = 3
