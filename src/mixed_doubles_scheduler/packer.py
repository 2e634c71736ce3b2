"""Packing of a flat game list into rounds of simultaneous games."""

import logging
from collections.abc import Sequence

from .models import Game, Player, Round, check_positive_int

logger = logging.getLogger(__name__)


def pack_rounds(games: Sequence[Game], court_capacity: int) -> list[Round]:
    """
    Partition games into rounds of at most `court_capacity` games.

    Each round takes the remaining games in order, accepting a game when a
    court is free and none of its players is already busy that round.
    Rejected games keep their relative order and wait for a later round.
    Everyone who plays somewhere in `games` but not in a given round has a
    bye in that round.
    """
    check_positive_int("court_capacity", court_capacity)

    everyone: set[Player] = set()
    for game in games:
        everyone |= game.all_players

    rounds: list[Round] = []
    remaining = list(games)
    while remaining:
        accepted: list[Game] = []
        busy: set[Player] = set()
        deferred: list[Game] = []

        for i, game in enumerate(remaining):
            if len(accepted) == court_capacity:
                deferred.extend(remaining[i:])
                break
            if busy & game.all_players:
                deferred.append(game)
                continue
            accepted.append(game)
            busy |= game.all_players

        byes = sorted(everyone - busy, key=lambda p: p.id)
        rounds.append(Round(number=len(rounds) + 1, games=accepted, byes=byes))
        logger.debug(
            "Round %d: %d games, %d byes", len(rounds), len(accepted), len(byes)
        )
        remaining = deferred

    logger.info("Packed %d games into %d rounds", len(games), len(rounds))
    return rounds
