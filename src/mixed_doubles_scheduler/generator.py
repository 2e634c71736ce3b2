"""Game generation logic."""

import logging
import random

from .candidates import CandidateRegistry
from .models import (
    DEFAULT_COURTS,
    DEFAULT_NUM_MEN,
    DEFAULT_NUM_WOMEN,
    Game,
    Player,
    Pool,
    Schedule,
    Team,
    check_positive_int,
)
from .packer import pack_rounds

logger = logging.getLogger(__name__)


def make_players(num_men: int, num_women: int) -> list[Player]:
    """Create the players: men take ids 0..num_men-1, women follow."""
    men = [Player(id=i, name=f"M{i + 1}", pool=Pool.MEN) for i in range(num_men)]
    women = [
        Player(id=num_men + i, name=f"W{i + 1}", pool=Pool.WOMEN)
        for i in range(num_women)
    ]
    return men + women


def generate_games(
    num_men: int,
    num_women: int,
    rng: random.Random | None = None,
) -> list[Game]:
    """
    Generate mixed doubles games with no repeated teammates or opponents.

    Greedy search without backtracking: each man in turn looks for a partner
    and an opposing team that none of the four players has used yet. After
    every committed game the candidate sets shrink, exhausted players are
    dropped, and the search restarts from a freshly shuffled list of men.
    The search stops when a full pass finds nothing to commit, which can
    leave some pairings unformed.

    Args:
        num_men: Number of players in the men's pool.
        num_women: Number of players in the women's pool.
        rng: Source of the shuffles. Pass a seeded Random for repeatable
             output; a fresh unseeded one is used otherwise.
    """
    check_positive_int("num_men", num_men)
    check_positive_int("num_women", num_women)
    rng = rng if rng is not None else random.Random()

    players = make_players(num_men, num_women)
    by_id = {p.id: p for p in players}

    # The shuffled order decides every "pick one" in the search
    order = [p.id for p in players]
    rng.shuffle(order)
    rank = {player_id: i for i, player_id in enumerate(order)}

    registry = CandidateRegistry(
        [p.id for p in players if p.pool is Pool.MEN],
        [p.id for p in players if p.pool is Pool.WOMEN],
        rank,
    )
    registry.remove_exhausted()

    games: list[Game] = []
    while registry.active_men():
        snapshot = registry.active_men()
        rng.shuffle(snapshot)

        found = _search_pass(registry, snapshot)
        if found is None:
            logger.debug("No legal game left for %d active players", len(registry))
            break

        m, w, opp_m, opp_w = found
        registry.commit(m, w, opp_m, opp_w)
        game = Game(Team(by_id[m], by_id[w]), Team(by_id[opp_m], by_id[opp_w]))
        games.append(game)
        logger.debug("Game %d: %s", len(games), game)

        registry.remove_exhausted()

    logger.info(
        "Generated %d games for %d men and %d women", len(games), num_men, num_women
    )
    return games


def _search_pass(
    registry: CandidateRegistry, men: list[int]
) -> tuple[int, int, int, int] | None:
    """
    Try each man in turn and return the first game found.

    A man with no workable partner is skipped; the pass only fails once
    every man has been tried.
    """
    for m in men:
        found = _find_game(registry, m)
        if found is not None:
            return found
    return None


def _find_game(
    registry: CandidateRegistry, m: int
) -> tuple[int, int, int, int] | None:
    """
    Find a game for man m, trying his candidate partners in rank order.

    Returns (m, w, opp_m, opp_w) or None if every partner is a dead end.
    """
    for w in registry.ordered(registry.teammates(m)):
        # Opponents neither m nor w has faced yet
        shared_men = registry.opponent_men(m) & registry.opponent_men(w)
        shared_men.discard(m)
        shared_women = registry.opponent_women(m) & registry.opponent_women(w)
        shared_women.discard(w)

        if not shared_men or not shared_women:
            continue

        for opp_m in registry.ordered(shared_men):
            partners = registry.teammates(opp_m) & shared_women
            if partners:
                return m, w, opp_m, registry.ordered(partners)[0]

    return None


def generate_schedule(
    num_men: int = DEFAULT_NUM_MEN,
    num_women: int = DEFAULT_NUM_WOMEN,
    courts: int = DEFAULT_COURTS,
    rng: random.Random | None = None,
) -> Schedule:
    """Generate the games and pack them into rounds of at most `courts` games."""
    check_positive_int("courts", courts)
    games = generate_games(num_men, num_women, rng)
    rounds = pack_rounds(games, courts)
    return Schedule(
        players=make_players(num_men, num_women),
        games=games,
        rounds=rounds,
        courts=courts,
    )
