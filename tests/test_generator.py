import random
from collections import Counter

import pytest

from mixed_doubles_scheduler.candidates import CandidateRegistry
from mixed_doubles_scheduler.generator import (
    _find_game,
    _search_pass,
    generate_games,
    generate_schedule,
    make_players,
)
from mixed_doubles_scheduler.metrics import max_possible_games
from mixed_doubles_scheduler.models import InvalidArgumentError, Pool


def _assert_hard_constraints(games) -> None:
    teams = Counter(team.players for game in games for team in (game.team1, game.team2))
    assert all(count == 1 for count in teams.values())

    opponents = Counter(pair for game in games for pair in game.opposing_pairs)
    assert all(count == 1 for count in opponents.values())

    for game in games:
        assert len(game.all_players) == 4
        for team in (game.team1, game.team2):
            assert team.man.pool is Pool.MEN
            assert team.woman.pool is Pool.WOMEN


def test_make_players_ids_and_names() -> None:
    players = make_players(2, 3)
    assert [p.id for p in players] == [0, 1, 2, 3, 4]
    assert [p.name for p in players] == ["M1", "M2", "W1", "W2", "W3"]
    assert [p.pool for p in players] == [Pool.MEN] * 2 + [Pool.WOMEN] * 3


@pytest.mark.parametrize("seed", range(10))
def test_two_by_two_yields_single_game(seed: int) -> None:
    games = generate_games(2, 2, random.Random(seed))
    assert len(games) == 1
    assert len(games[0].all_players) == 4
    _assert_hard_constraints(games)


@pytest.mark.parametrize("seed", range(20))
def test_five_by_six_respects_constraints(seed: int) -> None:
    games = generate_games(5, 6, random.Random(seed))
    assert 1 <= len(games) <= max_possible_games(5, 6)
    _assert_hard_constraints(games)


@pytest.mark.parametrize("num_men,num_women", [(3, 3), (4, 4), (4, 7), (8, 8), (10, 6)])
def test_other_sizes_respect_constraints(num_men: int, num_women: int) -> None:
    games = generate_games(num_men, num_women, random.Random(42))
    assert len(games) <= max_possible_games(num_men, num_women)
    _assert_hard_constraints(games)


@pytest.mark.parametrize("num_men,num_women", [(1, 5), (5, 1), (1, 1)])
def test_single_player_pool_yields_no_games(num_men: int, num_women: int) -> None:
    # Without a second man (or woman) there is nobody of the same pool to face
    assert generate_games(num_men, num_women, random.Random(0)) == []


@pytest.mark.parametrize(
    "num_men,num_women",
    [(0, 3), (3, 0), (-1, 2), (2, -4), (True, 2), ("2", 2), (2.0, 2)],
)
def test_invalid_counts_rejected(num_men, num_women) -> None:
    with pytest.raises(InvalidArgumentError):
        generate_games(num_men, num_women)


def test_invalid_counts_are_value_errors() -> None:
    with pytest.raises(ValueError):
        generate_games(0, 3)


def test_same_seed_same_games() -> None:
    first = generate_games(6, 6, random.Random(7))
    second = generate_games(6, 6, random.Random(7))
    assert first == second
    assert [str(g) for g in first] == [str(g) for g in second]


def test_default_rng_works() -> None:
    games = generate_games(4, 4)
    _assert_hard_constraints(games)


def test_generate_schedule_packs_games() -> None:
    schedule = generate_schedule(5, 6, 2, random.Random(3))

    assert schedule.courts == 2
    assert len(schedule.players) == 11
    assert len(schedule.men) == 5
    assert len(schedule.women) == 6
    assert sum(len(r.games) for r in schedule.rounds) == len(schedule.games)
    assert all(len(r.games) <= 2 for r in schedule.rounds)


def test_generate_schedule_rejects_bad_courts() -> None:
    with pytest.raises(InvalidArgumentError):
        generate_schedule(4, 4, 0)


def _registry_with_stuck_first_man() -> CandidateRegistry:
    """
    Men 0-2, women 3-5, ranked in id order.

    Man 0 may only partner woman 3 and only face woman 3, so every partner
    he has leaves no woman to play against.
    """
    registry = CandidateRegistry(men=[0, 1, 2], women=[3, 4, 5])
    for w in (4, 5):
        registry.teammates(0).discard(w)
        registry.teammates(w).discard(0)
        registry.opponent_women(0).discard(w)
        registry.opponent_men(w).discard(0)
    return registry


def test_stuck_man_is_skipped_not_fatal() -> None:
    registry = _registry_with_stuck_first_man()

    assert registry.remove_exhausted() == []
    assert registry.teammates(0) == {3}
    assert _find_game(registry, 0) is None

    # The pass moves on to man 1 instead of giving up
    assert _search_pass(registry, [0, 1, 2]) == (1, 3, 2, 4)


def test_pass_fails_only_when_every_man_is_stuck() -> None:
    registry = _registry_with_stuck_first_man()
    assert _search_pass(registry, [0]) is None
    assert _search_pass(registry, []) is None


def test_find_game_picks_lowest_ranked_players() -> None:
    registry = CandidateRegistry(men=[0, 1, 2], women=[3, 4, 5])
    assert _find_game(registry, 0) == (0, 3, 1, 4)

    reversed_rank = {p: 5 - p for p in range(6)}
    registry = CandidateRegistry(men=[0, 1, 2], women=[3, 4, 5], rank=reversed_rank)
    assert _find_game(registry, 0) == (0, 5, 2, 4)


def test_find_game_skips_partner_without_shared_opponents() -> None:
    registry = CandidateRegistry(men=[0, 1, 2], women=[3, 4, 5])
    # Woman 3 has already faced every other man, so she cannot partner man 0 now
    for opp in (1, 2):
        registry.opponent_men(3).discard(opp)
        registry.opponent_women(opp).discard(3)

    assert _find_game(registry, 0) == (0, 4, 1, 3)
