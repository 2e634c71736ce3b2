import pytest

from mixed_doubles_scheduler.generator import make_players
from mixed_doubles_scheduler.models import Game, Team


@pytest.fixture
def players():
    """M1..M4 (ids 0-3) then W1..W4 (ids 4-7)."""
    return make_players(4, 4)


@pytest.fixture
def games(players):
    """Two games on separate players, then one that clashes with both."""
    m1, m2, m3, m4, w1, w2, w3, w4 = players
    return [
        Game(Team(m1, w1), Team(m2, w2)),
        Game(Team(m3, w3), Team(m4, w4)),
        Game(Team(m1, w3), Team(m3, w1)),
    ]
