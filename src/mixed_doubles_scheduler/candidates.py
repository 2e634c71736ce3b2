"""
Per-player candidate state for game generation.

Every active player carries a set of candidate teammates (opposite pool) and
two sets of candidate opponents (men, women). All three relations are kept
symmetric: if q is a candidate of p then p is a candidate of q. Sets only
ever shrink.
"""

import logging
from collections import deque
from collections.abc import Iterable

from .models import InvalidArgumentError, RegistryError

logger = logging.getLogger(__name__)


class CandidateRegistry:
    """
    Registry of the players that can still extend a schedule.

    Players are plain integer ids. `rank` maps each id to its position in the
    search order; whenever the generator has to pick one member of a set it
    takes the lowest-ranked one.
    """

    def __init__(
        self,
        men: Iterable[int],
        women: Iterable[int],
        rank: dict[int, int] | None = None,
    ) -> None:
        men = list(men)
        women = list(women)
        if set(men) & set(women):
            raise InvalidArgumentError("A player cannot be in both pools")

        self._rank = rank if rank is not None else {p: i for i, p in enumerate(men + women)}
        self._men: set[int] = set(men)
        self._teammates: dict[int, set[int]] = {}
        self._opponents: dict[int, tuple[set[int], set[int]]] = {}

        for m in men:
            self._teammates[m] = set(women)
            self._opponents[m] = (set(men) - {m}, set(women))
        for w in women:
            self._teammates[w] = set(men)
            self._opponents[w] = (set(men), set(women) - {w})

    def __len__(self) -> int:
        return len(self._teammates)

    def __contains__(self, player: object) -> bool:
        return player in self._teammates

    @property
    def is_empty(self) -> bool:
        return not self._teammates

    def is_active(self, player: int) -> bool:
        return player in self._teammates

    def active_men(self) -> list[int]:
        """Active men in rank order."""
        return self.ordered(self._men)

    def ordered(self, players: Iterable[int]) -> list[int]:
        """Sort players by their search rank."""
        return sorted(players, key=self._rank.__getitem__)

    def teammates(self, player: int) -> set[int]:
        try:
            return self._teammates[player]
        except KeyError:
            raise RegistryError(f"Player {player} is not active") from None

    def opponent_men(self, player: int) -> set[int]:
        return self._opponent_sets(player)[0]

    def opponent_women(self, player: int) -> set[int]:
        return self._opponent_sets(player)[1]

    def _opponent_sets(self, player: int) -> tuple[set[int], set[int]]:
        try:
            return self._opponents[player]
        except KeyError:
            raise RegistryError(f"Player {player} is not active") from None

    def _is_exhausted(self, player: int) -> bool:
        opp_men, opp_women = self._opponents[player]
        return not self._teammates[player] or not opp_men or not opp_women

    def commit(self, m: int, w: int, opp_m: int, opp_w: int) -> None:
        """Record the game (m, w) v (opp_m, opp_w)."""
        self.teammates(m).discard(w)
        self.teammates(w).discard(m)
        self.teammates(opp_m).discard(opp_w)
        self.teammates(opp_w).discard(opp_m)

        for player in (m, w):
            self.opponent_men(player).discard(opp_m)
            self.opponent_women(player).discard(opp_w)
        for player in (opp_m, opp_w):
            self.opponent_men(player).discard(m)
            self.opponent_women(player).discard(w)

    def remove_exhausted(self) -> list[int]:
        """
        Remove every player that can no longer take part in a game.

        A player is exhausted once its teammate set or either opponent set is
        empty. Removing a player strips it from the sets of everyone that
        references it, which may exhaust them in turn; this runs until no
        exhausted player is left.

        Returns:
            The removed ids, in removal order.
        """
        pending = deque(p for p in self.ordered(self._teammates) if self._is_exhausted(p))
        queued = set(pending)
        removed: list[int] = []

        while pending:
            player = pending.popleft()
            teammates = self._teammates.pop(player)
            opp_men, opp_women = self._opponents.pop(player)
            self._men.discard(player)
            removed.append(player)

            # Relations are symmetric, so the removed player's own sets list
            # everyone that still points at it.
            for other in teammates | opp_men | opp_women:
                if other not in self._teammates:
                    continue
                self._teammates[other].discard(player)
                other_men, other_women = self._opponents[other]
                other_men.discard(player)
                other_women.discard(player)
                if other not in queued and self._is_exhausted(other):
                    queued.add(other)
                    pending.append(other)

        if removed:
            logger.debug("Removed exhausted players %s, %d active", removed, len(self))
        return removed
