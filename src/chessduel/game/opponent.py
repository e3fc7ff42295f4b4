"""Opponent policy — a uniformly random legal move."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

import chess

_LOGGER = logging.getLogger(__name__)


class NoLegalMovesError(RuntimeError):
    """The opponent was asked to move in a position with no legal moves."""


class RandomOpponent:
    """Picks a move uniformly at random from the legal-move set.

    Args:
        rng: Generator to draw from. Takes precedence over *seed*.
        seed: Seed for a private ``random.Random`` when *rng* is not given.
    """

    __slots__ = ("_rng", "name")

    def __init__(
        self,
        rng: random.Random | None = None,
        seed: int | None = None,
        name: str = "Random",
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self.name = name

    def choose(self, moves: Sequence[chess.Move]) -> chess.Move:
        if not moves:
            raise NoLegalMovesError("Opponent asked to move with no legal moves")
        move = self._rng.choice(list(moves))
        _LOGGER.debug("%s opponent picked %s of %d", self.name, move.uci(), len(moves))
        return move
