"""Selection state machine — turns chosen squares into a move to play.

States::

    NoOrigin ──own piece──▶ OriginSelected(from) ──unique match──▶ move
        ▲                        │   │
        └──────no match──────────┘   └─ambiguous, never prompted─▶ AwaitingPromotion(from, to)
                                                                      │
                                                           ChooseRole ▼
                                                                     move

The pending promotion role lives in the machine's own
:class:`PromotionResolver`; it is cleared on every origin selection and
consumed when a move is handed out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import chess

from chessduel.core.engine import PositionEngine
from chessduel.core.squares import Square, pre_promotion_rank, rank_of, square_name
from chessduel.game.interfaces import (
    NO_ORIGIN,
    AwaitingPromotion,
    OriginSelected,
    SelectionState,
)
from chessduel.game.promotion import PromotionResolver

_LOGGER = logging.getLogger(__name__)

_LEGACY_TRIGGER_RANK = 6  # the 7th rank, whichever side is moving


@dataclass(frozen=True)
class Choice:
    """Outcome of feeding one square (or role) to the machine.

    Attributes:
        consumed: False when the input made no sense in the current state.
        move: A fully resolved legal move, ready to be played.
        prompt_promotion: The role-choice dialog must be shown.
    """

    consumed: bool = True
    move: chess.Move | None = None
    prompt_promotion: bool = False


class SelectionMachine:
    """Tracks the move origin and the pending promotion role.

    Args:
        engine: Position engine queried for occupancy and legal moves.
        legacy_promotion_rank: Trigger the promotion prompt from the absolute
            7th rank for either side instead of the mover's own 7th rank.
    """

    __slots__ = ("_engine", "_state", "_resolver", "_legacy_promotion_rank")

    def __init__(
        self,
        engine: PositionEngine,
        *,
        legacy_promotion_rank: bool = False,
    ) -> None:
        self._engine = engine
        self._state: SelectionState = NO_ORIGIN
        self._resolver = PromotionResolver()
        self._legacy_promotion_rank = legacy_promotion_rank

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def resolver(self) -> PromotionResolver:
        return self._resolver

    @property
    def pending_role(self) -> chess.PieceType | None:
        return self._resolver.role

    @property
    def origin(self) -> Square | None:
        state = self._state
        if isinstance(state, OriginSelected):
            return state.square
        if isinstance(state, AwaitingPromotion):
            return state.origin
        return None

    def bind(self, engine: PositionEngine) -> None:
        """Point the machine at another engine and drop any selection."""
        self._engine = engine
        self.reset()

    # ── Transitions ──────────────────────────────────────────────────────

    def choose_square(self, sq: Square) -> Choice:
        state = self._state
        if isinstance(state, OriginSelected):
            return self._choose_destination(state.square, sq)
        # NoOrigin, or a fresh square abandoning AwaitingPromotion
        return self._choose_origin(sq)

    def choose_role(self, role: chess.PieceType) -> Choice:
        state = self._state
        if isinstance(state, AwaitingPromotion):
            self._resolver.choose(role)
            return self._choose_destination(state.origin, state.destination)
        if isinstance(state, OriginSelected) and self._resolver.origin == state.square:
            self._resolver.choose(role)
            return Choice()
        return Choice(consumed=False)

    def dismiss_promotion(self) -> Choice:
        """The dialog was closed without a role."""
        if isinstance(self._state, AwaitingPromotion):
            self.reset()
            return Choice()
        if self._resolver.is_open:
            # Keep the origin: a later destination stays ambiguous and resets.
            self._resolver.dismiss()
            return Choice()
        return Choice(consumed=False)

    def reset(self) -> None:
        self._state = NO_ORIGIN
        self._resolver.abandon()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _choose_origin(self, sq: Square) -> Choice:
        self._resolver.abandon()
        if not self._engine.occupied_by_side_to_move(sq):
            self._state = NO_ORIGIN
            return Choice()

        self._state = OriginSelected(sq)
        _LOGGER.debug("Origin selected: %s", square_name(sq))
        if self._triggers_promotion(sq):
            self._resolver.open(sq)
            return Choice(prompt_promotion=True)
        return Choice()

    def _choose_destination(self, origin: Square, dest: Square) -> Choice:
        role = self._resolver.role
        candidates = [
            m
            for m in self._engine.legal_moves()
            if m.from_square == origin and m.to_square == dest
        ]
        matches = [m for m in candidates if role is None or m.promotion == role]

        if len(matches) == 1:
            self._resolver.consume()
            return Choice(move=matches[0])

        if (
            len(matches) > 1
            and role is None
            and self._resolver.origin != origin
            and all(m.promotion is not None for m in matches)
        ):
            self._state = AwaitingPromotion(origin, dest)
            self._resolver.open(origin)
            _LOGGER.debug(
                "Awaiting promotion role for %s-%s",
                square_name(origin),
                square_name(dest),
            )
            return Choice(prompt_promotion=True)

        _LOGGER.debug(
            "No unique move %s-%s (%d candidates), selection dropped",
            square_name(origin),
            square_name(dest),
            len(matches),
        )
        self.reset()
        return Choice()

    def _triggers_promotion(self, sq: Square) -> bool:
        piece = self._engine.piece_at(sq)
        if piece is None or piece.piece_type != chess.PAWN:
            return False
        if self._legacy_promotion_rank:
            trigger_rank = _LEGACY_TRIGGER_RANK
        else:
            trigger_rank = pre_promotion_rank(piece.color)
        if rank_of(sq) != trigger_rank:
            return False
        return any(
            m.from_square == sq and m.promotion is not None
            for m in self._engine.legal_moves()
        )
