"""BoardController — the interaction state machine of a human-vs-random game.

Coordinates: CoordinateMapper, SelectionMachine, RandomOpponent,
PositionEngine. Emits events via simple callbacks so the UI / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import chess

from chessduel.core.engine import ChessEngine, PositionEngine
from chessduel.core.squares import Square, make_square
from chessduel.game.coordinates import CoordinateMapper
from chessduel.game.interfaces import (
    ChooseRole,
    Confirm,
    DismissPromotion,
    EventResult,
    GameOutcome,
    InputEvent,
    Pointer,
    SelectionState,
    Step,
)
from chessduel.game.opponent import RandomOpponent
from chessduel.game.render import RenderedSquare, board_to_text, render_board
from chessduel.game.selection import Choice, SelectionMachine

_LOGGER = logging.getLogger(__name__)

_CURSOR_START = make_square(0, 0)  # a1

_OUTCOME_MESSAGES: dict[GameOutcome, str] = {
    GameOutcome.HUMAN_WINS: "Game Over. You win.",
    GameOutcome.OPPONENT_WINS: "Game Over. I win.",
    GameOutcome.DRAW: "Game Over.",
}

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[chess.Move, bool], None]  # move, by_human
GameOverCallback = Callable[[GameOutcome], None]


@dataclass
class ControllerEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


def outcome_message(outcome: GameOutcome) -> str:
    """Modal text for a terminal *outcome*."""
    try:
        return _OUTCOME_MESSAGES[outcome]
    except KeyError:
        raise ValueError(f"Outcome is not terminal: {outcome!r}") from None


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController:
    """Turns input events into moves and replies with a random move.

    Everything runs synchronously inside ``on_input``: the human ply and
    the opponent's reply are both applied before it returns, so the host
    never draws the position in between.

    Args:
        engine: Position to play from. Defaults to the initial position.
        opponent: Reply policy. Defaults to an unseeded ``RandomOpponent``.
        human_color: Side the human plays. With ``chess.BLACK`` the
            opponent opens the game during construction.
        mapper: Pointer-to-square mapping (3×1 terminal cells by default).
        legacy_promotion_rank: See ``SelectionMachine``.
    """

    __slots__ = (
        "_engine",
        "_opponent",
        "_human_color",
        "_mapper",
        "_selection",
        "_cursor",
        "events",
    )

    def __init__(
        self,
        engine: PositionEngine | None = None,
        opponent: RandomOpponent | None = None,
        *,
        human_color: chess.Color = chess.WHITE,
        mapper: CoordinateMapper | None = None,
        legacy_promotion_rank: bool = False,
    ) -> None:
        self._engine = engine if engine is not None else ChessEngine()
        self._opponent = opponent if opponent is not None else RandomOpponent()
        self._human_color = human_color
        self._mapper = mapper if mapper is not None else CoordinateMapper()
        self._selection = SelectionMachine(
            self._engine, legacy_promotion_rank=legacy_promotion_rank
        )
        self._cursor: Square | None = None
        self.events = ControllerEvents()

        if self._engine.turn != human_color and not self._engine.is_game_over():
            self._play_opponent()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> PositionEngine:
        return self._engine

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def human_color(self) -> chess.Color:
        return self._human_color

    @property
    def selection(self) -> SelectionState:
        return self._selection.state

    @property
    def pending_role(self) -> chess.PieceType | None:
        return self._selection.pending_role

    @property
    def promotion_pending(self) -> bool:
        """The role-choice dialog is (still) expected to be open."""
        return self._selection.resolver.is_open

    @property
    def cursor(self) -> Square | None:
        return self._cursor

    @property
    def is_game_over(self) -> bool:
        return self._engine.is_game_over()

    # ── Host interface ───────────────────────────────────────────────────

    def on_input(self, event: InputEvent) -> EventResult:
        if self._engine.is_game_over():
            return EventResult.ignored()

        match event:
            case Pointer(position=position, offset=offset):
                sq = self._mapper.square_at(position, offset)
                if sq is None:
                    return EventResult.ignored()
                return self._resolve(self._selection.choose_square(sq))
            case Step(direction=direction):
                if self._cursor is None:
                    self._cursor = _CURSOR_START
                else:
                    self._cursor = self._mapper.step(self._cursor, direction)
                return EventResult.handled()
            case Confirm():
                if self._cursor is None:
                    self._cursor = _CURSOR_START
                    return EventResult.handled()
                return self._resolve(self._selection.choose_square(self._cursor))
            case ChooseRole(role=role):
                return self._resolve(self._selection.choose_role(role))
            case DismissPromotion():
                return self._resolve(self._selection.dismiss_promotion())
        return EventResult.ignored()

    def render(self) -> dict[Square, RenderedSquare]:
        return render_board(self._engine, self._selection.origin, self._cursor)

    # ── Turn orchestration ───────────────────────────────────────────────

    def finalize(self, move: chess.Move) -> GameOutcome:
        """Play the human *move*, then the opponent's reply if the game goes on."""
        try:
            self._engine.apply(move)
            self._emit_move(move, by_human=True)
            if self._engine.is_checkmate():
                return self._finish(GameOutcome.HUMAN_WINS)
            if self._engine.is_game_over():
                return self._finish(GameOutcome.DRAW)

            self._play_opponent()
            if self._engine.is_checkmate():
                return self._finish(GameOutcome.OPPONENT_WINS)
            if self._engine.is_game_over():
                return self._finish(GameOutcome.DRAW)
            return GameOutcome.ONGOING
        finally:
            self._selection.reset()
            if _LOGGER.isEnabledFor(logging.DEBUG):
                _LOGGER.debug("Position after turn:\n%s", board_to_text(self.render()))

    def new_session(self, engine: PositionEngine | None = None) -> None:
        """Restart from *engine* (default: the initial position).

        The cursor survives, like it does across turns.
        """
        self._engine = engine if engine is not None else ChessEngine()
        self._selection.bind(self._engine)
        if self._engine.turn != self._human_color and not self._engine.is_game_over():
            self._play_opponent()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _resolve(self, choice: Choice) -> EventResult:
        if choice.move is None:
            return EventResult(
                consumed=choice.consumed,
                prompt_promotion=choice.prompt_promotion,
            )
        outcome = self.finalize(choice.move)
        return EventResult(
            consumed=True,
            outcome=outcome if outcome.is_terminal else None,
        )

    def _play_opponent(self) -> None:
        move = self._opponent.choose(self._engine.legal_moves())
        self._engine.apply(move)
        self._emit_move(move, by_human=False)

    def _finish(self, outcome: GameOutcome) -> GameOutcome:
        _LOGGER.info("%s", outcome_message(outcome))
        for cb in self.events.on_game_over:
            cb(outcome)
        return outcome

    def _emit_move(self, move: chess.Move, by_human: bool) -> None:
        for cb in self.events.on_move:
            cb(move, by_human)


