"""Interaction layer — input mapping, selection, promotion, opponent, turns.

Quick start::

    from chessduel.game import BoardController, Pointer, RandomOpponent

    ctrl = BoardController(opponent=RandomOpponent(seed=7))
    ctrl.on_input(Pointer((12, 6)))   # e2
    result = ctrl.on_input(Pointer((12, 4)))   # e4, then the reply
"""

from chessduel.game.controller import BoardController, ControllerEvents, outcome_message
from chessduel.game.coordinates import CoordinateMapper
from chessduel.game.interfaces import (
    NO_ORIGIN,
    AwaitingPromotion,
    ChooseRole,
    Confirm,
    Direction,
    DismissPromotion,
    EventResult,
    GameOutcome,
    InputEvent,
    NoOrigin,
    OriginSelected,
    Pointer,
    SelectionState,
    Step,
)
from chessduel.game.opponent import NoLegalMovesError, RandomOpponent
from chessduel.game.promotion import PromotionResolver
from chessduel.game.render import RenderedSquare, Shade, render_board, render_square
from chessduel.game.selection import SelectionMachine

__all__ = [
    # Value types
    "AwaitingPromotion",
    "Direction",
    "EventResult",
    "GameOutcome",
    "NO_ORIGIN",
    "NoOrigin",
    "OriginSelected",
    "RenderedSquare",
    "SelectionState",
    "Shade",
    # Input events
    "ChooseRole",
    "Confirm",
    "DismissPromotion",
    "InputEvent",
    "Pointer",
    "Step",
    # Concrete
    "BoardController",
    "ControllerEvents",
    "CoordinateMapper",
    "NoLegalMovesError",
    "PromotionResolver",
    "RandomOpponent",
    "SelectionMachine",
    "outcome_message",
    "render_board",
    "render_square",
]
