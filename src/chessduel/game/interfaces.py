"""Value types shared by the interaction layer.

Input events are a small tagged union dispatched by
``BoardController.on_input``; selection states are frozen dataclasses
so that equality is structural.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TypeAlias

import chess

from chessduel.core.squares import Square

# ── Outcome ──────────────────────────────────────────────────────────────────


class GameOutcome(IntEnum):
    """Result of a half-move cycle, seen from the human's side."""

    ONGOING = auto()
    HUMAN_WINS = auto()
    OPPONENT_WINS = auto()
    DRAW = auto()

    @property
    def is_terminal(self) -> bool:
        return self != GameOutcome.ONGOING


class Direction(IntEnum):
    """Keyboard cursor step."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()

    @property
    def delta(self) -> tuple[int, int]:
        """(file, rank) offset."""
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


# ── Input events ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Pointer:
    """Pointer press at *position*; *offset* is the board's top-left corner."""

    position: tuple[float, float]
    offset: tuple[float, float] = (0, 0)


@dataclass(frozen=True)
class Step:
    direction: Direction


@dataclass(frozen=True)
class Confirm:
    """Choose the square under the keyboard cursor."""


@dataclass(frozen=True)
class ChooseRole:
    """Result of the promotion dialog."""

    role: chess.PieceType


@dataclass(frozen=True)
class DismissPromotion:
    """The promotion dialog was closed without a choice."""


InputEvent: TypeAlias = Pointer | Step | Confirm | ChooseRole | DismissPromotion


@dataclass(frozen=True)
class EventResult:
    """What the host needs to know after an input event.

    Attributes:
        consumed: The event was handled by the board.
        outcome: Terminal outcome when the event ended the game, else ``None``.
        prompt_promotion: The host must present the promotion dialog.
    """

    consumed: bool
    outcome: GameOutcome | None = None
    prompt_promotion: bool = False

    @classmethod
    def ignored(cls) -> EventResult:
        return cls(consumed=False)

    @classmethod
    def handled(cls) -> EventResult:
        return cls(consumed=True)


# ── Selection states ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class NoOrigin:
    pass


@dataclass(frozen=True)
class OriginSelected:
    square: Square


@dataclass(frozen=True)
class AwaitingPromotion:
    """Destination chosen, waiting for the promotion role."""

    origin: Square
    destination: Square


SelectionState: TypeAlias = NoOrigin | OriginSelected | AwaitingPromotion

NO_ORIGIN = NoOrigin()
