"""Position engine — the sole authority on board state and legality.

The interaction layer depends on the :class:`PositionEngine` ABC only.
:class:`ChessEngine` is the concrete implementation backed by python-chess.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import chess

from chessduel.core.squares import Square

_LOGGER = logging.getLogger(__name__)

PROMOTION_ROLES: tuple[chess.PieceType, ...] = (
    chess.QUEEN,
    chess.ROOK,
    chess.BISHOP,
    chess.KNIGHT,
)


class PositionEngine(ABC):
    """Interface for the rules engine consumed by the board controller."""

    @property
    @abstractmethod
    def turn(self) -> chess.Color:
        """Side to move."""

    @abstractmethod
    def legal_moves(self, color: chess.Color | None = None) -> list[chess.Move]:
        """All legal moves for *color* (defaults to the side to move).

        A side that is not on move has no legal moves.
        """

    @abstractmethod
    def apply(self, move: chess.Move) -> None:
        """Play *move*. Caller guarantees it came from :meth:`legal_moves`."""

    @abstractmethod
    def piece_at(self, square: Square) -> chess.Piece | None: ...

    @abstractmethod
    def occupied_by_side_to_move(self, square: Square) -> bool: ...

    @abstractmethod
    def is_checkmate(self) -> bool: ...

    @abstractmethod
    def is_game_over(self) -> bool:
        """True for checkmate, stalemate and every other terminal condition."""

    @abstractmethod
    def fen(self) -> str: ...

    @abstractmethod
    def copy(self) -> PositionEngine: ...


class ChessEngine(PositionEngine):
    """python-chess backed position engine.

    Args:
        fen: Start position. ``None`` means the standard initial position.

    Raises:
        ValueError: If *fen* cannot be parsed or describes an invalid position.
    """

    __slots__ = ("_board",)

    def __init__(self, fen: str | None = None) -> None:
        if fen is None:
            self._board = chess.Board()
        else:
            self._board = chess.Board(fen)
            if not self._board.is_valid():
                raise ValueError(f"Invalid position: {fen!r}")

    @classmethod
    def from_board(cls, board: chess.Board) -> ChessEngine:
        engine = cls()
        engine._board = board.copy()
        return engine

    @property
    def board(self) -> chess.Board:
        """A copy of the underlying board (mutations do not leak back)."""
        return self._board.copy()

    @property
    def turn(self) -> chess.Color:
        return self._board.turn

    def legal_moves(self, color: chess.Color | None = None) -> list[chess.Move]:
        if color is not None and color != self._board.turn:
            return []
        return list(self._board.legal_moves)

    def apply(self, move: chess.Move) -> None:
        _LOGGER.debug("Applying %s", move.uci())
        self._board.push(move)

    def piece_at(self, square: Square) -> chess.Piece | None:
        return self._board.piece_at(square)

    def occupied_by_side_to_move(self, square: Square) -> bool:
        piece = self._board.piece_at(square)
        return piece is not None and piece.color == self._board.turn

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def is_game_over(self) -> bool:
        return self._board.is_game_over()

    def fen(self) -> str:
        return self._board.fen()

    def copy(self) -> ChessEngine:
        return ChessEngine.from_board(self._board)

    def __repr__(self) -> str:
        return f"ChessEngine({self._board.fen()!r})"
