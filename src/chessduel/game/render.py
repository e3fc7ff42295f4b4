"""Render model — per-square glyph and background derived from state.

Everything here is a pure function of the engine position, the selected
origin and the keyboard cursor. Nothing is cached between draws.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

import chess

from chessduel.core.engine import PositionEngine
from chessduel.core.squares import Square, is_dark


class Shade(IntEnum):
    """Square background, highest priority first."""

    SELECTED = auto()  # move origin
    CURSOR = auto()  # keyboard highlight
    LIGHT = auto()
    DARK = auto()


PIECE_GLYPHS: dict[tuple[chess.Color, chess.PieceType], str] = {
    (chess.BLACK, chess.PAWN): "♟",
    (chess.BLACK, chess.KNIGHT): "♞",
    (chess.BLACK, chess.BISHOP): "♝",
    (chess.BLACK, chess.ROOK): "♜",
    (chess.BLACK, chess.QUEEN): "♛",
    (chess.BLACK, chess.KING): "♚",
    (chess.WHITE, chess.PAWN): "♙",
    (chess.WHITE, chess.KNIGHT): "♘",
    (chess.WHITE, chess.BISHOP): "♗",
    (chess.WHITE, chess.ROOK): "♖",
    (chess.WHITE, chess.QUEEN): "♕",
    (chess.WHITE, chess.KING): "♔",
}


@dataclass(frozen=True)
class RenderedSquare:
    glyph: str
    background: Shade


def piece_glyph(piece: chess.Piece | None) -> str:
    """Unicode symbol for *piece*, empty string for an empty square."""
    if piece is None:
        return ""
    return PIECE_GLYPHS[(piece.color, piece.piece_type)]


def square_shade(
    sq: Square,
    origin: Square | None = None,
    cursor: Square | None = None,
) -> Shade:
    if sq == origin:
        return Shade.SELECTED
    if sq == cursor:
        return Shade.CURSOR
    return Shade.DARK if is_dark(sq) else Shade.LIGHT


def render_square(
    engine: PositionEngine,
    sq: Square,
    origin: Square | None = None,
    cursor: Square | None = None,
) -> RenderedSquare:
    return RenderedSquare(
        glyph=piece_glyph(engine.piece_at(sq)),
        background=square_shade(sq, origin, cursor),
    )


def render_board(
    engine: PositionEngine,
    origin: Square | None = None,
    cursor: Square | None = None,
) -> dict[Square, RenderedSquare]:
    """Table of all 64 squares, a1 first."""
    return {sq: render_square(engine, sq, origin, cursor) for sq in chess.SQUARES}


def board_to_text(table: dict[Square, RenderedSquare]) -> str:
    """Plain-text board, rank 8 on top, 3 columns per square."""
    rows = []
    for rank in range(7, -1, -1):
        cells = []
        for file in range(8):
            glyph = table[chess.square(file, rank)].glyph or " "
            cells.append(f" {glyph} ")
        rows.append("".join(cells))
    return "\n".join(rows)
