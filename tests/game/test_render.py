"""Tests for the render model."""

import chess

from chessduel.core.engine import ChessEngine
from chessduel.game.render import (
    PIECE_GLYPHS,
    Shade,
    board_to_text,
    piece_glyph,
    render_board,
    render_square,
    square_shade,
)


class TestGlyphs:
    def test_twelve_distinct_symbols(self) -> None:
        assert len(PIECE_GLYPHS) == 12
        assert len(set(PIECE_GLYPHS.values())) == 12

    def test_piece_glyph(self) -> None:
        assert piece_glyph(chess.Piece(chess.KING, chess.WHITE)) == "♔"
        assert piece_glyph(chess.Piece(chess.PAWN, chess.BLACK)) == "♟"
        assert piece_glyph(None) == ""


class TestShades:
    def test_checkerboard(self) -> None:
        assert square_shade(chess.A1) == Shade.DARK
        assert square_shade(chess.B1) == Shade.LIGHT

    def test_priority(self) -> None:
        assert square_shade(chess.C3, origin=chess.C3, cursor=chess.C3) == Shade.SELECTED
        assert square_shade(chess.C3, origin=chess.D4, cursor=chess.C3) == Shade.CURSOR
        assert square_shade(chess.C3, origin=chess.D4, cursor=chess.E5) == Shade.DARK


class TestBoard:
    def test_initial_position_table(self) -> None:
        table = render_board(ChessEngine())
        assert len(table) == 64
        assert table[chess.E1].glyph == "♔"
        assert table[chess.D8].glyph == "♛"
        assert table[chess.E4].glyph == ""
        assert sum(1 for cell in table.values() if cell.glyph) == 32

    def test_render_square(self) -> None:
        cell = render_square(ChessEngine(), chess.G1, origin=chess.G1)
        assert cell.glyph == "♘"
        assert cell.background == Shade.SELECTED

    def test_rendering_has_no_side_effects(self) -> None:
        engine = ChessEngine()
        render_board(engine, origin=chess.E2, cursor=chess.A1)
        assert engine.fen() == chess.STARTING_FEN

    def test_board_to_text_rank_eight_on_top(self) -> None:
        text = board_to_text(render_board(ChessEngine()))
        lines = text.splitlines()
        assert len(lines) == 8
        assert lines[0] == " ♜  ♞  ♝  ♛  ♚  ♝  ♞  ♜ "
        assert lines[4] == " " * 24
        assert all(len(line) == 24 for line in lines)
