"""Tests for BoardWidget input translation and painting."""

from __future__ import annotations

import chess
import pytest
from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QKeyEvent, QMouseEvent

from chessduel.core.engine import ChessEngine
from chessduel.game.controller import BoardController
from chessduel.game.coordinates import CoordinateMapper
from chessduel.game.interfaces import NO_ORIGIN, GameOutcome, OriginSelected
from chessduel.game.opponent import RandomOpponent
from chessduel.ui.board.board_widget import BoardWidget
from chessduel.ui.styles.theme import BoardTheme

CELL = 40
WHITE_PROMOTION_FEN = "7k/P7/8/8/8/8/8/K7 w - - 0 1"
MATE_IN_ONE_FEN = "k7/8/1K6/8/8/8/8/7R w - - 0 1"


def _widget(fen: str | None = None) -> BoardWidget:
    controller = BoardController(
        ChessEngine(fen),
        RandomOpponent(seed=99),
        mapper=CoordinateMapper(CELL, CELL),
    )
    return BoardWidget(controller)


def _press(widget: BoardWidget, sq: chess.Square) -> None:
    x, y = widget.controller.mapper.cell_origin(sq)
    pos = QPointF(x + CELL / 2, y + CELL / 2)
    event = QMouseEvent(
        QEvent.Type.MouseButtonPress,
        pos,
        pos,
        Qt.MouseButton.LeftButton,
        Qt.MouseButton.LeftButton,
        Qt.KeyboardModifier.NoModifier,
    )
    widget.mousePressEvent(event)


def _key(widget: BoardWidget, key: Qt.Key) -> None:
    event = QKeyEvent(QEvent.Type.KeyPress, key.value, Qt.KeyboardModifier.NoModifier)
    widget.keyPressEvent(event)


def test_fixed_size_follows_cell_size() -> None:
    widget = _widget()
    assert widget.width() == 8 * CELL
    assert widget.height() == 8 * CELL


def test_mouse_selects_and_moves() -> None:
    widget = _widget()
    _press(widget, chess.E2)
    assert widget.controller.selection == OriginSelected(chess.E2)

    _press(widget, chess.E4)

    engine = widget.controller.engine
    assert engine.piece_at(chess.E4) == chess.Piece(chess.PAWN, chess.WHITE)
    assert engine.turn == chess.WHITE
    assert widget.controller.selection == NO_ORIGIN


def test_arrow_keys_move_cursor() -> None:
    widget = _widget()
    _key(widget, Qt.Key.Key_Up)
    assert widget.controller.cursor == chess.A1
    _key(widget, Qt.Key.Key_Up)
    _key(widget, Qt.Key.Key_Right)
    assert widget.controller.cursor == chess.B2

    _key(widget, Qt.Key.Key_Space)
    assert widget.controller.selection == OriginSelected(chess.B2)


def test_promotion_dialog_choice_is_forwarded(monkeypatch: pytest.MonkeyPatch) -> None:
    asked: list[chess.Color] = []

    def _ask(color: chess.Color, _parent: object) -> chess.PieceType:
        asked.append(color)
        return chess.KNIGHT

    monkeypatch.setattr(
        "chessduel.ui.board.board_widget.PromotionDialog.ask",
        _ask,
    )
    widget = _widget(WHITE_PROMOTION_FEN)
    moves: list[chess.Move] = []
    widget.controller.events.on_move.append(lambda move, _human: moves.append(move))

    _press(widget, chess.A7)
    assert asked == [chess.WHITE]
    assert widget.controller.pending_role == chess.KNIGHT

    _press(widget, chess.A8)
    assert moves[0] == chess.Move.from_uci("a7a8n")


def test_promotion_dialog_cancel_dismisses(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "chessduel.ui.board.board_widget.PromotionDialog.ask",
        lambda _color, _parent: None,
    )
    widget = _widget(WHITE_PROMOTION_FEN)

    _press(widget, chess.A7)
    assert not widget.controller.promotion_pending

    _press(widget, chess.A8)
    assert widget.controller.selection == NO_ORIGIN
    assert widget.controller.engine.turn == chess.WHITE


def test_game_over_signal() -> None:
    widget = _widget(MATE_IN_ONE_FEN)
    outcomes: list[GameOutcome] = []
    widget.game_over.connect(outcomes.append)

    _press(widget, chess.H1)
    _press(widget, chess.H8)

    assert outcomes == [GameOutcome.HUMAN_WINS]


def test_paint_uses_theme_colours() -> None:
    widget = _widget()
    theme = BoardTheme.default()
    image = widget.grab().toImage()

    x, y = widget.controller.mapper.cell_origin(chess.A1)
    assert image.pixelColor(x + 2, y + 2) == theme.dark_square
    x, y = widget.controller.mapper.cell_origin(chess.B1)
    assert image.pixelColor(x + 2, y + 2) == theme.light_square


def test_paint_highlights_origin() -> None:
    widget = _widget()
    _press(widget, chess.G1)
    image = widget.grab().toImage()

    x, y = widget.controller.mapper.cell_origin(chess.G1)
    assert image.pixelColor(x + 2, y + 2) == BoardTheme.default().highlight_from
