"""BoardWidget — paints the render model and feeds input to the controller."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QRectF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QFont, QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from chessduel.game.controller import BoardController
from chessduel.game.interfaces import (
    ChooseRole,
    Confirm,
    Direction,
    DismissPromotion,
    EventResult,
    InputEvent,
    Pointer,
    Step,
)
from chessduel.ui.dialogs.promotion_dialog import PromotionDialog
from chessduel.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

_KEY_DIRECTIONS: dict[int, Direction] = {
    Qt.Key.Key_Left.value: Direction.LEFT,
    Qt.Key.Key_Right.value: Direction.RIGHT,
    Qt.Key.Key_Up.value: Direction.UP,
    Qt.Key.Key_Down.value: Direction.DOWN,
}
_CONFIRM_KEYS = frozenset(
    {Qt.Key.Key_Space.value, Qt.Key.Key_Return.value, Qt.Key.Key_Enter.value}
)


class BoardWidget(QWidget):
    """Draws the 8×8 board at a fixed cell size, rank 8 on top.

    Signals:
        game_over(GameOutcome): Emitted when an input event ends the game.
    """

    game_over = pyqtSignal(object)

    def __init__(
        self,
        controller: BoardController,
        theme: BoardTheme | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = theme or BoardTheme.default()

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        width, height = controller.mapper.board_size
        self.setFixedSize(width, height)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController:
        return self._controller

    def sizeHint(self) -> QSize:
        width, height = self._controller.mapper.board_size
        return QSize(width, height)

    def dispatch(self, event: InputEvent) -> EventResult:
        """Feed *event* to the controller and follow up on its result."""
        result = self._controller.on_input(event)
        if result.prompt_promotion:
            result = self._ask_promotion()
        if result.outcome is not None:
            _LOGGER.info("Game over: %s", result.outcome.name)
            self.game_over.emit(result.outcome)
        self.update()
        return result

    # ── Painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent | None) -> None:
        mapper = self._controller.mapper
        cw, ch = mapper.cell_width, mapper.cell_height
        font = QFont("DejaVu Sans")
        font.setPixelSize(max(8, int(min(cw, ch) * 0.7)))

        painter = QPainter(self)
        painter.setFont(font)
        painter.setPen(QPen(self._theme.piece))
        for sq, cell in self._controller.render().items():
            x, y = mapper.cell_origin(sq)
            rect = QRectF(x, y, cw, ch)
            painter.fillRect(rect, self._theme.background(cell.background))
            if cell.glyph:
                painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, cell.glyph)
        painter.end()

    # ── Input ────────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None:
            return
        pos = event.position()
        result = self.dispatch(Pointer((pos.x(), pos.y())))
        if not result.consumed:
            super().mousePressEvent(event)

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None:
            return
        key = event.key()
        if key in _KEY_DIRECTIONS:
            result = self.dispatch(Step(_KEY_DIRECTIONS[key]))
        elif key in _CONFIRM_KEYS:
            result = self.dispatch(Confirm())
        else:
            super().keyPressEvent(event)
            return
        if not result.consumed:
            super().keyPressEvent(event)

    def _ask_promotion(self) -> EventResult:
        role = PromotionDialog.ask(self._controller.engine.turn, self)
        if role is None:
            return self._controller.on_input(DismissPromotion())
        return self._controller.on_input(ChooseRole(role))
