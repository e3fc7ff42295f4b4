"""Promotion dialog — lets user pick the promotion piece."""

from __future__ import annotations

import chess
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessduel.core.engine import PROMOTION_ROLES
from chessduel.game.render import PIECE_GLYPHS


class PromotionDialog(QDialog):
    """Modal dialog to select the promotion role."""

    def __init__(self, color: chess.Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Promotion")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._selected: chess.PieceType | None = None
        self._buttons: dict[chess.PieceType, QPushButton] = {}

        layout = QVBoxLayout(self)
        label = QLabel("Promote pawn to:")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(label)

        btn_row = QHBoxLayout()
        for role in PROMOTION_ROLES:
            btn = QPushButton(PIECE_GLYPHS[(color, role)])
            btn.setFont(QFont("DejaVu Sans", 28))
            btn.setFixedSize(68, 68)
            btn.setToolTip(chess.piece_name(role).capitalize())
            btn.clicked.connect(lambda checked, r=role: self._choose(r))
            btn_row.addWidget(btn)
            self._buttons[role] = btn

        layout.addLayout(btn_row)

    def _choose(self, role: chess.PieceType) -> None:
        self._selected = role
        self.accept()

    @property
    def selected(self) -> chess.PieceType | None:
        return self._selected

    @staticmethod
    def ask(color: chess.Color, parent: QWidget | None = None) -> chess.PieceType | None:
        """Show the dialog and return the chosen role, or ``None`` on cancel."""
        dlg = PromotionDialog(color, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None
