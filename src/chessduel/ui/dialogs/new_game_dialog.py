"""NewGameDialog — variant and colour choice before starting a game."""

from __future__ import annotations

import chess
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

VARIANTS = ("Chess", "Racing Kings")
PLAYABLE_VARIANTS = frozenset({"Chess"})


class _NewGameSettings:
    """Plain data returned by NewGameDialog."""

    __slots__ = ("variant", "player_color")

    def __init__(self, variant: str, player_color: chess.Color) -> None:
        self.variant = variant
        self.player_color = player_color

    @property
    def is_playable(self) -> bool:
        return self.variant in PLAYABLE_VARIANTS


class NewGameDialog(QDialog):
    """Modal dialog to configure a new game."""

    def __init__(
        self,
        parent: QWidget | None = None,
        player_color: chess.Color = chess.WHITE,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Select Variant")
        self.setMinimumWidth(300)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._settings: _NewGameSettings | None = None

        main = QVBoxLayout(self)
        form = QFormLayout()
        form.setSpacing(10)

        self._combo_variant = QComboBox()
        self._combo_variant.addItems(VARIANTS)
        form.addRow("Variant", self._combo_variant)

        color_row = QHBoxLayout()
        self._grp_color = QButtonGroup(self)
        self._rb_white = QRadioButton("White")
        self._rb_black = QRadioButton("Black")
        self._rb_white.setChecked(player_color == chess.WHITE)
        self._rb_black.setChecked(player_color == chess.BLACK)
        self._grp_color.addButton(self._rb_white, 0)
        self._grp_color.addButton(self._rb_black, 1)
        color_row.addWidget(self._rb_white)
        color_row.addWidget(self._rb_black)
        form.addRow("Play as", color_row)

        main.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        main.addWidget(buttons)

    def _on_accept(self) -> None:
        color = chess.WHITE if self._rb_white.isChecked() else chess.BLACK
        self._settings = _NewGameSettings(
            variant=self._combo_variant.currentText(),
            player_color=color,
        )
        self.accept()

    @property
    def settings(self) -> _NewGameSettings | None:
        return self._settings

    @staticmethod
    def ask(
        parent: QWidget | None = None,
        player_color: chess.Color = chess.WHITE,
    ) -> _NewGameSettings | None:
        dlg = NewGameDialog(parent, player_color)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.settings
        return None
