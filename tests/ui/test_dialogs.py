"""Tests for the promotion and new-game dialogs."""

from __future__ import annotations

import chess
from PyQt6.QtWidgets import QDialog

from chessduel.ui.dialogs.new_game_dialog import NewGameDialog
from chessduel.ui.dialogs.promotion_dialog import PromotionDialog


class TestPromotionDialog:
    def test_four_role_buttons(self) -> None:
        dlg = PromotionDialog(chess.WHITE)
        assert set(dlg._buttons) == {chess.QUEEN, chess.ROOK, chess.BISHOP, chess.KNIGHT}
        assert dlg._buttons[chess.QUEEN].text() == "♕"

    def test_black_glyphs(self) -> None:
        dlg = PromotionDialog(chess.BLACK)
        assert dlg._buttons[chess.KNIGHT].text() == "♞"

    def test_click_selects_and_accepts(self) -> None:
        dlg = PromotionDialog(chess.WHITE)
        assert dlg.selected is None

        dlg._buttons[chess.ROOK].click()

        assert dlg.selected == chess.ROOK
        assert dlg.result() == QDialog.DialogCode.Accepted


class TestNewGameDialog:
    def test_defaults_to_chess_as_white(self) -> None:
        dlg = NewGameDialog()
        dlg._on_accept()
        assert dlg.settings is not None
        assert dlg.settings.variant == "Chess"
        assert dlg.settings.player_color == chess.WHITE
        assert dlg.settings.is_playable

    def test_racing_kings_not_playable(self) -> None:
        dlg = NewGameDialog(player_color=chess.BLACK)
        dlg._combo_variant.setCurrentText("Racing Kings")
        dlg._on_accept()
        assert dlg.settings is not None
        assert dlg.settings.player_color == chess.BLACK
        assert not dlg.settings.is_playable
