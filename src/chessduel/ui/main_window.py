"""MainWindow — top-level window hosting one board session at a time."""

from __future__ import annotations

import logging
import random
from typing import Any

import chess
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QMessageBox, QVBoxLayout, QWidget

from chessduel.config import AppSettings
from chessduel.game.controller import BoardController, outcome_message
from chessduel.game.coordinates import CoordinateMapper
from chessduel.game.interfaces import GameOutcome
from chessduel.game.opponent import RandomOpponent
from chessduel.ui.board.board_widget import BoardWidget
from chessduel.ui.dialogs.new_game_dialog import NewGameDialog
from chessduel.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

CONTROLS_TEXT = (
    "Controls:\n"
    "Click with the mouse on the piece you want to move,\n"
    "then click on the square you want to move it to.\n"
    "Or use Arrows and Space."
)
RULES_TEXT = "You probably know how to play!"
COMING_SOON_TEXT = "Coming soon"


class MainWindow(QMainWindow):
    """Main application window for chessduel.

    Args:
        settings: Application settings; defaults are used when omitted.
        message_box_cls: Injected for tests; must provide ``information``.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        message_box_cls: type[Any] = QMessageBox,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chess")

        self._settings = settings or AppSettings()
        self._message_box_cls = message_box_cls
        self._human_color: chess.Color = self._settings.human_side
        # One generator for the whole run so a seed fixes every game.
        self._rng = random.Random(self._settings.seed)
        self._board: BoardWidget | None = None

        self._setup_ui()
        self._setup_menu()

        # Start with a default game
        self.start_game(self._human_color, show_help=self._settings.show_controls_help)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        self._layout = QVBoxLayout(central)
        self._layout.setContentsMargins(6, 6, 6, 6)

        self._status_label = QLabel()
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._layout.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("Game")
        assert menu_game is not None

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game_dialog)
        menu_game.addAction(self._act_new_game)

        self._act_rules = QAction("Rules", self)
        self._act_rules.triggered.connect(self._on_rules)
        menu_game.addAction(self._act_rules)

        menu_game.addSeparator()

        self._act_quit = QAction("Exit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        menu_game.addAction(self._act_quit)

    # ── Session lifecycle ────────────────────────────────────────────────

    @property
    def board(self) -> BoardWidget | None:
        return self._board

    def start_game(self, human_color: chess.Color, *, show_help: bool = False) -> None:
        """Tear down the current board and start a fresh session."""
        self._teardown_board()
        self._human_color = human_color

        size = self._settings.cell_size
        controller = BoardController(
            opponent=RandomOpponent(rng=self._rng),
            human_color=human_color,
            mapper=CoordinateMapper(size, size),
            legacy_promotion_rank=self._settings.legacy_promotion_rank,
        )
        board = BoardWidget(controller, BoardTheme.by_name(self._settings.board_theme))
        board.game_over.connect(self._on_game_over)
        self._layout.addWidget(board, alignment=Qt.AlignmentFlag.AlignCenter)
        board.setFocus()
        self._board = board

        _LOGGER.info("New game, human plays %s", self._show_side())

        if show_help:
            self._message_box_cls.information(self, "Chess", CONTROLS_TEXT)

    def _show_side(self) -> str:
        side = "White" if self._human_color == chess.WHITE else "Black"
        self._status_label.setText(f"You play {side}")
        return side

    def _teardown_board(self) -> None:
        if self._board is None:
            return
        self._layout.removeWidget(self._board)
        self._board.deleteLater()
        self._board = None

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_new_game_dialog(self) -> None:
        choice = NewGameDialog.ask(self, self._human_color)
        if choice is None:
            return
        if not choice.is_playable:
            self._message_box_cls.information(self, choice.variant, COMING_SOON_TEXT)
            return
        self.start_game(
            choice.player_color, show_help=self._settings.show_controls_help
        )

    def _on_rules(self) -> None:
        self._message_box_cls.information(self, "Rules", RULES_TEXT)

    def _on_game_over(self, outcome: GameOutcome) -> None:
        self._message_box_cls.information(self, "Game Over", outcome_message(outcome))
        if self._board is None:
            self.start_game(self._human_color)
            return
        # Same board and side; the cursor carries over into the next game.
        self._board.controller.new_session()
        self._board.update()
        _LOGGER.info("Game restarted, human plays %s", self._show_side())
