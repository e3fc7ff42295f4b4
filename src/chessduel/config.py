"""Application settings and command-line parsing."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass

import chess

BOARD_THEMES = ("Classic", "Blue", "Green")
_COLORS = {"white": chess.WHITE, "black": chess.BLACK}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    cell_size: int = 64  # px per square
    show_controls_help: bool = True

    # Game
    human_color: str = "white"
    seed: int | None = None  # opponent RNG seed
    legacy_promotion_rank: bool = False

    # Diagnostics
    log_level: str = "WARNING"

    @property
    def human_side(self) -> chess.Color:
        return _COLORS[self.human_color]

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    def validate(self) -> AppSettings:
        """Raise ``ValueError`` on an inconsistent setting, else return self."""
        if self.board_theme not in BOARD_THEMES:
            raise ValueError(f"Unknown board theme: {self.board_theme!r}")
        if self.human_color not in _COLORS:
            raise ValueError(f"Unknown colour: {self.human_color!r}")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if self.cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {self.cell_size}")
        return self


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessduel",
        description="Play chess against an opponent that picks random legal moves.",
    )
    parser.add_argument("--seed", type=int, default=None, help="opponent RNG seed")
    parser.add_argument(
        "--black", action="store_true", help="play Black (the opponent opens)"
    )
    parser.add_argument("--theme", choices=BOARD_THEMES, default="Classic")
    parser.add_argument("--cell-size", type=int, default=64, help="pixels per square")
    parser.add_argument(
        "--legacy-promotion-rank",
        action="store_true",
        help="open the promotion prompt from the 7th rank only, for either side",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        type=str.upper,
    )
    parser.add_argument(
        "--no-help", action="store_true", help="skip the controls dialog"
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> AppSettings:
    """Build validated settings from *argv* (``sys.argv[1:]`` when ``None``)."""
    ns = build_parser().parse_args(argv)
    return AppSettings(
        board_theme=ns.theme,
        cell_size=ns.cell_size,
        show_controls_help=not ns.no_help,
        human_color="black" if ns.black else "white",
        seed=ns.seed,
        legacy_promotion_rank=ns.legacy_promotion_rank,
        log_level=ns.log_level,
    ).validate()
