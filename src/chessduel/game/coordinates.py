"""Coordinate mapping — raw input locations and cursor steps to squares."""

from __future__ import annotations

import math

from chessduel.core.squares import Square, file_of, make_square, offset_square, rank_of
from chessduel.game.interfaces import Direction


class CoordinateMapper:
    """Translates screen cells into board squares, rank 8 drawn at the top.

    Args:
        cell_width: Horizontal size of one square (3 columns in a terminal,
            pixels in the Qt host).
        cell_height: Vertical size of one square.
    """

    __slots__ = ("cell_width", "cell_height")

    def __init__(self, cell_width: int = 3, cell_height: int = 1) -> None:
        if cell_width <= 0 or cell_height <= 0:
            raise ValueError("Cell size must be positive")
        self.cell_width = cell_width
        self.cell_height = cell_height

    @property
    def board_size(self) -> tuple[int, int]:
        """Width and height of the whole 8×8 board."""
        return 8 * self.cell_width, 8 * self.cell_height

    def square_at(
        self,
        position: tuple[float, float],
        offset: tuple[float, float] = (0, 0),
    ) -> Square | None:
        """Square under *position*, or ``None`` outside the board."""
        dx = math.floor(position[0] - offset[0])
        dy = math.floor(position[1] - offset[1])
        if dx < 0 or dy < 0:
            return None
        col = dx // self.cell_width
        row = dy // self.cell_height
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return make_square(col, 7 - row)

    def cell_origin(self, sq: Square) -> tuple[int, int]:
        """Top-left corner of *sq* relative to the board origin."""
        col, row = file_of(sq), 7 - rank_of(sq)
        return col * self.cell_width, row * self.cell_height

    @staticmethod
    def step(sq: Square, direction: Direction) -> Square:
        """Neighbour of *sq* in *direction*; off-board steps keep *sq*."""
        d_file, d_rank = direction.delta
        target = offset_square(sq, d_file, d_rank)
        return sq if target is None else target
