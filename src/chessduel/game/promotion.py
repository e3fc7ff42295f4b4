"""Promotion resolver — the role-choice sub-flow of move selection."""

from __future__ import annotations

import logging

import chess

from chessduel.core.engine import PROMOTION_ROLES
from chessduel.core.squares import Square, square_name

_LOGGER = logging.getLogger(__name__)


class PromotionResolver:
    """One-shot choice among Queen, Rook, Bishop and Knight.

    ``choose`` stores the role and closes the resolver; it never plays a
    move by itself. The stored role is read back with ``consume``.
    Re-opening or abandoning drops any stored role.
    """

    __slots__ = ("_origin", "_is_open", "_role")

    def __init__(self) -> None:
        self._origin: Square | None = None
        self._is_open = False
        self._role: chess.PieceType | None = None

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def origin(self) -> Square | None:
        """Square whose pawn the current (or last) prompt was opened for."""
        return self._origin

    @property
    def role(self) -> chess.PieceType | None:
        return self._role

    def open(self, origin: Square) -> None:
        self._origin = origin
        self._is_open = True
        self._role = None
        _LOGGER.debug("Promotion prompt opened for %s", square_name(origin))

    def choose(self, role: chess.PieceType) -> None:
        if role not in PROMOTION_ROLES:
            raise ValueError(f"Not a promotion role: {role!r}")
        self._role = role
        self._is_open = False
        _LOGGER.debug("Promotion role chosen: %s", chess.piece_name(role))

    def consume(self) -> chess.PieceType | None:
        """Return the stored role and clear it."""
        role, self._role = self._role, None
        return role

    def abandon(self) -> None:
        self._origin = None
        self._is_open = False
        self._role = None

    def dismiss(self) -> None:
        """Close without a role; the origin is remembered as already prompted."""
        self._is_open = False
        self._role = None
