"""Core domain layer — squares and the python-chess position engine.

Quick start::

    from chessduel.core import ChessEngine, parse_square

    engine = ChessEngine()
    for move in engine.legal_moves():
        print(move)
"""

from chessduel.core.engine import PROMOTION_ROLES, ChessEngine, PositionEngine
from chessduel.core.squares import (
    Square,
    file_of,
    is_dark,
    make_square,
    offset_square,
    parse_square,
    pre_promotion_rank,
    promotion_rank,
    rank_of,
    square_name,
)

__all__ = [
    # Engine
    "ChessEngine",
    "PositionEngine",
    "PROMOTION_ROLES",
    # Types / helpers
    "Square",
    "file_of",
    "is_dark",
    "make_square",
    "offset_square",
    "parse_square",
    "pre_promotion_rank",
    "promotion_rank",
    "rank_of",
    "square_name",
]
