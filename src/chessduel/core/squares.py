"""Square type alias and coordinate helpers.

Squares are the python-chess integer indices (Little-Endian Rank-File):
    a1=0, b1=1, ..., h1=7
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from typing import TypeAlias

import chess

Square: TypeAlias = int  # 0–63


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return chess.square_file(sq)


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return chess.square_rank(sq)


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"Off-board coordinates: file={file}, rank={rank}")
    return chess.square(file, rank)


def offset_square(sq: Square, d_file: int, d_rank: int) -> Square | None:
    """Square shifted by (*d_file*, *d_rank*), or ``None`` when off the board."""
    f, r = file_of(sq) + d_file, rank_of(sq) + d_rank
    if 0 <= f < 8 and 0 <= r < 8:
        return chess.square(f, r)
    return None


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chess.square_name(sq)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return chess.parse_square(name)


def is_dark(sq: Square) -> bool:
    """a1 is dark; colours alternate along files and ranks."""
    return (file_of(sq) + rank_of(sq)) % 2 == 0


def promotion_rank(color: chess.Color) -> int:
    """Rank index a pawn of *color* promotes on."""
    return 7 if color == chess.WHITE else 0


def pre_promotion_rank(color: chess.Color) -> int:
    """Rank index immediately before *color*'s promotion rank."""
    return 6 if color == chess.WHITE else 1
