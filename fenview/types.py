"""Data types describing a chess position as found in FEN notation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


class Color(Enum):
    """Side of a piece or side to move."""

    WHITE = "White"
    BLACK = "Black"


class PieceKind(Enum):
    """Kind of a chess piece."""

    KING = "King"
    QUEEN = "Queen"
    ROOK = "Rook"
    BISHOP = "Bishop"
    KNIGHT = "Knight"
    PAWN = "Pawn"


@dataclass(frozen=True)
class Piece:
    """A piece with its colour and kind."""

    color: Color
    kind: PieceKind


@dataclass
class CastlingRights:
    """Castling availability for both sides."""

    white_kingside: bool = False
    white_queenside: bool = False
    black_kingside: bool = False
    black_queenside: bool = False

    def has_any(self) -> bool:
        """Return True if at least one castling right is available."""
        return (
            self.white_kingside
            or self.white_queenside
            or self.black_kingside
            or self.black_queenside
        )

    @classmethod
    def none(cls) -> CastlingRights:
        """Return rights with no castling allowed."""
        return cls()


Rank = Tuple[Optional[Piece], ...]
Board = Tuple[Rank, ...]


@dataclass
class ChessPosition:
    """A complete chess position.

    ``pieces[rank][file]`` holds the piece on that square, rank 0 being
    rank 1 and file 0 being file a. ``en_passant`` is a ``(file, rank)``
    pair using the same indexing.
    """

    pieces: Board
    active_color: Color
    castling_rights: CastlingRights
    en_passant: Optional[Tuple[int, int]]
    halfmove_clock: int
    fullmove_number: int

    @classmethod
    def from_fen(cls, fen: str) -> ChessPosition:
        """Build a position from a FEN string."""
        from fenview.parser import parse_fen

        return parse_fen(fen)

    @classmethod
    def default(cls) -> ChessPosition:
        """Return the standard starting position."""
        return cls.from_fen(STARTING_FEN)