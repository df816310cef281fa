"""Parser for Forsyth-Edwards Notation strings."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from fenview.errors import InvalidFormatError
from fenview.types import Board, CastlingRights, ChessPosition, Color, Piece, PieceKind, Rank

_SPACE = " \t"
_DIGITS = "0123456789"
_FILES = "abcdefgh"
_EP_RANKS = "36"
_CASTLING_CHARS = "-KQkq"
_U32_MAX = 2**32 - 1

_KINDS = {
    "k": PieceKind.KING,
    "q": PieceKind.QUEEN,
    "r": PieceKind.ROOK,
    "b": PieceKind.BISHOP,
    "n": PieceKind.KNIGHT,
    "p": PieceKind.PAWN,
}
_PIECES = {
    **{letter.upper(): Piece(Color.WHITE, kind) for letter, kind in _KINDS.items()},
    **{letter: Piece(Color.BLACK, kind) for letter, kind in _KINDS.items()},
}


class _Failure(Exception):
    """Internal signal that the input does not match."""


class _Cursor:
    """Reading position over the FEN text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def take_while(self, accept: str) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in accept:
            self.pos += 1
        return self.text[start:self.pos]

    def take_one(self, accept: str) -> str:
        ch = self.peek()
        if not ch or ch not in accept:
            raise _Failure
        self.pos += 1
        return ch

    def spaces(self, required: bool = True) -> None:
        if not self.take_while(_SPACE) and required:
            raise _Failure


def _parse_rank(cur: _Cursor) -> Rank:
    row: List[Optional[Piece]] = [None] * 8
    idx = 0
    while True:
        ch = cur.peek()
        if ch and ch in _PIECES:
            cur.pos += 1
            if idx >= 8:
                raise _Failure
            row[idx] = _PIECES[ch]
            idx += 1
        elif ch and ch in _DIGITS:
            idx += int(cur.take_while(_DIGITS))
            if idx > 8:
                raise _Failure
        else:
            break
    if idx != 8:
        raise _Failure
    return tuple(row)


def _parse_placement(cur: _Cursor) -> Board:
    ranks = [_parse_rank(cur)]
    while cur.peek() == "/":
        cur.pos += 1
        ranks.append(_parse_rank(cur))
    cur.spaces()
    if len(ranks) != 8:
        raise _Failure
    # FEN lists rank 8 first; the board is indexed from rank 1.
    return tuple(reversed(ranks))


def _parse_active_color(cur: _Cursor) -> Color:
    ch = cur.take_one("wb")
    cur.spaces()
    return Color.WHITE if ch == "w" else Color.BLACK


def _parse_castling(cur: _Cursor) -> CastlingRights:
    field = cur.take_while(_CASTLING_CHARS)
    if not field:
        raise _Failure
    cur.spaces()
    rights = CastlingRights.none()
    if field == "-":
        return rights
    if len(set(field)) != len(field):
        raise _Failure
    rights.white_kingside = "K" in field
    rights.white_queenside = "Q" in field
    rights.black_kingside = "k" in field
    rights.black_queenside = "q" in field
    return rights


def _parse_en_passant(cur: _Cursor) -> Optional[Tuple[int, int]]:
    if cur.peek() == "-":
        cur.pos += 1
        square = None
    else:
        file = cur.take_one(_FILES)
        rank = cur.take_one(_EP_RANKS)
        square = (_FILES.index(file), int(rank) - 1)
    cur.spaces()
    return square


def _parse_number(cur: _Cursor) -> int:
    digits = cur.take_while(_DIGITS)
    if not digits:
        raise _Failure
    value = int(digits)
    if value > _U32_MAX:
        raise _Failure
    cur.spaces(required=False)
    return value


def _run(cur: _Cursor, step: Callable[[_Cursor], object]) -> object:
    return step(cur)


def parse_fen(fen: str) -> ChessPosition:
    """Parse a FEN string into a ChessPosition.

    Raises InvalidFormatError if the string is not valid FEN.
    """
    cur = _Cursor(fen)
    try:
        pieces = _parse_placement(cur)
        active_color = _parse_active_color(cur)
        castling = _parse_castling(cur)
        en_passant = _parse_en_passant(cur)
        halfmove = _parse_number(cur)
        fullmove = _parse_number(cur)
    except _Failure:
        raise InvalidFormatError("Failed to parse FEN string") from None
    return ChessPosition(
        pieces=pieces,
        active_color=active_color,
        castling_rights=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )