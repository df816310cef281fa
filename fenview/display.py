"""Text rendering of a chess position."""

from __future__ import annotations

from fenview.types import ChessPosition, PieceKind

_SYMBOLS = {
    PieceKind.KING: "♔",
    PieceKind.QUEEN: "♕",
    PieceKind.ROOK: "♖",
    PieceKind.BISHOP: "♗",
    PieceKind.KNIGHT: "♘",
    PieceKind.PAWN: "♙",
}
_EMPTY = "·"
_BORDER = "  +-----------------+"
_FILE_LABELS = "    a b c d e f g h"


def _castling_text(position: ChessPosition) -> str:
    rights = position.castling_rights
    flags = (
        (rights.white_kingside, "K"),
        (rights.white_queenside, "Q"),
        (rights.black_kingside, "k"),
        (rights.black_queenside, "q"),
    )
    return "".join(letter for enabled, letter in flags if enabled)


def _en_passant_text(position: ChessPosition) -> str:
    if position.en_passant is None:
        return "-"
    file, rank = position.en_passant
    return f"{chr(ord('a') + file)}{rank + 1}"


def render_ascii(position: ChessPosition) -> str:
    """Return the board and position details as multi-line text."""
    lines = [_BORDER]
    for rank_index in reversed(range(8)):
        cells = "".join(
            f"{_EMPTY if piece is None else _SYMBOLS[piece.kind]} "
            for piece in position.pieces[rank_index]
        )
        lines.append(f"{rank_index + 1} | {cells}|")
    lines += [
        _BORDER,
        _FILE_LABELS,
        "",
        f"Active color: {position.active_color.value}",
        f"Castling rights: {_castling_text(position)}",
        f"En passant: {_en_passant_text(position)}",
        f"Halfmove clock: {position.halfmove_clock}",
        f"Fullmove number: {position.fullmove_number}",
    ]
    return "\n".join(lines)


def display_ascii(position: ChessPosition) -> None:
    """Print the rendered position to standard output."""
    print(render_ascii(position))