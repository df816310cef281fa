import pytest

from fenview.errors import FenError, InvalidFormatError
from fenview.parser import parse_fen
from fenview.types import Color, Piece, PieceKind


def test_initial_position():
    fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
    position = parse_fen(fen)

    assert position.active_color == Color.WHITE
    assert position.castling_rights.white_kingside is True
    assert position.castling_rights.white_queenside is True
    assert position.castling_rights.black_kingside is True
    assert position.castling_rights.black_queenside is True
    assert position.en_passant is None
    assert position.halfmove_clock == 0
    assert position.fullmove_number == 1
    assert position.pieces[0][0] == Piece(Color.WHITE, PieceKind.ROOK)
    assert position.pieces[7][4] == Piece(Color.BLACK, PieceKind.KING)


def test_position_with_promotions():
    fen = "r1bq1bnr/ppPp1kpp/5n2/4p3/8/8/PPPP1PPP/RNBQKBNR w KQ - 1 10"
    position = parse_fen(fen)

    assert position.active_color == Color.WHITE
    assert position.pieces[1][2] == Piece(Color.WHITE, PieceKind.PAWN)
    assert position.halfmove_clock == 1
    assert position.fullmove_number == 10


def test_en_passant_position():
    fen = "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 2"
    position = parse_fen(fen)

    assert position.en_passant == (2, 5)
    assert position.halfmove_clock == 0


def test_no_castling_rights():
    fen = "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R b - - 3 3"
    position = parse_fen(fen)

    assert not position.castling_rights.has_any()
    assert position.active_color == Color.BLACK


def test_partial_castling_rights():
    fen = "rnbqk2r/pppp1ppp/5n2/2b1p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQk - 4 4"
    position = parse_fen(fen)

    assert position.castling_rights.white_kingside
    assert position.castling_rights.white_queenside
    assert position.castling_rights.black_kingside
    assert not position.castling_rights.black_queenside


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN w KQkq - 0 1",
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR/8 w KQkq - 0 1",
    ],
)
def test_invalid_row_count(fen):
    with pytest.raises(FenError):
        parse_fen(fen)


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX w KQkq - 0 1",
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e9 0 1",
    ],
)
def test_invalid_piece_chars(fen):
    with pytest.raises(FenError):
        parse_fen(fen)


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - a 1",
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 -1",
    ],
)
def test_invalid_numbers(fen):
    with pytest.raises(FenError):
        parse_fen(fen)


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQXkq - 0 1",
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkqk - 0 1",
    ],
)
def test_invalid_castling(fen):
    with pytest.raises(FenError):
        parse_fen(fen)


def test_empty_board():
    position = parse_fen("8/8/8/8/8/8/8/8 w - - 0 1")
    assert all(square is None for rank in position.pieces for square in rank)
    assert len(position.pieces) == 8
    assert all(len(rank) == 8 for rank in position.pieces)


def test_crowded_board():
    fen = "rnbqkbnr/pppppppp/PPPPPPPP/8/8/pppppppp/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
    position = parse_fen(fen)

    assert position.pieces[2][0] is not None
    assert position.pieces[5][7] is not None
    assert position.pieces[2][0] == Piece(Color.BLACK, PieceKind.PAWN)
    assert position.pieces[5][7] == Piece(Color.WHITE, PieceKind.PAWN)


def test_midgame_position():
    fen = "r1bqkb1r/pp1p1ppp/2n1pn2/2p5/2B1P3/2N2N2/PPPP1PPP/R1BQK2R w KQkq - 4 6"
    position = parse_fen(fen)

    assert position.halfmove_clock == 4
    assert position.fullmove_number == 6
    assert position.active_color == Color.WHITE
    assert position.castling_rights.has_any()


def test_error_message_is_invalid_format():
    with pytest.raises(InvalidFormatError) as info:
        parse_fen("garbage")
    assert str(info.value) == "Invalid FEN format: Failed to parse FEN string"


def test_tabs_separate_fields():
    fen = "8/8/8/8/8/8/8/8\tb\t-\t-\t7\t9"
    position = parse_fen(fen)
    assert position.active_color == Color.BLACK
    assert position.halfmove_clock == 7
    assert position.fullmove_number == 9


def test_black_side_en_passant_square():
    fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
    assert parse_fen(fen).en_passant == (4, 2)


@pytest.mark.parametrize(
    "fen",
    [
        "8/8/8/8/8/8/8/8 w - - 01",
        "8/8/8/8/8/8/8/8 w - - 4294967296 1",
        "8/8/8/8/8/8/8/8 x - - 0 1",
        "8/8/8/8/8/8/8/8 w - e4 0 1",
        "8/8/8/8/8/8/8/8 w - -",
        "8/8/8/8/8/8/8/9 w - - 0 1",
        "8/8/8/8/8/8/8/44R w - - 0 1",
        "8/8/8/8//8/8/8 w - - 0 1",
        "8/8/8/8/8/8/8/8w - - 0 1",
    ],
)
def test_malformed_inputs(fen):
    with pytest.raises(InvalidFormatError):
        parse_fen(fen)


def test_split_empty_runs_are_summed():
    position = parse_fen("8/8/8/8/8/8/8/3K4 w - - 0 1")
    assert position.pieces[0][3] == Piece(Color.WHITE, PieceKind.KING)
    assert sum(square is not None for rank in position.pieces for square in rank) == 1


def test_trailing_text_is_ignored():
    position = parse_fen("8/8/8/8/8/8/8/8 w - - 0 1 trailing")
    assert position.fullmove_number == 1