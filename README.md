# fenview

Read a chess position written in Forsyth-Edwards Notation (FEN), check that it
is well formed, and print it as a board in the terminal.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## From the command line

```
fenview "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
```

This prints the board with rank 8 at the top, each piece shown by its symbol
(the same symbol for both colours) and empty squares as `·`. Below the board
come the side to move, the castling rights, the en passant square, the
halfmove clock and the fullmove number.

If you give no argument, or more than one, it prints a usage message and exits
with status 0. If the FEN string is malformed, it prints `Error: ...` to
standard error and exits with status 1.

## From Python

```python
from fenview.parser import parse_fen
from fenview.types import ChessPosition, Color, Piece, PieceKind
from fenview.display import render_ascii, display_ascii
from fenview.errors import FenError

position = parse_fen("rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 2")

position.active_color                  # Color.WHITE
position.en_passant                    # (2, 5) -> c6, as (file, rank) counted from 0
position.castling_rights.has_any()     # True
position.pieces[0][0]                  # Piece(color=Color.WHITE, kind=PieceKind.ROOK) on a1

print(render_ascii(position))          # the board as a string
display_ascii(position)                # or print it directly

start = ChessPosition.default()        # the standard starting position
empty = ChessPosition.from_fen("8/8/8/8/8/8/8/8 w - - 0 1")

try:
    parse_fen("not a fen")
except FenError as exc:
    print(exc)                         # Invalid FEN format: Failed to parse FEN string
```

`pieces[rank][file]` holds a `Piece` or `None`; index 0 is rank 1 and file a.
`CastlingRights.none()` gives rights with nothing allowed.

## What is rejected

`parse_fen` raises `InvalidFormatError` (a subclass of `FenError`) when:

- the placement does not have exactly eight ranks separated by `/`;
- a rank does not cover exactly eight squares;
- the side to move is not `w` or `b`;
- the castling field has a character other than `K`, `Q`, `k`, `q` or `-`,
  or repeats one;
- the en passant field is not `-` or a square on rank 3 or 6;
- a move counter is not a whole number from 0 to 4294967295;
- a required space between fields is missing.

Anything after the fullmove number is ignored.

`fenview.errors` also defines `InvalidPiecePlacementError`,
`InvalidActiveColorError`, `InvalidCastlingRightsError`,
`InvalidEnPassantError`, `InvalidHalfmoveClockError`,
`InvalidFullmoveNumberError` and `UnknownFenError`, all subclasses of
`FenError`; the parser itself only raises `InvalidFormatError`.

## What it does not do

fenview reads and shows a position. It does not check that the position is
legal (for example, that each side has one king), generate or validate moves,
or write a position back out as FEN.