"""Command-line viewer for FEN positions."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from fenview.display import display_ascii
from fenview.errors import FenError
from fenview.types import STARTING_FEN, ChessPosition

_PROG = "fenview"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the FEN given as the single argument and print the board."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {_PROG} <FEN_string>")
        print(f'Example: {_PROG} "{STARTING_FEN}"')
        return 0
    try:
        position = ChessPosition.from_fen(args[0])
    except FenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    display_ascii(position)
    return 0


if __name__ == "__main__":
    sys.exit(main())