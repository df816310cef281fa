"""Exceptions raised while reading FEN strings."""


class FenError(Exception):
    """Base class of every FEN parsing error."""


class _DetailedFenError(FenError):
    """A FEN error that carries a human-readable detail."""

    _label = "FEN error"

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self._label}: {detail}")
        self.detail = detail


class InvalidFormatError(_DetailedFenError):
    """The FEN string as a whole is malformed."""

    _label = "Invalid FEN format"


class InvalidPiecePlacementError(_DetailedFenError):
    """The piece placement field is malformed."""

    _label = "Invalid piece placement"


class InvalidActiveColorError(_DetailedFenError):
    """The active colour field is malformed."""

    _label = "Invalid active color"


class InvalidCastlingRightsError(_DetailedFenError):
    """The castling rights field is malformed."""

    _label = "Invalid castling rights"


class InvalidEnPassantError(_DetailedFenError):
    """The en passant field is malformed."""

    _label = "Invalid en passant square"


class InvalidHalfmoveClockError(_DetailedFenError):
    """The halfmove clock field is malformed."""

    _label = "Invalid halfmove clock"


class InvalidFullmoveNumberError(_DetailedFenError):
    """The fullmove number field is malformed."""

    _label = "Invalid fullmove number"


class UnknownFenError(FenError):
    """An error with no more specific description."""

    def __init__(self) -> None:
        super().__init__("Unknown parsing error")