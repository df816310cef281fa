"""Parse chess positions in Forsyth-Edwards Notation and show them as a text board."""

__version__ = "0.1.0"