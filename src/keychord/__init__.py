"""Wildcard key-chord matching engine."""

__all__ = [
    "adapters",
    "chords",
    "config",
    "runtime",
]

__version__ = "0.1.0"
