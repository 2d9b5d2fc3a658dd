"""Pokemon type effectiveness engine."""

__version__ = "0.1.0"
