"""ABOUTME: Exception types raised by the type effectiveness engine.
ABOUTME: All input problems surface as InvalidDefenderTypesError subclasses."""

from typing import Any


class TypeMatchupError(Exception):
    """Base class for errors raised by typematchup."""


class InvalidDefenderTypesError(TypeMatchupError, ValueError):
    """Defender type list is empty, too long, or holds an unknown type."""


class UnknownTypeError(InvalidDefenderTypesError):
    """A value is not one of the 18 Pokemon types."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unknown Pokemon type: {value!r}")
