# ABOUTME: Chart package holding the Pokemon type enumeration and effectiveness table.
# ABOUTME: Re-exports the type model and the single-type lookup.

from typematchup.chart.type_chart import (
    EFFECTIVENESS,
    generate_all_type_combinations,
    lookup,
)
from typematchup.chart.types import TYPES, PokemonType

__all__ = [
    "EFFECTIVENESS",
    "TYPES",
    "PokemonType",
    "generate_all_type_combinations",
    "lookup",
]
