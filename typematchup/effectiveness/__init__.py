# ABOUTME: Effectiveness package combining chart lookups for 1- or 2-type defenders.
# ABOUTME: Exposes the combinator, offensive matchups and the caller-side cache.

from typematchup.effectiveness.cache import EffectivenessCache
from typematchup.effectiveness.combinator import combine, get_effectiveness, validate_defender_types
from typematchup.effectiveness.dataclasses import (
    Category,
    CounterRecommendation,
    EffectivenessEntry,
    OffensiveCoverage,
    TypeEffectivenessResult,
)
from typematchup.effectiveness.matchups import calculate_offensive_coverage, format_multiplier, recommend_counters

__all__ = [
    "Category",
    "CounterRecommendation",
    "EffectivenessCache",
    "EffectivenessEntry",
    "OffensiveCoverage",
    "TypeEffectivenessResult",
    "calculate_offensive_coverage",
    "combine",
    "format_multiplier",
    "get_effectiveness",
    "recommend_counters",
    "validate_defender_types",
]
