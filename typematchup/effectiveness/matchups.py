# ABOUTME: Offensive matchups, counter recommendations and multiplier labels for a Pokemon's typing.
# ABOUTME: Builds on the chart lookup and the defensive combinator.

from collections.abc import Sequence

from typematchup.chart.type_chart import IMMUNITY_VALUE, NEUTRAL_VALUE, SUPER_EFFECTIVE_VALUE, lookup
from typematchup.chart.types import TYPES, PokemonType
from typematchup.effectiveness.combinator import combined_multiplier, validate_defender_types
from typematchup.effectiveness.dataclasses import CounterRecommendation, OffensiveCoverage

_ASCII_FRACTIONS = {0.25: "1/4x", 0.5: "1/2x"}
_UNICODE_FRACTIONS = {0.25: "¼x", 0.5: "½x"}


def calculate_offensive_coverage(types: Sequence[PokemonType | str]) -> OffensiveCoverage:
    """Classify every defending type by the best hit the Pokemon's own types can land.

    Each defending type is judged by the single best attacking type, not a product.

    Args:
        types: The Pokemon's one or two types.

    Returns:
        OffensiveCoverage with defending types in canonical order.
    """
    attacking_types = validate_defender_types(types)

    super_effective: list[PokemonType] = []
    not_very_effective: list[PokemonType] = []
    no_effect: list[PokemonType] = []

    for defender in TYPES:
        best = max(lookup(attacker, defender) for attacker in attacking_types)
        if best == IMMUNITY_VALUE:
            no_effect.append(defender)
        elif best >= SUPER_EFFECTIVE_VALUE:
            super_effective.append(defender)
        elif best < NEUTRAL_VALUE:
            not_very_effective.append(defender)

    return OffensiveCoverage(
        attacking_types=attacking_types,
        super_effective=tuple(super_effective),
        not_very_effective=tuple(not_very_effective),
        no_effect=tuple(no_effect),
    )


def recommend_counters(types: Sequence[PokemonType | str]) -> CounterRecommendation:
    """Find attacking types that beat a Pokemon without being beaten back.

    A counter deals at least 2x to the target and is not hit for 2x by any of the
    target's types. Counters the target's types cannot damage at all are listed
    separately as the safest options.

    Args:
        types: The target Pokemon's one or two types.

    Returns:
        CounterRecommendation with counters in canonical order.
    """
    target_types = validate_defender_types(types)
    threatened = set(calculate_offensive_coverage(target_types).super_effective)

    immune: list[PokemonType] = []
    recommended: list[PokemonType] = []

    for candidate in TYPES:
        if combined_multiplier(candidate, target_types) < SUPER_EFFECTIVE_VALUE:
            continue
        if candidate in threatened:
            continue

        damage_taken = 1.0
        for target_type in target_types:
            damage_taken *= lookup(target_type, candidate)

        if damage_taken == IMMUNITY_VALUE:
            immune.append(candidate)
        else:
            recommended.append(candidate)

    return CounterRecommendation(
        target_types=target_types,
        immune=tuple(immune),
        recommended=tuple(recommended),
    )


def format_multiplier(multiplier: float, unicode: bool = False) -> str:
    """Format a multiplier for display, e.g. "4x", "1/2x" or "½x"."""
    fractions = _UNICODE_FRACTIONS if unicode else _ASCII_FRACTIONS
    if multiplier in fractions:
        return fractions[multiplier]
    return f"{multiplier:g}x"
