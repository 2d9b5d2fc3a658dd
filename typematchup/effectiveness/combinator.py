# ABOUTME: Combines chart lookups for a 1- or 2-type defender and buckets the results.
# ABOUTME: Provides defender validation, combined multipliers and the grouped effectiveness result.

import logging
from collections.abc import Sequence
from types import MappingProxyType

from typematchup.chart.type_chart import lookup
from typematchup.chart.types import TYPES, PokemonType
from typematchup.effectiveness.dataclasses import (
    CATEGORY_BY_MULTIPLIER,
    Category,
    EffectivenessEntry,
    TypeEffectivenessResult,
)
from typematchup.errors import InvalidDefenderTypesError, UnknownTypeError

logger = logging.getLogger(__name__)

MAX_DEFENDER_TYPES = 2


def validate_defender_types(defender_types: Sequence[PokemonType | str]) -> tuple[PokemonType, ...]:
    """Check and normalize a defender's typing.

    Args:
        defender_types: One or two types, as members or type names.

    Returns:
        The defending types as PokemonType members, order preserved.

    Raises:
        InvalidDefenderTypesError: If the input is not a sequence, is empty, or is longer than two.
        UnknownTypeError: If a value is not one of the 18 types.
    """
    if isinstance(defender_types, str) or not isinstance(defender_types, Sequence):
        logger.debug("Rejected defender types %r", defender_types)
        raise InvalidDefenderTypesError(
            f"Defender types must be a sequence of types, got {type(defender_types).__name__}"
        )

    if not 1 <= len(defender_types) <= MAX_DEFENDER_TYPES:
        logger.debug("Rejected defender types %r", defender_types)
        raise InvalidDefenderTypesError(
            f"Expected 1 to {MAX_DEFENDER_TYPES} defender types, got {len(defender_types)}"
        )

    try:
        validated = tuple(PokemonType.parse(t) for t in defender_types)
    except UnknownTypeError:
        logger.debug("Rejected defender types %r", defender_types)
        raise

    if len(validated) == MAX_DEFENDER_TYPES and validated[0] is validated[1]:
        logger.warning("Duplicate defender type %s; its multiplier will be applied twice", validated[0])

    return validated


def combined_multiplier(attacker: PokemonType, defender_types: Sequence[PokemonType]) -> float:
    """Multiply the chart entries of one attacking type over every defending type.

    A 0x entry makes the product 0 regardless of the other type.
    """
    multiplier = 1.0
    for defender in defender_types:
        multiplier *= lookup(attacker, defender)
    return multiplier


def classify(multiplier: float) -> Category:
    """Map a combined multiplier to its display category.

    Raises:
        ValueError: If multiplier is not 0, 0.25, 0.5, 1, 2 or 4.
    """
    try:
        return CATEGORY_BY_MULTIPLIER[multiplier]
    except KeyError:
        raise ValueError(f"Multiplier {multiplier} has no category") from None


def combine(defender_types: Sequence[PokemonType | str]) -> TypeEffectivenessResult:
    """Compute how every attacking type performs against a defender.

    Args:
        defender_types: The defender's one or two types. A type given twice is
            applied twice (Water vs Fire/Fire = 4x).

    Returns:
        The 18 entries grouped by category, canonical attacking-type order within each group.

    Raises:
        InvalidDefenderTypesError: If the typing is empty, too long, or contains an unknown type.
    """
    validated = validate_defender_types(defender_types)

    buckets: dict[Category, list[EffectivenessEntry]] = {category: [] for category in Category}
    for attacker in TYPES:
        multiplier = combined_multiplier(attacker, validated)
        category = classify(multiplier)
        buckets[category].append(EffectivenessEntry(attacker, multiplier, category))

    return TypeEffectivenessResult(
        defender_types=validated,
        groups=MappingProxyType({category: tuple(entries) for category, entries in buckets.items()}),
    )


def get_effectiveness(
    atk_type: PokemonType | str,
    def_type1: PokemonType | str,
    def_type2: PokemonType | str | None = None,
) -> float:
    """Combined multiplier of one attacking type against a defender given as separate type fields.

    Args:
        atk_type: The attacking type (e.g., "Fire").
        def_type1: The defender's primary type.
        def_type2: The defender's secondary type, or None for monotype.

    Returns:
        Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.
    """
    defender_types = [def_type1] if def_type2 is None else [def_type1, def_type2]
    return combined_multiplier(PokemonType.parse(atk_type), validate_defender_types(defender_types))
