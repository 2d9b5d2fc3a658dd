# ABOUTME: Pokemon type effectiveness chart for Gen 6+ (18 types including Fairy).
# ABOUTME: Read-only 18x18 multiplier table with lookup and type combination helpers.

from types import MappingProxyType
from typing import Mapping

from typematchup.chart.types import TYPES, PokemonType

# Single-chart multipliers
IMMUNITY_VALUE = 0.0
RESISTANCE_VALUE = 0.5
NEUTRAL_VALUE = 1.0
SUPER_EFFECTIVE_VALUE = 2.0

CHART_VALUES: frozenset[float] = frozenset({IMMUNITY_VALUE, RESISTANCE_VALUE, NEUTRAL_VALUE, SUPER_EFFECTIVE_VALUE})

_ = NEUTRAL_VALUE
h = RESISTANCE_VALUE
x = SUPER_EFFECTIVE_VALUE
o = IMMUNITY_VALUE

# One row per attacking type; columns follow canonical order:
# Nor  Fir  Wat  Ele  Gra  Ice  Fig  Poi  Gro  Fly  Psy  Bug  Roc  Gho  Dra  Dar  Ste  Fai
_ROWS: dict[PokemonType, tuple[float, ...]] = {
    PokemonType.NORMAL: (_, _, _, _, _, _, _, _, _, _, _, _, h, o, _, _, h, _),
    PokemonType.FIRE: (_, h, h, _, x, x, _, _, _, _, _, x, h, _, h, _, x, _),
    PokemonType.WATER: (_, x, h, _, h, _, _, _, x, _, _, _, x, _, h, _, _, _),
    PokemonType.ELECTRIC: (_, _, x, h, h, _, _, _, o, x, _, _, _, _, h, _, _, _),
    PokemonType.GRASS: (_, h, x, _, h, _, _, h, x, h, _, h, x, _, h, _, h, _),
    PokemonType.ICE: (_, h, h, _, x, h, _, _, x, x, _, _, _, _, x, _, h, _),
    PokemonType.FIGHTING: (x, _, _, _, _, x, _, h, _, h, h, h, x, o, _, x, x, h),
    PokemonType.POISON: (_, _, _, _, x, _, _, h, h, _, _, _, h, h, _, _, o, x),
    PokemonType.GROUND: (_, x, _, x, h, _, _, x, _, o, _, h, x, _, _, _, x, _),
    PokemonType.FLYING: (_, _, _, h, x, _, x, _, _, _, _, x, h, _, _, _, h, _),
    PokemonType.PSYCHIC: (_, _, _, _, _, _, x, x, _, _, h, _, _, _, _, o, h, _),
    PokemonType.BUG: (_, h, _, _, x, _, h, h, _, h, x, _, _, h, _, x, h, h),
    PokemonType.ROCK: (_, x, _, _, _, x, h, _, h, x, _, x, _, _, _, _, h, _),
    PokemonType.GHOST: (o, _, _, _, _, _, _, _, _, _, x, _, _, x, _, h, _, _),
    PokemonType.DRAGON: (_, _, _, _, _, _, _, _, _, _, _, _, _, _, x, _, h, o),
    PokemonType.DARK: (_, _, _, _, _, _, h, _, _, _, x, _, _, x, _, h, _, h),
    PokemonType.STEEL: (_, h, h, h, _, x, _, _, _, _, _, _, x, _, _, _, h, x),
    PokemonType.FAIRY: (_, h, _, _, _, _, x, h, _, _, _, _, _, _, x, x, h, _),
}

del _, h, x, o

# EFFECTIVENESS[attacking_type][defending_type], read-only at every level
EFFECTIVENESS: Mapping[PokemonType, Mapping[PokemonType, float]] = MappingProxyType(
    {
        attacker: MappingProxyType(dict(zip(TYPES, row, strict=True)))
        for attacker, row in _ROWS.items()
    }
)


def lookup(attacker: PokemonType, defender: PokemonType) -> float:
    """Return the chart multiplier for one attacking type against one defending type.

    Args:
        attacker: The attacking type.
        defender: A single defending type.

    Returns:
        One of 0.0, 0.5, 1.0 or 2.0.
    """
    return EFFECTIVENESS[attacker][defender]


def generate_all_type_combinations() -> list[tuple[PokemonType, PokemonType | None]]:
    """Generate all 171 unique defender typings.

    Returns:
        List of 171 tuples:
        - 18 monotypes as (type, None)
        - 153 dual types as (type1, type2), in canonical order
    """
    monotypes: list[tuple[PokemonType, PokemonType | None]] = [(t, None) for t in TYPES]
    dual_types: list[tuple[PokemonType, PokemonType | None]] = [
        (type1, type2) for i, type1 in enumerate(TYPES) for type2 in TYPES[i + 1 :]
    ]
    return monotypes + dual_types
