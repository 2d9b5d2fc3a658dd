"""ABOUTME: Value types produced by the effectiveness combinator.
ABOUTME: Contains Category, EffectivenessEntry, TypeEffectivenessResult and the offensive result types."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from typematchup.chart.types import PokemonType


class Category(str, Enum):
    """Display bucket for a combined multiplier, from least to most damage."""

    IMMUNE = "immune"
    DOUBLE_RESIST = "doubleResist"
    RESIST = "resist"
    NEUTRAL = "neutral"
    WEAK = "weak"
    DOUBLE_WEAK = "doubleWeak"

    def __str__(self) -> str:
        return self.value


# Every product of at most two chart values lands on exactly one of these keys
CATEGORY_BY_MULTIPLIER: Mapping[float, Category] = MappingProxyType(
    {
        0.0: Category.IMMUNE,
        0.25: Category.DOUBLE_RESIST,
        0.5: Category.RESIST,
        1.0: Category.NEUTRAL,
        2.0: Category.WEAK,
        4.0: Category.DOUBLE_WEAK,
    }
)


@dataclass(frozen=True)
class EffectivenessEntry:
    """How one attacking type fares against a defender.

    Attributes:
        attacking_type: The attacking type.
        multiplier: Product of the chart lookups over all defending types.
        category: Display bucket for the multiplier.
    """

    attacking_type: PokemonType
    multiplier: float
    category: Category


@dataclass(frozen=True)
class TypeEffectivenessResult:
    """All 18 attacking types against one defender, grouped by category.

    Attributes:
        defender_types: The validated defending types, in the order given.
        groups: Entries per category. Every category is present, possibly empty,
            and entries keep canonical attacking-type order.
    """

    defender_types: tuple[PokemonType, ...]
    groups: Mapping[Category, tuple[EffectivenessEntry, ...]]

    @property
    def entries(self) -> tuple[EffectivenessEntry, ...]:
        """All entries in canonical attacking-type order."""
        return tuple(sorted((e for group in self.groups.values() for e in group), key=lambda e: e.attacking_type.index))

    @property
    def weaknesses(self) -> tuple[EffectivenessEntry, ...]:
        """4x weaknesses first, then 2x."""
        return self.groups[Category.DOUBLE_WEAK] + self.groups[Category.WEAK]

    @property
    def resistances(self) -> tuple[EffectivenessEntry, ...]:
        """0.25x resistances first, then 0.5x. Immunities are excluded."""
        return self.groups[Category.DOUBLE_RESIST] + self.groups[Category.RESIST]

    @property
    def immunities(self) -> tuple[PokemonType, ...]:
        """Attacking types that deal no damage."""
        return tuple(e.attacking_type for e in self.groups[Category.IMMUNE])

    def multiplier_for(self, attacker: PokemonType) -> float:
        """Return the combined multiplier of one attacking type."""
        for group in self.groups.values():
            for entry in group:
                if entry.attacking_type is attacker:
                    return entry.multiplier
        raise KeyError(attacker)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-ready data."""
        return {
            "defender_types": [t.value for t in self.defender_types],
            "categories": {
                category.value: [
                    {"type": e.attacking_type.value, "multiplier": e.multiplier} for e in self.groups[category]
                ]
                for category in Category
            },
        }


@dataclass(frozen=True)
class OffensiveCoverage:
    """Which defending types a Pokemon's own types hit well or poorly.

    Attributes:
        attacking_types: The Pokemon's types.
        super_effective: Defending types hit for 2x by at least one attacking type.
        not_very_effective: Defending types where the best attacking type deals less than 1x but more than 0x.
        no_effect: Defending types none of the attacking types can damage.
    """

    attacking_types: tuple[PokemonType, ...]
    super_effective: tuple[PokemonType, ...] = field(default_factory=tuple)
    not_very_effective: tuple[PokemonType, ...] = field(default_factory=tuple)
    no_effect: tuple[PokemonType, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CounterRecommendation:
    """Types that hit a Pokemon super effectively without being hit back super effectively.

    Attributes:
        target_types: The Pokemon being countered.
        immune: Counters that also take no damage from the target's types.
        recommended: Remaining counters.
    """

    target_types: tuple[PokemonType, ...]
    immune: tuple[PokemonType, ...] = field(default_factory=tuple)
    recommended: tuple[PokemonType, ...] = field(default_factory=tuple)
