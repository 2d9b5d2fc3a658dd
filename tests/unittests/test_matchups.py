# ABOUTME: Unit tests for offensive coverage, counter recommendations and multiplier formatting.
# ABOUTME: Uses well-known typings whose matchups are easy to verify by hand.

import pytest

from typematchup.chart.types import TYPES, PokemonType
from typematchup.effectiveness.matchups import (
    calculate_offensive_coverage,
    format_multiplier,
    recommend_counters,
)
from typematchup.errors import InvalidDefenderTypesError

T = PokemonType


class TestOffensiveCoverage:
    """Tests for calculate_offensive_coverage function."""

    def test_fire(self) -> None:
        """Fire hits Grass, Ice, Bug, Steel hard and is resisted by Fire, Water, Rock, Dragon."""
        coverage = calculate_offensive_coverage([T.FIRE])
        assert coverage.super_effective == (T.GRASS, T.ICE, T.BUG, T.STEEL)
        assert coverage.not_very_effective == (T.FIRE, T.WATER, T.ROCK, T.DRAGON)
        assert coverage.no_effect == ()

    def test_normal_has_no_effect_on_ghost(self) -> None:
        """Normal cannot touch Ghost."""
        coverage = calculate_offensive_coverage(["Normal"])
        assert coverage.super_effective == ()
        assert coverage.not_very_effective == (T.ROCK, T.STEEL)
        assert coverage.no_effect == (T.GHOST,)

    def test_dual_type_uses_best_type(self) -> None:
        """Grass/Poison is judged by whichever of its types hits harder."""
        coverage = calculate_offensive_coverage([T.GRASS, T.POISON])
        assert coverage.attacking_types == (T.GRASS, T.POISON)
        assert coverage.super_effective == (T.WATER, T.GRASS, T.GROUND, T.ROCK, T.FAIRY)
        assert coverage.not_very_effective == (T.POISON, T.STEEL)
        assert coverage.no_effect == ()

    def test_second_type_lifts_immunity(self) -> None:
        """Electric/Flying still hits Ground through its Flying type."""
        coverage = calculate_offensive_coverage([T.ELECTRIC, T.FLYING])
        assert T.GROUND not in coverage.no_effect
        assert T.GROUND not in coverage.not_very_effective

    @pytest.mark.parametrize("attacker", TYPES)
    def test_buckets_disjoint(self, attacker: PokemonType) -> None:
        """A defending type appears in at most one bucket."""
        coverage = calculate_offensive_coverage([attacker])
        buckets = [set(coverage.super_effective), set(coverage.not_very_effective), set(coverage.no_effect)]
        assert sum(len(b) for b in buckets) == len(set().union(*buckets))

    def test_invalid_input(self) -> None:
        """Empty typing raises."""
        with pytest.raises(InvalidDefenderTypesError):
            calculate_offensive_coverage([])


class TestRecommendCounters:
    """Tests for recommend_counters function."""

    def test_fire(self) -> None:
        """Water, Ground and Rock counter Fire, none of them immune to it."""
        recommendation = recommend_counters([T.FIRE])
        assert recommendation.recommended == (T.WATER, T.GROUND, T.ROCK)
        assert recommendation.immune == ()

    def test_electric_ground_is_immune_counter(self) -> None:
        """Ground hits Electric for 2x and takes nothing back."""
        recommendation = recommend_counters([T.ELECTRIC])
        assert recommendation.immune == (T.GROUND,)
        assert recommendation.recommended == ()

    def test_excludes_types_the_target_hits_back(self) -> None:
        """Ghost beats Ghost but is hit super effectively in return, leaving only Dark."""
        recommendation = recommend_counters([T.GHOST])
        assert recommendation.recommended == (T.DARK,)
        assert recommendation.immune == ()

    def test_dual_type(self) -> None:
        """Grass/Poison is countered by Fire, Ice, Flying and Psychic."""
        recommendation = recommend_counters(["Grass", "Poison"])
        assert recommendation.target_types == (T.GRASS, T.POISON)
        assert recommendation.recommended == (T.FIRE, T.ICE, T.FLYING, T.PSYCHIC)
        assert recommendation.immune == ()

    def test_invalid_input(self) -> None:
        """Unknown types raise."""
        with pytest.raises(InvalidDefenderTypesError):
            recommend_counters(["Cosmic"])


class TestFormatMultiplier:
    """Tests for format_multiplier function."""

    @pytest.mark.parametrize(
        ("multiplier", "expected"),
        [(4.0, "4x"), (2.0, "2x"), (1.0, "1x"), (0.5, "1/2x"), (0.25, "1/4x"), (0.0, "0x")],
    )
    def test_ascii(self, multiplier: float, expected: str) -> None:
        """Default labels use ASCII fractions."""
        assert format_multiplier(multiplier) == expected

    @pytest.mark.parametrize(("multiplier", "expected"), [(0.5, "½x"), (0.25, "¼x"), (4.0, "4x")])
    def test_unicode(self, multiplier: float, expected: str) -> None:
        """Unicode labels use vulgar fractions."""
        assert format_multiplier(multiplier, unicode=True) == expected
