"""ABOUTME: Polars tables over the type chart and every defender typing.
ABOUTME: Used by the CLI export command and the Streamlit chart view."""

from collections.abc import Iterable
from pathlib import Path

import polars as pl

from typematchup.chart.type_chart import EFFECTIVENESS, generate_all_type_combinations
from typematchup.chart.types import TYPES, PokemonType
from typematchup.effectiveness.combinator import combine
from typematchup.effectiveness.dataclasses import Category


def type_chart_frame() -> pl.DataFrame:
    """Return the 18x18 chart with one row per attacking type.

    Columns: attacking_type, then one Float64 column per defending type.
    """
    rows = [
        {"attacking_type": attacker.value, **{defender.value: EFFECTIVENESS[attacker][defender] for defender in TYPES}}
        for attacker in TYPES
    ]
    return pl.DataFrame(rows)


def defensive_profile_frame(
    combinations: Iterable[tuple[PokemonType, PokemonType | None]] | None = None,
) -> pl.DataFrame:
    """Return one row per defender typing with every attacking multiplier and category counts.

    Args:
        combinations: Typings as (type1, type2 or None). Defaults to all 171.

    Returns:
        DataFrame with columns type1, type2, one multiplier column per attacking
        type, and a `<category>_count` column per category.
    """
    if combinations is None:
        combinations = generate_all_type_combinations()

    results = []
    for type1, type2 in combinations:
        result = combine([type1] if type2 is None else [type1, type2])
        row: dict[str, str | float | int | None] = {
            "type1": type1.value,
            "type2": type2.value if type2 is not None else None,
        }
        for entry in result.entries:
            row[entry.attacking_type.value] = entry.multiplier
        for category in Category:
            row[f"{category.value}_count"] = len(result.groups[category])
        results.append(row)

    schema: dict[str, pl.DataType | type[pl.DataType]] = {"type1": pl.String, "type2": pl.String}
    schema.update({t.value: pl.Float64 for t in TYPES})
    schema.update({f"{c.value}_count": pl.Int64 for c in Category})
    return pl.DataFrame(results, schema=schema)


def write_defensive_profiles(output_path: Path) -> Path:
    """Write all 171 defensive profiles to Parquet or CSV, chosen by file suffix.

    Returns:
        The path written.
    """
    df = defensive_profile_frame()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix == ".csv":
        df.write_csv(output_path)
    else:
        df.write_parquet(output_path)
    return output_path
