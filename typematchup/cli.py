"""ABOUTME: CLI entry point for typematchup commands.
ABOUTME: Provides defense, offense, counters, chart, export, and ui commands via Typer."""

import subprocess
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from typematchup.chart.types import TYPES, PokemonType
from typematchup.config import DisplayConfig, load_display_config
from typematchup.effectiveness.combinator import combine
from typematchup.effectiveness.dataclasses import Category
from typematchup.effectiveness.frames import type_chart_frame, write_defensive_profiles
from typematchup.effectiveness.matchups import calculate_offensive_coverage, format_multiplier, recommend_counters
from typematchup.errors import InvalidDefenderTypesError
from typematchup.logs import init_logging
from typematchup.settings import settings

app = typer.Typer(
    name="typematchup",
    help="Pokemon type effectiveness calculator.",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    log_config: Path | None = typer.Option(None, "--log-config", help="Logging YAML config to apply"),
) -> None:
    """Pokemon type effectiveness calculator."""
    path = log_config or settings.logging_config_path
    if path.exists():
        init_logging(path)


def _load_display() -> DisplayConfig:
    try:
        return load_display_config()
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None


def _join(types: tuple[PokemonType, ...]) -> str:
    return ", ".join(t.value for t in types) if types else "-"


@app.command()
def defense(
    types: list[str] = typer.Argument(..., help="One or two defending types, e.g. Grass Poison"),
    show_neutral: bool = typer.Option(False, "--neutral", "-n", help="Also list neutral matchups"),
) -> None:
    """Show how every attacking type performs against a typing."""
    display = _load_display()
    try:
        result = combine(types)
    except InvalidDefenderTypesError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None

    console.print(f"[bold]Defensive matchups for {'/'.join(t.value for t in result.defender_types)}[/]")
    for category, section in display.ordered_sections():
        entries = result.groups[category]
        if not entries or (category is Category.NEUTRAL and not show_neutral):
            continue
        labels = ", ".join(
            f"{e.attacking_type.value} ({format_multiplier(e.multiplier, display.unicode_fractions)})" for e in entries
        )
        console.print(f"  [cyan]{section.title}:[/] {labels}")


@app.command()
def offense(
    types: list[str] = typer.Argument(..., help="The Pokemon's one or two types"),
) -> None:
    """Show which defending types a typing hits well or poorly."""
    try:
        coverage = calculate_offensive_coverage(types)
    except InvalidDefenderTypesError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None

    console.print(f"[bold]Offensive matchups for {'/'.join(t.value for t in coverage.attacking_types)}[/]")
    console.print(f"  [green]Super effective against:[/] {_join(coverage.super_effective)}")
    console.print(f"  [yellow]Not very effective against:[/] {_join(coverage.not_very_effective)}")
    console.print(f"  [red]No effect on:[/] {_join(coverage.no_effect)}")


@app.command()
def counters(
    types: list[str] = typer.Argument(..., help="The target Pokemon's one or two types"),
) -> None:
    """Recommend attacking types that counter a typing."""
    try:
        recommendation = recommend_counters(types)
    except InvalidDefenderTypesError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None

    console.print(f"[bold]Counters for {'/'.join(t.value for t in recommendation.target_types)}[/]")
    console.print(f"  [green]Immune counters:[/] {_join(recommendation.immune)}")
    console.print(f"  [green]Recommended:[/] {_join(recommendation.recommended)}")


@app.command()
def chart() -> None:
    """Print the full 18x18 type chart (rows attack, columns defend)."""
    df = type_chart_frame()
    table = Table(title="Type chart")
    table.add_column("Atk \\ Def")
    for t in TYPES:
        table.add_column(t.value[:3], justify="center")
    for row in df.iter_rows(named=True):
        table.add_row(row["attacking_type"], *(format_multiplier(row[t.value]) for t in TYPES))
    console.print(table)


@app.command()
def export(
    output: Path = typer.Option(settings.export_path, "--output", "-o", help="Parquet or CSV output path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
) -> None:
    """Export defensive profiles for all 171 typings."""
    if verbose:
        console.print(f"[blue]Writing defensive profiles to {output}[/]")
    try:
        path = write_defensive_profiles(output)
    except OSError as e:
        console.print(f"[red]Export failed:[/] {e}")
        raise typer.Exit(1) from None
    console.print(f"[green]Exported defensive profiles:[/] {path}")


@app.command()
def ui(
    port: int = typer.Option(8501, "--port", "-p", help="Port for Streamlit server"),
) -> None:
    """Launch the Streamlit type calculator."""
    app_path = Path(__file__).parent / "app" / "main.py"

    if not app_path.exists():
        console.print(f"[red]Error:[/] Streamlit app not found at {app_path}")
        raise typer.Exit(1)

    console.print(f"[blue]Starting Streamlit UI on port {port}...[/]")

    try:
        # All arguments are controlled/validated - not user-provided strings
        subprocess.run(  # noqa: S603
            [sys.executable, "-m", "streamlit", "run", str(app_path), "--server.port", str(port)],
            check=True,
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]UI stopped.[/]")
    except subprocess.CalledProcessError as e:
        console.print(f"[red]Streamlit failed:[/] {e}")
        raise typer.Exit(1) from None


if __name__ == "__main__":
    app()
