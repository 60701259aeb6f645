"""
Sample sheet generator for Player Feed.

Writes a deterministic pseudo-random auction sheet in the layout the feed
expects (name, rating, pool, role, country, base price) using openpyxl.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import Sequence

import typer
from openpyxl import Workbook

from player_feed.config import SOURCE_PATH

app = typer.Typer(help="Generate a sample auction sheet (.xlsx).")

HEADER = ["Name", "Rating", "Pool", "Role", "Country", "Base Price"]

_FIRST_NAMES = ["Raj", "Arjun", "Vikram", "Steve", "Kane", "Rashid", "Ben", "Rohit", "Quinton"]
_LAST_NAMES = ["Sharma", "Patel", "Singh", "Smith", "Williamson", "Khan", "Stokes", "de Kock"]
_ROLES = ["Batsman", "Bowler", "All-Rounder", "Wicket-Keeper"]
_COUNTRIES = ["India", "India", "India", "Australia", "New Zealand", "Afghanistan", "England"]


def _write_sheet(path: Path, rows: Sequence[Sequence[object]], header: Sequence[str] = HEADER) -> None:
    """Write ``header`` plus ``rows`` to the first sheet of a new workbook."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Players"
    sheet.append(list(header))
    for row in rows:
        sheet.append(list(row))
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)


def _generate_rows(rows: int, seed: int) -> list[list[object]]:
    rng = random.Random(seed)
    generated: list[list[object]] = []
    for _ in range(rows):
        generated.append(
            [
                f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}",
                round(rng.uniform(5, 10), 1),
                f"P{rng.randint(1, 4)}",
                rng.choice(_ROLES),
                rng.choice(_COUNTRIES),
                rng.choice([20, 50, 75, 100, 150, 200]),
            ]
        )
    return generated


@app.command()
def main(
    rows: int = typer.Option(
        25,
        "--rows",
        "-r",
        help="Number of player rows to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path(SOURCE_PATH),
        "--output",
        "-o",
        help="Output .xlsx path.",
    ),
) -> None:
    """
    Generate a sample player sheet.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {rows:,} players -> {output} (seed={seed})")
    _write_sheet(output, _generate_rows(rows, seed))
    typer.echo(f"Sheet written in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
