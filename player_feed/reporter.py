from __future__ import annotations

from typing import Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from player_feed.domain.models import PlayerRecord


def print_records(records: List[PlayerRecord], console: Optional[Console] = None) -> None:
    """
    Render normalized player records as a rich table (sheet order).
    """
    console = console or Console()

    if not records:
        console.print("[yellow]No players to display.[/yellow]")
        return

    table = Table(
        title="Player Preview",
        box=box.ROUNDED,
        caption=f"{len(records)} player(s), not sent",
    )
    table.add_column("Player", style="cyan", no_wrap=True)
    table.add_column("ID", style="magenta")
    table.add_column("Rating", justify="right", style="green")
    table.add_column("Base Price", justify="right", style="bold green")
    table.add_column("Pool", justify="center", style="blue")
    table.add_column("Nationality", style="yellow")
    table.add_column("Role")

    for record in records:
        table.add_row(
            record.name,
            record.identifier,
            f"{record.rating:.1f}",
            f"{record.base_price:,}",
            record.pool,
            record.nationality,
            record.role,
        )

    console.print(table)


def print_audit_entries(entries: List[Dict[str, str]], console: Optional[Console] = None) -> None:
    console = console or Console()

    if not entries:
        console.print("[yellow]Audit log is empty.[/yellow]")
        return

    table = Table(title="Audit Log", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Player", style="cyan")
    table.add_column("ID", style="magenta")

    for i, entry in enumerate(entries, start=1):
        table.add_row(str(i), entry.get("playerName", ""), entry.get("playerId", ""))

    console.print(table)


__all__ = ["print_audit_entries", "print_records"]
