from __future__ import annotations

import sys

import typer

from player_feed.config import (
    AUDIT_LOG_PATH,
    MAX_PLAYERS,
    PLAYER_ENDPOINT,
    SOURCE_PATH,
    get_settings,
)
from player_feed.infrastructure.audit_log import read_audit_entries
from player_feed.infrastructure.sheet_reader import SourceReadError
from player_feed.orchestrator import run_batch
from player_feed.reporter import print_audit_entries, print_records
from player_feed.transform import load_records
from player_feed.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Player Feed CLI: push the auction sheet to the player server.")

log = get_logger(__name__)


def _configure() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show the fixed source, endpoint and audit log, plus logging settings.
    """
    settings = get_settings()
    typer.echo(
        f"source={SOURCE_PATH} (max {MAX_PLAYERS} players) | endpoint={PLAYER_ENDPOINT} | "
        f"audit={AUDIT_LOG_PATH} | env={settings.app_env} log_level={settings.log_level}"
    )


@app.command()
def run(
    audit: bool = typer.Option(
        True,
        "--audit/--no-audit",
        help="Append name/ID pairs of sent players to the audit log.",
    ),
) -> None:
    """
    Read the sheet and send every player to the server, one at a time.
    """
    _configure()
    try:
        run_batch(audit=audit)
    except SourceReadError as exc:
        log.critical(str(exc), extra={"source": exc.path})
        raise typer.Exit(code=1)


@app.command()
def preview() -> None:
    """
    Read and normalize the sheet without sending anything.
    """
    _configure()
    try:
        records = load_records(SOURCE_PATH)
    except SourceReadError as exc:
        log.critical(str(exc), extra={"source": exc.path})
        raise typer.Exit(code=1)
    print_records(records)


@app.command("audit")
def show_audit() -> None:
    """
    Show the entries recorded in the audit log.
    """
    print_audit_entries(read_audit_entries(AUDIT_LOG_PATH))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
