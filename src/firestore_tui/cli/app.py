"""Command-line entry point.

    firestore-tui my-project
    firestore-tui my-project --database staging
    firestore-tui demo --snapshot store.yml

The store is opened before the TUI starts and closed when it exits, however
it exits.
"""

from __future__ import annotations

import sys
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Optional

import typer

from firestore_tui.config import (
    DEFAULT_DATABASE,
    BrowserConfig,
    LogLevel,
    configure_logging,
)
from firestore_tui.store.errors import StoreConnectionError
from firestore_tui.store.snapshot import open_snapshot
from firestore_tui.store.source import DataSource
from firestore_tui.tui.app import FirestoreApp


USAGE = "Usage: firestore-tui <projectId>"

app = typer.Typer(add_completion=False, help="Browse a Firestore database in two panes.")


def open_source(config: BrowserConfig) -> AbstractContextManager[DataSource]:
    if config.snapshot is not None:
        return open_snapshot(config.snapshot)

    from firestore_tui.store.firestore import open_firestore

    return open_firestore(config.project_id, config.database)


@app.command()
def browse(
    project_id: Optional[str] = typer.Argument(
        None, metavar="PROJECT_ID", help="Google Cloud project to browse."
    ),
    database: str = typer.Option(
        DEFAULT_DATABASE, "--database", help="Firestore database id."
    ),
    snapshot: Optional[Path] = typer.Option(
        None, "--snapshot", help="Browse a YAML snapshot instead of Firestore."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write logs to this file."
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.info, "--log-level", case_sensitive=False
    ),
):
    """Open the two-pane browser."""
    if not project_id:
        print(USAGE)
        sys.exit(1)

    config = BrowserConfig(
        project_id=project_id,
        database=database,
        snapshot=snapshot,
        log_file=log_file,
        log_level=log_level,
    )
    configure_logging(config)

    try:
        with open_source(config) as source:
            tui = FirestoreApp(source, config.project_id)
            tui.run()
    except StoreConnectionError as e:
        print(f"failed to create client: {e}")
        sys.exit(1)

    if tui.return_code:
        sys.exit(tui.return_code)
