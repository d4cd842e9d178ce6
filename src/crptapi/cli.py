"""Click CLI for crptapi — submit documents to the CRPT registry."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from crptapi.codec import load_document
from crptapi.config.defaults import REQUIRED_KEYS
from crptapi.config.hierarchy import ConfigError, load_config_hierarchy, require_keys
from crptapi.errors.exceptions import SerializationError
from crptapi.submission.client import SubmissionClient
from crptapi.types import Document, OutcomeKind, SubmissionOutcome

console = Console()
error_console = Console(stderr=True)

_OUTCOME_STYLES = {
    OutcomeKind.ACCEPTED: "green",
    OutcomeKind.REJECTED: "yellow",
    OutcomeKind.TRANSPORT_ERROR: "red",
    OutcomeKind.SERIALIZATION_ERROR: "red",
    OutcomeKind.CANCELLED: "magenta",
}


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(str(default_level).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


@click.group()
@click.version_option(package_name="crptapi")
def cli() -> None:
    """crptapi — rate-limited CRPT document submission."""


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("-s", "--signature", type=str, default=None, help="Document signature.")
@click.option(
    "--time-unit",
    type=str,
    default=None,
    help="Replenishment period: a unit name (seconds, minutes, ...) or seconds.",
)
@click.option("--limit", "request_limit", type=int, default=None, help="Requests per time unit.")
@click.option("--timeout", type=float, default=None, help="HTTP timeout in seconds.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def submit(
    files: tuple[str, ...],
    signature: str | None,
    time_unit: str | None,
    request_limit: int | None,
    timeout: float | None,
    verbose: int,
) -> None:
    """Submit JSON document file(s) to the registry."""
    config = load_config_hierarchy(
        time_unit=time_unit,
        request_limit=request_limit,
        timeout=timeout,
        signature=signature,
    )
    _setup_logging(verbose, config.get("log_level", "WARNING"))

    try:
        require_keys(config)
    except ConfigError as e:
        raise click.UsageError(f"{e}. Use --time-unit/--limit or CRPTAPI_* variables.") from e

    documents: list[Document] = []
    for path in files:
        try:
            documents.append(load_document(path))
        except SerializationError as e:
            error_console.print(f"[red]Invalid document {path}:[/red] {e.message}")
            sys.exit(1)

    try:
        client = SubmissionClient(
            config["time_unit"],
            config["request_limit"],
            timeout=config.get("timeout"),
        )
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    sig = config.get("signature") or ""

    async def _run() -> list[SubmissionOutcome]:
        async with client:
            return await client.submit_many((doc, sig) for doc in documents)

    outcomes = asyncio.run(_run())

    _print_outcomes([Path(p) for p in files], outcomes)

    if not all(outcome.ok for outcome in outcomes):
        sys.exit(1)


def _print_outcomes(files: list[Path], outcomes: list[SubmissionOutcome]) -> None:
    table = Table(title="Submission Results", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Outcome")
    table.add_column("Status")
    table.add_column("Detail")

    for path, outcome in zip(files, outcomes, strict=True):
        style = _OUTCOME_STYLES[outcome.kind]
        status = str(outcome.status_code) if outcome.status_code is not None else "-"
        if outcome.error is not None and outcome.kind != OutcomeKind.REJECTED:
            detail = outcome.error.message
        else:
            detail = (outcome.body or "").strip()[:80] or "-"
        table.add_row(path.name, f"[{style}]{outcome.kind.value}[/{style}]", status, detail)

    console.print(table)


@cli.command("config")
def show_config() -> None:
    """Show the resolved configuration."""
    config = load_config_hierarchy()

    table = Table(title="Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key in sorted(set(config) | set(REQUIRED_KEYS)):
        table.add_row(key, _display_value(key, config.get(key)))

    console.print(table)


def _display_value(key: str, value: Any) -> str:
    if value is None:
        return "[dim]unset[/dim]"
    if key == "signature" and value:
        return "****"
    return str(value)
