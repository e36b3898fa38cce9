"""Typer CLI entrypoint for orderwrap."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from .config import ParsingConfig, load_parsing_config
from .exceptions import ConfigError, OrderwrapError
from .logging_setup import configure_logging
from .parsing import ParsedDataset, parse_order_file
from .parsing.exceptions import ParsingError
from .reports import (
    ReportError,
    build_summary,
    filter_transactions,
    write_summary_json,
    write_transactions_csv,
)


EXIT_SUCCESS = 0
EXIT_IO_ERROR = 4
EXIT_CONFIG_ERROR = 5


app = typer.Typer(help="Order history export parser")
export_app = typer.Typer(help="Export commands")
app.add_typer(export_app, name="export")


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to ORDERWRAP_LOG_LEVEL or INFO)",
    ),
) -> None:
    """Configure shared options."""

    configure_logging(log_level)


def _load(source: Path, config_path: Optional[Path]) -> ParsedDataset:
    try:
        config = load_parsing_config(config_path) if config_path else ParsingConfig()
        return parse_order_file(source, config)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(EXIT_CONFIG_ERROR) from exc
    except ParsingError as exc:
        typer.echo(f"Input error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc
    except OrderwrapError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc


@app.command("parse")
def parse_command(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional TOML parsing configuration",
    ),
    show_transactions: bool = typer.Option(
        False,
        "--show-transactions",
        help="Include every cleaned transaction in the output",
    ),
) -> None:
    """Parse an order export and print parsing statistics as JSON."""

    dataset = _load(source, config_path)
    payload = dataset.as_dict(include_transactions=show_transactions)
    typer.echo(json.dumps(payload, indent=2))


@export_app.command("csv")
def export_csv(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    out: Path = typer.Option(..., "--out", "-o", help="CSV file to write"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional TOML parsing configuration",
    ),
) -> None:
    """Write the cleaned transactions as a flat CSV file."""

    dataset = _load(source, config_path)
    try:
        written = write_transactions_csv(dataset.transactions, out)
    except ReportError as exc:
        typer.echo(f"Export error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    payload = {"output": str(written), "rows": len(dataset.transactions)}
    typer.echo(json.dumps(payload, indent=2))


@export_app.command("summary")
def export_summary(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    out: Path = typer.Option(..., "--out", "-o", help="JSON file to write"),
    person: Optional[str] = typer.Option(None, "--person", help="Only include this person"),
    exclude_returns: bool = typer.Option(
        False,
        "--exclude-returns",
        help="Leave out transactions with a refund",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional TOML parsing configuration",
    ),
) -> None:
    """Write the KPI summary JSON for the export."""

    dataset = _load(source, config_path)
    selected = filter_transactions(
        dataset.transactions, person=person, exclude_returns=exclude_returns
    )
    try:
        written = write_summary_json(build_summary(selected), out)
    except ReportError as exc:
        typer.echo(f"Export error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    payload = {"output": str(written), "transactions": len(selected)}
    typer.echo(json.dumps(payload, indent=2))
