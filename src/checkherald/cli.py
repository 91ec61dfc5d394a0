"""checkherald CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from checkherald import __version__
from checkherald._constants import DEFAULT_CONFIG
from checkherald.config import (
    ConfigError,
    StateType,
    generate_example_config_yaml,
    load_config,
)
from checkherald.report import ReportAssembler
from checkherald.variables import EnvironmentVariableStore

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="checkherald",
    help="Annotate Graphite threshold alerts with search results and graphs",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Status output goes to stderr so the report can be piped from stdout
console = Console(stderr=True)


# =============================================================================
# Helper Functions
# =============================================================================


def resolve_config_path(config_file: Path | None) -> Path | None:
    """Resolve config file path, using ./checkherald.yaml when present.

    Unlike an explicit path, a missing default file is not an error: the
    built-in defaults are used instead.
    """
    if config_file is not None:
        return config_file

    default = Path(DEFAULT_CONFIG)
    if default.exists():
        return default
    return None


def parse_var_overrides(values: list[str] | None) -> dict[str, str]:
    """Parse repeated ``NAME=VALUE`` options into a mapping."""
    overrides: dict[str, str] = {}
    for item in values or []:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"Expected NAME=VALUE, got: {item}", param_hint="--var")
        overrides[name] = value
    return overrides


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]OK[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]ERROR[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]...[/blue] {message}")


# =============================================================================
# CLI Commands
# =============================================================================


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"checkherald version {__version__}")


@app.command()
def init(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file path for configuration",
        ),
    ] = Path(DEFAULT_CONFIG),
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Write an example configuration file."""
    if output.exists() and not force:
        print_error(f"{output} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    output.write_text(generate_example_config_yaml())
    print_success(f"Wrote {output}")


@app.command(name="format")
def format_check(
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help=f"Configuration file (default: ./{DEFAULT_CONFIG} if present)",
        ),
    ] = None,
    variables: Annotated[
        list[str] | None,
        typer.Option(
            "--var",
            help="Set an alerting-system variable, NAME=VALUE (repeatable; overrides the environment)",
        ),
    ] = None,
    state_type: Annotated[
        StateType | None,
        typer.Option("--state-type", help="SERVICE or HOST alert"),
    ] = None,
    sandbox: Annotated[
        Path | None,
        typer.Option("--sandbox", help="Directory for downloaded graph images"),
    ] = None,
    text: Annotated[
        bool,
        typer.Option("--text", help="Emit the plain-text rendering instead of HTML"),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Format the annotation for the alert described by NAGIOS_* variables."""
    configure_logging(verbose)

    try:
        cfg = load_config(resolve_config_path(config_file))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from None

    if state_type is not None:
        cfg.variables.state_type = state_type
    if sandbox is not None:
        cfg.graphite.sandbox_dir = str(sandbox)

    store = EnvironmentVariableStore(parse_var_overrides(variables))
    report = ReportAssembler.from_config(cfg, store).assemble()
    body = report.to_text() if text else report.to_html()

    if output is not None:
        output.write_text(body)
        print_success(f"Report written to {output}")
    else:
        typer.echo(body)

    attachments = report.attachments
    if attachments:
        table = Table(title="Attachments")
        table.add_column("File", style="cyan")
        for path in attachments:
            table.add_row(path)
        console.print(table)
    elif verbose:
        print_info("No attachments")


@app.command(name="show-config")
def show_config(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Configuration file"),
    ] = None,
) -> None:
    """Show the effective configuration."""
    try:
        cfg = load_config(resolve_config_path(config_file))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from None

    es = cfg.elasticsearch
    console.print(
        Panel(
            f"Elasticsearch: {es.url}/{es.index}\n"
            f"Query dir:     {es.query_dir}\n"
            f"Default window: {es.default_period}\n"
            f"Graph sandbox: {cfg.graphite.sandbox_dir}\n"
            f"Output var:    {cfg.variables.output_variable()}",
            title="checkherald configuration",
            expand=False,
        )
    )


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
