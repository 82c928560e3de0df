"""Typer-powered command-line interface for named connectome queries."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import LoaderConfig
from .context import ConnectomeContext
from .errors import ConnectomeLoadError
from .query import QueryResult

app = typer.Typer(help="Query synaptic connections between named cells, possibly using wild-cards.")
console = Console()


def _load_context(
    names: Optional[Path],
    connect: Optional[Path],
    log_level: str,
    debug: bool,
) -> ConnectomeContext:
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level)
    config = LoaderConfig.from_env(names, connect)
    try:
        context = ConnectomeContext.load(config)
    except ConnectomeLoadError as exc:
        console.print(f"[bold red]ERROR:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    console.print(f"Ready to serve connections between {len(context.connectome)} neurons...")
    return context


def _display_name(name: str) -> str:
    # Names read from non UTF-8 files carry lone surrogates that stdout cannot encode.
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


_NAMES_OPTION = typer.Option(
    None,
    "--names",
    help="File name of cell names CSV (default: $CONNECTOME_NAMES or cell_names.csv).",
    rich_help_panel="Data selection",
)
_CONNECT_OPTION = typer.Option(
    None,
    "--connect",
    help="File name of connectivity CSV (default: $CONNECTOME_CONNECT or connectivity_mat_379.csv).",
    rich_help_panel="Data selection",
)
_LOG_LEVEL_OPTION = typer.Option("WARNING", "--log-level", help="Python logging level.", rich_help_panel="Advanced")
_DEBUG_OPTION = typer.Option(False, "--debug", help="Run in debug mode. Verbose.", rich_help_panel="Advanced")


@app.command("query")
def query(
    pre: str = typer.Option(
        ...,
        "--pre",
        help="Comma separated presynaptic cell names; a trailing * matches by prefix.",
        rich_help_panel="Query parameters",
    ),
    post: str = typer.Option(
        ...,
        "--post",
        help="Comma separated postsynaptic cell names; a trailing * matches by prefix.",
        rich_help_panel="Query parameters",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        min=1,
        help="Only display the strongest N connections.",
        rich_help_panel="Output",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        help="Write the full ranked result to this CSV file.",
        rich_help_panel="Output",
    ),
    names: Optional[Path] = _NAMES_OPTION,
    connect: Optional[Path] = _CONNECT_OPTION,
    log_level: str = _LOG_LEVEL_OPTION,
    debug: bool = _DEBUG_OPTION,
) -> None:
    """Show connections from cells matching --pre to cells matching --post."""

    context = _load_context(names, connect, log_level, debug)
    result = context.query(pre, post)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        result.to_frame().to_csv(output, index=False, errors="surrogateescape")
        console.print(f"Results written to [cyan]{output}[/cyan]")
    _display_result(result, limit)


@app.command("info")
def info(
    list_names: bool = typer.Option(
        False,
        "--list",
        help="Also list every presynaptic cell name.",
        rich_help_panel="Output",
    ),
    names: Optional[Path] = _NAMES_OPTION,
    connect: Optional[Path] = _CONNECT_OPTION,
    log_level: str = _LOG_LEVEL_OPTION,
    debug: bool = _DEBUG_OPTION,
) -> None:
    """Summarise the loaded name table and connectome."""

    context = _load_context(names, connect, log_level, debug)
    console.print(f"Cell names: {len(context.names)}")
    console.print(f"Presynaptic cells: {len(context.connectome)}")
    console.print(f"Connections: {context.connectome.edge_count()}")
    if list_names:
        for name in sorted(context.connectome.presynaptic_names()):
            console.print(_display_name(name), markup=False, highlight=False)


def _display_result(result: QueryResult, limit: Optional[int]) -> None:
    if result.is_empty:
        console.print("[bold]No connections found.[/bold]")
        return
    console.print(f"Presynaptic cells in search: {result.pre_patterns}", markup=False, highlight=False)
    console.print(f"Postsynaptic cells in search: {result.post_patterns}", markup=False, highlight=False)
    table = Table(title="Connections in order of strength")
    table.add_column("# Synapses", justify="right")
    table.add_column("Presynaptic cell")
    table.add_column("Postsynaptic cell")
    shown = result.connections if limit is None else result.top(limit)
    for connection in shown:
        table.add_row(
            str(connection.strength),
            escape(_display_name(connection.pre)),
            escape(_display_name(connection.post)),
        )
    console.print(table)


def main() -> None:
    """Entry point for ``python -m named_connectome``."""

    app()


if __name__ == "__main__":
    main()
