"""CLI interface for vertextual using Typer framework."""

import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text
from slugify import slugify

from vertextual import __description__, __version__
from vertextual.config import (
    DiagramFormat,
    ExportFormat,
    LogLevel,
    VertextualConfig,
    load_config,
)
from vertextual.constants import DEFAULT_CONNECTIONS, SYNTAX_GUIDE
from vertextual.export import get_exporter
from vertextual.graph import create_generator
from vertextual.parser import CompileResult, EdgeCompiler, SelfLoopPolicy, SkipReason

app = typer.Typer(
    name="vertextual",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

InputArgument = Annotated[
    Optional[str],
    typer.Argument(help="Shorthand file to read, '-' for stdin (default: built-in example)")
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Configuration file path (default: search for .vertextual.json)")
]
DropSelfLoopsOption = Annotated[
    bool,
    typer.Option("--drop-self-loops", help="Remove edges from a node to itself")
]


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"vertextual version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """vertextual - Build network diagrams and mindmaps with plain text."""


def _configure_logging(config: VertextualConfig) -> None:
    logging.basicConfig(
        level=LOG_LEVELS.get(config.logging.level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load(config_path: Path | None) -> VertextualConfig:
    """Load configuration, turning failures into a CLI error."""
    try:
        config = load_config(config_path)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    _configure_logging(config)
    return config


def _read_input(source: str | None) -> str:
    """Read shorthand text from a file, stdin or the built-in example."""
    if source is None:
        return DEFAULT_CONNECTIONS
    if source == "-":
        return sys.stdin.read()

    try:
        return Path(source).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] Input file not found: {source}")
        raise typer.Exit(1)
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error:[/red] Failed to read {source}: {e}")
        raise typer.Exit(1)


def _compile(source: str | None, config: VertextualConfig, drop_self_loops: bool) -> CompileResult:
    policy = SelfLoopPolicy.DROP if drop_self_loops else config.compiler.self_loops
    compiler = EdgeCompiler(self_loops=policy)
    return compiler.compile_with_report(_read_input(source))


def _write_output(rendered: str, out: Path | None) -> None:
    if out is None:
        typer.echo(rendered, nl=False)
        return

    try:
        out.write_text(rendered, encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]Error:[/red] Failed to write {out}: {e}")
        raise typer.Exit(1)
    err_console.print(f"[green]Written:[/green] {out}")


@app.command("compile")
def compile_command(
    source: InputArgument = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json, plain (default: table)")
    ] = "table",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Also list lines that produced no edge")
    ] = False,
    drop_self_loops: DropSelfLoopsOption = False,
    config: ConfigOption = None,
) -> None:
    """Compile shorthand text into a directed edge list."""
    valid_formats = ["table", "json", "plain"]
    if format not in valid_formats:
        err_console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    result = _compile(source, _load(config), drop_self_loops)

    if format == "json":
        payload = {
            "edges": [{"from": edge.source, "to": edge.target} for edge in result.edges],
            "nodes": result.nodes,
        }
        if verbose:
            payload["skipped"] = [
                {"line": line.line_number, "text": line.text, "reason": line.reason.value}
                for line in result.skipped
            ]
        typer.echo(jsonlib.dumps(payload, indent=2, ensure_ascii=False))
        return

    if format == "plain":
        for edge in result.edges:
            typer.echo(str(edge))
    else:
        table = Table(title=f"Edges ({len(result.edges)})")
        table.add_column("#", style="dim", justify="right")
        table.add_column("From", style="cyan")
        table.add_column("To", style="green")
        for i, edge in enumerate(result.edges, 1):
            table.add_row(str(i), Text(edge.source), Text(edge.target))
        console.print(table)
        console.print(f"[blue]Nodes:[/blue] {len(result.nodes)}")

    if verbose and result.skipped:
        counts = []
        for reason in SkipReason:
            lines = result.skipped_by_reason(reason)
            if lines:
                counts.append(f"{reason.value}: {len(lines)}")
        err_console.print(f"[yellow]Skipped lines:[/yellow] {len(result.skipped)} ({', '.join(counts)})")
        for line in result.skipped:
            err_console.print(f"  {line}", markup=False)


@app.command("export")
def export_command(
    source: InputArgument = None,
    format: Annotated[
        Optional[ExportFormat],
        typer.Option("--format", "-f", help="Export format (default: from config, tribble)")
    ] = None,
    variable: Annotated[
        Optional[str],
        typer.Option("--variable", help="Variable name assigned in the literal (default: edges)")
    ] = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output file path (default: stdout)")
    ] = None,
    drop_self_loops: DropSelfLoopsOption = False,
    config: ConfigOption = None,
) -> None:
    """Export the edge list as a code literal with 'from' and 'to' columns."""
    vertextual_config = _load(config)
    export_config = vertextual_config.export

    try:
        exporter = get_exporter(
            format or export_config.format,
            variable=variable or export_config.variable,
            indent=export_config.indent,
        )
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    result = _compile(source, vertextual_config, drop_self_loops)
    _write_output(exporter.export(result.edges), out)


@app.command("graph")
def graph_command(
    source: InputArgument = None,
    format: Annotated[
        Optional[DiagramFormat],
        typer.Option("--format", "-f", help="Diagram format (default: from config, mermaid)")
    ] = None,
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-t", help="Network title")
    ] = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output file path, '-' for stdout (default: <title>.<ext>)")
    ] = None,
    drop_self_loops: DropSelfLoopsOption = False,
    config: ConfigOption = None,
) -> None:
    """Render the edge list as Mermaid or Graphviz diagram source."""
    vertextual_config = _load(config)
    graph_config = vertextual_config.graph
    format = format or graph_config.format
    title = graph_config.title if title is None else title

    result = _compile(source, vertextual_config, drop_self_loops)

    generator = create_generator(vertextual_config.appearance)
    spec = generator.build_spec(result.edges, title=title)
    try:
        rendered = generator.render_graph(spec, format.value)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if out is not None and str(out) == "-":
        _write_output(rendered, None)
        return

    if out is None:
        extension = generator.renderers[format.value].get_file_extension()
        out = Path(f"{slugify(title) or 'graph'}{extension}")

    _write_output(rendered, out)
    err_console.print(f"[blue]Graph:[/blue] {len(spec.nodes)} nodes, {len(spec.edges)} edges")
    self_loops = spec.get_self_loops()
    if self_loops:
        err_console.print(f"[yellow]Self-loops:[/yellow] {len(self_loops)}")
    if result.skipped:
        err_console.print(f"[yellow]Skipped lines:[/yellow] {len(result.skipped)}")


@app.command()
def example() -> None:
    """Print the built-in example network."""
    typer.echo(DEFAULT_CONNECTIONS)


@app.command()
def help() -> None:
    """Show detailed help information."""
    console.print(f"[bold]{__description__}[/bold]")
    console.print(f"Version: {__version__}")
    console.print()

    table = Table(title="Available Commands")
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")

    table.add_row("compile", "Compile shorthand text -> directed edge list")
    table.add_row("export", "Export the edge list as a tribble, Python or CSV literal")
    table.add_row("graph", "Render the edge list as Mermaid or Graphviz source")
    table.add_row("example", "Print the built-in example network")
    table.add_row("help", "Show this help information")

    console.print(table)

    for heading, body, sample in SYNTAX_GUIDE:
        console.print()
        console.print(f"[bold]{heading}[/bold]")
        console.print(body)
        console.print(sample, style="dim", markup=False)


if __name__ == "__main__":
    app()
