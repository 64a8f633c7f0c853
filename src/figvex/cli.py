"""Command-line front end for figvex.

Commands:
    figvex export SNAPSHOT   Render a snapshot and write the output files
    figvex inspect SNAPSHOT  Report alias problems in a snapshot
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from figvex.analyzer import AliasReport, analyze_graph
from figvex.config import load_options
from figvex.errors import FigvexError, SnapshotError
from figvex.export import ExportFormat, generate_exports, output_files, write_files
from figvex.model import VariableGraph
from figvex.serialization import graph_from_json, graph_from_yaml

EXIT_SUCCESS = 0
EXIT_WARNINGS = 1
EXIT_ERROR = 2

app = typer.Typer(
    name="figvex",
    help="Export design variables to CSS, SCSS, JSON tokens and TypeScript",
    no_args_is_help=True,
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _error(message: str) -> None:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)


def load_graph(path: Path) -> VariableGraph:
    """
    Load a snapshot file; YAML for .yaml/.yml, JSON otherwise.

    Raises:
        SnapshotError: If the file is missing or malformed
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SnapshotError(f"Snapshot file not found: {path}") from None

    if path.suffix.lower() in (".yaml", ".yml"):
        return graph_from_yaml(content)
    return graph_from_json(content)


@app.command()
def export(
    snapshot: Path = typer.Argument(..., help="Snapshot file (.json, .yaml)"),
    formats: Optional[List[ExportFormat]] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format; repeat for several (default: all)",
    ),
    out_dir: Path = typer.Option(Path("."), "--out-dir", "-o", help="Directory for output files"),
    basename: str = typer.Option("variables", "--basename", help="Output file name without extension"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file of export options"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Identifier prefix"),
    selector: Optional[str] = typer.Option(None, "--selector", help="CSS selector (default :root)"),
    modes_as_selectors: bool = typer.Option(
        False, "--modes-as-selectors", help="One CSS block per collection mode"
    ),
    collections: Optional[List[str]] = typer.Option(
        None, "--collection", help="Collection id to export; repeat for several"
    ),
    stdout: bool = typer.Option(False, "--stdout", help="Print instead of writing files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Render a snapshot in one or more formats."""
    _setup_logging(verbose)

    try:
        graph = load_graph(snapshot)
        overrides: Dict[str, Any] = load_options(config) if config else {}
    except FigvexError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    if prefix is not None:
        overrides["prefix"] = prefix
    if selector is not None:
        overrides["selector"] = selector
    if modes_as_selectors:
        overrides["use_modes_as_selectors"] = True
    if collections:
        overrides["selected_collections"] = collections
    overrides.setdefault("file_name", snapshot.name)

    exports = generate_exports(graph, formats or list(ExportFormat), overrides)

    if stdout:
        for content in exports.values():
            typer.echo(content)
        return

    files = output_files(exports, out_dir, basename)
    write_files(files)
    for file in files:
        typer.echo(f"Wrote {file.path}")


def _print_report(report: AliasReport) -> None:
    typer.echo(f"Collections:   {report.total_collections}")
    typer.echo(f"Variables:     {report.total_variables}")
    typer.echo(f"Aliases:       {report.total_aliases}")
    typer.echo(f"Deepest chain: {report.max_chain_depth}")

    if report.alias_references:
        typer.echo("Alias targets:")
        for name, count in sorted(report.alias_references.items()):
            typer.echo(f"  {name}: {count} reference(s)")

    if report.missing_values:
        typer.echo("Missing values:")
        for name, mode in report.missing_values:
            typer.echo(f"  {name} ({mode})")

    for warning in report.warnings:
        typer.secho(f"WARNING: {warning}", fg=typer.colors.YELLOW)


@app.command()
def inspect(
    snapshot: Path = typer.Argument(..., help="Snapshot file (.json, .yaml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Report alias cycles, dangling aliases and other export hazards."""
    _setup_logging(verbose)

    try:
        graph = load_graph(snapshot)
    except FigvexError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    report = analyze_graph(graph)
    _print_report(report)

    if report.warnings:
        raise typer.Exit(code=EXIT_WARNINGS)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
