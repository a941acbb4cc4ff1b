from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from component_metadata.config import load_settings
from component_metadata.core.batch import FileReport, collect_source_files, process_file

console = Console()


def render_reports(reports: list[FileReport]) -> None:
    table = Table(show_lines=False)
    for header in ("file", "matched", "artifacts", "errors"):
        table.add_column(header)
    for report in reports:
        if report.failure is not None:
            table.add_row(str(report.path), "-", "-", "[red]failed[/red]")
        else:
            table.add_row(str(report.path), str(report.matched), str(len(report.artifacts)), str(len(report.errors)))
    console.print(table)

    for report in reports:
        if report.failure is not None:
            console.print(f"[red]error[/red] {report.path}: {report.failure}")
        for message in report.errors:
            console.print(f"[yellow]warning[/yellow] {report.path}: {message}")


def extract(
    paths: Annotated[list[Path], typer.Argument(help="Source files or directories to process.")],
    context: Annotated[
        Path | None, typer.Option(help="Base directory thumbnails are resolved against.")
    ] = None,
    artifact_dir: Annotated[
        Path | None, typer.Option(help="Directory component artifacts are written to.")
    ] = None,
    out_dir: Annotated[
        Path | None, typer.Option(help="Write rewritten sources here, keeping their relative layout.")
    ] = None,
    language: Annotated[
        str | None, typer.Option(help="Language (javascript, typescript, tsx); detected from extension if omitted.")
    ] = None,
    strict: Annotated[bool, typer.Option(help="Exit non-zero when any metadata is rejected.")] = False,
) -> None:
    """Extract component metadata from source files."""
    settings = load_settings()
    resolved_context = context or settings.context
    resolved_artifact_dir = artifact_dir or settings.artifact_dir

    files = collect_source_files(paths, exclude=[out_dir] if out_dir is not None else [])
    if not files:
        console.print("[yellow]No supported source files found.[/yellow]")
        raise typer.Exit(code=0)

    reports = [
        process_file(path, root, resolved_context, resolved_artifact_dir, out_dir, language) for path, root in files
    ]
    render_reports(reports)

    artifact_count = sum(len(report.artifacts) for report in reports)
    console.print(f"[green]Wrote[/green] {artifact_count} artifact(s) to {resolved_artifact_dir}")

    failed = any(report.failure is not None for report in reports)
    rejected = any(report.errors for report in reports)
    if failed or (strict and rejected):
        raise typer.Exit(code=1)
