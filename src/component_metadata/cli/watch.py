import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from component_metadata.cli.extract import render_reports
from component_metadata.config import load_settings
from component_metadata.core.batch import collect_source_files, process_file
from component_metadata.watcher.watchfiles_adapter import WatchfilesWatcher

console = Console()


def watch(
    directory: Annotated[Path, typer.Argument(help="Directory to watch.")],
    context: Annotated[
        Path | None, typer.Option(help="Base directory thumbnails are resolved against.")
    ] = None,
    artifact_dir: Annotated[
        Path | None, typer.Option(help="Directory component artifacts are written to.")
    ] = None,
    out_dir: Annotated[
        Path | None, typer.Option(help="Write rewritten sources here, keeping their relative layout.")
    ] = None,
) -> None:
    """Extract once, then re-extract whenever a source file changes."""
    settings = load_settings()
    resolved_context = context or settings.context
    resolved_artifact_dir = artifact_dir or settings.artifact_dir
    root = directory.resolve()

    def _run(files: list[Path]) -> None:
        reports = [process_file(path, root, resolved_context, resolved_artifact_dir, out_dir) for path in files]
        render_reports(reports)

    excluded = [path for path in (out_dir, resolved_artifact_dir) if path is not None]
    _run([path for path, _ in collect_source_files([root], exclude=excluded)])

    async def _on_change(paths: set[Path]) -> None:
        _run(sorted(paths))

    async def _main() -> None:
        watcher = WatchfilesWatcher(root, _on_change, ignore_paths=excluded)
        await watcher.start()
        console.print(f"[green]Watching[/green] {root} (Ctrl+C to stop)")
        try:
            await watcher.wait()
        finally:
            await watcher.stop()

    try:
        asyncio.run(_main())
    except KeyboardInterrupt:
        console.print("Stopped.")
