from typing import Annotated

import typer

from component_metadata.cli.extract import extract
from component_metadata.cli.watch import watch
from component_metadata.config import configure_logging, load_settings

app = typer.Typer(
    name="component-metadata",
    help="Component Metadata CLI: extract @Metadata decorators into component artifacts.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("extract")(extract)
app.command("watch")(watch)


@app.callback()
def main_callback(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR).")
    ] = None,
) -> None:
    """Configure logging before any subcommand runs."""
    try:
        configure_logging(log_level or load_settings().log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


def main() -> None:
    app()
