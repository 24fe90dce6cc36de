"""Root Typer app — global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from vra_cli import __version__
from vra_cli.commands import config_cmd, request, resource

app = typer.Typer(
    name="vra-cli",
    help="CLI tool for the vRealize Automation catalog API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"vra-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """vRA CLI — inspect catalog resources, run their actions, follow requests."""


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(resource.app, name="resource")
app.add_typer(request.app, name="request")


def main() -> None:
    app()
