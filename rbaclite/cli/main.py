"""
rbaclite CLI - Command-line tools for in-memory RBAC data.

Usage:
    rbaclite inspect        Load a seed file and show roles, permissions and grants
    rbaclite validate       Check a seed file
    rbaclite version        Show the installed version
"""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler

from .. import __version__
from ..config import load_config
from .commands import seed

# Create the main Typer app
app = typer.Typer(
    name="rbaclite",
    help="In-memory role-based access control data provider",
    add_completion=False,
)

console = Console()

app.command(name="inspect")(seed.inspect_command)
app.command(name="validate")(seed.validate_command)


@app.command(name="version")
def version_command() -> None:
    """Show the installed version."""
    console.print(f"rbaclite {__version__}")


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """
    rbaclite - In-memory RBAC for Python.
    """
    try:
        config = load_config(debug=True) if debug else load_config()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=config.effective_log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
