"""
rbaclite seed commands - Inspect and validate seed files.

Seed files are loaded into a fresh in-memory store; nothing is persisted.
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...client import RbacStore
from ...config import RbacLiteConfig, load_config
from ...errors import RbacError
from ...seed import SeedResult, load_seed, read_seed_file

console = Console()


def _load_config() -> RbacLiteConfig:
    """Load configuration, reporting invalid RBACLITE_* values."""
    try:
        return load_config()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)


def _resolve_seed_path(seed_file: Optional[Path], config: RbacLiteConfig) -> Path:
    """Use the argument, falling back to RBACLITE_SEED_FILE."""
    if seed_file is not None:
        return seed_file
    if config.seed_file is None:
        console.print("[red]Error:[/red] No seed file given and RBACLITE_SEED_FILE is not set")
        raise typer.Exit(1)
    return config.seed_file


def inspect_command(
    seed_file: Optional[Path] = typer.Argument(
        None,
        help="Seed file (JSON). Defaults to RBACLITE_SEED_FILE",
    ),
) -> None:
    """
    Load a seed file into a fresh store and show its contents.

    Example:
        $ rbaclite inspect roles.json
    """
    config = _load_config()
    path = _resolve_seed_path(seed_file, config)
    console.print(f"\n[bold cyan]Seed: {path}[/bold cyan]\n")

    try:
        seed = read_seed_file(path)
        result = asyncio.run(load_seed(RbacStore(config=config), seed))
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading file:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid seed file:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)
    except RbacError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _print_result(result)


def validate_command(
    seed_file: Optional[Path] = typer.Argument(
        None,
        help="Seed file (JSON). Defaults to RBACLITE_SEED_FILE",
    ),
) -> None:
    """
    Check a seed file without showing its contents.

    Example:
        $ rbaclite validate roles.json
    """
    path = _resolve_seed_path(seed_file, _load_config())

    try:
        seed = read_seed_file(path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading file:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid seed file:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)

    problems = seed.problems()
    if problems:
        for problem in problems:
            console.print(f"[red]✗[/red] {escape(problem)}")
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] {path} is valid "
        f"({len(seed.roles)} roles, {len(seed.permissions)} permissions, {len(seed.grants)} grants)"
    )


def _print_result(result: SeedResult) -> None:
    """Render the loaded records as tables."""
    for title, records in (("Roles", result.roles), ("Permissions", result.permissions)):
        table = Table(title=title)
        table.add_column("ID", style="dim")
        table.add_column("System name", style="cyan")
        table.add_column("Display name")
        table.add_column("Description")
        for record in records.values():
            table.add_row(
                str(record.id),
                record.system_name,
                record.display_name,
                record.description or "",
            )
        console.print(table)
        console.print()

    role_names = {role.id: name for name, role in result.roles.items()}
    permission_names = {permission.id: name for name, permission in result.permissions.items()}

    table = Table(title="Associations")
    table.add_column("ID", style="dim")
    table.add_column("Role", style="cyan")
    table.add_column("Permission", style="cyan")
    for association in result.associations:
        table.add_row(
            str(association.id),
            role_names.get(association.role_id, str(association.role_id)),
            permission_names.get(association.permission_id, str(association.permission_id)),
        )
    console.print(table)
    console.print()
