"""Main CLI interface for trashbin using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import ConfigManager, resolve_app_paths
from ..core import TrashSession
from ..errors import NoHistoryError, TrashError
from ..history import History
from ..utils.logging import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def _fail(message: str) -> None:
    console.print(f"[bold red]✗ trash error:[/bold red] {escape(message)}")
    sys.exit(1)


def _open_session(ctx: click.Context) -> TrashSession:
    """Load configuration, set up logging and open a session for a command."""
    verbose = ctx.obj["verbose"]
    explain = ctx.obj["explain"]

    try:
        config = ConfigManager(ctx.obj["config_path"]).load()
    except ValueError as e:
        _fail(str(e))

    setup_logging(
        level="DEBUG" if verbose or explain else config.logging.level,
        log_dir=config.logging.log_dir,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        file_enabled=config.logging.file_enabled,
    )

    try:
        session = TrashSession.from_config(config, explain=explain)
        logger.debug(
            f"Ledger: {session.paths.ledger_path} - Staging: {session.paths.staging_path}"
        )
        return session
    except TrashError as e:
        _fail(str(e))


def render_history(history: History) -> list[Table]:
    """Build one table per batch, oldest first, numbered from 1."""
    tables = []
    for number, batch in enumerate(history, start=1):
        table = Table(title=f"#{number}", show_header=True, header_style="bold cyan", title_justify="left")
        table.add_column("Original", style="green")
        table.add_column("Staged", style="magenta")
        for pair in batch:
            table.add_row(escape(str(pair.original)), escape(str(pair.staged)))
        tables.append(table)
    return tables


@click.group()
@click.version_option(version=__version__, prog_name="trash")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option("-v", "--verbose", is_flag=True, help="Show full output detailing all moves")
@click.option(
    "-e",
    "--explain",
    is_flag=True,
    help="Do not take action, only explain what would occur. Same log level as verbose.",
)
@click.pass_context
def cli(ctx, config: Optional[Path], verbose: bool, explain: bool):
    """
    trash - move files into a staging area instead of deleting them.

    Everything trashed is recorded so the last command can be undone.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["explain"] = explain


@cli.command()
@click.argument("patterns", nargs=-1, required=True)
@click.pass_context
def remove(ctx, patterns: tuple[str, ...]):
    """
    Move files or directories matching PATTERNS to the trash.

    Every argument is treated as a glob pattern.
    """
    session = _open_session(ctx)
    result = session.remove(patterns)

    try:
        session.save()
    except TrashError as e:
        _fail(str(e))

    if session.explain:
        console.print(f"[cyan]Explain mode:[/cyan] {len(result.targets)} target(s) would be trashed")
    elif result.batch:
        console.print(f"[green]✓ Trashed {len(result.batch)} file(s)[/green]")
    elif not result.targets:
        console.print("[yellow]⚠ Nothing matched[/yellow]")

    if not result.success:
        _fail(f"{len(result.failures)} target(s) could not be trashed")


cli.add_command(remove, name="rm")


@cli.command()
@click.pass_context
def undo(ctx):
    """Undo the last trash command."""
    session = _open_session(ctx)

    try:
        result = session.undo()
    except NoHistoryError as e:
        _fail(str(e))

    try:
        session.save()
    except TrashError as e:
        _fail(str(e))

    if result.dry_run:
        console.print(f"[cyan]Explain mode:[/cyan] {len(result.restored)} file(s) would be restored")
    else:
        console.print(f"[green]✓ Restored {len(result.restored)} file(s)[/green]")

    if not result.success:
        _fail(
            f"{len(result.unresolved)} file(s) could not be restored and were kept in history"
        )


@cli.command()
@click.pass_context
def view(ctx):
    """Show the trash history, oldest first."""
    session = _open_session(ctx)

    if session.history.is_empty():
        console.print("[yellow]History is empty[/yellow]")
        return

    for table in render_history(session.history):
        console.print(table)


@cli.group(name="config")
def config_group():
    """Inspect trashbin configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration and resolved paths."""
    try:
        config_manager = ConfigManager(ctx.obj["config_path"])
        config = config_manager.load()
        paths = resolve_app_paths(config.paths, prepare=False)
    except (ValueError, TrashError) as e:
        _fail(str(e))

    console.print("\n[bold cyan]trashbin Configuration[/bold cyan]\n")

    console.print("[bold]Paths:[/bold]")
    console.print(f"  Ledger:  {escape(str(paths.ledger_path))}")
    console.print(f"  Staging: {escape(str(paths.staging_path))}")
    console.print(f"  Reset orphaned staging: {config.paths.reset_orphaned_staging}")

    console.print("\n[bold]Naming:[/bold]")
    console.print(f"  Preserve extension: {config.naming.preserve_extension}")

    console.print("\n[bold]Logging:[/bold]")
    console.print(f"  Level: {config.logging.level}")
    console.print(f"  File logging: {config.logging.file_enabled}")
    console.print(f"  Log dir: {escape(str(config.logging.log_dir))}")

    console.print(f"\n[dim]Config file: {config_manager.config_path or 'defaults'}[/dim]")


def main():
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
