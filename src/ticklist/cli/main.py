"""ticklist CLI — the main entry point."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ticklist import __version__
from ticklist.errors import InvalidIndexError

app = typer.Typer(
    name="ticklist",
    help="A single-screen personal task list. Run without a command to open the TUI.",
    rich_markup_mode="rich",
)
console = Console()

# Options from the top-level callback, shared by every command
_options: dict = {}


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Prefs file holding the task list (default from config)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Also log to stderr"),
):
    if version:
        console.print(f"ticklist [dim]v{__version__}[/dim]")
        raise typer.Exit()

    _options["file"] = file
    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        _launch_tui(ephemeral=False, theme=None)


def _configure_logging(verbose: bool) -> None:
    from ticklist.config.settings import get_settings
    from ticklist.logging_setup import setup_logging

    settings = get_settings()
    level = "DEBUG" if verbose else settings.logging.level
    setup_logging(settings.log_path, level=level, console=verbose)


def _get_session(ephemeral: bool = False):
    """Open a TaskSession on the configured (or ``--file``) prefs file."""
    from ticklist.core.session import open_session

    return open_session(prefs_file=_options.get("file"), ephemeral=ephemeral)


@contextmanager
def _position_errors(position: int) -> Iterator[None]:
    """Turn an out-of-range 1-based position into a CLI error."""
    try:
        yield
    except InvalidIndexError as exc:
        console.print(f"[red]No task #{position}.[/red] The list has {exc.length} task(s).")
        raise typer.Exit(1)


def _warn_if_unsaved(session) -> None:
    if session.last_save_ok is False:
        console.print("[yellow]Warning:[/yellow] the change could not be saved to disk.")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("list")
def list_tasks(
    show_all: bool = typer.Option(True, "--all/--open", help="Include completed tasks"),
):
    """Show the task list."""
    session = _get_session()
    tasks = session.tasks

    if not tasks:
        console.print("[dim]No tasks yet.[/dim]")
        console.print('[dim]Add one: ticklist add "Buy milk"[/dim]')
        raise typer.Exit()

    done, total = session.store.counts()
    table = Table(title=f"Tasks ({done}/{total} done)", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Done", justify="center")
    table.add_column("Title")

    for position, task in enumerate(tasks, start=1):
        if task.done and not show_all:
            continue
        mark = "[green]✓[/green]" if task.done else " "
        title = f"[strike dim]{escape(task.title)}[/strike dim]" if task.done else escape(task.title)
        table.add_row(str(position), mark, title)

    console.print(table)


@app.command()
def add(text: str = typer.Argument(..., help="Task title")):
    """Append a new task."""
    session = _get_session()
    before = len(session)
    tasks = session.add(text)
    if len(tasks) == before:
        console.print("[yellow]Nothing added:[/yellow] the title is empty.")
        return
    console.print(f"[green]✓[/green] Added #{len(tasks)}: [bold]{escape(tasks[-1].title)}[/bold]")
    _warn_if_unsaved(session)


@app.command()
def done(position: int = typer.Argument(..., help="Task number from `list`")):
    """Toggle a task between open and done."""
    session = _get_session()
    with _position_errors(position):
        tasks = session.toggle_done(position - 1)
    task = tasks[position - 1]
    state = "[green]done[/green]" if task.done else "[yellow]open[/yellow]"
    console.print(f"#{position} [bold]{escape(task.title)}[/bold] is now {state}.")
    _warn_if_unsaved(session)


@app.command()
def edit(
    position: int = typer.Argument(..., help="Task number from `list`"),
    text: str = typer.Argument(..., help="New title"),
):
    """Change a task's title."""
    session = _get_session()
    with _position_errors(position):
        tasks = session.edit_title(position - 1, text)
    if not text.strip():
        console.print("[yellow]Title unchanged:[/yellow] the new title is empty.")
        return
    title = escape(tasks[position - 1].title)
    console.print(f"[green]✓[/green] #{position} is now [bold]{title}[/bold]")
    _warn_if_unsaved(session)


@app.command("rm")
def remove(position: int = typer.Argument(..., help="Task number from `list`")):
    """Delete a task."""
    session = _get_session()
    with _position_errors(position):
        removed = session.remove(position - 1)
    console.print(f"Deleted [bold]'{escape(removed.task.title)}'[/bold]")
    _warn_if_unsaved(session)


@app.command()
def move(
    from_position: int = typer.Argument(..., metavar="FROM", help="Task number to move"),
    to_position: int = typer.Argument(..., metavar="TO", help="Where it should end up"),
):
    """Move a task so it ends up at position TO."""
    session = _get_session()
    with _position_errors(from_position):
        session.store.get(from_position - 1)
    with _position_errors(to_position):
        tasks = session.reorder(from_position - 1, to_position - 1)
    title = escape(tasks[to_position - 1].title)
    console.print(f"[green]✓[/green] Moved [bold]{title}[/bold] to #{to_position}")
    _warn_if_unsaved(session)


@app.command("clear-done")
def clear_done():
    """Delete every completed task."""
    session = _get_session()
    removed = session.clear_done()
    if not removed:
        console.print("[dim]No completed tasks.[/dim]")
        return
    console.print(f"Deleted {removed} completed task(s).")
    _warn_if_unsaved(session)


@app.command()
def path():
    """Show the prefs file that holds the task list."""
    from ticklist.config.settings import get_settings

    prefs = _options.get("file") or get_settings().prefs_path
    console.print(str(Path(prefs).expanduser().resolve()), soft_wrap=True)


@app.command()
def tui(
    ephemeral: bool = typer.Option(
        False, "--ephemeral", help="Keep the list in memory only; nothing is saved"
    ),
    theme: Optional[str] = typer.Option(None, "--theme", help="Start in 'light' or 'dark' mode"),
):
    """Open the interactive task list."""
    _launch_tui(ephemeral=ephemeral, theme=theme)


def _launch_tui(ephemeral: bool, theme: str | None) -> None:
    from ticklist.tui.app import run_tui
    from ticklist.tui.theme import ThemeMode

    if theme is not None:
        try:
            mode = ThemeMode(theme.strip().lower())
        except ValueError:
            console.print(f"[red]Unknown theme:[/red] {theme} (use 'light' or 'dark')")
            raise typer.Exit(1)
    else:
        mode = None
    run_tui(_get_session(ephemeral=ephemeral), theme=mode)


if __name__ == "__main__":
    app()
