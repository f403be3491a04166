"""Session commands for the ProjectDesk CLI."""

from typing import List

import typer
from rich.markup import escape

from projectdesk.cli.utils import console, get_session
from projectdesk.exceptions import ProjectDeskError

app = typer.Typer(help="Live session commands", invoke_without_command=True)


def fail(error: Exception):
    console.print(f"[red]❌ {escape(str(error))}[/red]")
    raise typer.Exit(1)


@app.callback()
def callback(ctx: typer.Context):
    """Show the session when no subcommand is provided."""
    if ctx.invoked_subcommand is None:
        status()


@app.command()
def status():
    """Show the open files and working directory of the session."""
    session = get_session()
    try:
        files = session.list_open_files()
        directory = session.get_working_directory()
    except ProjectDeskError as e:
        fail(e)

    console.print(f"\n[bold]Working directory:[/bold] {escape(directory)}")
    if not files:
        console.print("[yellow]No open files[/yellow]")
        return
    console.print(f"[bold]Open files ({len(files)}):[/bold]")
    for path in files:
        console.print(f"  {escape(path)}")


@app.command(name="open")
def open_files(
    paths: List[str] = typer.Argument(..., help="Files to open"),
):
    """Open files in the session."""
    session = get_session()
    failed = False
    for path in paths:
        try:
            session.open_file(path)
            console.print(f"[green]✅ Opened '{escape(path)}'[/green]")
        except ProjectDeskError as e:
            fail(e)
        except FileNotFoundError as e:
            console.print(f"[red]❌ {escape(str(e))}[/red]")
            failed = True
    if failed:
        raise typer.Exit(1)


@app.command(name="close")
def close_files():
    """Close every open file without touching the registry."""
    try:
        get_session().close_all_files()
    except ProjectDeskError as e:
        fail(e)
    console.print("[green]✅ All files closed[/green]")


@app.command()
def cd(
    directory: str = typer.Argument(..., help="New working directory"),
):
    """Change the session working directory."""
    try:
        get_session().set_working_directory(directory)
    except ProjectDeskError as e:
        fail(e)
    except (FileNotFoundError, NotADirectoryError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✅ Working directory is now '{escape(directory)}'[/green]")
