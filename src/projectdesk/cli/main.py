"""Main CLI entry point for ProjectDesk."""

import logging
from typing import List, Optional

import typer
from rich.markup import escape

from projectdesk.cli.commands import session
from projectdesk.cli.utils import console, dispatch, execute, render_result
from projectdesk.models import (
    ListCommand,
    ShowCommand,
    ActiveCommand,
    SaveCommand,
    LoadCommand,
    RenameCommand,
    DeleteCommand,
    ModifiedCommand,
    CloseCommand,
    NewCommand,
    SwitchCommand,
)

app = typer.Typer(
    name="projects",
    help="ProjectDesk - named snapshots of open files and working directory",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    ProjectDesk - named snapshots of open files and working directory
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        # No subcommand lists the projects
        render_result(execute(ListCommand()))


app.add_typer(session.app, name="session", help="Live session commands")


@app.command(name="list")
def list_projects():
    """List all projects. An arrow marks the active project."""
    render_result(execute(ListCommand()))


@app.command()
def show(
    name: Optional[str] = typer.Argument(None, help="Project name (default: active)"),
):
    """Show information about a project."""
    render_result(execute(ShowCommand(name=name)))


app.command(name="info", help="Show information about a project.")(show)


@app.command()
def active():
    """Show the name of the active project."""
    result = execute(ActiveCommand())
    console.print(escape(result.message))


@app.command()
def save(
    name: Optional[str] = typer.Argument(None, help="Project name (default: active)"),
):
    """Save open files and working directory under a project."""
    render_result(execute(SaveCommand(name=name)))


@app.command()
def load(
    name: Optional[str] = typer.Argument(None, help="Project name (default: default)"),
):
    """Restore a project's open files and working directory."""
    render_result(execute(LoadCommand(name=name)))


app.command(name="open", help="Restore a project (same as load).")(load)


@app.command()
def rename(
    names: List[str] = typer.Argument(..., help="[OLD_NAME] NEW_NAME"),
):
    """Rename the active project, or OLD_NAME if given."""
    render_result(dispatch(["rename", *names]))


@app.command()
def delete(
    name: Optional[str] = typer.Argument(None, help="Project name (default: active)"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Force deletion without confirmation"
    ),
):
    """Delete a project."""
    if not force:
        target = name or "the active project"
        confirm = typer.confirm(f"Are you sure you want to delete {target}?")
        if not confirm:
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    render_result(execute(DeleteCommand(name=name)))


@app.command()
def modified():
    """Check whether the open files changed since the active project was saved."""
    result = execute(ModifiedCommand())
    console.print(escape(result.message))


@app.command()
def close():
    """Save the active project if modified, then close all files."""
    render_result(execute(CloseCommand()))


@app.command()
def new(
    name: str = typer.Argument(..., help="Name of the new project"),
):
    """Close the session and start a new, empty project."""
    render_result(execute(NewCommand(name=name)))


@app.command()
def switch(
    name: str = typer.Argument(..., help="Project to switch to"),
):
    """Save the active project, then load NAME."""
    render_result(execute(SwitchCommand(name=name)))


@app.command()
def run(
    tokens: Optional[List[str]] = typer.Argument(None, help="Command and arguments"),
):
    """Run a command from raw tokens, e.g. 'run web:api'."""
    render_result(dispatch(tokens or []))


@app.command()
def version():
    """Show ProjectDesk version."""
    from projectdesk import __version__

    typer.echo(f"ProjectDesk version {__version__}")


@app.command()
def status():
    """Show ProjectDesk status including configuration and environment variables."""
    from projectdesk.config import Config
    from projectdesk.cli.utils import get_desk, show_env_config

    config = Config()
    config.load()
    desk = get_desk()

    console.print("\n[bold]ProjectDesk Status[/bold]")
    console.print(f"Home: {config.home_dir}")
    console.print(f"Store: {config.store_path}")
    console.print(f"Session: {config.session_path}")
    console.print(f"Completion: {config.completion_path or 'disabled'}")
    console.print(f"Projects: {len(desk.registry.names)}")
    console.print(f"Active Project: {desk.registry.current_name()}")

    show_env_config()


if __name__ == "__main__":
    app()
