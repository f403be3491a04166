"""Utility functions for CLI commands."""

import os
from typing import Sequence

import typer
from rich.console import Console
from rich.markup import escape

from projectdesk.config import Config
from projectdesk.core.desk import open_desk
from projectdesk.core.dispatcher import CommandResult, Dispatcher
from projectdesk.core.grouping import ProjectGroup, render_groups
from projectdesk.core.session import StateFileSession
from projectdesk.exceptions import ProjectDeskError
from projectdesk.models import BaseCommand, ListCommand, Project, ShowCommand
from projectdesk.utils.name_validator import InvalidNameError

console = Console()


def get_desk() -> Dispatcher:
    """Open the registry from the configured home directory."""
    try:
        return open_desk()
    except ProjectDeskError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)


def get_session() -> StateFileSession:
    """Get the file-backed session from the configured home directory."""
    config = Config()
    return StateFileSession(config.session_path)


def execute(command: BaseCommand) -> CommandResult:
    """Execute a command, exiting with status 1 on a structural error."""
    desk = get_desk()
    try:
        return desk.execute(command)
    except (ProjectDeskError, InvalidNameError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)


def dispatch(tokens: Sequence[str]) -> CommandResult:
    """Parse and execute raw tokens, exiting with status 1 on a structural error."""
    desk = get_desk()
    try:
        return desk.dispatch(tokens)
    except (ProjectDeskError, InvalidNameError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)


def print_groups(groups: Sequence[ProjectGroup]) -> None:
    """Print the grouped project listing, highlighting the active project."""
    for line in render_groups(groups):
        text = escape(line)
        if line.startswith("->"):
            console.print(f"[green]{text}[/green]")
        elif line.startswith("* "):
            console.print(f"[bold green]{text}[/bold green]")
        elif line and not line.startswith(" "):
            console.print(f"[bold]{text}[/bold]")
        else:
            console.print(text)


def print_project(project: Project) -> None:
    """Print the details of a project."""
    console.print(f"\n[bold]Project: {escape(project.name)}[/bold]")
    console.print(f"Directory: {escape(project.active_dir)}")
    console.print(f"Open files: {len(project.opened_files)}")
    for path in project.opened_files:
        console.print(f"  {escape(path)}")


def render_result(result: CommandResult) -> None:
    """Print a command result and any warnings it carries."""
    for warning in result.warnings:
        console.print(f"[yellow]⚠️  {escape(warning.message)}[/yellow]")

    if isinstance(result.command, ListCommand):
        console.print(result.message)
        print_groups(result.value)
    elif isinstance(result.command, ShowCommand):
        print_project(result.value)
    else:
        for line in result.message.splitlines():
            console.print(f"[green]✅ {escape(line)}[/green]")


def show_env_config():
    """Display active environment variable configuration."""
    env_vars = {
        "PROJECTDESK_HOME": os.environ.get("PROJECTDESK_HOME"),
        "PROJECTDESK_DEFAULT_DIR": os.environ.get("PROJECTDESK_DEFAULT_DIR"),
        "PROJECTDESK_STORE": os.environ.get("PROJECTDESK_STORE"),
        "PROJECTDESK_COMPLETION_FILE": os.environ.get("PROJECTDESK_COMPLETION_FILE"),
    }

    active = {k: v for k, v in env_vars.items() if v}
    if active:
        console.print("\n[yellow]Active environment variables:[/yellow]")
        for key, value in active.items():
            console.print(f"  {key}={value}")
    else:
        console.print("\n[dim]No ProjectDesk environment variables set[/dim]")
