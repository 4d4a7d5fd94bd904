"""Configuration and project switching commands for gcpctl CLI."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gcpctl_core.mode import GcloudMode
from gcpctl_core.selection import ConfigurationEntry, parse_selection

from ..context import CliContext, handle_errors

console = Console()
pass_obj = click.pass_obj


def prompt_selection(entries):
    """Interactive single-choice menu over selection keys."""
    console.print("\n[bold]Select configuration or project:[/bold]")

    for i, key in enumerate(entries, 1):
        entry = parse_selection(key)
        if isinstance(entry, ConfigurationEntry):
            label = f"[cyan]config[/cyan]   {escape(entry.name)}"
        else:
            label = f"[magenta]project[/magenta]  {escape(entry.display_name)} [dim]({escape(entry.project_id)})[/dim]"
        console.print(f"  [{i}] {label}", highlight=False)

    choice = click.prompt(
        f"\nEnter choice (1-{len(entries)})",
        type=click.IntRange(1, len(entries)),
    )
    return entries[choice - 1]


def choose_and_activate(mode: GcloudMode, limit=None) -> bool:
    """List entries, let the user pick one, and activate it.

    Returns:
        True if something was activated
    """
    with console.status("Listing configurations and projects..."):
        entries = mode.selection_list(limit)

    if not entries:
        console.print("[yellow]No configurations or projects found.[/yellow]")
        return False

    selection = prompt_selection(entries)
    mode.activate(selection)
    console.print(f"[green]✓[/green] Activated {escape(selection)}")
    console.print(escape(mode.status_text.strip()), highlight=False)
    return True


@click.command()
@pass_obj
@handle_errors
def status(ctx: CliContext):
    """Print the status segment for the active configuration

    Suitable for embedding in a shell prompt:
        PS1='$(gcpctl status)\\$ '
    """
    ctx.mode.enable()
    click.echo(ctx.mode.status_line.render())


@click.command()
@pass_obj
@handle_errors
def current(ctx: CliContext):
    """Show the active configuration"""
    state = ctx.mode.refresh()

    if not state.is_set:
        console.print("[yellow]No active gcloud configuration.[/yellow]")
        console.print("[dim]Create one with 'gcloud init'[/dim]")
        return

    table = Table(title="Active gcloud configuration")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Configuration", escape(state.config_name))
    table.add_row("Project", escape(state.project_id))
    table.add_row("Account", escape(state.account))
    table.add_row("Region", escape(state.region))

    console.print(table)


@click.command()
@click.option('--limit', '-l', type=click.IntRange(min=1), help='Maximum number of projects to list')
@pass_obj
@handle_errors
def list_cmd(ctx: CliContext, limit):
    """List selectable configurations and projects"""
    for key in ctx.mode.selection_list(limit or ctx.config.project_limit):
        click.echo(key)


@click.command()
@click.option('--limit', '-l', type=click.IntRange(min=1), help='Maximum number of projects to list')
@pass_obj
@handle_errors
def projects(ctx: CliContext, limit):
    """List projects visible to the active account"""
    with console.status("Listing projects..."):
        rows = ctx.mode.reader.list_projects(limit or ctx.config.project_limit)

    if not rows:
        console.print("[yellow]No projects found.[/yellow]")
        return

    table = Table()
    table.add_column("Name")
    table.add_column("Project ID", style="cyan")

    for project in rows:
        table.add_row(escape(project.name), escape(project.project_id))

    console.print(table)


@click.command()
@click.argument('selection')
@pass_obj
@handle_errors
def activate(ctx: CliContext, selection):
    """Activate a configuration or project

    Examples:
        gcpctl activate config:staging
        gcpctl activate "project:My Project|my-proj-123"
    """
    ctx.mode.activate(selection)
    console.print(f"[green]✓[/green] Activated {escape(selection)}")
    console.print(escape(ctx.mode.status_text.strip()), highlight=False)


@click.command()
@click.option('--limit', '-l', type=click.IntRange(min=1), help='Maximum number of projects to offer')
@pass_obj
@handle_errors
def switch(ctx: CliContext, limit):
    """Choose a configuration or project interactively"""
    choose_and_activate(ctx.mode, limit or ctx.config.project_limit)
