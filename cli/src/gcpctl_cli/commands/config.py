"""Configuration management commands for gcpctl CLI."""

import sys

import click
from rich.console import Console
from rich.markup import escape
import yaml

from ..context import CliContext

console = Console()
pass_obj = click.pass_obj


@click.group('config', invoke_without_command=True)
@click.pass_context
def config_group(click_ctx):
    """Manage gcpctl configuration settings"""
    if click_ctx.invoked_subcommand is None:
        click_ctx.invoke(config_show)


@config_group.command('show')
@click.option('--key', '-k', help='Show specific config key')
@pass_obj
def config_show(ctx: CliContext, key):
    """Show current configuration"""
    if key:
        value = ctx.config.get(key)
        if value is None:
            console.print(f"[yellow]Key '{escape(key)}' not found[/yellow]")
        else:
            console.print(f"[bold]{escape(key)}:[/bold] {escape(str(value))}")
    else:
        console.print("[bold]gcpctl Configuration[/bold]\n")
        console.print(f"Config file: {ctx.config.config_path}\n")
        console.print(escape(yaml.dump(ctx.config.as_dict(), default_flow_style=False, sort_keys=False)))


@config_group.command('set')
@click.argument('key')
@click.argument('value')
@pass_obj
def config_set(ctx: CliContext, key, value):
    """Set a configuration value

    Examples:
        gcpctl config set gcloud.binary /opt/google-cloud-sdk/bin/gcloud
        gcpctl config set projects.limit 50
        gcpctl config set mode.keybinding "C-c p"
    """
    # Parse value type
    if value.lower() == 'true':
        value = True
    elif value.lower() == 'false':
        value = False
    elif value.lower() in ('none', 'null'):
        value = None
    elif value.isdigit():
        value = int(value)
    else:
        try:
            value = float(value)
        except ValueError:
            pass  # Keep as string

    ctx.config.set(key, value)
    console.print(f"[green]✓[/green] Set {escape(key)} = {escape(str(value))}")


@config_group.command('get')
@click.argument('key')
@pass_obj
def config_get(ctx: CliContext, key):
    """Get a configuration value"""
    value = ctx.config.get(key)
    if value is None:
        console.print(f"[yellow]Key '{escape(key)}' not found[/yellow]")
        sys.exit(1)
    else:
        click.echo(value)


@config_group.command('path')
@pass_obj
def config_path(ctx: CliContext):
    """Show configuration file path"""
    click.echo(ctx.config.config_path)


@config_group.command('init')
@click.option('--force', '-f', is_flag=True, help='Overwrite existing config')
@pass_obj
def config_init(ctx: CliContext, force):
    """Create config file with defaults"""
    if ctx.config.config_path.exists() and not force:
        console.print(f"[yellow]Config file already exists:[/yellow] {ctx.config.config_path}")
        console.print("[dim]Use --force to overwrite with defaults[/dim]")
        return

    ctx.config.save()
    console.print(f"[green]✓[/green] Created config file: {ctx.config.config_path}")


@config_group.command('edit')
@pass_obj
def config_edit(ctx: CliContext):
    """Open configuration file in editor"""
    import os
    import subprocess

    if not ctx.config.config_path.exists():
        ctx.config.save()
        console.print(f"[dim]Created config file: {ctx.config.config_path}[/dim]")

    editor = os.environ.get('EDITOR', 'vim')
    try:
        subprocess.run([editor, str(ctx.config.config_path)])
    except FileNotFoundError:
        console.print(f"[red]Editor '{escape(editor)}' not found[/red]")
        console.print(f"[dim]Set EDITOR environment variable or edit manually: {ctx.config.config_path}[/dim]")
