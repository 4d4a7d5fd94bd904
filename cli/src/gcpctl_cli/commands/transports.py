"""Remote transport commands for gcpctl CLI."""

import shlex
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..context import CliContext

console = Console()
pass_obj = click.pass_obj


def print_transports(ctx: CliContext):
    table = Table()
    table.add_column("Method", style="cyan")
    table.add_column("Login command")
    table.add_column("Remote shell", style="dim")

    for definition in ctx.mode.transports:
        table.add_row(
            definition.method_name,
            escape(" ".join([definition.login_program, *definition.login_args])),
            escape(" ".join([definition.remote_shell, *definition.remote_shell_args])),
        )

    console.print(table)


@click.command()
@pass_obj
def transports(ctx: CliContext):
    """List registered remote-access transports"""
    ctx.mode.register_transports()
    print_transports(ctx)


@click.command()
@click.argument('method')
@click.argument('host', required=False)
@click.option('--user', '-u', help='Remote user')
@click.option('--command', '-c', 'remote_cmd', help='Run a command through the remote shell and exit')
@click.option('--dry-run', is_flag=True, help='Print the command instead of running it')
@pass_obj
def connect(ctx: CliContext, method, host, user, remote_cmd, dry_run):
    """Open a remote session through a transport

    Examples:
        gcpctl connect gcloud-shell
        gcpctl connect gcloud-ssh my-vm
        gcpctl connect gcloud-ssh my-vm -u root -c 'uptime'
    """
    ctx.mode.register_transports()

    try:
        if remote_cmd:
            cmd = ctx.connection.remote_command(method, remote_cmd, host=host, user=user)
        else:
            cmd = ctx.connection.login_command(method, host=host, user=user)
    except KeyError as e:
        console.print(f"[red]Error: {escape(e.args[0])}[/red]")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if dry_run:
        click.echo(shlex.join(cmd))
        return

    try:
        ctx.connection.connect(method, host=host, user=user, command=remote_cmd)
    except FileNotFoundError:
        console.print(f"[red]Error: '{escape(cmd[0])}' not found[/red]")
        sys.exit(1)
