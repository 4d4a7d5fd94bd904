"""Main entry point for gcpctl CLI.

This module provides the CLI interface to gcpctl.
All business logic is in gcpctl-core; this package only handles
CLI presentation (click commands, rich output).
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from gcpctl_core import __version__

from .context import CliContext


def setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


@click.group()
@click.version_option(version=__version__, prog_name="gcpctl")
@click.option('--debug', is_flag=True, help='Log gcloud calls and state changes')
@click.pass_context
def cli(ctx, debug):
    """gcpctl - track and switch the active gcloud configuration

    Examples:
        gcpctl status                        # [GCP:project(account,config)]
        gcpctl switch                        # Pick a configuration or project
        gcpctl activate config:staging       # Activate a configuration
        gcpctl connect gcloud-ssh my-vm      # SSH into a Compute Engine VM
        gcpctl session                       # Interactive prompt with status
    """
    setup_logging(debug)
    if ctx.obj is None:
        ctx.obj = CliContext.create()


# Import and register commands
from .commands import (
    status, current, list_cmd, projects, activate, switch,
    transports, connect, session, config_group,
)

# Configuration and project commands
cli.add_command(status)
cli.add_command(current)
cli.add_command(list_cmd, name="list")
cli.add_command(projects)
cli.add_command(activate)
cli.add_command(switch)

# Transport commands
cli.add_command(transports)
cli.add_command(connect)

cli.add_command(session)

cli.add_command(config_group, name="config")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
