"""CLI context management for gcpctl.

Provides a context object that holds references to core components
and is passed through Click commands via the pass decorator.
"""

import functools
import logging
import sys
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from gcpctl_core import Config, ConnectionManager, GcloudMode, GcloudRunner
from gcpctl_core.gcloud import CommandNotFoundError, ExternalCommandError
from gcpctl_core.selection import SelectionParseError

logger = logging.getLogger(__name__)

console = Console()


@dataclass
class CliContext:
    """Context object passed through Click commands.

    The CLI is the host: it owns the mode (state, status line, transport
    registry) for the lifetime of one invocation or session.
    """
    config: Config
    mode: GcloudMode
    connection: ConnectionManager

    @classmethod
    def create(cls) -> "CliContext":
        """Create a new CLI context with default configuration."""
        config = Config()
        return cls.from_config(config)

    @classmethod
    def from_config(cls, config: Config, runner: GcloudRunner = None) -> "CliContext":
        runner = runner or GcloudRunner(
            binary=config.gcloud_binary,
            timeout_s=config.gcloud_timeout_seconds,
        )
        mode = GcloudMode(runner, keybinding=config.keybinding)
        return cls(
            config=config,
            mode=mode,
            connection=ConnectionManager(mode.transports),
        )


def describe_error(error: Exception) -> str:
    """Single-line diagnostic for a failed action."""
    if isinstance(error, CommandNotFoundError):
        return f"{error} (install: https://cloud.google.com/sdk/docs/install)"
    return str(error)


def handle_errors(func):
    """Report gcloud, selection and config value errors as one line and exit 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ExternalCommandError, SelectionParseError, ValueError) as e:
            logger.debug("Command failed", exc_info=True)
            console.print(f"[red]Error: {escape(describe_error(e))}[/red]")
            sys.exit(1)
    return wrapper
