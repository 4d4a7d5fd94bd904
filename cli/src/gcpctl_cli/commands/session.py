"""Interactive session with the gcloud mode status in the prompt."""

import click
from rich.console import Console
from rich.markup import escape

from gcpctl_core.gcloud import ExternalCommandError
from gcpctl_core.selection import SelectionParseError

from ..context import CliContext, describe_error
from .gcloud import choose_and_activate
from .transports import print_transports

console = Console()
pass_obj = click.pass_obj

QUIT_COMMANDS = ("quit", "exit", "q")

SESSION_HELP = """[bold]Session commands[/bold]
  switch       Choose a configuration or project ({key})
  on / off     Enable or disable gcloud mode
  toggle       Toggle gcloud mode
  refresh      Re-read the active configuration
  status       Show the status line
  transports   List registered transports
  help         Show this help
  quit         Leave the session"""


def _toggle(ctx: CliContext):
    state = "enabled" if ctx.mode.toggle() else "disabled"
    console.print(f"gcloud mode {state}")


def _show_status(ctx: CliContext):
    console.print(escape(ctx.mode.status_line.render() or "(empty)"), highlight=False)


def _show_help(ctx: CliContext):
    console.print(SESSION_HELP.format(key=escape(ctx.mode.keybinding)))


_SESSION_HANDLERS = {
    "switch": lambda ctx: choose_and_activate(ctx.mode, ctx.config.project_limit),
    "on": lambda ctx: ctx.mode.enable(),
    "off": lambda ctx: ctx.mode.disable(),
    "toggle": _toggle,
    "refresh": lambda ctx: ctx.mode.refresh(),
    "status": _show_status,
    "transports": print_transports,
    "help": _show_help,
}


def run_session_command(ctx: CliContext, command: str) -> bool:
    """Run one session command.

    Returns:
        False when the session should end
    """
    command = ctx.mode.keymap.get(command, command)

    if not command:
        return True
    if command in QUIT_COMMANDS:
        return False

    handler = _SESSION_HANDLERS.get(command)
    if handler is None:
        console.print(f"[yellow]Unknown command '{escape(command)}'. Type 'help'.[/yellow]")
        return True

    try:
        handler(ctx)
    except click.Abort:
        console.print("[yellow]Cancelled[/yellow]")
    except (ExternalCommandError, SelectionParseError, ValueError) as e:
        console.print(f"[red]Error: {escape(describe_error(e))}[/red]")

    return True


@click.command()
@click.option('--enable/--no-enable', default=None, help='Start with gcloud mode on or off')
@pass_obj
def session(ctx: CliContext, enable):
    """Interactive session showing the active configuration in the prompt"""
    if enable is None:
        enable = ctx.config.enable_on_start

    if enable:
        run_session_command(ctx, "on")

    console.print(f"[dim]Type 'help' for commands, '{escape(ctx.mode.keybinding)}' to switch.[/dim]")

    while True:
        prompt = f"gcpctl{ctx.mode.status_line.render()}>"
        try:
            line = click.prompt(prompt, default="", show_default=False, prompt_suffix=" ")
        except click.Abort:
            break
        if not run_session_command(ctx, line.strip()):
            break
