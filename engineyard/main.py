#!/usr/bin/env python3
"""Engine Yard CLI - Main entry point"""

import functools
import os
import sys

from rich.console import Console
from rich.markup import escape

# Rich-Click: colored help output
import rich_click as click

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = False
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.MAX_WIDTH = 100

click.rich_click.STYLE_COMMAND = "bold cyan"
click.rich_click.STYLE_OPTION = "bold magenta"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_ARGUMENT = "bold yellow"
click.rich_click.STYLE_USAGE = "bold yellow"
click.rich_click.STYLE_METAVAR = "bold yellow"
click.rich_click.STYLE_OPTIONS_PANEL_BORDER = "cyan"
click.rich_click.STYLE_COMMANDS_PANEL_BORDER = "cyan"
click.rich_click.ERRORS_EPILOGUE = ""

from engineyard.commands import (  # noqa: E402
    deploy,
    environments,
    logs,
    rebuild,
    recipes,
    rollback,
    ssh,
    web,
)
from engineyard.commands.help import help_command  # noqa: E402
from engineyard.commands.version import version, version_string  # noqa: E402
from engineyard.context import EYContext  # noqa: E402
from engineyard.exceptions import EngineYardError  # noqa: E402
from engineyard.ui import UI  # noqa: E402

err_console = Console(stderr=True, highlight=False)


def handle_cli_errors(func):
    """Decorator to handle errors raised outside of a command's own handling."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except EngineYardError as e:
            err_console.print(f"[bold red]✗ {escape(e.format_message())}[/bold red]")
            sys.exit(1)
        except KeyboardInterrupt:
            err_console.print("\n[yellow]⚠ Operation cancelled by user[/yellow]")
            sys.exit(130)

    return wrapper


class EYGroup(click.RichGroup):
    """Command table with aliases (e.g. 'envs' for 'environments')."""

    command_aliases = {
        "envs": "environments",
    }

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, self.command_aliases.get(cmd_name, cmd_name))


def _print_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    ui = ctx.obj.ui if ctx.obj else UI()
    ui.say(version_string())
    ctx.exit()


@click.group("ey", cls=EYGroup, invoke_without_command=True)
@click.option(
    "-v",
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help="Print version number.",
)
@click.option("--verbose", is_flag=True, help="Show debug output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """
    Engine Yard Cloud command line client.

    \b
    Quick Start:
      ey environments        # Environments of the app in this directory
      ey deploy              # Deploy the current branch
      ey ssh -e production   # Log in to the app master
      ey logs                # Latest configuration logs
    """
    if ctx.obj is None:
        ctx.obj = EYContext.from_environment()
    if verbose or os.environ.get("DEBUG"):
        ctx.obj.ui.verbose = True

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Static command table
cli.add_command(deploy.deploy)
cli.add_command(environments.environments)
cli.add_command(rebuild.rebuild)
cli.add_command(rollback.rollback)
cli.add_command(ssh.ssh)
cli.add_command(logs.logs)
cli.add_command(recipes.recipes)
cli.add_command(web.web)
cli.add_command(version)
cli.add_command(help_command)


@handle_cli_errors
def main():
    """Main entry point with error handling."""
    cli()


if __name__ == "__main__":
    main()
