"""Engine Yard CLI - Help command"""

from typing import List

import click

from engineyard.base import BaseCommand
from engineyard.exceptions import NoCommandError


class HelpCommand(BaseCommand):
    """Describe all commands, or one command inside any subcommand group."""

    def __init__(self, context, root_ctx: click.Context, commands: List[str]):
        super().__init__(context)
        self.root_ctx = root_ctx
        self.commands = commands

    def execute(self) -> None:
        command = self.root_ctx.command
        cmd_ctx = self.root_ctx

        for name in self.commands:
            sub = command.get_command(cmd_ctx, name) if isinstance(command, click.Group) else None
            if sub is None:
                raise NoCommandError(name)
            cmd_ctx = sub.context_class(sub, info_name=sub.name, parent=cmd_ctx)
            command = sub

        click.echo(command.get_help(cmd_ctx))
        if not self.commands:
            self.ui.say(
                f"See '{self.root_ctx.info_name} help [COMMAND]' "
                "for more information on a specific command."
            )


@click.command("help")
@click.argument("commands", nargs=-1)
@click.pass_context
def help_command(ctx, commands):
    """Describe all commands or one specific command."""
    HelpCommand(ctx.obj, ctx.find_root(), list(commands)).run()
