"""Engine Yard CLI - Version command"""

import click

from engineyard.base import BaseCommand
from engineyard.constants import VERSION


def version_string() -> str:
    return f"engineyard version {VERSION}"


class VersionCommand(BaseCommand):
    """Print the version number."""

    def execute(self) -> None:
        self.ui.say(version_string())


@click.command("version")
@click.pass_obj
def version(context):
    """Print version number."""
    VersionCommand(context).run()
