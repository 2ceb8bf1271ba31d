"""Engine Yard CLI - Rebuild command"""

import click

from engineyard.base import EnvironmentCommand
from engineyard.exceptions import EngineYardError


class RebuildCommand(EnvironmentCommand):
    """Rerun the main configuration on every server of an environment."""

    def execute(self) -> None:
        env = self.fetch_environment()
        self.init_logger("rebuild", env.name)
        self.ui.debug(f"Rebuilding {env.name}")
        if not env.rebuild():
            raise EngineYardError(f"Rebuild of {env.name} failed")
        self.ui.info(f"Rebuild started for {env.name}")


@click.command("rebuild")
@click.option("-e", "--environment", help="Environment to rebuild")
@click.pass_obj
def rebuild(context, environment):
    """
    Rebuild specified environment.

    \b
    The main configuration run occurs on all servers. Mainly used to fix
    failed configuration of new or existing servers, or to update servers
    to the latest stack. Uploaded recipes run after the main configuration
    run has completed successfully.
    """
    RebuildCommand(context, environment).run()
