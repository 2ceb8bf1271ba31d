"""Engine Yard CLI - Rollback command"""

import click

from engineyard.base import EnvironmentCommand
from engineyard.exceptions import EngineYardError


class RollbackCommand(EnvironmentCommand):
    """Restart app servers on the previous release."""

    def execute(self) -> None:
        app = self.resolver.app_for_repo()
        env = self.fetch_environment()

        self.init_logger("rollback", env.name)
        self.loudly_check_server_side(env)

        self.ui.info(f"Rolling back {env.name}")
        if env.rollback(app):
            self.ui.success("Rollback complete")
        else:
            raise EngineYardError("Rollback failed")


@click.command("rollback")
@click.option("-e", "--environment", help="Environment in which to roll back the current application")
@click.pass_obj
def rollback(context, environment):
    """
    Rollback to the previous deploy.

    \b
    Uses code from the previous deploy in "/data/APP_NAME/releases" on the
    remote servers to restart application servers.
    """
    RollbackCommand(context, environment).run()
