"""Engine Yard CLI - Logs command"""

import click

from engineyard.base import EnvironmentCommand


class LogsCommand(EnvironmentCommand):
    """Print the latest configuration logs of each server."""

    def execute(self) -> None:
        env = self.fetch_environment()
        for log in env.logs():
            self.ui.info(log.instance_name)

            if log.main:
                self.ui.info(f"Main logs for {env.name}:")
                self.ui.say(log.main)

            if log.custom:
                self.ui.info(f"Custom logs for {env.name}:")
                self.ui.say(log.custom)


@click.command("logs")
@click.option("-e", "--environment", help="Environment with the interesting logs")
@click.pass_obj
def logs(context, environment):
    """
    Retrieve the latest logs for an environment.

    \b
    Displays configuration logs for all servers in the environment. If
    recipes were uploaded and run, their logs are shown beneath the main
    configuration logs.
    """
    LogsCommand(context, environment).run()
