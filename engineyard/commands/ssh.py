"""Engine Yard CLI - SSH command"""

import click

from engineyard.base import EnvironmentCommand
from engineyard.services import SSHService


class SSHCommand(EnvironmentCommand):
    """Replace this process with an ssh session to the app master."""

    def execute(self) -> None:
        env = self.fetch_environment()
        app_master = env.require_app_master()
        self.ui.debug(f"Connecting to {env.username}@{app_master.public_hostname}")
        SSHService(env.ssh_config).open_session(app_master.public_hostname)


@click.command("ssh")
@click.option("-e", "--environment", help="Environment to ssh into")
@click.pass_obj
def ssh(context, environment):
    """
    Open an ssh session.

    \b
    If the environment contains just one server, a session to it is opened.
    For clusters, the session is opened to the application master.
    """
    SSHCommand(context, environment).run()
