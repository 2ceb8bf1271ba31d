"""Engine Yard CLI - Maintenance page commands"""

import click

from engineyard.base import EnvironmentCommand
from engineyard.exceptions import EngineYardError


class MaintenancePageCommand(EnvironmentCommand):
    """Put up or take down the maintenance page of the current app."""

    def __init__(self, context, environment_name=None, enable: bool = True):
        super().__init__(context, environment_name)
        self.enable = enable

    def execute(self) -> None:
        app = self.resolver.app_for_repo()
        env = self.fetch_environment()

        self.init_logger("web-enable" if self.enable else "web-disable", env.name)
        self.loudly_check_server_side(env)

        if self.enable:
            self.ui.info(f"Putting up maintenance page for '{app.name}' in '{env.name}'")
            ok = env.put_up_maintenance_page(app)
        else:
            self.ui.info(f"Taking down maintenance page for '{app.name}' in '{env.name}'")
            ok = env.take_down_maintenance_page(app)

        if not ok:
            raise EngineYardError("Changing the maintenance page failed")


@click.group("web")
def web():
    """Commands related to maintenance pages."""


@web.command("enable")
@click.option("-e", "--environment", help="Environment on which to put up the maintenance page")
@click.pass_obj
def web_enable(context, environment):
    """
    Turn on maintenance page.

    \b
    The maintenance page is taken from the app currently being deployed, or
    a default page if none is present in the app.
    """
    MaintenancePageCommand(context, environment, enable=True).run()


@web.command("disable")
@click.option("-e", "--environment", help="Environment on which to take down the maintenance page")
@click.pass_obj
def web_disable(context, environment):
    """Turn off maintenance page."""
    MaintenancePageCommand(context, environment, enable=False).run()
