"""Engine Yard CLI - Environments command"""

import click

from engineyard.base import EnvironmentCommand
from engineyard.exceptions import NoAppError, NoRemotesError


class EnvironmentsCommand(EnvironmentCommand):
    """List apps and their environments."""

    def __init__(self, context, all_apps: bool = False):
        super().__init__(context)
        self.all_apps = all_apps

    def execute(self) -> None:
        apps = self.resolver.get_apps(self.all_apps)
        config = self.context.config

        if not apps and not self.all_apps:
            self.ui.warn(self._no_app_message())

        self.ui.print_envs(apps, config.default_environment, config.endpoint)

    def _no_app_message(self) -> str:
        try:
            urls = self.context.repo.urls
        except NoRemotesError as e:
            return e.format_message()
        return NoAppError(urls, self.context.config.endpoint).format_message()


@click.command("environments")
@click.option("-a", "--all", "all_apps", is_flag=True, help="Show environments of all apps")
@click.pass_obj
def environments(context, all_apps):
    """
    List environments.

    \b
    By default, environments for this app are displayed. With --all, all
    environments are displayed instead.
    """
    EnvironmentsCommand(context, all_apps=all_apps).run()
