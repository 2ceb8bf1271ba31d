"""
Environment Command Base Class

Base class for commands that act on one environment.
"""

from typing import Optional

from engineyard.base.base_command import BaseCommand
from engineyard.core import EnvironmentResolver
from engineyard.models import App, Environment
from engineyard.services.server_side_service import INSTALLING, UPGRADING


class EnvironmentCommand(BaseCommand):
    """
    Base class for environment-specific commands.

    Provides:
    - App/environment resolution
    - Server-side component check with progress messages
    """

    def __init__(self, context, environment_name: Optional[str] = None):
        super().__init__(context)
        self.environment_name = environment_name
        self.resolver = EnvironmentResolver(context)

    @property
    def api(self):
        return self.context.ensure_api()

    def fetch_environment(self, app: Optional[App] = None) -> Environment:
        return self.resolver.fetch_environment(self.environment_name, app)

    def loudly_check_server_side(self, environment: Environment) -> None:
        """Ensure the server-side component, telling the user about slow steps."""
        environment.ensure_server_component(self._report_server_side)

    def _report_server_side(self, action: str) -> None:
        if action == INSTALLING:
            self.ui.warn("Instance does not have server-side component installed")
            self.ui.info("Installing server-side component...")
        elif action == UPGRADING:
            self.ui.info("Upgrading server-side component...")
