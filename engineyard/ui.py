"""
Engine Yard CLI - UI
Console output for all commands, with consistent colors and log mirroring
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from engineyard.logger import CommandLogger

# Color scheme
BRAND_COLOR = "cyan"
SUCCESS_COLOR = "green"
WARNING_COLOR = "yellow"
ERROR_COLOR = "red"


class UI:
    """
    Console front end shared by every command.

    Messages are also written to the active command log, if any.
    """

    def __init__(
        self,
        verbose: bool = False,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.verbose = verbose
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.logger: Optional[CommandLogger] = None

    def attach_logger(self, logger: Optional[CommandLogger]) -> None:
        self.logger = logger

    def _log(self, message: str, level: str) -> None:
        if self.logger:
            self.logger.log(message, level)

    def say(self, message: str) -> None:
        """Print message verbatim."""
        self._log(message, "INFO")
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)

    def info(self, message: str) -> None:
        self._log(message, "INFO")
        self.console.print(f"[bold]{escape(message)}[/bold]", soft_wrap=True)

    def success(self, message: str) -> None:
        self._log(message, "INFO")
        self.console.print(f"[{SUCCESS_COLOR}]✓ {escape(message)}[/{SUCCESS_COLOR}]", soft_wrap=True)

    def warn(self, message: str) -> None:
        self._log(message, "WARNING")
        self.err_console.print(f"[{WARNING_COLOR}]⚠ {escape(message)}[/{WARNING_COLOR}]", soft_wrap=True)

    def error(self, message: str) -> None:
        self.err_console.print(f"[bold {ERROR_COLOR}]✗ {escape(message)}[/bold {ERROR_COLOR}]", soft_wrap=True)

    def debug(self, message: str) -> None:
        """Shown only in verbose mode; always logged."""
        self._log(message, "DEBUG")
        if self.verbose:
            self.console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)

    def print_envs(self, apps: Iterable, default_env_name: Optional[str], endpoint: str) -> None:
        """
        List apps and their environments.

        Args:
            apps: Apps to show
            default_env_name: Environment marked as default in ey.yml
            endpoint: Dashboard URL shown for apps without environments
        """
        for app in apps:
            title = escape(app.name)
            if app.account_name:
                title += f" [dim]({escape(app.account_name)})[/dim]"
            self.console.print(f"[bold {BRAND_COLOR}]{title}[/bold {BRAND_COLOR}]", soft_wrap=True)

            if app.environments:
                for env in app.environments:
                    default_text = " [green](default)[/green]" if env.name == default_env_name else ""
                    noun = "instance" if env.instances_count == 1 else "instances"
                    self.console.print(f"  {escape(env.name)}{default_text}", soft_wrap=True)
                    self.console.print(f"    [dim]{env.instances_count} {noun}[/dim]", soft_wrap=True)
            else:
                self.console.print(
                    "  [dim](This application is not in any environments; "
                    f"you can make one at {escape(endpoint)})[/dim]",
                    soft_wrap=True,
                )
            self.console.print()
