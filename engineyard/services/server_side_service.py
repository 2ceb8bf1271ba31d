"""
Server-side Component Service

Drives the engineyard-serverside agent on an environment's app master.
Deploys, rollbacks and maintenance pages all run through it over SSH.
"""

import shlex
from typing import Callable, List, Optional

from engineyard.constants import (
    CHECK_MISSING,
    CHECK_OK,
    CHECK_OUTDATED,
    CHECK_SSH_FAILED,
    SERVER_SIDE_BIN,
    SERVER_SIDE_GEM,
    SERVER_SIDE_GEM_BIN,
    SERVER_SIDE_VERSION,
)
from engineyard.exceptions import ServerSideError
from engineyard.models.ssh import SSHConfig
from engineyard.services.ssh_service import SSHService

INSTALLING = "installing"
UPGRADING = "upgrading"


class ServerSideService:
    """Runs engineyard-serverside commands on one host."""

    def __init__(self, host: str, ssh_config: SSHConfig, ssh_service: Optional[SSHService] = None):
        self.host = host
        self.ssh_service = ssh_service or SSHService(ssh_config)

    def check_command(self) -> str:
        """Shell snippet exiting 0 (current), 104 (missing) or 70 (outdated)."""
        gem = SERVER_SIDE_GEM_BIN
        return (
            f"if ! {gem} list {SERVER_SIDE_GEM} -i > /dev/null; then exit {CHECK_MISSING}; "
            f"elif ! {gem} list {SERVER_SIDE_GEM} -i -v {SERVER_SIDE_VERSION} > /dev/null; "
            f"then exit {CHECK_OUTDATED}; fi"
        )

    def install_command(self) -> str:
        return (
            f"sudo sh -c '{SERVER_SIDE_GEM_BIN} install {SERVER_SIDE_GEM} "
            f"--no-rdoc --no-ri -v {SERVER_SIDE_VERSION}'"
        )

    def ensure_present(self, callback: Optional[Callable[[str], None]] = None) -> None:
        """
        Make sure the pinned server-side version is installed.

        Args:
            callback: Called with "installing" or "upgrading" before slow work

        Raises:
            ServerSideError: If SSH fails or the install does not succeed
        """
        result = self.ssh_service.execute_command(self.host, self.check_command())

        if result.returncode == CHECK_OK:
            return
        if result.returncode == CHECK_SSH_FAILED:
            raise ServerSideError(f"SSH connection to {self.host} failed")

        if result.returncode == CHECK_MISSING:
            action = INSTALLING
        elif result.returncode == CHECK_OUTDATED:
            action = UPGRADING
        else:
            raise ServerSideError(
                f"Could not check the server-side component on {self.host}",
                context=result.output or f"exit status {result.returncode}",
            )

        if callback:
            callback(action)

        install = self.ssh_service.execute_command(self.host, self.install_command())
        if install.is_failure:
            raise ServerSideError(
                f"Installing {SERVER_SIDE_GEM} {SERVER_SIDE_VERSION} on {self.host} failed",
                context=install.output or None,
            )

    def build_command(self, action: List[str], app_name: str, options: List[str]) -> str:
        argv = [SERVER_SIDE_BIN, f"_{SERVER_SIDE_VERSION}_", "deploy", *action, "--app", app_name, *options]
        return shlex.join(argv)

    def run(self, action: List[str], app_name: str, options: List[str]) -> bool:
        """Run a server-side command, streaming its output to the terminal."""
        command = self.build_command(action, app_name, options)
        result = self.ssh_service.execute_command(self.host, command, capture_output=False)
        return result.is_success

    def deploy(
        self,
        app_name: str,
        repository_uri: str,
        ref: str,
        framework_env: str,
        instances: List[str],
        migrate: Optional[str] = None,
    ) -> bool:
        options = [
            "--repo", repository_uri,
            "--branch", ref,
            "--framework-env", framework_env,
        ]
        if instances:
            options.extend(["--instances", *instances])
        if migrate:
            options.extend(["--migrate", migrate])
        return self.run([], app_name, options)

    def rollback(self, app_name: str, framework_env: str, instances: List[str]) -> bool:
        options = ["--framework-env", framework_env]
        if instances:
            options.extend(["--instances", *instances])
        return self.run(["rollback"], app_name, options)

    def enable_maintenance_page(self, app_name: str, instances: List[str]) -> bool:
        options = ["--instances", *instances] if instances else []
        return self.run(["enable_maintenance_page"], app_name, options)

    def disable_maintenance_page(self, app_name: str, instances: List[str]) -> bool:
        options = ["--instances", *instances] if instances else []
        return self.run(["disable_maintenance_page"], app_name, options)
