"""Tests for the server-side component driver."""

from unittest.mock import MagicMock

import pytest

from engineyard.constants import SERVER_SIDE_VERSION
from engineyard.exceptions import ServerSideError
from engineyard.models import SSHConfig, SSHResult
from engineyard.services.server_side_service import INSTALLING, UPGRADING, ServerSideService


def _service(*returncodes):
    ssh = MagicMock()
    ssh.execute_command.side_effect = [SSHResult(returncode=code) for code in returncodes]
    return ServerSideService("app.example.com", SSHConfig(user="deploy"), ssh_service=ssh), ssh


class TestEnsurePresent:
    def test_current_version_needs_nothing(self) -> None:
        service, ssh = _service(0)
        callback = MagicMock()
        service.ensure_present(callback)
        callback.assert_not_called()
        assert ssh.execute_command.call_count == 1

    def test_missing_component_is_installed(self) -> None:
        service, ssh = _service(104, 0)
        callback = MagicMock()
        service.ensure_present(callback)
        callback.assert_called_once_with(INSTALLING)
        install_command = ssh.execute_command.call_args_list[1].args[1]
        assert f"-v {SERVER_SIDE_VERSION}" in install_command

    def test_outdated_component_is_upgraded(self) -> None:
        service, _ = _service(70, 0)
        callback = MagicMock()
        service.ensure_present(callback)
        callback.assert_called_once_with(UPGRADING)

    def test_ssh_failure(self) -> None:
        service, _ = _service(255)
        with pytest.raises(ServerSideError, match="SSH connection to app.example.com failed"):
            service.ensure_present()

    def test_failed_install(self) -> None:
        service, _ = _service(104, 1)
        with pytest.raises(ServerSideError, match="Installing"):
            service.ensure_present()


class TestCommands:
    def test_deploy_command_line(self) -> None:
        service, ssh = _service(0)
        ok = service.deploy(
            app_name="shop",
            repository_uri="git@github.com:acme/shop.git",
            ref="main",
            framework_env="production",
            instances=["a.example.com"],
            migrate="rake db:migrate",
        )
        assert ok is True
        host, command = ssh.execute_command.call_args.args
        assert host == "app.example.com"
        assert f"_{SERVER_SIDE_VERSION}_ deploy --app shop" in command
        assert "--branch main" in command
        assert "--migrate 'rake db:migrate'" in command
        assert ssh.execute_command.call_args.kwargs == {"capture_output": False}

    def test_failed_rollback(self) -> None:
        service, ssh = _service(1)
        assert service.rollback("shop", "production", []) is False
        assert "deploy rollback --app shop" in ssh.execute_command.call_args.args[1]

    def test_maintenance_page(self) -> None:
        service, ssh = _service(0, 0)
        assert service.enable_maintenance_page("shop", []) is True
        assert service.disable_maintenance_page("shop", []) is True
        commands = [c.args[1] for c in ssh.execute_command.call_args_list]
        assert "enable_maintenance_page" in commands[0]
        assert "disable_maintenance_page" in commands[1]
