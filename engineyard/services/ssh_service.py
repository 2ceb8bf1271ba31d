"""
SSH Service

Runs commands on environment instances through the local ``ssh`` binary,
and hands the terminal over to ssh for interactive sessions.
"""

import os
import subprocess
import time
from typing import Optional

from engineyard.exceptions import EngineYardError
from engineyard.models.results import SSHResult
from engineyard.models.ssh import SSHConfig, SSHConnection


class SSHService:
    """ssh access to the instances of one environment."""

    def __init__(self, config: SSHConfig):
        self.config = config

    def connection(self, host: str) -> SSHConnection:
        return SSHConnection(host=host, config=self.config)

    def execute_command(
        self,
        host: str,
        command: str,
        timeout: Optional[int] = None,
        capture_output: bool = True,
    ) -> SSHResult:
        """
        Run a shell command on host.

        Args:
            host: Instance hostname
            command: Remote shell command line
            timeout: Seconds before giving up; None waits for completion
            capture_output: Capture stdout/stderr instead of streaming them
                to the terminal (deploys stream)

        Raises:
            EngineYardError: If ssh cannot be started or times out
        """
        argv = self.connection(host).build_command(command)
        started = time.time()

        try:
            result = subprocess.run(
                argv,
                capture_output=capture_output,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            raise EngineYardError(
                f"SSH command timed out after {timeout}s",
                context=f"Host: {host}, Command: {command}",
            )
        except OSError as e:
            raise EngineYardError(
                f"SSH command failed: {e}",
                context=f"Host: {host}, Command: {command}",
            )
        duration = time.time() - started

        return SSHResult(
            returncode=result.returncode,
            stdout=(result.stdout or "") if capture_output else "",
            stderr=(result.stderr or "") if capture_output else "",
            host=host,
            command=command,
            duration_seconds=duration,
        )

    def open_session(self, host: str) -> None:
        """
        Open an interactive session to host.

        On POSIX the current process image is replaced by ssh and this call
        does not return. Elsewhere ssh runs as a child and its exit code
        becomes ours.
        """
        argv = self.connection(host).session_command

        if os.name == "posix":
            os.execvp(argv[0], argv)
        else:
            result = subprocess.run(argv)
            raise SystemExit(result.returncode)
