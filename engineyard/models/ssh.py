"""
SSH Models

How to reach an environment's instances: the login user and the argv
built from it.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class SSHConfig:
    """Login settings shared by every instance of an environment."""

    user: str


@dataclass
class SSHConnection:
    """One instance, reached with an SSHConfig."""

    host: str
    config: SSHConfig

    @property
    def connection_string(self) -> str:
        return f"{self.config.user}@{self.host}"

    @property
    def session_command(self) -> List[str]:
        """argv for an interactive login."""
        return ["ssh", self.connection_string]

    def build_command(self, remote_command: str) -> List[str]:
        """argv running remote_command without prompting about host keys."""
        return [
            "ssh",
            "-o", "StrictHostKeyChecking=no",
            self.connection_string,
            remote_command,
        ]
