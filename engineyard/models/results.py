"""Outcome of a command run on a remote host."""

from dataclasses import dataclass


@dataclass
class SSHResult:
    """Exit status and captured output of one ssh invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    host: str = ""
    command: str = ""
    duration_seconds: float = 0.0

    @property
    def is_success(self) -> bool:
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def output(self) -> str:
        """stdout and stderr joined, for error context."""
        return "\n".join(part for part in (self.stdout, self.stderr) if part).strip()
