"""Local git repository inspection."""

import subprocess
from pathlib import Path
from typing import List, Optional

from engineyard.exceptions import NoRemotesError


class Repo:
    """
    The git repository the CLI runs in.

    Only reads: current branch and remote URLs.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else Path.cwd()

    def _git(self, *args: str) -> Optional[str]:
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=self.path,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    @property
    def current_branch(self) -> Optional[str]:
        """Checked-out branch name, or None on a detached HEAD."""
        head = self._git("symbolic-ref", "-q", "HEAD")
        if not head:
            return None
        return head[len("refs/heads/"):] if head.startswith("refs/heads/") else head

    @property
    def urls(self) -> List[str]:
        """
        URLs of all remotes.

        Raises:
            NoRemotesError: If the repository has no remotes
        """
        output = self._git("config", "--get-regexp", r"remote\..*\.url")
        urls = []
        for line in (output or "").splitlines():
            parts = line.split(None, 1)
            if len(parts) == 2:
                urls.append(parts[1])
        if not urls:
            raise NoRemotesError(str(self.path))
        return urls
