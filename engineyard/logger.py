"""
Command log files

Every command that changes remote state keeps a plain-text record under
``~/.ey/logs/<date>/<time>_<operation>.log`` (root overridable with
EY_LOG_DIR). The console stays terse; the log has everything.
"""

import os
import re
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from engineyard.constants import DEFAULT_LOG_DIR, ENV_LOG_DIR, LOG_DATE_FORMAT, LOG_TIME_FORMAT

ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
RULE_WIDTH = 80


def get_log_root() -> Path:
    return Path(os.environ.get(ENV_LOG_DIR) or DEFAULT_LOG_DIR).expanduser()


def _rule(char: str = "=") -> str:
    return char * RULE_WIDTH


class CommandLogger:
    """
    Log file of a single ey operation.

    Lines are flushed as they are written so the file can be tailed while
    a deploy is running.
    """

    def __init__(self, operation: str, environment: Optional[str] = None):
        self.operation = operation
        self.environment = environment
        self.has_errors = False

        started = datetime.now()
        day_dir = get_log_root() / started.strftime(LOG_DATE_FORMAT)
        day_dir.mkdir(parents=True, exist_ok=True)
        self.log_path = day_dir / f"{started.strftime(LOG_TIME_FORMAT)}_{operation}.log"

        self.log_file: Optional[TextIO] = open(self.log_path, "w", buffering=1)
        self._write(
            _rule(),
            f"ey {operation}",
            f"Environment: {environment or '-'}",
            f"Started: {started.isoformat()}",
            _rule(),
            "",
        )

    def _write(self, *lines: str) -> None:
        if self.log_file is None:
            return
        self.log_file.write("\n".join(lines) + "\n")
        self.log_file.flush()

    def log(self, message: str, level: str = "INFO") -> None:
        """
        Append a message, one ``[HH:MM:SS] [LEVEL]`` line per input line.

        Args:
            message: Text to record; ANSI color codes are stripped
            level: INFO, WARNING, ERROR or DEBUG
        """
        stamp = datetime.now().strftime("%H:%M:%S")
        lines = ANSI_ESCAPE.sub("", message).splitlines() or [""]
        self._write(*(f"[{stamp}] [{level}] {line}" for line in lines))

    def log_error(self, error: str, context: Optional[str] = None) -> None:
        """Record a failure; the footer will report FAILED."""
        self.has_errors = True
        block = ["", _rule("!"), f"ERROR: {error}"]
        if context:
            block.append(context)
        block.extend([_rule("!"), ""])
        self._write(*block)

    def close(self) -> None:
        if self.log_file is None:
            return
        self._write(
            "",
            _rule(),
            f"Finished: {datetime.now().isoformat()}",
            f"Status: {'FAILED' if self.has_errors else 'SUCCESS'}",
            _rule(),
        )
        self.log_file.close()
        self.log_file = None
