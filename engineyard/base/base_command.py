"""
Base Command Class

Every ey command is a BaseCommand: `execute` holds the work, `run` turns
failures into messages and exit codes.
"""

import traceback
from abc import ABC, abstractmethod
from typing import Optional

from engineyard.exceptions import EngineYardError
from engineyard.logger import CommandLogger


class BaseCommand(ABC):
    """
    One invocation of an ey command.

    Subclasses implement `execute`; click callbacks call `run`.
    """

    def __init__(self, context):
        self.context = context
        self.ui = context.ui
        self.logger: Optional[CommandLogger] = None

    def init_logger(self, operation: str, environment: Optional[str] = None) -> CommandLogger:
        """
        Open the command log and mirror UI output into it.

        Args:
            operation: Operation name, used in the log file name
            environment: Target environment name

        Returns:
            CommandLogger instance
        """
        self.logger = CommandLogger(operation, environment=environment)
        self.ui.attach_logger(self.logger)
        return self.logger

    def close_logger(self) -> None:
        if self.logger:
            self.logger.close()
            self.ui.attach_logger(None)

    def handle_error(self, message: str, context: Optional[str] = None) -> None:
        """
        Report an error on the console and in the command log.

        Args:
            message: Error message
            context: Optional context message
        """
        if self.logger:
            self.logger.log_error(message, context=context)
        self.ui.error(f"{message}\n{context}" if context else message)
        if self.logger:
            self.ui.debug(f"Logs saved to: {self.logger.log_path}")

    @abstractmethod
    def execute(self, **kwargs) -> None:
        """Do the work, raising EngineYardError on expected failures."""

    def run(self, **kwargs) -> None:
        """
        Execute and map the outcome to an exit status.

        EngineYardError and unexpected exceptions exit 1, Ctrl-C exits 130.
        The command log is closed either way.
        """
        try:
            self.execute(**kwargs)
        except KeyboardInterrupt:
            self.ui.warn("Operation cancelled by user")
            raise SystemExit(130)
        except SystemExit:
            raise
        except EngineYardError as e:
            self.handle_error(e.message, e.context)
            raise SystemExit(1)
        except Exception as e:
            error_type = type(e).__name__
            self.handle_error(f"{error_type}: {e}")
            if self.ui.verbose:
                traceback.print_exc()
            raise SystemExit(1)
        finally:
            self.close_logger()
