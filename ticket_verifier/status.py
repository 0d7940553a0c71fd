"""
Run status signalling for GitHub Actions.

Log records are written as workflow commands (``::debug::``, ``::warning::``,
``::error::``) so the runner shows them as annotations. A failed run is
recorded on RunStatus and turned into a non-zero exit code by the CLI.
"""

import logging
from typing import Optional

logger = logging.getLogger("ticket_verifier")

COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_data(value: str) -> str:
    """Escape a message for use as workflow command data."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Formats log records as GitHub Actions workflow commands."""

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        command = COMMANDS.get(record.levelno)
        if command is None:
            return msg
        return f"::{command}::{escape_data(msg)}"


class RunStatus:
    """Pass/fail state of the current run."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logger
        self.failed = False
        self.failure_message: Optional[str] = None

    def info(self, message: str) -> None:
        self.logger.info(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def set_failed(self, message: str) -> None:
        """Mark the run as failed. The last message wins."""
        self.failed = True
        self.failure_message = message
        self.logger.error(message)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
