"""External command execution abstraction.

This module provides abstraction over the external tools kicks drives
(generator, installer, rails tasks, archive tool, editor), enabling
dependency injection for testing without mock.patch.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

import click

from kicks.cli.output import user_output
from kicks.core.errors import ExternalCommandError
from kicks.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class Shell(ABC):
    """Abstract interface for running external commands."""

    @abstractmethod
    def run(self, command: list[str], *, cwd: Path | None, operation: str, quiet: bool) -> None:
        """Run a command to completion.

        Blocks until the command exits; there is no timeout.

        Args:
            command: Command name followed by its arguments
            cwd: Working directory for the command
            operation: Human-readable description used in error messages
            quiet: Capture the command's output instead of streaming it

        Raises:
            ExternalCommandError: If the command exits nonzero or is not installed
        """
        ...

    @abstractmethod
    def launch_interactive(self, command: list[str], *, cwd: Path | None) -> None:
        """Replace the current process with an interactive command.

        Args:
            command: Command name followed by its arguments
            cwd: Directory to change into before launching
        """
        ...


class RealShell(Shell):
    """Production implementation using subprocess and os.execvp."""

    def run(self, command: list[str], *, cwd: Path | None, operation: str, quiet: bool) -> None:
        if not quiet:
            user_output(click.style(f"$ {' '.join(command)}", dim=True))
        run_subprocess_with_context(
            command,
            operation_context=operation,
            cwd=cwd,
            capture_output=quiet,
        )

    def launch_interactive(self, command: list[str], *, cwd: Path | None) -> None:
        if cwd is not None:
            os.chdir(cwd)
        logger.debug("Replacing process with %s (cwd=%s)", command, cwd)
        try:
            os.execvp(command[0], command)
        except FileNotFoundError as e:
            raise ExternalCommandError(f"Command not found: {command[0]}", 127) from e
        # Never returns - process is replaced
