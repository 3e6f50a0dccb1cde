"""User-facing milestone output."""

from abc import ABC, abstractmethod

import click

from kicks.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing progress output.

    Pipeline steps call ctx.feedback methods instead of printing directly so
    tests can assert on the exact notices emitted. Quiet mode only affects the
    output of external commands; these messages are always shown.

    Usage:
        ctx.feedback.info("Generating demo...")
        ctx.feedback.warning("Workspace already exists: /tmp/kicks/demo")
        ctx.feedback.success("Workspace ready: /tmp/kicks/demo")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stdout with click styling."""

    def info(self, message: str) -> None:
        user_output(message)

    def warning(self, message: str) -> None:
        user_output(click.style("Warning: ", fg="yellow") + message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))
