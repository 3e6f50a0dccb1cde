"""Operator input abstraction.

Confirmation prompts read from the terminal through this interface so that
tests can script answers without patching stdin.
"""

from abc import ABC, abstractmethod

import click


class Prompter(ABC):
    """Abstract interface for reading a line of operator input."""

    @abstractmethod
    def prompt(self, text: str, *, default: str) -> str:
        """Ask the operator a question and return the raw answer.

        Blocks until the operator answers; there is no timeout.

        Args:
            text: Question shown to the operator
            default: Answer used when the operator submits empty input

        Returns:
            The operator's answer, or default on empty input
        """
        ...


class ClickPrompter(Prompter):
    """Production implementation using click.prompt."""

    def prompt(self, text: str, *, default: str) -> str:
        return click.prompt(text, default=default, show_default=False)
