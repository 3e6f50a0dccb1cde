"""Output utilities for CLI commands with clear intent."""

import click


def user_output(message: str = "") -> None:
    """Print a message meant for the operator (milestones, notices, prompts)."""
    click.echo(message)


def error_output(message: str) -> None:
    """Print an error message to stderr."""
    click.echo(message, err=True)
