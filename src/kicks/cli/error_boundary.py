"""Error boundary handling for the CLI command.

Converts KicksError into a labeled message and exit status, without a stack
trace. All other exceptions bubble up normally with full stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from kicks.cli.output import error_output
from kicks.core.errors import KicksError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches KicksError and exits with its status.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except KicksError as e:
            logger.debug("Aborting with %s", type(e).__name__, exc_info=True)
            error_output(click.style(f"Error ({e.label}): ", fg="red") + e.message)
            raise SystemExit(e.exit_code) from None

    return wrapper  # type: ignore[return-value]
