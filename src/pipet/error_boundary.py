"""Error boundary handling for the CLI entry point.

Catches pipet's own exceptions and displays a clean error message without a
stack trace. Anything else bubbles up with a full traceback.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from pipet.errors import PipetError
from pipet.output import user_output

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns PipetError into "Error: ..." and exit status 1.

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
        except PipetError as e:
            logger.debug("Exception caught: %s: %s", type(e).__name__, e, exc_info=True)
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
