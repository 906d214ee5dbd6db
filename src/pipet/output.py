"""Output helpers with clear intent.

user_output() is for messages meant for the person at the terminal and goes
to stderr. machine_output() goes to stdout, where a calling script expects
results.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write a message to stdout."""
    click.echo(message, nl=nl)
