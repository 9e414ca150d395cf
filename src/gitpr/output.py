"""Output helpers for CLI commands.

Machine-readable results (PR names) go to stdout; everything meant for a
person reading the terminal goes to stderr.
"""

from typing import NoReturn

import click


def user_output(message: str = "") -> None:
    """Write a message for the user to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Write a result line to stdout."""
    click.echo(message)


def user_error(message: str) -> NoReturn:
    """Report an unrecoverable failure and exit with status 1."""
    user_output(click.style("Error: ", fg="red") + message)
    raise SystemExit(1)
