"""Shared helpers for commands that delete several branches in a row."""

import logging
from collections.abc import Callable, Iterable

import click

from gitpr.gateway.executor.abc import ExecutionError
from gitpr.output import user_output

logger = logging.getLogger(__name__)


def delete_each(
    branches: Iterable[str],
    delete: Callable[[str], None],
    *,
    stop_on_error: bool,
) -> list[str]:
    """Run a delete operation for every branch.

    A failure is reported on stderr and, unless stop_on_error is set, does not
    prevent the remaining branches from being attempted.

    Args:
        branches: Branch names to delete
        delete: Git client operation performing one deletion
        stop_on_error: Re-raise the first failure instead of continuing

    Returns:
        Names of the branches whose deletion failed

    Raises:
        ExecutionError: On the first failure when stop_on_error is set
    """
    failed: list[str] = []
    for branch in branches:
        try:
            delete(branch)
        except ExecutionError as e:
            if stop_on_error:
                raise
            logger.debug("deleting %s failed: %s", branch, e)
            user_output(click.style("Could not delete ", fg="yellow") + f"{branch}: {e}")
            failed.append(branch)
    return failed
