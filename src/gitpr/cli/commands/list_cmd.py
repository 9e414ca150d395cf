"""Display a list of currently active pull requests.

By "currently active", we mean "not yet deleted from the remote".
"""

import click

from gitpr.branches.extraction import extract_pr_names
from gitpr.context import GitPrContext
from gitpr.gateway.executor.abc import ExecutionError
from gitpr.output import machine_output, user_error


@click.command("list")
@click.pass_obj
def pr_list(ctx: GitPrContext) -> None:
    """List active pull requests, one name per line.

    Remote-tracking branches are refreshed (and pruned) first, so the list
    matches what collaborators see.
    """
    try:
        ctx.git.fetch_prune()
        branches = ctx.git.all_branches()
    except ExecutionError as e:
        user_error(str(e))

    # The same PR may be visible through more than one remote
    for pr_name in dict.fromkeys(extract_pr_names(branches, ctx.config.pr_pattern)):
        machine_output(pr_name)
