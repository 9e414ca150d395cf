"""Remove local branches which have been merged into trunk."""

import click

from gitpr.branches.extraction import deletable_branch_names
from gitpr.cli.commands.deletion_helpers import delete_each
from gitpr.context import GitPrContext
from gitpr.gateway.executor.abc import ExecutionError
from gitpr.output import user_error, user_output


@click.command("clean")
@click.pass_obj
def pr_clean(ctx: GitPrContext) -> None:
    """Delete local branches already merged into trunk.

    The checked-out branch and trunk itself are never deleted. By default
    every branch is attempted and the command exits 1 if any deletion
    failed; set `clean.stop_on_error = true` in .git-pr.toml to stop at the
    first failure instead.
    """
    try:
        merged = ctx.git.merged_branches()
        failed = delete_each(
            deletable_branch_names(merged, ctx.config.trunk),
            ctx.git.delete_branch,
            stop_on_error=ctx.config.clean_stop_on_error,
        )
    except ExecutionError as e:
        user_error(str(e))

    if failed:
        user_output(f"Failed to delete {len(failed)} branch(es)")
        raise SystemExit(1)
