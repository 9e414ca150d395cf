"""Abandon a pull request locally and remotely."""

import click

from gitpr.branches.extraction import filter_local_branches, filter_remote_branches
from gitpr.cli.commands.deletion_helpers import delete_each
from gitpr.context import GitPrContext
from gitpr.gateway.executor.abc import ExecutionError
from gitpr.output import user_error, user_output


@click.command("abandon")
@click.argument("name", required=False)
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Delete local branches even if they are not merged",
)
@click.pass_obj
def pr_abandon(ctx: GitPrContext, name: str | None, force: bool) -> None:
    """Delete every remote and local branch of pull request NAME.

    Remote branches are only looked up on the configured remote (`remote` in
    .git-pr.toml, default origin), even when `list` shows pull requests from
    other remotes. All matching branches are attempted even if some
    deletions fail; the command exits 1 if any of them did.
    """
    if not name:
        user_output("A Pull Request name is required: git pr-abandon <name>")
        raise SystemExit(1)

    suffix = ctx.config.pr_pattern.suffix
    try:
        ctx.git.fetch_prune()
        remote_branches = filter_remote_branches(
            name, ctx.git.all_remote_branches(), remote=ctx.git.remote, suffix=suffix
        )
        local_branches = filter_local_branches(name, ctx.git.all_local_branches(), suffix=suffix)
    except ExecutionError as e:
        user_error(str(e))

    if not remote_branches and not local_branches:
        user_output(
            f"No branches found for pull request '{name}'"
            f" locally or on remote '{ctx.git.remote}'"
        )
        return

    delete_local = ctx.git.force_delete_branch if force else ctx.git.delete_branch
    failed = delete_each(remote_branches, ctx.git.push_delete, stop_on_error=False)
    failed += delete_each(local_branches, delete_local, stop_on_error=False)

    if failed:
        user_output(f"Failed to delete {len(failed)} branch(es)")
        raise SystemExit(1)
