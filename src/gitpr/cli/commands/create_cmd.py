"""Create a branch for a new pull request and push it upstream."""

import click

from gitpr.context import GitPrContext
from gitpr.gateway.executor.abc import ExecutionError
from gitpr.output import user_error, user_output


@click.command("create")
@click.argument("name", required=False)
@click.pass_obj
def pr_create(ctx: GitPrContext, name: str | None) -> None:
    """Start pull request NAME from the current commit.

    Creates the branch NAME/<short-hash-of-HEAD>, switches to it, and pushes
    it to the configured remote with upstream tracking.
    """
    if not name:
        user_output("A Pull Request name is required: git pr-create <name>")
        raise SystemExit(1)

    try:
        head = ctx.git.rev_parse_head()
        branch_name = f"{name}/{head}"
        ctx.git.create_branch(branch_name)
        ctx.git.push_upstream(branch_name)
    except ExecutionError as e:
        user_error(str(e))

    user_output(f"Created pull request branch {click.style(branch_name, fg='cyan')}")
