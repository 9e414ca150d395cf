from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

import click

from gitpr.context import GitPrContext
from gitpr.gateway.executor.abc import ExecutionError
from gitpr.output import machine_output, user_error

UNKNOWN_VERSION = "unknown"


def _installed_version() -> str:
    # Running from a source checkout without `pip install` leaves no metadata
    try:
        return package_version("git-pr")
    except PackageNotFoundError:
        return UNKNOWN_VERSION


@click.command("version")
@click.pass_obj
def version_cmd(ctx: GitPrContext) -> None:
    """Show the git-pr version and the version of git it runs."""
    try:
        git_version = ctx.git.version()
    except ExecutionError as e:
        user_error(str(e))

    machine_output(f"git-pr {_installed_version()}")
    machine_output(git_version)
