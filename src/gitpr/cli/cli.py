import logging
import os
from pathlib import Path

import click

from gitpr.cli.commands.abandon_cmd import pr_abandon
from gitpr.cli.commands.clean_cmd import pr_clean
from gitpr.cli.commands.create_cmd import pr_create
from gitpr.cli.commands.list_cmd import pr_list
from gitpr.cli.commands.version_cmd import version_cmd
from gitpr.config import ConfigError
from gitpr.context import GitPrContext, create_context
from gitpr.output import user_error

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "GIT_PR_DEBUG"


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")


def _create_context_or_exit(cwd: Path) -> GitPrContext:
    try:
        return create_context(cwd)
    except ConfigError as e:
        user_error(str(e))


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="git-pr")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Pull request workflow for bare git remotes."""
    _configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = _create_context_or_exit(Path.cwd())


cli.add_command(pr_abandon)
cli.add_command(pr_clean)
cli.add_command(pr_create)
cli.add_command(pr_list)
cli.add_command(version_cmd)


def main() -> None:
    """CLI entry point used by the `git-pr` console script."""
    cli()


def _run_standalone(command: click.Command) -> None:
    """Run one command as its own program, e.g. `git-pr-list`.

    git finds these on PATH, so `git pr-list` works like a built-in.
    """
    _configure_logging(bool(os.environ.get(DEBUG_ENV_VAR)))
    command.main(
        prog_name=f"git-pr-{command.name}",
        obj=_create_context_or_exit(Path.cwd()),
    )


def pr_list_main() -> None:
    _run_standalone(pr_list)


def pr_create_main() -> None:
    _run_standalone(pr_create)


def pr_clean_main() -> None:
    _run_standalone(pr_clean)


def pr_abandon_main() -> None:
    _run_standalone(pr_abandon)
