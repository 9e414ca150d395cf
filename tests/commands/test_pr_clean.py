"""Tests for the pr-clean command."""

import dataclasses

from click.testing import CliRunner

from gitpr.cli.commands.clean_cmd import pr_clean
from gitpr.config import GitPrConfig
from gitpr.gateway.executor.fake import FakeResponse
from tests.test_utils.git_helpers import build_fake_context, git_args

MERGED = "  one\n* two\n  trunk\n  three\n"


def test_deletes_merged_branches_except_head_and_trunk() -> None:
    ctx, executor = build_fake_context(
        {
            git_args("branch", "--merged", "trunk"): FakeResponse(stdout=MERGED),
            git_args("branch", "-d", "one"): FakeResponse(),
            git_args("branch", "-d", "three"): FakeResponse(),
        }
    )

    result = CliRunner().invoke(pr_clean, [], obj=ctx)

    assert result.exit_code == 0
    assert executor.calls == [
        git_args("branch", "--merged", "trunk"),
        git_args("branch", "-d", "one"),
        git_args("branch", "-d", "three"),
    ]


def test_failure_does_not_stop_remaining_deletions() -> None:
    ctx, executor = build_fake_context(
        {
            git_args("branch", "--merged", "trunk"): FakeResponse(stdout=MERGED),
            git_args("branch", "-d", "one"): FakeResponse(returncode=1),
            git_args("branch", "-d", "three"): FakeResponse(),
        }
    )

    result = CliRunner().invoke(pr_clean, [], obj=ctx)

    assert result.exit_code == 1
    assert "Could not delete one" in result.output
    assert git_args("branch", "-d", "three") in executor.calls


def test_stop_on_error_aborts_at_first_failure() -> None:
    config = dataclasses.replace(GitPrConfig.default(), clean_stop_on_error=True)
    ctx, executor = build_fake_context(
        {
            git_args("branch", "--merged", "trunk"): FakeResponse(stdout=MERGED),
            git_args("branch", "-d", "one"): FakeResponse(returncode=1),
            git_args("branch", "-d", "three"): FakeResponse(),
        },
        config=config,
    )

    result = CliRunner().invoke(pr_clean, [], obj=ctx)

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert git_args("branch", "-d", "three") not in executor.calls


def test_nothing_to_delete() -> None:
    ctx, executor = build_fake_context(
        {git_args("branch", "--merged", "trunk"): FakeResponse(stdout="* trunk\n")}
    )

    result = CliRunner().invoke(pr_clean, [], obj=ctx)

    assert result.exit_code == 0
    assert executor.calls == [git_args("branch", "--merged", "trunk")]


def test_listing_failure_exits_nonzero() -> None:
    ctx, _ = build_fake_context({})

    result = CliRunner().invoke(pr_clean, [], obj=ctx)

    assert result.exit_code == 1
    assert "Error:" in result.output
