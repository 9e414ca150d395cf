"""Execution of the external git program."""

from gitpr.gateway.executor.abc import ExecutionError as ExecutionError
from gitpr.gateway.executor.abc import Executor as Executor
from gitpr.gateway.executor.abc import NonZeroExitError as NonZeroExitError
from gitpr.gateway.executor.abc import ProcessLaunchError as ProcessLaunchError
from gitpr.gateway.executor.fake import FakeExecutor as FakeExecutor
from gitpr.gateway.executor.fake import FakeResponse as FakeResponse
from gitpr.gateway.executor.real import SubprocessExecutor as SubprocessExecutor
