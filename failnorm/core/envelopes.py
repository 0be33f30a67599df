# failnorm/core/envelopes.py
"""
Producers of envelope failures.

invoke() and future_result() report a failure of the code they ran by
raising an envelope whose cause is that failure, so "the call itself went
wrong" and "the callee went wrong" stay distinguishable. Use unwrap() or
unwrap_and_unchecked() at the catch site to get at the real failure.
"""

from __future__ import annotations

import concurrent.futures
import logging
from typing import Any, Callable, Optional

from failnorm.core.errors.exceptions import ExecutionError, InvocationError

logger = logging.getLogger(__name__)


def invoke(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Call func; an Exception it raises comes back as InvocationError.

    Fatal failures (KeyboardInterrupt, SystemExit, ...) pass through.
    """
    if not callable(func):
        raise TypeError(f"object of type {type(func).__name__} is not callable")
    try:
        return func(*args, **kwargs)
    except Exception as e:
        raise InvocationError(e) from e


def invoke_method(target: Any, name: str, *args: Any, **kwargs: Any) -> Any:
    """
    Look up a method by name and invoke() it.

    A missing or non-callable attribute is a problem with the call, not the
    callee, so AttributeError/TypeError are raised directly.
    """
    method = getattr(target, name)
    if not callable(method):
        raise TypeError(f"{type(target).__name__}.{name} is not callable")
    return invoke(method, *args, **kwargs)


def future_result(future: "concurrent.futures.Future[Any]", timeout: Optional[float] = None) -> Any:
    """
    Wait for a future; a failure raised by its task comes back as ExecutionError.

    Timeouts and cancellation are about the wait, not the task, and
    propagate untouched.
    """
    # exception() raises TimeoutError/CancelledError for the wait itself
    failure = future.exception(timeout=timeout)
    if failure is not None:
        logger.debug("Task of %r failed with %s", future, type(failure).__name__)
        raise ExecutionError(failure) from failure
    return future.result()
