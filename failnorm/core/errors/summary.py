# failnorm/core/errors/summary.py
"""
Human-readable renderings of a failure.

All functions accept None and return empty text for it, so they are safe to
call from logging code paths.
"""

from __future__ import annotations

import traceback
from typing import Optional, Set

from failnorm.config.normalizer import DEFAULT_MAX_CHAIN_DEPTH
from .chain import root_cause
from .exceptions import failure_message
from .origin import synthetic_origin

ROOT_CAUSE_SEPARATOR = "; <---"


def short_summary(failure: Optional[BaseException]) -> str:
    """
    "ShortTypeName: message", like str(repr) but without the module.

    A failure without a message still gets the ": " ("Err: ").
    """
    if failure is None:
        return ""
    return f"{type(failure).__name__}: {failure_message(failure)}"


def summary_with_root_cause(
    failure: Optional[BaseException],
    follow_context: bool = True,
    max_depth: int = DEFAULT_MAX_CHAIN_DEPTH,
) -> str:
    """
    "Outer: msg; <---Root: msg", or just the short summary when the failure
    is its own root cause. Intermediate causes are never shown.
    """
    if failure is None:
        return ""
    summary = short_summary(failure)
    root = root_cause(failure, follow_context, max_depth)
    if root is failure:
        return summary
    return summary + ROOT_CAUSE_SEPARATOR + short_summary(root)


def _apply_synthetic_origins(
    te: Optional[traceback.TracebackException],
    failure: Optional[BaseException],
    seen: Set[int],
) -> None:
    # TracebackException mirrors __cause__/__context__, so walk both in step
    while te is not None and failure is not None and id(failure) not in seen:
        seen.add(id(failure))
        origin = synthetic_origin(failure)
        if origin is not None:
            te.stack = traceback.StackSummary.from_list(
                [(origin.filename, 0, origin.operation_name, None)]
            )
        _apply_synthetic_origins(te.__context__, failure.__context__, seen)
        te, failure = te.__cause__, failure.__cause__


def stack_trace_text(failure: Optional[BaseException], chain: bool = True) -> str:
    """
    The text traceback.print_exception() would write, as a single string.

    Failures labeled with assign_synthetic_origin() show their one synthetic
    frame instead of their real traceback.
    """
    if failure is None:
        return ""
    te = traceback.TracebackException(type(failure), failure, failure.__traceback__)
    _apply_synthetic_origins(te, failure, set())
    return "".join(te.format(chain=chain))
