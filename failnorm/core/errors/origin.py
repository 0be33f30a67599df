# failnorm/core/errors/origin.py
"""
Synthetic origin labels for reused failure singletons.

Some failures are raised so often (timeouts, "queue full", ...) that a module
keeps one preallocated instance and raises it from several places. Such an
instance has no useful traceback of its own; instead it carries a one-frame
label naming the call site that configured it:

    TIMEOUT = assign_synthetic_origin(TimeoutError("Timeout"), Poller, "poll")

Concurrency: the label is overwritten in place. When several threads share
one singleton the last writer wins, so the label is NOT a reliable record of
the site that actually raised it. It is diagnostic text only; nothing in this
package makes decisions from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeVar, Union

_ORIGIN_ATTR = "__failnorm_origin__"

F = TypeVar("F", bound=BaseException)


@dataclass(frozen=True)
class SyntheticOrigin:
    declaring_type: str
    operation_name: str

    @property
    def filename(self) -> str:
        return self.declaring_type

    def __str__(self) -> str:
        return f"{self.declaring_type}.{self.operation_name}"


def qualified_name(declaring_type: Union[type, str]) -> str:
    if isinstance(declaring_type, str):
        return declaring_type
    module = getattr(declaring_type, "__module__", None)
    qualname = getattr(declaring_type, "__qualname__", None) or declaring_type.__name__
    if module and module != "builtins":
        return f"{module}.{qualname}"
    return qualname


def assign_synthetic_origin(
    failure: F,
    declaring_type: Union[type, str],
    operation_name: str,
) -> F:
    """
    Replace the failure's traceback with a single synthetic frame.

    The real traceback is dropped irrecoverably. Returns the same object so
    it can be used at the construction site.
    """
    failure.__traceback__ = None
    setattr(failure, _ORIGIN_ATTR, SyntheticOrigin(qualified_name(declaring_type), operation_name))
    return failure


def synthetic_origin(failure: Optional[BaseException]) -> Optional[SyntheticOrigin]:
    if failure is None:
        return None
    return getattr(failure, _ORIGIN_ATTR, None)
