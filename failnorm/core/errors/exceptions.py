# failnorm/core/errors/exceptions.py
from __future__ import annotations

from typing import Optional


def _safe_str(x: object) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def failure_message(failure: Optional[BaseException]) -> str:
    """
    Message text of a failure, empty when it carries none.
    """
    if failure is None:
        return ""
    return _safe_str(failure)


class UncheckedError(RuntimeError):
    """
    Runtime wrapper around a declared-but-uninteresting failure.

    Carries no text of its own: the message is read through to the cause
    every time it is asked for, so a cause whose message changes later is
    still reported correctly.
    """

    def __init__(self, cause: Optional[BaseException]) -> None:
        super().__init__(cause)
        self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    @property
    def message(self) -> str:
        return failure_message(self.__cause__)

    def __str__(self) -> str:
        return self.message


class _Envelope(Exception):
    """
    A failure whose only role is to carry the failure that really happened.
    """

    def __init__(self, cause: Optional[BaseException], message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else failure_message(cause))
        self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    # args holds the message, not the cause; rebuild from both for copy/pickle
    def __reduce__(self):
        return type(self), (self.__cause__, str(self)), self.__dict__ or None


class ExecutionError(_Envelope):
    """Raised when a task run elsewhere (executor, future) failed."""


class InvocationError(_Envelope):
    """Raised when a dynamically invoked callable raised."""


class FailnormConfigError(ValueError):
    """Invalid normalizer configuration."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"[{self.path}] {self.message}"
        return self.message
