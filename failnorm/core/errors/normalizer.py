# failnorm/core/errors/normalizer.py
"""
FailureNormalizer: reclassify, unwrap and describe failures.

Typical catch site:

    try:
        ...
    except Exception as e:
        unwrap_and_unchecked(e)

unchecked() and unwrap_and_unchecked() never return. They always raise
exactly one failure: the original one (fatal or ordinary runtime failures)
or a fresh UncheckedError around it (declared failures).
"""

from __future__ import annotations

import contextlib
import functools
import logging
from typing import Any, Callable, Dict, Iterator, List, NoReturn, Optional, Type, TypeVar, Union

from failnorm.config.normalizer import NormalizerConfig
from . import chain as _chain
from . import summary as _summary
from .exceptions import UncheckedError, failure_message
from .kinds import FailureKind, FailurePolicy
from .origin import assign_synthetic_origin as _assign_synthetic_origin, synthetic_origin

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)
F = TypeVar("F", bound=BaseException)
C = TypeVar("C", bound=Callable[..., Any])


class FailureNormalizer:
    """
    Stateless apart from its (immutable) configuration; safe to share.
    """

    def __init__(self, config: Optional[NormalizerConfig] = None) -> None:
        self.config = config or NormalizerConfig.default()
        self.policy = FailurePolicy(self.config)

    # -------- classification --------

    def kind_of(self, failure: BaseException) -> FailureKind:
        return self.policy.kind_of(failure)

    def is_envelope(self, failure: Optional[BaseException]) -> bool:
        return self.policy.is_envelope(failure)

    # -------- control transfer --------

    def unchecked(self, failure: BaseException) -> NoReturn:
        """
        Re-raise a failure so callers never have to declare it.

        Fatal and recoverable failures are raised untouched: same object,
        same __context__.
        Declared failures are raised wrapped in a new UncheckedError whose
        cause is the original.
        """
        if not isinstance(failure, BaseException):
            raise TypeError(f"expected an exception instance, got {type(failure).__name__}")

        kind = self.policy.kind_of(failure)
        if kind is FailureKind.DECLARED:
            logger.debug("Wrapping declared %s in UncheckedError", type(failure).__name__)
            raise UncheckedError(failure) from failure

        # Raising inside an except block would overwrite the implicit context
        # with the failure being handled (often the envelope just unwrapped)
        context = failure.__context__
        try:
            raise failure
        finally:
            failure.__context__ = context

    def unwrap(self, failure: Optional[BaseException]) -> Optional[BaseException]:
        """
        The cause of a well-known envelope, else the failure itself.

        Only one level is removed. Never raises; an envelope without a cause
        yields None.
        """
        if self.policy.is_envelope(failure):
            return failure.__cause__
        return failure

    def unwrap_and_unchecked(self, failure: BaseException) -> NoReturn:
        """unchecked(unwrap(failure)); a causeless envelope is normalized as-is."""
        unwrapped = self.unwrap(failure)
        self.unchecked(unwrapped if unwrapped is not None else failure)

    @contextlib.contextmanager
    def normalized(self) -> Iterator[None]:
        """Apply unwrap_and_unchecked() to any Exception leaving the block."""
        try:
            yield
        except Exception as e:
            self.unwrap_and_unchecked(e)

    def normalizing(self, func: C) -> C:
        """Decorator form of normalized()."""
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with self.normalized():
                return func(*args, **kwargs)
        return wrapper  # type: ignore[return-value]

    # -------- chain --------

    def root_cause(self, failure: BaseException) -> BaseException:
        return _chain.root_cause(failure, self.config.follow_context, self.config.max_chain_depth)

    def causal_chain(self, failure: BaseException) -> List[BaseException]:
        return _chain.causal_chain(failure, self.config.follow_context, self.config.max_chain_depth)

    def find_cause(self, failure: Optional[BaseException], cause_type: Type[E]) -> Optional[E]:
        return _chain.find_cause(
            failure, cause_type,
            follow_context=self.config.follow_context,
            max_depth=self.config.max_chain_depth,
        )

    def is_caused_by(self, failure: Optional[BaseException], *cause_types: Type[BaseException]) -> bool:
        return _chain.is_caused_by(
            failure, *cause_types,
            follow_context=self.config.follow_context,
            max_depth=self.config.max_chain_depth,
        )

    # -------- rendering --------

    def short_summary(self, failure: Optional[BaseException]) -> str:
        return _summary.short_summary(failure)

    def summary_with_root_cause(self, failure: Optional[BaseException]) -> str:
        return _summary.summary_with_root_cause(
            failure, self.config.follow_context, self.config.max_chain_depth
        )

    def stack_trace_text(self, failure: Optional[BaseException]) -> str:
        return _summary.stack_trace_text(failure)

    def failure_details(self, failure: Optional[BaseException], include_stack: bool = False) -> Dict[str, Any]:
        """
        Structured view for the caller's structured logging.
        """
        if failure is None:
            return {}
        root = self.root_cause(failure)
        details: Dict[str, Any] = {
            "type": type(failure).__name__,
            "message": failure_message(failure),
            "kind": self.kind_of(failure).value,
            "summary": self.summary_with_root_cause(failure),
            "root_cause": None if root is failure else self.short_summary(root),
        }
        origin = synthetic_origin(failure)
        if origin is not None:
            details["origin"] = str(origin)
        if include_stack:
            details["stack"] = self.stack_trace_text(failure)
        return details

    # -------- origin --------

    def assign_synthetic_origin(
        self,
        failure: F,
        declaring_type: Union[type, str],
        operation_name: str,
    ) -> F:
        return _assign_synthetic_origin(failure, declaring_type, operation_name)


_default = FailureNormalizer()


def default_normalizer() -> FailureNormalizer:
    return _default


def unchecked(failure: BaseException) -> NoReturn:
    _default.unchecked(failure)


def unwrap(failure: Optional[BaseException]) -> Optional[BaseException]:
    return _default.unwrap(failure)


def unwrap_and_unchecked(failure: BaseException) -> NoReturn:
    _default.unwrap_and_unchecked(failure)


def normalized() -> contextlib.AbstractContextManager:
    return _default.normalized()


def normalizing(func: C) -> C:
    return _default.normalizing(func)


def root_cause(failure: BaseException) -> BaseException:
    return _default.root_cause(failure)


def causal_chain(failure: BaseException) -> List[BaseException]:
    return _default.causal_chain(failure)


def find_cause(failure: Optional[BaseException], cause_type: Type[E]) -> Optional[E]:
    return _default.find_cause(failure, cause_type)


def is_caused_by(failure: Optional[BaseException], *cause_types: Type[BaseException]) -> bool:
    return _default.is_caused_by(failure, *cause_types)


def short_summary(failure: Optional[BaseException]) -> str:
    return _default.short_summary(failure)


def summary_with_root_cause(failure: Optional[BaseException]) -> str:
    return _default.summary_with_root_cause(failure)


def stack_trace_text(failure: Optional[BaseException]) -> str:
    return _default.stack_trace_text(failure)


def failure_details(failure: Optional[BaseException], include_stack: bool = False) -> Dict[str, Any]:
    return _default.failure_details(failure, include_stack)


def assign_synthetic_origin(failure: F, declaring_type: Union[type, str], operation_name: str) -> F:
    return _default.assign_synthetic_origin(failure, declaring_type, operation_name)
