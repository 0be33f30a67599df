# failnorm/core/errors/kinds.py
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple, Type

from failnorm.config.normalizer import NormalizerConfig
from failnorm.config.validator import check_config
from .exceptions import ExecutionError, InvocationError, UncheckedError


class FailureKind(str, Enum):
    """How a failure is propagated by unchecked()."""

    FATAL = "fatal"            # never caught-and-continued; re-raised untouched
    RECOVERABLE = "recoverable"  # ordinary runtime failure; re-raised untouched
    DECLARED = "declared"      # wrapped once in UncheckedError


# ---- built-in classification (extended, never replaced, by config) ----

BUILTIN_FATAL_TYPES: Tuple[Type[BaseException], ...] = (MemoryError,)

# OSError is the canonical "you must handle this" failure (I/O, disk full, ...).
# Envelopes are declared too: raising one bare means nobody unwrapped it.
BUILTIN_DECLARED_TYPES: Tuple[Type[BaseException], ...] = (
    OSError,
    ExecutionError,
    InvocationError,
)

BUILTIN_ENVELOPE_TYPES: Tuple[Type[BaseException], ...] = (
    ExecutionError,
    InvocationError,
    UncheckedError,
)


class FailurePolicy:
    """
    Maps failures to kinds and recognizes envelopes.

    Precedence: fatal > UncheckedError (always recoverable) > declared > recoverable.
    """

    def __init__(self, config: Optional[NormalizerConfig] = None) -> None:
        self.config = check_config(config or NormalizerConfig.default())
        self.fatal_types = BUILTIN_FATAL_TYPES + self.config.types("fatal_types")
        self.declared_types = BUILTIN_DECLARED_TYPES + self.config.types("declared_types")
        self.envelope_types = BUILTIN_ENVELOPE_TYPES + self.config.types("envelope_types")

    def kind_of(self, failure: BaseException) -> FailureKind:
        # KeyboardInterrupt, SystemExit, GeneratorExit, CancelledError ...
        if not isinstance(failure, Exception) or isinstance(failure, self.fatal_types):
            return FailureKind.FATAL
        if isinstance(failure, UncheckedError):
            return FailureKind.RECOVERABLE
        if isinstance(failure, self.declared_types):
            return FailureKind.DECLARED
        return FailureKind.RECOVERABLE

    def is_envelope(self, failure: Optional[BaseException]) -> bool:
        return isinstance(failure, self.envelope_types)

    def __repr__(self) -> str:
        return (
            f"FailurePolicy(fatal={[t.__name__ for t in self.fatal_types]}, "
            f"declared={[t.__name__ for t in self.declared_types]}, "
            f"envelopes={[t.__name__ for t in self.envelope_types]})"
        )
