# failnorm/__init__.py
"""
failnorm - failure normalization and diagnostic formatting

Quick Start:
    >>> from failnorm import unwrap_and_unchecked, summary_with_root_cause
    >>> try:
    ...     open("/nonexistent")
    ... except OSError as e:
    ...     summary_with_root_cause(e)
    "FileNotFoundError: [Errno 2] No such file or directory: '/nonexistent'"

For custom classification, build a FailureNormalizer from a NormalizerConfig:
    >>> from failnorm import FailureNormalizer, load_config
    >>> normalizer = FailureNormalizer(load_config("failnorm.yml"))
"""

__version__ = "0.1.0"

from .core.errors.exceptions import (
    UncheckedError,
    ExecutionError,
    InvocationError,
    FailnormConfigError,
)
from .core.errors.kinds import FailureKind, FailurePolicy
from .core.errors.origin import SyntheticOrigin, synthetic_origin
from .core.errors.normalizer import (
    FailureNormalizer,
    default_normalizer,
    unchecked,
    unwrap,
    unwrap_and_unchecked,
    normalized,
    normalizing,
    root_cause,
    causal_chain,
    find_cause,
    is_caused_by,
    short_summary,
    summary_with_root_cause,
    stack_trace_text,
    failure_details,
    assign_synthetic_origin,
)
from .core.envelopes import invoke, invoke_method, future_result
from .config import NormalizerConfig, load_config, validate_config, ConfigIssue

__all__ = [
    "__version__",
    # failures
    "UncheckedError",
    "ExecutionError",
    "InvocationError",
    "FailnormConfigError",
    # classification
    "FailureKind",
    "FailurePolicy",
    # normalizer
    "FailureNormalizer",
    "default_normalizer",
    "unchecked",
    "unwrap",
    "unwrap_and_unchecked",
    "normalized",
    "normalizing",
    "root_cause",
    "causal_chain",
    "find_cause",
    "is_caused_by",
    "short_summary",
    "summary_with_root_cause",
    "stack_trace_text",
    "failure_details",
    "assign_synthetic_origin",
    "SyntheticOrigin",
    "synthetic_origin",
    # envelopes
    "invoke",
    "invoke_method",
    "future_result",
    # config
    "NormalizerConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
