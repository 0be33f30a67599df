# failnorm/core/errors/chain.py
"""
Cause-chain traversal.

Chains are built by arbitrary upstream code, so every walk keeps a visited
set (by identity) and a hop limit. A walk that revisits a failure stops at
the last distinct one.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Type, TypeVar, Union

from failnorm.config.normalizer import DEFAULT_MAX_CHAIN_DEPTH

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)


def cause_of(failure: BaseException, follow_context: bool = True) -> Optional[BaseException]:
    """
    Direct cause: explicit __cause__, else the implicit __context__
    unless it was suppressed with "raise ... from None".

    A context whose own __cause__ is this failure is the envelope it was
    unwrapped from inside an except block, not a cause.
    """
    cause = failure.__cause__
    if cause is None and follow_context and not failure.__suppress_context__:
        context = failure.__context__
        if context is not None and context.__cause__ is not failure:
            cause = context
    return cause


def causal_chain(
    failure: BaseException,
    follow_context: bool = True,
    max_depth: int = DEFAULT_MAX_CHAIN_DEPTH,
) -> List[BaseException]:
    """The failure followed by each of its causes, outermost first."""
    chain = [failure]
    seen = {id(failure)}
    current = failure
    while True:
        cause = cause_of(current, follow_context)
        if cause is None:
            break
        if id(cause) in seen:
            logger.debug("Cause chain of %s loops back to %s", type(failure).__name__, type(cause).__name__)
            break
        if len(chain) > max_depth:
            logger.debug("Cause chain of %s truncated at %d hops", type(failure).__name__, max_depth)
            break
        chain.append(cause)
        seen.add(id(cause))
        current = cause
    return chain


def root_cause(
    failure: BaseException,
    follow_context: bool = True,
    max_depth: int = DEFAULT_MAX_CHAIN_DEPTH,
) -> BaseException:
    """Deepest cause, or the failure itself when it has none."""
    return causal_chain(failure, follow_context, max_depth)[-1]


def find_cause(
    failure: Optional[BaseException],
    cause_type: Type[E],
    follow_context: bool = True,
    max_depth: int = DEFAULT_MAX_CHAIN_DEPTH,
) -> Optional[E]:
    """First failure in the chain (the failure itself included) of cause_type."""
    if failure is None:
        return None
    for f in causal_chain(failure, follow_context, max_depth):
        if isinstance(f, cause_type):
            return f
    return None


def is_caused_by(
    failure: Optional[BaseException],
    *cause_types: Union[Type[BaseException], Tuple[Type[BaseException], ...]],
    follow_context: bool = True,
    max_depth: int = DEFAULT_MAX_CHAIN_DEPTH,
) -> bool:
    if failure is None or not cause_types:
        return False
    flat: Tuple[Type[BaseException], ...] = ()
    for t in cause_types:
        flat += t if isinstance(t, tuple) else (t,)
    return any(isinstance(f, flat) for f in causal_chain(failure, follow_context, max_depth))
