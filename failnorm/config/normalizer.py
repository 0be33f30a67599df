# failnorm/config/normalizer.py
"""
Normalizer Configuration

Type lists are dotted names (e.g. "concurrent.futures.BrokenExecutor") so a
YAML file can extend the built-in classification without importing anything.
They are ADDED to the built-in kinds, never replace them.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple, Type

from failnorm.core.errors.exceptions import FailnormConfigError


DEFAULT_MAX_CHAIN_DEPTH = 100


def resolve_type(dotted_name: str) -> Type[BaseException]:
    """
    Resolve "package.module.ClassName" to an exception class.

    Nested classes are supported ("pkg.mod.Outer.Inner").
    Names without a module are looked up in builtins.
    """
    name = (dotted_name or "").strip()
    if not name:
        raise FailnormConfigError("empty type name")

    parts = name.split(".")
    if len(parts) == 1:
        parts = ["builtins"] + parts

    # Longest importable module prefix wins
    obj: Any = None
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            obj = importlib.import_module(module_name)
        except ImportError:
            continue
        try:
            for attr in parts[split:]:
                obj = getattr(obj, attr)
        except AttributeError:
            raise FailnormConfigError(f"'{name}' not found in module '{module_name}'") from None
        break
    else:
        raise FailnormConfigError(f"cannot import a module for '{name}'")

    if not (isinstance(obj, type) and issubclass(obj, BaseException)):
        raise FailnormConfigError(f"'{name}' is not an exception class")
    return obj


@dataclass(frozen=True)
class NormalizerConfig:
    """
    Classification and traversal settings.

    All fields have code defaults - YAML is optional.
    """

    declared_types: Tuple[str, ...] = ()
    envelope_types: Tuple[str, ...] = ()
    fatal_types: Tuple[str, ...] = ()
    follow_context: bool = True
    max_chain_depth: int = DEFAULT_MAX_CHAIN_DEPTH
    _resolved: Dict[str, Tuple[Type[BaseException], ...]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @classmethod
    def default(cls) -> "NormalizerConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NormalizerConfig":
        """Build from a plain mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls) if f.init}
        kwargs: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if key not in known:
                continue
            if key.endswith("_types"):
                if isinstance(value, str):
                    value = [value]
                kwargs[key] = tuple(str(v) for v in (value or ()))
            else:
                kwargs[key] = value
        return cls(**kwargs)

    def types(self, name: str) -> Tuple[Type[BaseException], ...]:
        """
        Resolved classes for one of the *_types fields (cached).

        Raises FailnormConfigError if a name cannot be resolved.
        """
        cached = self._resolved.get(name)
        if cached is None:
            cached = tuple(resolve_type(n) for n in getattr(self, name))
            self._resolved[name] = cached
        return cached

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "declared_types": list(self.declared_types),
            "envelope_types": list(self.envelope_types),
            "fatal_types": list(self.fatal_types),
            "follow_context": self.follow_context,
            "max_chain_depth": self.max_chain_depth,
        }
