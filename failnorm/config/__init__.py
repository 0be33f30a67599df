"""
failnorm Configuration

Design principles:
1. Code has the defaults; YAML only adds to them (YAML can be deleted)
2. Nothing is read from disk unless load_config() is called
"""

from .normalizer import NormalizerConfig, resolve_type, DEFAULT_MAX_CHAIN_DEPTH
from .loader import load_config
from .validator import validate_config, check_config, ConfigIssue

__all__ = [
    "NormalizerConfig",
    "resolve_type",
    "DEFAULT_MAX_CHAIN_DEPTH",
    "load_config",
    "validate_config",
    "check_config",
    "ConfigIssue",
]
