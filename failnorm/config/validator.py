# failnorm/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from dataclasses import dataclass
from typing import List, Literal

from failnorm.core.errors.exceptions import FailnormConfigError
from .normalizer import NormalizerConfig, resolve_type


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "declared_types[0]"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"{self.level.upper()} [{self.path}] {self.message}{hint_str}"


def validate_config(config: NormalizerConfig) -> List[ConfigIssue]:
    """
    Validate configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues: List[ConfigIssue] = []

    if not isinstance(config.max_chain_depth, int) or isinstance(config.max_chain_depth, bool) \
            or config.max_chain_depth < 1:
        issues.append(ConfigIssue(
            level="error",
            path="max_chain_depth",
            message=f"max_chain_depth must be a positive integer, got {config.max_chain_depth!r}",
            hint="Remove the key to use the default of 100",
        ))

    if not isinstance(config.follow_context, bool):
        issues.append(ConfigIssue(
            level="error",
            path="follow_context",
            message=f"follow_context must be true or false, got {config.follow_context!r}",
        ))

    resolved = {}
    for group in ("declared_types", "envelope_types", "fatal_types"):
        for i, name in enumerate(getattr(config, group)):
            try:
                resolved.setdefault(name, []).append(group)
                resolve_type(name)
            except FailnormConfigError as e:
                issues.append(ConfigIssue(
                    level="error",
                    path=f"{group}[{i}]",
                    message=e.message,
                    hint="Use a fully qualified name such as 'concurrent.futures.BrokenExecutor'",
                ))

    # Fatal wins over declared, so listing a type in both is misleading
    for name, groups in resolved.items():
        if "fatal_types" in groups and "declared_types" in groups:
            issues.append(ConfigIssue(
                level="warn",
                path="declared_types",
                message=f"'{name}' is listed as both fatal and declared; it will be treated as fatal",
            ))

    return issues


def check_config(config: NormalizerConfig) -> NormalizerConfig:
    """
    Raise FailnormConfigError for the first error-level issue.

    Warnings are left to callers of validate_config().
    """
    for issue in validate_config(config):
        if issue.level == "error":
            raise FailnormConfigError(issue.message, path=issue.path)
    return config
