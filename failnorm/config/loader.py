# failnorm/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .normalizer import NormalizerConfig
from .validator import check_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".failnorm" / "config.yml"


def _load_yaml(config_path: Optional[Union[str, Path]] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return None

    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level is %s, expected a mapping", path, type(data).__name__)
        return None
    return data


def load_config(config_path: Optional[Union[str, Path]] = None) -> NormalizerConfig:
    """
    Load configuration.

    Args:
        config_path: Path to YAML file. If None, tries ~/.failnorm/config.yml

    Returns:
        NormalizerConfig instance (always has code defaults as fallback)

    Raises:
        FailnormConfigError: the file sets an invalid value
    """
    yaml_data = _load_yaml(config_path)
    if not yaml_data:
        return NormalizerConfig.default()

    # Accept both a bare mapping and one nested under "normalizer:"
    section = yaml_data.get("normalizer", yaml_data)
    if not isinstance(section, dict):
        logger.warning("Ignoring 'normalizer' section: expected a mapping")
        return NormalizerConfig.default()

    config = check_config(NormalizerConfig.from_dict(section))
    logger.debug("Loaded normalizer config from %s: %s", config_path or DEFAULT_CONFIG_PATH, config.to_dict())
    return config
