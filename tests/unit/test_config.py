# tests/unit/test_config.py
"""
Configuration Tests - code defaults, YAML loading, validation
"""

import concurrent.futures
import json
import logging

import pytest

from failnorm import FailnormConfigError
from failnorm.config import (
    DEFAULT_MAX_CHAIN_DEPTH,
    NormalizerConfig,
    check_config,
    load_config,
    resolve_type,
    validate_config,
)


def test_defaults():
    config = NormalizerConfig.default()
    assert config.declared_types == ()
    assert config.envelope_types == ()
    assert config.fatal_types == ()
    assert config.follow_context is True
    assert config.max_chain_depth == DEFAULT_MAX_CHAIN_DEPTH
    assert validate_config(config) == []


def test_config_is_frozen():
    config = NormalizerConfig.default()
    with pytest.raises(AttributeError):
        config.max_chain_depth = 5


def test_from_dict_ignores_unknown_keys():
    config = NormalizerConfig.from_dict({
        "declared_types": "json.JSONDecodeError",
        "max_chain_depth": 7,
        "colour": "blue",
    })
    assert config.declared_types == ("json.JSONDecodeError",)
    assert config.max_chain_depth == 7


def test_to_dict_round_trip():
    config = NormalizerConfig(fatal_types=("RecursionError",), follow_context=False)
    assert NormalizerConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize("name, expected", [
    ("OSError", OSError),
    ("builtins.KeyError", KeyError),
    ("json.JSONDecodeError", json.JSONDecodeError),
    ("concurrent.futures.CancelledError", concurrent.futures.CancelledError),
])
def test_resolve_type(name, expected):
    assert resolve_type(name) is expected


@pytest.mark.parametrize("name", [
    "",
    "NoSuchError",
    "json.NoSuchError",
    "json.dumps",
    "no_such_module_for_failnorm.Error",
])
def test_resolve_type_errors(name):
    with pytest.raises(FailnormConfigError):
        resolve_type(name)


def test_types_are_resolved_and_cached():
    config = NormalizerConfig(declared_types=("json.JSONDecodeError",))
    first = config.types("declared_types")
    assert first == (json.JSONDecodeError,)
    assert config.types("declared_types") is first


def test_load_config_missing_file_uses_defaults(tmp_path):
    assert load_config(tmp_path / "missing.yml") == NormalizerConfig.default()


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "failnorm.yml"
    path.write_text(
        "normalizer:\n"
        "  declared_types:\n"
        "    - json.JSONDecodeError\n"
        "  envelope_types: [concurrent.futures.BrokenExecutor]\n"
        "  follow_context: false\n"
        "  max_chain_depth: 12\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.declared_types == ("json.JSONDecodeError",)
    assert config.envelope_types == ("concurrent.futures.BrokenExecutor",)
    assert config.follow_context is False
    assert config.max_chain_depth == 12


def test_load_config_bare_mapping(tmp_path):
    path = tmp_path / "failnorm.yml"
    path.write_text("fatal_types: [RecursionError]\n", encoding="utf-8")
    assert load_config(str(path)).fatal_types == ("RecursionError",)


def test_load_config_invalid_yaml_falls_back(tmp_path, caplog):
    path = tmp_path / "broken.yml"
    path.write_text("normalizer: [unclosed\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="failnorm.config.loader"):
        config = load_config(path)

    assert config == NormalizerConfig.default()
    assert "unreadable config file" in caplog.text


def test_load_config_non_mapping_falls_back(tmp_path, caplog):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="failnorm.config.loader"):
        assert load_config(path) == NormalizerConfig.default()
    assert "expected a mapping" in caplog.text


def test_validate_reports_bad_values():
    config = NormalizerConfig(
        declared_types=("json.NoSuchError",),
        max_chain_depth=0,
        follow_context="yes",
    )
    issues = validate_config(config)

    paths = {issue.path for issue in issues}
    assert paths == {"declared_types[0]", "max_chain_depth", "follow_context"}
    assert all(issue.level == "error" for issue in issues)


def test_validate_warns_on_fatal_and_declared():
    config = NormalizerConfig(fatal_types=("OSError",), declared_types=("OSError",))
    issues = validate_config(config)
    assert [issue.level for issue in issues] == ["warn"]
    assert "fatal" in str(issues[0])


@pytest.mark.parametrize("kwargs, path", [
    ({"max_chain_depth": 0}, "max_chain_depth"),
    ({"max_chain_depth": "5"}, "max_chain_depth"),
    ({"max_chain_depth": True}, "max_chain_depth"),
    ({"follow_context": "yes"}, "follow_context"),
    ({"envelope_types": ("json.NoSuchError",)}, "envelope_types[0]"),
])
def test_normalizer_rejects_invalid_config(kwargs, path):
    from failnorm import FailureNormalizer

    with pytest.raises(FailnormConfigError) as exc_info:
        FailureNormalizer(NormalizerConfig(**kwargs))
    assert exc_info.value.path == path
    assert path in str(exc_info.value)


def test_check_config_returns_valid_config():
    config = NormalizerConfig(max_chain_depth=3)
    assert check_config(config) is config


def test_check_config_ignores_warnings():
    config = NormalizerConfig(fatal_types=("OSError",), declared_types=("OSError",))
    assert check_config(config) is config


def test_load_config_rejects_invalid_values(tmp_path):
    path = tmp_path / "failnorm.yml"
    path.write_text("normalizer:\n  max_chain_depth: '5'\n", encoding="utf-8")

    with pytest.raises(FailnormConfigError) as exc_info:
        load_config(path)
    assert exc_info.value.path == "max_chain_depth"


def test_load_config_rejects_unknown_type(tmp_path):
    path = tmp_path / "failnorm.yml"
    path.write_text("declared_types: [json.NoSuchError]\n", encoding="utf-8")

    with pytest.raises(FailnormConfigError) as exc_info:
        load_config(path)
    assert exc_info.value.path == "declared_types[0]"
