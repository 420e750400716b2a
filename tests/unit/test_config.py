"""Unit tests for tree configuration loading."""

import pytest

from avl_tree import ConfigError, TreeConfig, load_config


def test_defaults():
    """Test the default configuration."""
    cfg = TreeConfig()
    assert cfg.comparator is None
    assert cfg.precheck_membership is False
    assert cfg.validate_after_insert is False


def test_from_dict():
    """Test building a config from a dict."""
    cfg = TreeConfig.from_dict({"precheck_membership": True})
    assert cfg.precheck_membership is True
    assert cfg.validate_after_insert is False


def test_from_dict_rejects_unknown_keys():
    """Test that unknown keys are rejected."""
    with pytest.raises(ConfigError, match="Unknown config keys: rebalance_policy"):
        TreeConfig.from_dict({"rebalance_policy": "red-black"})


def test_from_dict_rejects_comparator():
    """Test that comparators cannot come from data."""
    with pytest.raises(ConfigError, match="comparator"):
        TreeConfig.from_dict({"comparator": "reverse"})


@pytest.mark.parametrize("value", [1, "yes", None, 0.5])
def test_from_dict_rejects_non_boolean(value):
    """Test that flags must be booleans."""
    with pytest.raises(ConfigError, match="must be a boolean"):
        TreeConfig.from_dict({"validate_after_insert": value})


def test_load_config_from_table(tmp_path):
    """Test loading settings from an [avl_tree] table."""
    path = tmp_path / "tree.toml"
    path.write_text(
        "[avl_tree]\nprecheck_membership = true\nvalidate_after_insert = true\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.precheck_membership is True
    assert cfg.validate_after_insert is True


def test_load_config_from_top_level(tmp_path):
    """Test loading settings from the document top level."""
    path = tmp_path / "tree.toml"
    path.write_text("validate_after_insert = true\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.validate_after_insert is True
    assert cfg.precheck_membership is False


def test_load_config_missing_file(tmp_path):
    """Test that a missing file is wrapped in ConfigError."""
    with pytest.raises(ConfigError, match="not found") as excinfo:
        load_config(tmp_path / "missing.toml")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_load_config_invalid_toml(tmp_path):
    """Test that malformed TOML is reported."""
    path = tmp_path / "bad.toml"
    path.write_text("precheck_membership = \n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(path)


def test_load_config_table_must_be_table(tmp_path):
    """Test that a non-table [avl_tree] value is rejected."""
    path = tmp_path / "tree.toml"
    path.write_text('avl_tree = "fast"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a table"):
        load_config(path)
