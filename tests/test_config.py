"""Tests for configuration loading."""
import pytest

from mockhash.domain.entities.app_config import AppConfig
from mockhash.infra.common.config import load_app_config, load_normalize_rules
from mockhash.infra.common.errors import ConfigError


def test_load_staging_config():
    """Test staging config module."""
    config = load_app_config("staging")
    assert isinstance(config, AppConfig)
    assert config.normalizer == "strip_tracking"
    assert config.hash_prefix_length == 8


def test_env_variable_selects_config(monkeypatch):
    """Test ENV selects the config module."""
    monkeypatch.setenv("ENV", "production")
    config = load_app_config()
    assert config.log_level == "WARNING"


def test_invalid_environment():
    """Test unknown environment name."""
    with pytest.raises(ConfigError, match="Invalid environment"):
        load_app_config("qa")


def test_app_config_rejects_bad_prefix_length():
    """Test prefix length validation."""
    with pytest.raises(ValueError):
        AppConfig(hash_prefix_length=0)
    with pytest.raises(ValueError):
        AppConfig(hash_prefix_length=33)


def test_load_bundled_rules():
    """Test bundled strip_tracking profile."""
    rules = load_normalize_rules("strip_tracking")
    assert rules.profile == "strip_tracking"
    assert rules.drop_fragment is True
    assert "utm_source" in rules.drop_query_params


def test_load_rules_single_mapping(tmp_path):
    """Test rules file holding one mapping."""
    path = tmp_path / "rules.yml"
    path.write_text("drop_query: true\nuse_body: false\n", encoding="utf-8")
    
    rules = load_normalize_rules("custom", str(path))
    
    assert rules.profile == "custom"
    assert rules.drop_query is True
    assert rules.use_body is False


def test_load_rules_from_list(tmp_path):
    """Test rules file holding several profiles."""
    path = tmp_path / "rules.yml"
    path.write_text(
        "- profile: one\n  drop_fragment: true\n"
        "- profile: two\n  drop_query_params: [session]\n",
        encoding="utf-8",
    )
    
    rules = load_normalize_rules("two", str(path))
    
    assert rules.drop_query_params == ["session"]
    assert rules.drop_fragment is False


def test_load_rules_profile_missing_from_list(tmp_path):
    """Test profile not present in list."""
    path = tmp_path / "rules.yml"
    path.write_text("- profile: one\n", encoding="utf-8")
    
    with pytest.raises(ConfigError, match="Profile three not found"):
        load_normalize_rules("three", str(path))


def test_load_rules_invalid_yaml(tmp_path):
    """Test invalid YAML."""
    path = tmp_path / "rules.yml"
    path.write_text("drop_query: [unclosed\n", encoding="utf-8")
    
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_normalize_rules("x", str(path))


def test_load_rules_invalid_values(tmp_path):
    """Test rules failing validation."""
    path = tmp_path / "rules.yml"
    path.write_text("drop_query_params: 5\n", encoding="utf-8")
    
    with pytest.raises(ConfigError, match="Invalid normalize rules"):
        load_normalize_rules("x", str(path))


def test_load_rules_missing_file(tmp_path):
    """Test explicit path that does not exist."""
    with pytest.raises(ConfigError, match="Rules file not found"):
        load_normalize_rules("x", str(tmp_path / "missing.yml"))


def test_load_rules_unknown_profile():
    """Test profile with no bundled file."""
    with pytest.raises(ConfigError, match="Rules not found for profile"):
        load_normalize_rules("no_such_profile")
