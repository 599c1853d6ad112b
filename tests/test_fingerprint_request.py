"""Tests for fingerprint use case."""
import pytest

from mockhash.domain.entities.app_config import AppConfig
from mockhash.domain.entities.mock_request import MockRequest
from mockhash.infra.common.errors import ConfigError
from mockhash.infra.plugins.registry import NORMALIZERS
from mockhash.use_cases.fingerprint_request import fingerprint_request, resolve_normalizer


def test_resolve_registered_normalizer():
    """Test registered plugin lookup."""
    normalizer = resolve_normalizer(None, AppConfig(normalizer="strip_volatile"))
    assert normalizer.id == "strip_volatile"


def test_resolve_rules_profile(tmp_path):
    """Test unregistered ID loads a rules profile."""
    path = tmp_path / "rules.yml"
    path.write_text("profile: session_free\ndrop_query_params: [session]\n", encoding="utf-8")
    app_config = AppConfig(normalize_rules_path=str(path))
    
    normalizer = resolve_normalizer("session_free", app_config)
    
    assert normalizer.id == "session_free"
    assert normalizer.normalize_url("https://example.com/?session=1&q=2") == "https://example.com/?q=2"


def test_resolve_unknown_profile():
    """Test unknown ID with no rules file."""
    with pytest.raises(ConfigError):
        resolve_normalizer("no_such_profile", AppConfig())


def test_fingerprint_request_uses_config_prefix_length():
    """Test prefix length comes from config."""
    result = fingerprint_request(MockRequest(url="/tmp/foo/bar/baz"), AppConfig(hash_prefix_length=12))
    
    assert result.request_hash == "bb4a1d8146e8"
    assert result.normalizer == "identity"
    assert result.request_file == "request-bb4a1d8146e8.json"
    assert result.request_body_file is None


def test_fingerprint_request_override_normalizer():
    """Test normalizer override collapses volatile parts."""
    app_config = AppConfig()
    result1 = fingerprint_request(MockRequest(url="https://example.com/p?a=1"), app_config, "strip_volatile")
    result2 = fingerprint_request(MockRequest(url="https://example.com/p?a=2"), app_config, "strip_volatile")
    
    assert result1.request_hash == result2.request_hash
    assert result1.request_file == result2.request_file


def test_resolve_same_profile_from_different_rules_files(tmp_path):
    """Test each rules path is honored for a shared profile name."""
    first = tmp_path / "first.yml"
    first.write_text("profile: shared\ndrop_query: true\n", encoding="utf-8")
    second = tmp_path / "second.yml"
    second.write_text("profile: shared\ndrop_query: false\n", encoding="utf-8")
    
    normalizer1 = resolve_normalizer("shared", AppConfig(normalize_rules_path=str(first)))
    normalizer2 = resolve_normalizer("shared", AppConfig(normalize_rules_path=str(second)))
    
    assert normalizer1.rules.drop_query is True
    assert normalizer2.rules.drop_query is False
    assert normalizer2.normalize_url("https://example.com/?a=1") == "https://example.com/?a=1"


def test_resolve_rules_profile_does_not_touch_registry(tmp_path):
    """Test loading a rules profile leaves the plugin registry unchanged."""
    path = tmp_path / "rules.yml"
    path.write_text("profile: unregistered\n", encoding="utf-8")
    
    resolve_normalizer("unregistered", AppConfig(normalize_rules_path=str(path)))
    
    assert "unregistered" not in NORMALIZERS


def test_fingerprint_request_file_name_matches_hash():
    """Test file name embeds the same hash that is reported."""
    request = MockRequest(url="https://example.com/p?a=1&utm_source=x")
    result = fingerprint_request(request, AppConfig(), "strip_volatile")
    
    assert result.request_file == f"example.com/p-{result.request_hash}.json"
