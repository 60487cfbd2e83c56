"""Tests for environment driven configuration."""

import pytest

from config.settings import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, APIConfig, ConfigManager


def test_defaults():
    settings = ConfigManager()
    assert settings.api_config.base_url == DEFAULT_BASE_URL
    assert settings.api_config.token is None
    assert settings.api_config.verify_ssl is True
    assert settings.api_config.timeout == DEFAULT_TIMEOUT
    assert settings.has_credentials is False


def test_environment(monkeypatch):
    monkeypatch.setenv("FORGE_API_TOKEN", "  abc123  ")
    monkeypatch.setenv("FORGE_API_URL", "https://forge.example.test/api/v1/")
    monkeypatch.setenv("FORGE_VERIFY_SSL", "false")
    monkeypatch.setenv("FORGE_API_TIMEOUT", "12.5")

    api = ConfigManager().api_config
    assert api.token == "abc123"
    assert api.base_url == "https://forge.example.test/api/v1"
    assert api.verify_ssl is False
    assert api.timeout == 12.5


@pytest.mark.parametrize("raw", ["soon", "0", "-4"])
def test_bad_timeout_falls_back(monkeypatch, raw):
    monkeypatch.setenv("FORGE_API_TIMEOUT", raw)
    assert ConfigManager().api_config.timeout == DEFAULT_TIMEOUT


def test_blank_token_counts_as_missing(monkeypatch):
    monkeypatch.setenv("FORGE_API_TOKEN", "")
    assert ConfigManager().has_credentials is False


def test_summary_never_contains_the_token(monkeypatch):
    monkeypatch.setenv("FORGE_API_TOKEN", "abc123")
    summary = ConfigManager().get_config_summary()
    assert summary["token_present"] is True
    assert "abc123" not in str(summary)


def test_base_url_is_normalized():
    assert APIConfig(base_url="https://forge.test/api/v1///").base_url == "https://forge.test/api/v1"
