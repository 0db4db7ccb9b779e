from __future__ import annotations

import pytest

from github_bridge.config import BridgeSettings
from github_bridge.errors import ConfigurationError


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")
    monkeypatch.setenv("GITHUB_TIMEOUT", "12.5")
    monkeypatch.setenv("BRIDGE_LOG_LEVEL", "DEBUG")
    settings = BridgeSettings()
    assert settings.github_token == "ghp_test_fake"
    assert settings.github_api_url == "https://ghe.example.com/api/v3"
    assert settings.github_timeout == 12.5
    assert settings.bridge_log_level == "DEBUG"


def test_settings_defaults(monkeypatch):
    settings = BridgeSettings()
    assert settings.github_api_url == "https://api.github.com"
    assert settings.github_timeout == 30.0
    assert settings.bridge_log_level == "INFO"


def test_require_token_returns_token():
    assert BridgeSettings().require_token() == "ghp_test_fake"


@pytest.mark.parametrize("value", ["", "   "])
def test_require_token_missing(monkeypatch, value):
    monkeypatch.setenv("GITHUB_TOKEN", value)
    with pytest.raises(ConfigurationError) as exc:
        BridgeSettings().require_token()
    assert exc.value.setting == "GITHUB_TOKEN"
    assert "GITHUB_TOKEN" in str(exc.value)
