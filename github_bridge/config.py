"""Environment-driven bridge settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from github_bridge.errors import ConfigurationError


class BridgeSettings(BaseSettings):
    """Environment-driven settings for the GitHub bridge."""

    github_token: str = ""
    github_api_url: str = "https://api.github.com"
    github_timeout: float = 30.0
    bridge_log_level: str = "INFO"

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    def require_token(self) -> str:
        """Return the GitHub token, or raise if it was not provided."""
        token = self.github_token.strip()
        if not token:
            raise ConfigurationError("GITHUB_TOKEN")
        return token
