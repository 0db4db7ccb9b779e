"""Shared test fixtures for the GitHub bridge."""

from __future__ import annotations

import pytest

from github_bridge.dispatcher import Dispatcher
from github_bridge.errors import GitHubAPIError
from github_bridge.github.models import GitHubRepo
from github_bridge.tools.registry import ToolRegistry
from tests.stubs import StubAdapter


@pytest.fixture(autouse=True)
def set_test_env(monkeypatch):
    """Set test environment variables."""
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_fake")
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    monkeypatch.delenv("GITHUB_TIMEOUT", raising=False)
    monkeypatch.delenv("BRIDGE_LOG_LEVEL", raising=False)


@pytest.fixture
def two_repos() -> list[GitHubRepo]:
    return [
        GitHubRepo(
            name="hello-world",
            description="My first repository",
            private=False,
            html_url="https://github.com/octocat/hello-world",
        ),
        GitHubRepo(
            name="secret-plans",
            description="Nothing to see here",
            private=True,
            html_url="https://github.com/octocat/secret-plans",
        ),
    ]


@pytest.fixture
def stub_adapter(two_repos) -> StubAdapter:
    return StubAdapter(repos=two_repos)


@pytest.fixture
def failing_adapter() -> StubAdapter:
    return StubAdapter(error=GitHubAPIError("GitHub API error: 503 Service Unavailable", status_code=503))


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry()


@pytest.fixture
def dispatcher(registry, stub_adapter) -> Dispatcher:
    return Dispatcher(registry, stub_adapter)
