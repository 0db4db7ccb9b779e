"""Static catalogue of the bridge's GitHub tools.

Each ``ToolName`` member owns exactly one ``ToolSpec``: its descriptor, the
argument model generated from that descriptor, and the function that calls
the adapter and formats the result. The catalogue order is the order
``tools/list`` reports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from github_bridge.github.client import ResourceAdapter
from github_bridge.tools.arguments import ToolArguments, arguments_model
from github_bridge.tools.formatting import (
    format_commits,
    format_content,
    format_issues,
    format_pull_requests,
    format_repos,
    format_user,
)
from github_bridge.tools.schema import ToolDescriptor, ToolField

logger = logging.getLogger(__name__)


class ToolName(str, Enum):
    """Wire names of the registered tools."""

    GET_USER = "get_user"
    GET_REPOS = "get_repos"
    GET_ISSUES = "get_issues"
    GET_PULL_REQUESTS = "get_pull_requests"
    GET_COMMITS = "get_commits"
    GET_CONTENT = "get_content"


_USERNAME = ToolField("username", description="GitHub username (omit for the authenticated user)")
_OWNER = ToolField("owner", required=True, description="Repository owner")
_REPO = ToolField("repo", required=True, description="Repository name")
_PATH = ToolField("path", required=True, description="File path relative to the repository root")


# ---------------------------------------------------------------------------
# Tool implementations
# ---------------------------------------------------------------------------

def _get_user(adapter: ResourceAdapter, args: Any) -> str:
    return format_user(adapter.get_user(args.username))


def _get_repos(adapter: ResourceAdapter, args: Any) -> str:
    return format_repos(adapter.get_repos(args.username))


def _get_issues(adapter: ResourceAdapter, args: Any) -> str:
    return format_issues(args.owner, args.repo, adapter.get_issues(args.owner, args.repo))


def _get_pull_requests(adapter: ResourceAdapter, args: Any) -> str:
    pulls = adapter.get_pull_requests(args.owner, args.repo)
    return format_pull_requests(args.owner, args.repo, pulls)


def _get_commits(adapter: ResourceAdapter, args: Any) -> str:
    return format_commits(args.owner, args.repo, adapter.get_commits(args.owner, args.repo))


def _get_content(adapter: ResourceAdapter, args: Any) -> str:
    content = adapter.get_content(args.owner, args.repo, args.path)
    return format_content(args.owner, args.repo, args.path, content)


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

ToolRunner = Callable[[ResourceAdapter, Any], str]


@dataclass(frozen=True)
class ToolSpec:
    """One catalogue entry: what the tool declares and how it runs."""

    descriptor: ToolDescriptor
    run: ToolRunner
    arguments: type[ToolArguments] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", arguments_model(self.descriptor))


def _spec(name: ToolName, description: str, fields: tuple[ToolField, ...], run: ToolRunner) -> ToolSpec:
    return ToolSpec(ToolDescriptor(name.value, description, fields), run)


CATALOGUE: dict[ToolName, ToolSpec] = {
    ToolName.GET_USER: _spec(
        ToolName.GET_USER,
        "Get a GitHub user's profile.",
        (_USERNAME,),
        _get_user,
    ),
    ToolName.GET_REPOS: _spec(
        ToolName.GET_REPOS,
        "List a user's repositories.",
        (_USERNAME,),
        _get_repos,
    ),
    ToolName.GET_ISSUES: _spec(
        ToolName.GET_ISSUES,
        "List the issues of a repository.",
        (_OWNER, _REPO),
        _get_issues,
    ),
    ToolName.GET_PULL_REQUESTS: _spec(
        ToolName.GET_PULL_REQUESTS,
        "List the pull requests of a repository.",
        (_OWNER, _REPO),
        _get_pull_requests,
    ),
    ToolName.GET_COMMITS: _spec(
        ToolName.GET_COMMITS,
        "List the commits of a repository.",
        (_OWNER, _REPO),
        _get_commits,
    ),
    ToolName.GET_CONTENT: _spec(
        ToolName.GET_CONTENT,
        "Get the content of a file in a repository.",
        (_OWNER, _REPO, _PATH),
        _get_content,
    ),
}


class ToolRegistry:
    """Read-only view over a tool catalogue, shared by every request."""

    def __init__(self, catalogue: Mapping[ToolName, ToolSpec] | None = None) -> None:
        catalogue = CATALOGUE if catalogue is None else catalogue
        self._specs: dict[str, ToolSpec] = {name.value: spec for name, spec in catalogue.items()}
        self._descriptors = tuple(spec.descriptor for spec in self._specs.values())
        logger.debug("Tool registry loaded: %s", list(self._specs))

    def __len__(self) -> int:
        return len(self._specs)

    def describe(self) -> tuple[ToolDescriptor, ...]:
        return self._descriptors

    def lookup(self, name: str) -> ToolDescriptor | None:
        spec = self._specs.get(name)
        return spec.descriptor if spec else None

    def spec(self, name: str) -> ToolSpec | None:
        return self._specs.get(name)
