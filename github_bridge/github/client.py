"""GitHub REST client used by the bridge tools.

One method per tool, each issuing exactly one GET against the GitHub API.
Every failure (non-2xx status, transport error, timeout, unexpected body)
is raised as ``GitHubAPIError``; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from github_bridge import __version__
from github_bridge.errors import GitHubAPIError
from github_bridge.github.models import (
    GitHubCommit,
    GitHubContent,
    GitHubIssue,
    GitHubPullRequest,
    GitHubRepo,
    GitHubUser,
)

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"github-bridge/{__version__}"

T = TypeVar("T")

_USER = TypeAdapter(GitHubUser)
_REPOS = TypeAdapter(list[GitHubRepo])
_ISSUES = TypeAdapter(list[GitHubIssue])
_PULLS = TypeAdapter(list[GitHubPullRequest])
_COMMITS = TypeAdapter(list[GitHubCommit])
_CONTENT = TypeAdapter(GitHubContent)


def _segment(value: str) -> str:
    """Percent-encode one URL path segment, slashes included."""
    return quote(value, safe="")


class ResourceAdapter(Protocol):
    """The six GitHub operations the tools call. ``GitHubClient`` implements it."""

    def get_user(self, username: str | None = None) -> GitHubUser: ...

    def get_repos(self, username: str | None = None) -> list[GitHubRepo]: ...

    def get_issues(self, owner: str, repo: str) -> list[GitHubIssue]: ...

    def get_pull_requests(self, owner: str, repo: str) -> list[GitHubPullRequest]: ...

    def get_commits(self, owner: str, repo: str) -> list[GitHubCommit]: ...

    def get_content(self, owner: str, repo: str, path: str) -> GitHubContent: ...


class GitHubClient:
    """Synchronous GitHub REST client authenticated with a personal token."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github.v3+json",
                "User-Agent": USER_AGENT,
            },
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _get(self, path: str) -> Any:
        """GET ``path`` and return the decoded JSON body of a 2xx response."""
        try:
            response = self._http.get(path)
        except httpx.HTTPError as e:
            logger.debug("GitHub GET %s failed: %s", path, e)
            raise GitHubAPIError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            cause = f"GitHub API error: {response.status_code} {response.reason_phrase}".rstrip()
            logger.debug("GitHub GET %s -> %s", path, response.status_code)
            raise GitHubAPIError(cause, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON from GitHub: {e}", status_code=response.status_code) from e

    @staticmethod
    def _decode(payload: Any, adapter: TypeAdapter[T]) -> T:
        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            raise GitHubAPIError(f"Unexpected GitHub response: {e.error_count()} invalid field(s)") from e

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def get_user(self, username: str | None = None) -> GitHubUser:
        """Fetch a user profile, or the authenticated user when no name is given."""
        path = f"/users/{_segment(username)}" if username else "/user"
        return self._decode(self._get(path), _USER)

    def get_repos(self, username: str | None = None) -> list[GitHubRepo]:
        """List a user's repositories, or the authenticated user's."""
        path = f"/users/{_segment(username)}/repos" if username else "/user/repos"
        return self._decode(self._get(path), _REPOS)

    def get_issues(self, owner: str, repo: str) -> list[GitHubIssue]:
        return self._decode(self._get(f"/repos/{_segment(owner)}/{_segment(repo)}/issues"), _ISSUES)

    def get_pull_requests(self, owner: str, repo: str) -> list[GitHubPullRequest]:
        return self._decode(self._get(f"/repos/{_segment(owner)}/{_segment(repo)}/pulls"), _PULLS)

    def get_commits(self, owner: str, repo: str) -> list[GitHubCommit]:
        return self._decode(self._get(f"/repos/{_segment(owner)}/{_segment(repo)}/commits"), _COMMITS)

    def get_content(self, owner: str, repo: str, path: str) -> GitHubContent:
        """Fetch a single file. Directories are reported as a failure."""
        file_path = quote(path.lstrip("/"), safe="/")
        data = self._get(f"/repos/{_segment(owner)}/{_segment(repo)}/contents/{file_path}")
        if isinstance(data, list):
            raise GitHubAPIError(f"'{path}' is a directory, not a file")
        return self._decode(data, _CONTENT)
