"""Plain-text rendering of GitHub payloads for tool results.

Pure functions: no I/O, no hidden state. The same payload always renders
to the same text. Listings start with an item count and render one block
per item; single entities render one field per line.
"""

from __future__ import annotations

from collections.abc import Sequence

from github_bridge.errors import GitHubAPIError
from github_bridge.github.models import (
    GitHubCommit,
    GitHubContent,
    GitHubIssue,
    GitHubPullRequest,
    GitHubRepo,
    GitHubUser,
)
from github_bridge.protocol import ErrorCode, ErrorDescriptor


def format_user(user: GitHubUser) -> str:
    return "\n".join([
        f"User: {user.login}",
        f"Name: {user.name}",
        f"Bio: {user.bio}",
        f"Location: {user.location}",
        f"Company: {user.company}",
        f"Email: {user.email}",
        f"Followers: {user.followers}",
        f"Following: {user.following}",
        f"URL: {user.html_url}",
    ])


def format_repos(repos: Sequence[GitHubRepo]) -> str:
    lines = [f"Repositories ({len(repos)}):", ""]
    for repo in repos:
        lines.append(f"- {repo.name}")
        lines.append(f"  Description: {repo.description}")
        lines.append(f"  Visibility: {'private' if repo.private else 'public'}")
        lines.append(f"  URL: {repo.html_url}")
        lines.append("")
    return "\n".join(lines) + "\n"


def _format_numbered(title: str, items: Sequence[GitHubIssue | GitHubPullRequest]) -> str:
    lines = [f"{title} ({len(items)}):", ""]
    for item in items:
        lines.append(f"- #{item.number}: {item.title}")
        lines.append(f"  State: {item.state}")
        lines.append(f"  URL: {item.html_url}")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_issues(owner: str, repo: str, issues: Sequence[GitHubIssue]) -> str:
    return _format_numbered(f"Issues for {owner}/{repo}", issues)


def format_pull_requests(owner: str, repo: str, pulls: Sequence[GitHubPullRequest]) -> str:
    return _format_numbered(f"Pull requests for {owner}/{repo}", pulls)


def format_commits(owner: str, repo: str, commits: Sequence[GitHubCommit]) -> str:
    lines = [f"Commits for {owner}/{repo} ({len(commits)}):", ""]
    for commit in commits:
        author = commit.commit.author
        lines.append(f"- {commit.short_sha}")
        lines.append(f"  Message: {commit.commit.message}")
        lines.append(f"  Author: {author.name} ({author.email})")
        lines.append(f"  Date: {author.date}")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_content(owner: str, repo: str, path: str, content: GitHubContent) -> str:
    text = (
        f"Content of {owner}/{repo}/{path}:\n\n"
        f"Type: {content.type}\n"
        f"Size: {content.size} bytes\n"
        f"URL: {content.html_url}\n"
    )
    body = content.decoded_text()
    if body:
        text += "\nContent:\n" + body
    return text


def format_error(error: GitHubAPIError) -> ErrorDescriptor:
    """Map an adapter failure to an internal-error descriptor."""
    return ErrorDescriptor(
        code=ErrorCode.INTERNAL_ERROR,
        message="Internal error",
        data=error.cause or "GitHub request failed",
    )
