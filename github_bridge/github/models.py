"""Typed GitHub REST payloads consumed by the bridge tools.

Only the fields the tools render are declared; anything else GitHub returns
is ignored. GitHub sends ``null`` for unset profile and description fields,
which are normalised to the field default so formatting never sees ``None``.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class GitHubModel(BaseModel):
    """Base for GitHub payloads: ignore unknown keys, map null to default."""

    model_config = {"extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
        return value


class GitHubUser(GitHubModel):
    login: str = ""
    name: str = ""
    bio: str = ""
    location: str = ""
    company: str = ""
    email: str = ""
    html_url: str = ""
    followers: int = 0
    following: int = 0


class GitHubRepo(GitHubModel):
    name: str = ""
    description: str = ""
    private: bool = False
    html_url: str = ""


class GitHubIssue(GitHubModel):
    number: int = 0
    title: str = ""
    state: str = ""
    html_url: str = ""


class GitHubPullRequest(GitHubModel):
    number: int = 0
    title: str = ""
    state: str = ""
    html_url: str = ""


class CommitAuthor(GitHubModel):
    name: str = ""
    email: str = ""
    date: str = ""


class CommitDetail(GitHubModel):
    message: str = ""
    author: CommitAuthor = Field(default_factory=CommitAuthor)


class GitHubCommit(GitHubModel):
    sha: str = ""
    commit: CommitDetail = Field(default_factory=CommitDetail)

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


class GitHubContent(GitHubModel):
    type: str = ""
    size: int = 0
    content: str = ""
    encoding: str = ""
    html_url: str = ""

    def decoded_text(self) -> str:
        """Return the file body as text, decoding base64 when GitHub used it."""
        if self.encoding != "base64":
            return self.content
        try:
            raw = base64.b64decode(self.content, validate=False)
        except (binascii.Error, ValueError):
            return self.content
        return raw.decode("utf-8", errors="replace")
