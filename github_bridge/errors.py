"""Bridge exception hierarchy.

All bridge exceptions inherit from ``BridgeError`` so the dispatcher can
convert them to JSON-RPC error responses in one place.
"""

from __future__ import annotations


class BridgeError(Exception):
    """Base exception for all bridge failures."""


class ConfigurationError(BridgeError):
    """Raised at startup when required settings are missing."""

    def __init__(self, setting: str) -> None:
        super().__init__(f"{setting} is not set")
        self.setting = setting


class InvalidParamsError(BridgeError):
    """Raised when a tool invocation does not match its declared schema."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class GitHubAPIError(BridgeError):
    """Raised when a GitHub call fails.

    Attributes
    ----------
    status_code : int | None
        HTTP status returned by GitHub, or ``None`` for transport failures
        (timeouts, connection errors) and undecodable bodies.
    cause : str
        Human-readable failure cause, forwarded to the caller as the
        JSON-RPC error ``data``.
    """

    def __init__(self, cause: str, status_code: int | None = None) -> None:
        super().__init__(cause)
        self.cause = cause
        self.status_code = status_code
