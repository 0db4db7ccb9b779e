"""MCP method routing for the GitHub bridge.

The dispatcher is the single place where bridge errors become JSON-RPC
error responses. It holds no per-session state: ``tools/call`` is accepted
whether or not ``initialize`` was seen first.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from github_bridge import __version__
from github_bridge.errors import GitHubAPIError, InvalidParamsError
from github_bridge.github.client import ResourceAdapter
from github_bridge.protocol import (
    PROTOCOL_VERSION,
    CallToolParams,
    ErrorCode,
    Method,
    RequestMessage,
    ResponseMessage,
    failure,
    success,
)
from github_bridge.tools.arguments import decode_arguments, describe_validation_error
from github_bridge.tools.formatting import format_error
from github_bridge.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "github-bridge"
PING_RESULT = {"status": "pong"}


class Dispatcher:
    """Route decoded requests to handshake, tool listing, tool calls and ping."""

    def __init__(self, registry: ToolRegistry, adapter: ResourceAdapter) -> None:
        self.registry = registry
        self.adapter = adapter

    def handle(self, request: RequestMessage) -> ResponseMessage:
        method = request.method
        if method == Method.INITIALIZE.value:
            return success(request.id, self._initialize_result())
        if method == Method.TOOLS_LIST.value:
            return success(request.id, {"tools": [d.to_wire() for d in self.registry.describe()]})
        if method == Method.TOOLS_CALL.value:
            return self._call_tool(request)
        if method == Method.PING.value:
            return success(request.id, dict(PING_RESULT))

        logger.debug("Unknown method: %r", method)
        return failure(request.id, ErrorCode.METHOD_NOT_FOUND, "Method not found", f"Unknown method: {method}")

    @staticmethod
    def _initialize_result() -> dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": {"name": SERVER_NAME, "version": __version__},
        }

    def _call_tool(self, request: RequestMessage) -> ResponseMessage:
        req_id = request.id
        try:
            params = CallToolParams.model_validate(request.params)
        except ValidationError as e:
            detail = describe_validation_error(e, root="params")
            return failure(req_id, ErrorCode.INVALID_PARAMS, "Invalid params", detail)

        spec = self.registry.spec(params.name)
        if spec is None:
            return failure(req_id, ErrorCode.METHOD_NOT_FOUND, "Tool not found", f"Unknown tool: {params.name}")

        try:
            args = decode_arguments(spec.arguments, params.arguments)
        except InvalidParamsError as e:
            return failure(req_id, ErrorCode.INVALID_PARAMS, "Invalid params", e.detail)

        try:
            text = spec.run(self.adapter, args)
        except GitHubAPIError as e:
            logger.warning("Tool %s failed: %s", params.name, e.cause)
            return ResponseMessage(id=req_id, error=format_error(e))
        except Exception as e:
            logger.exception("Tool %s raised unexpectedly", params.name)
            return failure(req_id, ErrorCode.INTERNAL_ERROR, "Internal error", str(e) or e.__class__.__name__)

        return success(req_id, {"content": [{"type": "text", "text": text}]})
