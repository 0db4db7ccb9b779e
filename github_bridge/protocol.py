"""JSON-RPC 2.0 message models for the MCP stdio wire format."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"


class ErrorCode(int, Enum):
    """JSON-RPC error codes used by the bridge."""

    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class Method(str, Enum):
    """Request methods the dispatcher understands."""

    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    PING = "ping"


class ErrorDescriptor(BaseModel):
    """The ``error`` member of a JSON-RPC response."""

    code: ErrorCode
    message: str
    data: str | None = None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class RequestMessage(BaseModel):
    """An incoming request. ``id`` is opaque and echoed back unchanged."""

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    method: str = ""
    params: Any = None

    model_config = {"extra": "ignore"}

    @field_validator("method", mode="before")
    @classmethod
    def _null_method(cls, value: Any) -> Any:
        return "" if value is None else value


class ResponseMessage(BaseModel):
    """An outgoing response carrying exactly one of ``result`` / ``error``."""

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: Any = None
    error: ErrorDescriptor | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "ResponseMessage":
        if (self.result is None) == (self.error is None):
            raise ValueError("response must carry exactly one of result or error")
        return self

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_wire(self) -> dict[str, Any]:
        out: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            out["error"] = self.error.to_wire()
        else:
            out["result"] = self.result
        return out


class CallToolParams(BaseModel):
    """The ``params`` envelope of a ``tools/call`` request."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _null_arguments(cls, value: Any) -> Any:
        return {} if value is None else value


def decode_request(line: str) -> RequestMessage:
    """Decode one input line. Raises ``pydantic.ValidationError`` on bad input."""
    return RequestMessage.model_validate_json(line)


def encode_response(response: ResponseMessage) -> str:
    return json.dumps(response.to_wire(), default=str)


def success(req_id: Any, result: Any) -> ResponseMessage:
    return ResponseMessage(id=req_id, result=result)


def failure(req_id: Any, code: ErrorCode, message: str, data: str | None = None) -> ResponseMessage:
    return ResponseMessage(id=req_id, error=ErrorDescriptor(code=code, message=message, data=data))
