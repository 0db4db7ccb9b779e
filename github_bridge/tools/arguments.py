"""Tool descriptor -> Pydantic argument model conversion and validation.

Each tool's arguments are decoded into a model generated from its
descriptor, so the advertised schema and the enforced schema are the same
object. Required fields must be present, of the declared type, and (for
strings) non-empty. Optional fields that are absent decode to ``None``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError, create_model

from github_bridge.errors import InvalidParamsError
from github_bridge.tools.schema import FieldType, ToolDescriptor, ToolField

_PRIMITIVES: dict[FieldType, type] = {
    FieldType.STRING: str,
    FieldType.NUMBER: float,
    FieldType.BOOLEAN: bool,
}


class ToolArguments(BaseModel):
    """Base for generated argument models. Unknown keys are ignored."""

    model_config = {"extra": "ignore", "frozen": True}


def _field_definition(field: ToolField) -> tuple[Any, Any]:
    py_type = _PRIMITIVES[field.type]
    if field.required:
        if field.type is FieldType.STRING:
            return (py_type, Field(..., min_length=1, description=field.description))
        return (py_type, Field(..., description=field.description))
    return (py_type | None, Field(None, description=field.description))


def arguments_model(descriptor: ToolDescriptor) -> type[ToolArguments]:
    """Build the argument model for a tool descriptor."""
    model_name = "".join(part.title() for part in descriptor.name.split("_")) + "Args"
    fields = {f.name: _field_definition(f) for f in descriptor.fields}
    return create_model(model_name, __base__=ToolArguments, **fields)  # type: ignore[call-overload]


def describe_validation_error(error: ValidationError, root: str = "arguments") -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or root
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def decode_arguments(model: type[ToolArguments], arguments: dict[str, Any]) -> ToolArguments:
    """Validate raw ``arguments`` against ``model``.

    Raises ``InvalidParamsError`` with a per-field diagnostic on failure.
    """
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise InvalidParamsError(describe_validation_error(e)) from e
