"""Tool descriptors: name, description and declared input fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Primitive JSON types a tool field may declare."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ToolField:
    name: str
    type: FieldType = FieldType.STRING
    required: bool = False
    description: str = ""


@dataclass(frozen=True)
class ToolDescriptor:
    """Immutable description of one tool, as advertised by ``tools/list``."""

    name: str
    description: str
    fields: tuple[ToolField, ...] = ()

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.required)

    def input_schema(self) -> dict[str, Any]:
        """Render the declared fields as a JSON Schema object."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {
                f.name: {"type": f.type.value, "description": f.description}
                for f in self.fields
            },
        }
        if self.required_fields:
            schema["required"] = list(self.required_fields)
        return schema

    def to_wire(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
