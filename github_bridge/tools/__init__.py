"""GitHub tools: descriptors, argument validation, formatting and the registry."""

from github_bridge.tools.registry import CATALOGUE, ToolName, ToolRegistry, ToolSpec
from github_bridge.tools.schema import FieldType, ToolDescriptor, ToolField

__all__ = [
    "CATALOGUE",
    "FieldType",
    "ToolDescriptor",
    "ToolField",
    "ToolName",
    "ToolRegistry",
    "ToolSpec",
]
