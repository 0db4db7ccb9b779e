from __future__ import annotations

import pytest

from github_bridge.errors import InvalidParamsError
from github_bridge.tools.arguments import arguments_model, decode_arguments
from github_bridge.tools.registry import CATALOGUE, ToolName, ToolRegistry
from github_bridge.tools.schema import FieldType, ToolDescriptor, ToolField

EXPECTED_ORDER = [
    "get_user",
    "get_repos",
    "get_issues",
    "get_pull_requests",
    "get_commits",
    "get_content",
]


def test_describe_returns_six_tools_in_catalogue_order(registry):
    descriptors = registry.describe()
    assert len(descriptors) == 6
    assert [d.name for d in descriptors] == EXPECTED_ORDER
    assert registry.describe() == descriptors


def test_catalogue_covers_every_tool_name():
    assert set(CATALOGUE) == set(ToolName)
    for name, spec in CATALOGUE.items():
        assert spec.descriptor.name == name.value


def test_every_descriptor_has_name_description_and_schema(registry):
    for d in registry.describe():
        wire = d.to_wire()
        assert wire["name"]
        assert wire["description"]
        schema = wire["inputSchema"]
        assert schema["type"] == "object"
        assert schema["properties"]
        for prop in schema["properties"].values():
            assert prop["type"] == "string"


@pytest.mark.parametrize(
    "name, required",
    [
        ("get_user", ()),
        ("get_repos", ()),
        ("get_issues", ("owner", "repo")),
        ("get_pull_requests", ("owner", "repo")),
        ("get_commits", ("owner", "repo")),
        ("get_content", ("owner", "repo", "path")),
    ],
)
def test_required_fields(registry, name, required):
    descriptor = registry.lookup(name)
    assert descriptor is not None
    assert descriptor.required_fields == required
    schema = descriptor.input_schema()
    assert tuple(schema.get("required", ())) == required


def test_optional_username_declared(registry):
    schema = registry.lookup("get_user").input_schema()
    assert "username" in schema["properties"]
    assert "required" not in schema


def test_lookup_unknown(registry):
    assert registry.lookup("delete_repo") is None
    assert registry.spec("delete_repo") is None


def test_registry_accepts_custom_catalogue():
    reg = ToolRegistry({ToolName.GET_USER: CATALOGUE[ToolName.GET_USER]})
    assert len(reg) == 1
    assert [d.name for d in reg.describe()] == ["get_user"]


def test_descriptor_is_immutable(registry):
    with pytest.raises(AttributeError):
        registry.describe()[0].name = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Argument models
# ---------------------------------------------------------------------------

def test_argument_model_matches_descriptor():
    for spec in CATALOGUE.values():
        model_fields = spec.arguments.model_fields
        assert set(model_fields) == {f.name for f in spec.descriptor.fields}
        required = {n for n, f in model_fields.items() if f.is_required()}
        assert required == set(spec.descriptor.required_fields)


def test_optional_field_absent_is_none():
    args = decode_arguments(CATALOGUE[ToolName.GET_USER].arguments, {})
    assert args.username is None


def test_unknown_arguments_ignored():
    args = decode_arguments(CATALOGUE[ToolName.GET_ISSUES].arguments, {"owner": "o", "repo": "r", "state": "all"})
    assert (args.owner, args.repo) == ("o", "r")


def test_missing_required_fields_rejected():
    with pytest.raises(InvalidParamsError) as exc:
        decode_arguments(CATALOGUE[ToolName.GET_ISSUES].arguments, {})
    assert "owner" in exc.value.detail
    assert "repo" in exc.value.detail


def test_empty_required_string_rejected():
    with pytest.raises(InvalidParamsError) as exc:
        decode_arguments(CATALOGUE[ToolName.GET_CONTENT].arguments, {"owner": "o", "repo": "r", "path": ""})
    assert "path" in exc.value.detail


def test_wrong_type_rejected():
    with pytest.raises(InvalidParamsError) as exc:
        decode_arguments(CATALOGUE[ToolName.GET_COMMITS].arguments, {"owner": 42, "repo": "r"})
    assert "owner" in exc.value.detail


def test_number_and_boolean_fields():
    descriptor = ToolDescriptor(
        "sample",
        "Sample tool",
        (
            ToolField("limit", FieldType.NUMBER, required=True),
            ToolField("verbose", FieldType.BOOLEAN),
        ),
    )
    model = arguments_model(descriptor)
    args = decode_arguments(model, {"limit": 5})
    assert args.limit == 5.0
    assert args.verbose is None
    assert descriptor.input_schema()["properties"]["verbose"]["type"] == "boolean"
    with pytest.raises(InvalidParamsError):
        decode_arguments(model, {"verbose": True})
