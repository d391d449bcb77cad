"""
Tests for tool contracts and the tool registry.
"""
import dataclasses

import pytest

from tablemind.errors import NotFoundError, ToolNotFoundError
from tablemind.tools.builtin import CHART_TOOL, FILTER_TOOL, STATISTICS_TOOL
from tablemind.tools.registry import ToolRegistry
from tablemind.tools.schema import Tool


def make_tool(name="echo", **kwargs):
    fields = dict(
        name=name,
        description="Echo back text",
        connector_name="local",
        input_schema={"text": "string"},
        output_schema={"text": "string"},
    )
    fields.update(kwargs)
    return Tool(**fields)


class TestToolContract:
    """Invariants and LLM-facing schema rendering."""

    def test_rejects_blank_name(self):
        with pytest.raises(ValueError):
            make_tool(name="")

    def test_rejects_unknown_hint(self):
        with pytest.raises(ValueError):
            make_tool(input_schema={"text": "strin"})

    def test_rejects_enum_for_undeclared_field(self):
        with pytest.raises(ValueError):
            make_tool(enums={"mode": ("a",)})

    def test_is_frozen(self):
        tool = make_tool()

        with pytest.raises(dataclasses.FrozenInstanceError):
            tool.name = "other"

    def test_chart_parameter_schema(self):
        schema = CHART_TOOL.parameter_schema

        assert schema["type"] == "object"
        assert "userId" not in schema["properties"]
        assert schema["required"] == ["type", "title"]
        assert schema["properties"]["type"]["enum"] == ["bar", "xy"]
        assert schema["properties"]["data"] == {
            "type": "array",
            "items": {"type": "object"},
            "description": CHART_TOOL.field_descriptions["data"],
        }

    def test_statistics_fields_are_all_optional(self):
        schema = STATISTICS_TOOL.parameter_schema

        assert schema["required"] == []
        assert schema["properties"]["numbers"]["items"] == {"type": "number"}

    def test_filter_operator_enum(self):
        enum = FILTER_TOOL.parameter_schema["properties"]["operator"]["enum"]

        assert ">=" in enum and "between" in enum

    def test_function_spec_shape(self):
        spec = make_tool().to_function_spec()

        assert spec == {
            "type": "function",
            "function": {
                "name": "echo",
                "description": "Echo back text",
                "parameters": {
                    "type": "object",
                    "properties": {"text": {"type": "string"}},
                    "required": ["text"],
                },
            },
        }


class TestToolRegistry:

    def setup_method(self):
        self.registry = ToolRegistry()

    def test_register_and_get(self):
        tool = make_tool()
        self.registry.register(tool)

        assert self.registry.get("echo") is tool
        assert "echo" in self.registry
        assert len(self.registry) == 1

    def test_duplicate_registration_fails(self):
        self.registry.register(make_tool())

        with pytest.raises(ValueError):
            self.registry.register(make_tool())

    def test_register_many_is_atomic(self):
        with pytest.raises(ValueError):
            self.registry.register_many([make_tool("a"), make_tool("a")])

        assert len(self.registry) == 0

    def test_unknown_tool_is_not_found(self):
        with pytest.raises(ToolNotFoundError) as exc:
            self.registry.get("missing")

        assert isinstance(exc.value, NotFoundError)

    def test_schema_copies_are_independent(self):
        self.registry.register(make_tool())

        schema = self.registry.get_input_schema("echo")
        schema["extra"] = "int"

        assert "extra" not in self.registry.get("echo").input_schema

    def test_function_specs_sorted_by_name(self):
        self.registry.register_many([STATISTICS_TOOL, CHART_TOOL, FILTER_TOOL])

        names = [s["function"]["name"] for s in self.registry.get_function_specs()]

        assert names == [
            "compute_avg_count_sum_min_max_median",
            "create_plot",
            "filter_numeric",
        ]
        assert self.registry.list_tool_names() == names
