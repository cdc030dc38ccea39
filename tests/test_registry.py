"""Tests for the tool registry and the static tool table."""

import pytest

from ai_orchestrator.errors import ErrorKind, InvalidArgumentsError, UnknownToolError
from ai_orchestrator.tools.catalog import build_registry
from ai_orchestrator.tools.registry import ToolRegistry
from ai_orchestrator.tools.types import ParameterSpec, ToolDefinition, ToolResult


async def _noop(arguments):
    return ToolResult(text="ok")


class TestToolTable:
    """Tests for the tools exposed to the calling agent."""

    def test_lists_four_tools_in_order(self, fake_providers):
        registry = build_registry(fake_providers)

        assert [tool.name for tool in registry.list()] == [
            "ask_gemini",
            "ask_gpt4",
            "ask_grok",
            "multi_ai_review",
        ]

    def test_ask_tool_schema(self, fake_providers):
        definition = build_registry(fake_providers).resolve("ask_gemini").definition
        schema = definition.input_schema()

        assert schema["type"] == "object"
        assert schema["required"] == ["prompt"]
        assert set(schema["properties"]) == {"prompt", "code"}
        assert schema["properties"]["prompt"]["description"] == "The prompt to send to Gemini"

    def test_review_tool_schema(self, fake_providers):
        definition = build_registry(fake_providers).resolve("multi_ai_review").definition
        schema = definition.input_schema()

        assert schema["required"] == ["code"]
        assert schema["properties"]["focus"]["enum"] == ["architecture", "security", "quality", "all"]
        assert schema["properties"]["focus"]["default"] == "all"

    def test_mcp_tool_conversion(self, fake_providers):
        tool = build_registry(fake_providers).resolve("ask_grok").definition.to_mcp_tool()

        assert tool.name == "ask_grok"
        assert "edge cases" in tool.description
        assert tool.inputSchema["required"] == ["prompt"]

    def test_missing_provider_is_rejected(self, fake_providers):
        with pytest.raises(ValueError, match="ask_grok"):
            build_registry(fake_providers[:2])


class TestToolRegistry:
    """Tests for ToolRegistry resolution and validation."""

    def test_duplicate_names_rejected(self):
        definition = ToolDefinition(name="echo", description="Echo")

        with pytest.raises(ValueError, match="already registered"):
            ToolRegistry([(definition, _noop), (definition, _noop)])

    def test_resolve_unknown(self, fake_providers):
        registry = build_registry(fake_providers)

        with pytest.raises(UnknownToolError) as excinfo:
            registry.resolve("ask_claude")

        assert excinfo.value.kind is ErrorKind.UNKNOWN_TOOL
        assert excinfo.value.tool_name == "ask_claude"

    def test_missing_required_argument(self, fake_providers):
        registry = build_registry(fake_providers)

        with pytest.raises(InvalidArgumentsError, match="prompt"):
            registry.validate("ask_gpt4", {"code": "x = 1"})

    def test_none_counts_as_missing(self, fake_providers):
        registry = build_registry(fake_providers)

        with pytest.raises(InvalidArgumentsError):
            registry.validate("multi_ai_review", {"code": None})

    def test_unknown_arguments_ignored(self, fake_providers):
        registry = build_registry(fake_providers)

        validated = registry.validate("ask_gpt4", {"prompt": "hi", "temperature": 0.2})

        assert validated == {"prompt": "hi"}

    def test_focus_defaults_to_all(self, fake_providers):
        registry = build_registry(fake_providers)

        assert registry.validate("multi_ai_review", {"code": "x"}) == {"code": "x", "focus": "all"}

    @pytest.mark.parametrize("focus", ["architecture", "security", "quality", "all"])
    def test_valid_requests_pass(self, fake_providers, focus):
        registry = build_registry(fake_providers)

        validated = registry.validate("multi_ai_review", {"code": "x", "focus": focus})

        assert validated["focus"] == focus

    def test_focus_outside_enum(self, fake_providers):
        registry = build_registry(fake_providers)

        with pytest.raises(InvalidArgumentsError, match="must be one of"):
            registry.validate("multi_ai_review", {"code": "x", "focus": "performance"})

    def test_wrong_type(self, fake_providers):
        registry = build_registry(fake_providers)

        with pytest.raises(InvalidArgumentsError, match="type string"):
            registry.validate("ask_gemini", {"prompt": 42})

    def test_boolean_is_not_a_number(self):
        definition = ToolDefinition(
            name="count",
            description="Count",
            parameters={"n": ParameterSpec(type="integer", required=True)},
        )
        registry = ToolRegistry([(definition, _noop)])

        assert registry.validate("count", {"n": 3}) == {"n": 3}
        with pytest.raises(InvalidArgumentsError):
            registry.validate("count", {"n": True})
