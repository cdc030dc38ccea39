"""
Tool registry for the AI Orchestrator server.

The registry is built once at startup from a static table and is read-only
afterwards.
"""

from typing import Any, Awaitable, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ai_orchestrator.errors import InvalidArgumentsError, UnknownToolError
from ai_orchestrator.tools.types import PARAMETER_TYPES, ToolDefinition, ToolResult

ToolHandler = Callable[[Dict[str, Any]], Awaitable[ToolResult]]
"""
An async callable receiving validated arguments and producing a ToolResult.
"""


class RegisteredTool:
    """A tool definition paired with its handler."""

    __slots__ = ("definition", "handler")

    def __init__(self, definition: ToolDefinition, handler: ToolHandler):
        self.definition = definition
        self.handler = handler

    @property
    def name(self) -> str:
        return self.definition.name


class ToolRegistry:
    """
    Maps tool names to definitions and handlers.

    Tools are listed in the order they were given.
    """

    def __init__(self, entries: Iterable[Tuple[ToolDefinition, ToolHandler]]):
        """
        Build the registry.

        Args:
            entries: (definition, handler) pairs.

        Raises:
            ValueError: If two entries share a name.
        """
        self._tools: Dict[str, RegisteredTool] = {}
        for definition, handler in entries:
            if definition.name in self._tools:
                raise ValueError(f"Tool '{definition.name}' is already registered")
            self._tools[definition.name] = RegisteredTool(definition, handler)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def list(self) -> List[ToolDefinition]:
        """Return every tool definition, for discovery by the calling agent."""
        return [tool.definition for tool in self._tools.values()]

    def resolve(self, name: str) -> RegisteredTool:
        """
        Look up a tool by name.

        Raises:
            UnknownToolError: If no tool has that name.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def validate(self, name: str, arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Check arguments against a tool's parameters.

        Unknown arguments are ignored and left out of the result. Missing
        optional arguments take their declared default, if any.

        Args:
            name: Tool name.
            arguments: Raw arguments from the request.

        Returns:
            Normalized arguments.

        Raises:
            UnknownToolError: If no tool has that name.
            InvalidArgumentsError: If a required argument is missing or a
                value has the wrong type or is outside its enum.
        """
        definition = self.resolve(name).definition
        arguments = arguments or {}
        validated: Dict[str, Any] = {}

        for param_name, spec in definition.parameters.items():
            value = arguments.get(param_name)

            if value is None:
                if spec.required:
                    raise InvalidArgumentsError(f"{name}: missing required argument '{param_name}'")
                if spec.default is not None:
                    validated[param_name] = spec.default
                continue

            accepted = PARAMETER_TYPES.get(spec.type)
            if accepted is not None:
                # bool is an int subclass; keep it out of numeric parameters
                wrong_bool = isinstance(value, bool) and spec.type in ("integer", "number")
                if wrong_bool or not isinstance(value, accepted):
                    raise InvalidArgumentsError(
                        f"{name}: argument '{param_name}' must be of type {spec.type}"
                    )

            if spec.enum is not None and value not in spec.enum:
                allowed = ", ".join(spec.enum)
                raise InvalidArgumentsError(
                    f"{name}: argument '{param_name}' must be one of: {allowed}"
                )

            validated[param_name] = value

        return validated
