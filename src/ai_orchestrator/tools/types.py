"""
Tool definitions, invocation requests and results.
"""

from typing import Any, Dict, List, Optional

from mcp.types import Tool
from pydantic import BaseModel, Field

from ai_orchestrator.errors import ErrorKind, OrchestratorError
from ai_orchestrator.providers.base import ProviderCallResult

# JSON Schema type name -> accepted Python types
PARAMETER_TYPES = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
    "object": (dict,),
    "array": (list,),
}


class ParameterSpec(BaseModel):
    """One named tool parameter."""

    type: str = "string"
    description: str = ""
    required: bool = False
    enum: Optional[List[str]] = None
    default: Optional[Any] = None

    model_config = {"frozen": True}

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.default is not None:
            schema["default"] = self.default
        return schema


class ToolDefinition(BaseModel):
    """A named operation exposed to the calling agent."""

    name: str
    description: str
    parameters: Dict[str, ParameterSpec] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def required(self) -> List[str]:
        return [name for name, spec in self.parameters.items() if spec.required]

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema object describing the tool's arguments."""
        return {
            "type": "object",
            "properties": {name: spec.json_schema() for name, spec in self.parameters.items()},
            "required": self.required,
        }

    def to_mcp_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema())


class ToolInvocationRequest(BaseModel):
    """A single inbound tool call."""

    tool_name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class ToolResult(BaseModel):
    """Normalized result of a tool invocation."""

    text: str
    is_error: bool = False
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ToolResult":
        return cls(text=f"Error [{kind}]: {message}", is_error=True, error_kind=kind)

    @classmethod
    def from_error(cls, error: OrchestratorError) -> "ToolResult":
        return cls.failure(error.kind, str(error))

    @classmethod
    def from_provider_result(cls, result: ProviderCallResult) -> "ToolResult":
        if result.ok:
            return cls(text=result.text or "")
        return cls(text=result.render(), is_error=True, error_kind=result.error_kind)
