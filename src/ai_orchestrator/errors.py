"""
Error kinds and exceptions shared across the AI Orchestrator server.

Errors are data: provider and dispatcher failures are turned into results
carrying an ``ErrorKind`` rather than escaping to the transport.
"""

import enum


class ErrorKind(str, enum.Enum):
    """Classification of a failed provider call or tool invocation."""

    MISSING_CREDENTIAL = "MissingCredential"
    PROVIDER_UNAVAILABLE = "ProviderUnavailable"
    INVALID_RESPONSE = "InvalidResponse"
    UNKNOWN_TOOL = "UnknownTool"
    INVALID_ARGUMENTS = "InvalidArguments"
    HANDLER_FAILURE = "HandlerFailure"

    def __str__(self) -> str:
        return self.value


class OrchestratorError(Exception):
    """Base class for errors that map onto an ErrorKind."""

    kind: ErrorKind = ErrorKind.HANDLER_FAILURE


class ProviderUnavailableError(OrchestratorError):
    """Transport failure, timeout or non-success status from a provider."""

    kind = ErrorKind.PROVIDER_UNAVAILABLE


class InvalidResponseError(OrchestratorError):
    """Provider answered with success but the body did not match its envelope."""

    kind = ErrorKind.INVALID_RESPONSE


class UnknownToolError(OrchestratorError):
    """No tool is registered under the requested name."""

    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class InvalidArgumentsError(OrchestratorError):
    """Tool arguments failed validation against the tool's parameters."""

    kind = ErrorKind.INVALID_ARGUMENTS
