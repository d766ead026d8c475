"""Exception hierarchy for the AgentQL MCP Server.

Startup errors are fatal and end the process. Invocation errors are reported
back to the MCP client as error results.
"""

from .constants import ErrorCode


class AgentQLMCPError(Exception):
    """Base class for all server errors."""

    error_code: ErrorCode = ErrorCode.UNEXPECTED_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(AgentQLMCPError):
    """Raised when configuration values are invalid."""

    error_code = ErrorCode.INVALID_CONFIG


class MissingCredentialError(ConfigurationError):
    """Raised at startup when the AgentQL API key is not set."""

    error_code = ErrorCode.MISSING_CREDENTIAL


class ToolInvocationError(AgentQLMCPError):
    """Base class for errors raised while invoking a tool."""


class UnknownToolError(ToolInvocationError):
    """Raised when a tool name does not match any registered tool."""

    error_code = ErrorCode.UNKNOWN_TOOL

    def __init__(self, message: str, tool_name: str):
        super().__init__(message)
        self.tool_name = tool_name


class InvalidArgumentsError(ToolInvocationError):
    """Raised when tool arguments fail validation."""

    error_code = ErrorCode.INVALID_ARGUMENTS


class UpstreamError(ToolInvocationError):
    """Raised when the AgentQL API answers with a non-success status."""

    error_code = ErrorCode.UPSTREAM_ERROR

    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UpstreamTimeoutError(ToolInvocationError):
    """Raised when the AgentQL API does not answer within the timeout."""

    error_code = ErrorCode.UPSTREAM_TIMEOUT


class MalformedResponseError(ToolInvocationError):
    """Raised when a successful AgentQL response cannot be reshaped."""

    error_code = ErrorCode.MALFORMED_RESPONSE
