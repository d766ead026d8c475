"""MCP Server exposing AgentQL web data extraction."""

from .client import AgentQLClient, build_query
from .config import ServerConfig, load_config
from .constants import ErrorCode, ErrorMessage, EXTRACT_TOOL_NAME
from .decorators import handle_errors
from .exceptions import (
    AgentQLMCPError,
    ConfigurationError,
    MissingCredentialError,
    ToolInvocationError,
    UnknownToolError,
    InvalidArgumentsError,
    UpstreamError,
    UpstreamTimeoutError,
    MalformedResponseError,
)
from .server import MCPServer, create_server

__version__ = "1.0.0"

__all__ = [
    "AgentQLClient",
    "build_query",
    "ServerConfig",
    "load_config",
    "ErrorCode",
    "ErrorMessage",
    "EXTRACT_TOOL_NAME",
    "handle_errors",
    "AgentQLMCPError",
    "ConfigurationError",
    "MissingCredentialError",
    "ToolInvocationError",
    "UnknownToolError",
    "InvalidArgumentsError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "MalformedResponseError",
    "MCPServer",
    "create_server",
]
