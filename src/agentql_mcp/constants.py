"""Constants for the AgentQL MCP Server.

This module defines all constants, enums, and error messages used throughout
the server to avoid magic strings.
"""

from enum import Enum

SERVER_NAME = "agentql-mcp"
SERVER_VERSION = "1.0.0"

EXTRACT_TOOL_NAME = "extract-web-data"

# Upstream AgentQL REST API
AGENTQL_API_URL = "https://api.agentql.com/v1/query-data"
API_KEY_HEADER = "X-API-Key"
REQUEST_ORIGIN_HEADER = "X-TF-Request-Origin"
REQUEST_ORIGIN = "mcp-server"
DEFAULT_TIMEOUT_SECONDS = 900.0

# Fixed query options sent with every extraction
QUERY_PARAMS = {
    "wait_for": 0,
    "is_scroll_to_bottom_enabled": False,
    "mode": "fast",
    "is_screenshot_enabled": False,
}

# Environment variables
ENV_API_KEY = "AGENTQL_API_KEY"
ENV_API_URL = "AGENTQL_API_URL"
ENV_TIMEOUT = "AGENTQL_TIMEOUT"
ENV_LOG_LEVEL = "AGENTQL_LOG_LEVEL"
ENV_LOG_FORMAT = "AGENTQL_LOG_FORMAT"
ENV_CONFIG_FILE = "AGENTQL_MCP_CONFIG"


class ErrorCode(str, Enum):
    """Error code identifiers for error categorization."""
    
    # Startup errors
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    INVALID_CONFIG = "INVALID_CONFIG"
    
    # Invocation errors
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
    
    # Upstream errors
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    
    # Generic errors
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class ErrorMessage:
    """Error message templates."""
    
    MISSING_CREDENTIAL = f"{ENV_API_KEY} environment variable is required"
    INVALID_TIMEOUT = "Timeout must be a positive number of seconds"
    UNKNOWN_TOOL = "Unknown tool: '{name}'"
    MISSING_URL_OR_PROMPT = "Both 'url' and 'prompt' are required"
    UPSTREAM_ERROR = "AgentQL API error: {reason}\n{body}"
    UPSTREAM_TIMEOUT = "AgentQL API request timed out after {timeout} seconds"
    NOT_JSON = "AgentQL API returned a response that is not valid JSON"
    MISSING_DATA = "AgentQL API response does not contain a 'data' field"
    UNEXPECTED_ERROR = "Unexpected error occurred"
