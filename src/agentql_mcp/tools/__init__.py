"""Tool registration and invocation for the AgentQL MCP Server."""

from .registry import ToolRegistry, ToolMetadata, ToolHandler
from .schemas import (
    ToolSchema,
    get_tool_schema,
    TOOL_SCHEMAS,
)
from .extract import ExtractWebDataTool, ExtractRequest
from .invoker import ToolInvoker, create_registry

__all__ = [
    "ToolRegistry",
    "ToolMetadata",
    "ToolHandler",
    "ToolSchema",
    "get_tool_schema",
    "TOOL_SCHEMAS",
    "ExtractWebDataTool",
    "ExtractRequest",
    "ToolInvoker",
    "create_registry",
]
