"""Tool invocation for the AgentQL MCP Server.

Dispatches a tool call to its registered handler and converts failures
into MCP error results.
"""

import logging
from typing import Any, Optional

from mcp import types

from ..client import AgentQLClient
from ..constants import ErrorMessage
from ..decorators import handle_errors
from ..exceptions import UnknownToolError
from .extract import ExtractWebDataTool
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolInvoker:
    """Routes tool calls to handlers through the registry."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    async def call(
        self,
        name: str,
        arguments: Optional[dict[str, Any]] = None,
    ) -> list[types.TextContent]:
        """Invoke a tool by name.
        
        Args:
            name: Tool name
            arguments: Tool arguments
            
        Returns:
            Content blocks produced by the tool
            
        Raises:
            UnknownToolError: If no tool is registered under ``name``
            ToolInvocationError: If validation or the upstream call fails
        """
        handler = self.registry.get_handler(name)
        if handler is None:
            raise UnknownToolError(ErrorMessage.UNKNOWN_TOOL.format(name=name), tool_name=name)

        logger.info(f"Invoking tool: {name}")
        validated = handler.validate(arguments or {})
        return await handler.execute(validated)

    @handle_errors
    async def invoke(
        self,
        name: str,
        arguments: Optional[dict[str, Any]] = None,
    ) -> list[types.TextContent]:
        """Invoke a tool, reporting any failure as an error result."""
        return await self.call(name, arguments)


def create_registry(client: AgentQLClient) -> ToolRegistry:
    """Build the registry holding every tool this server exposes."""
    registry = ToolRegistry()
    registry.register(ExtractWebDataTool(client))
    return registry
