"""Tool registry for the AgentQL MCP Server.

This module implements the registry that answers tool discovery requests
and maps tool names to their handlers.
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from mcp import types

from .schemas import ToolSchema

logger = logging.getLogger(__name__)


class ToolHandler(Protocol):
    """Uniform contract implemented by every tool handler."""

    schema: ToolSchema

    def validate(self, arguments: dict[str, Any]) -> Any:
        """Check arguments and return the validated input."""
        ...

    async def execute(self, validated: Any) -> list[types.TextContent]:
        """Run the tool on validated input."""
        ...


@dataclass(frozen=True)
class ToolMetadata:
    """Metadata for a registered tool."""
    
    name: str
    handler: ToolHandler
    schema: ToolSchema


class ToolRegistry:
    """Registry for managing MCP tools.
    
    This registry provides:
    - Tool registration and discovery
    - Name-based routing to handlers
    """
    
    def __init__(self):
        """Initialize empty tool registry."""
        self._tools: dict[str, ToolMetadata] = {}
        logger.debug("Tool registry initialized")
    
    def register(self, handler: ToolHandler) -> None:
        """Register a tool in the registry.
        
        Args:
            handler: Tool handler carrying its schema
            
        Raises:
            ValueError: If a tool with the same name is already registered
        """
        name = handler.schema.name
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered")
        
        self._tools[name] = ToolMetadata(
            name=name,
            handler=handler,
            schema=handler.schema,
        )
        logger.info(f"Registered tool: {name}")
    
    def get_handler(self, name: str) -> ToolHandler | None:
        """Get tool handler by name.
        
        Args:
            name: Tool name
            
        Returns:
            Handler if registered, None otherwise
        """
        tool = self._tools.get(name)
        return tool.handler if tool else None
    
    def list_descriptors(self) -> list[types.Tool]:
        """Get MCP descriptors of all registered tools.
        
        Returns:
            List of tool descriptors, in registration order
        """
        return [tool.schema.to_mcp_tool() for tool in self._tools.values()]
    
    def count(self) -> int:
        """Get total number of registered tools."""
        return len(self._tools)
