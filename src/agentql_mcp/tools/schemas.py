"""Tool schema definitions for the AgentQL MCP Server.

This module defines the JSON Schema descriptors for all MCP tools.
"""

from typing import Any

from mcp import types

from ..constants import EXTRACT_TOOL_NAME

# Tool schema definitions following JSON Schema specification
TOOL_SCHEMAS: dict[str, dict[str, Any]] = {
    EXTRACT_TOOL_NAME: {
        "name": EXTRACT_TOOL_NAME,
        "description": (
            "Extracts structured data as JSON from a web page given a URL "
            "using a Natural Language description of the data."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "The URL of the public webpage to extract data from",
                },
                "prompt": {
                    "type": "string",
                    "description": "Natural Language description of the data to extract from the page",
                },
            },
            "required": ["url", "prompt"],
        },
    },
}


class ToolSchema:
    """Tool schema wrapper for easier access."""
    
    def __init__(self, name: str, schema: dict[str, Any]):
        """Initialize tool schema.
        
        Args:
            name: Tool name
            schema: Tool descriptor dictionary
        """
        self.name = name
        self.description = schema.get("description", "")
        self.input_schema = schema.get("inputSchema", {})
    
    def get_required_params(self) -> list[str]:
        """Get list of required parameter names."""
        return self.input_schema.get("required", [])
    
    def validate_required(self, params: dict[str, Any]) -> tuple[bool, list[str]]:
        """Validate that all required parameters are present and non-empty.
        
        Args:
            params: Parameters dictionary
            
        Returns:
            Tuple of (is_valid, missing_params)
        """
        missing = [
            param for param in self.get_required_params()
            if params.get(param) is None or not str(params[param]).strip()
        ]
        return len(missing) == 0, missing

    def to_mcp_tool(self) -> types.Tool:
        """Convert to the MCP protocol tool descriptor."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


def get_tool_schema(name: str) -> ToolSchema | None:
    """Get tool schema by name.
    
    Args:
        name: Tool name
        
    Returns:
        ToolSchema instance if found, None otherwise
    """
    if name not in TOOL_SCHEMAS:
        return None
    return ToolSchema(name, TOOL_SCHEMAS[name])
