"""MCP Server implementation for AgentQL.

This module implements the MCP server with stdio transport, lifecycle
management, and tool capability declaration.
"""

import json
import logging
import sys
import time
from typing import Any, Optional

import httpx
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .client import AgentQLClient
from .config import ServerConfig, load_config
from .tools.invoker import ToolInvoker, create_registry

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(config: ServerConfig) -> None:
    """Configure the root logger.
    
    Logs always go to stderr since stdout carries the protocol stream.
    
    Args:
        config: Server configuration with log level, format and file
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    
    # Remove existing handlers
    root_logger.handlers.clear()
    
    if config.log_format == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    
    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logger.info(f"Logging to file: {config.log_file}")


class MCPServer:
    """MCP Server exposing AgentQL web data extraction as a tool."""

    def __init__(
        self,
        config: ServerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        configure_logging: bool = True,
    ):
        """Initialize MCP Server.
        
        Args:
            config: Immutable server configuration
            transport: Optional httpx transport for the AgentQL client
            configure_logging: Whether to configure the root logger
        """
        self.config = config
        self.name = config.name
        self.version = config.version
        
        if configure_logging:
            setup_logging(config)
        
        self.client = AgentQLClient(config, transport=transport)
        self.tool_registry = create_registry(self.client)
        self.invoker = ToolInvoker(self.tool_registry)
        
        self.server = Server(self.name, version=self.version)
        self._register_capabilities()
        
        logger.info(f"Initialized {self.name} MCP Server v{self.version}")
        logger.info(f"Upstream: {config.api_url} (timeout {config.timeout}s)")

    def _register_capabilities(self) -> None:
        """Register the tools/list and tools/call request handlers."""
        registry = self.tool_registry
        invoker = self.invoker
        
        @self.server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return registry.list_descriptors()
        
        # Arguments are validated by the tool handlers themselves
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
            return await invoker.invoke(name, arguments)
        
        logger.info(f"✓ Registered {registry.count()} tools")

    async def start(self) -> None:
        """Start the MCP server on stdio and serve until the client disconnects."""
        logger.info("Starting MCP server...")
        
        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("✓ stdio transport initialized")
                logger.info("Server ready. Waiting for requests...")
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        except KeyboardInterrupt:
            logger.info("Received interrupt signal. Shutting down...")
        except Exception as e:
            logger.error(f"Server error: {e}", exc_info=True)
            raise
        finally:
            logger.info("MCP server stopped")


def create_server(
    config: Optional[ServerConfig] = None,
    **kwargs: Any,
) -> MCPServer:
    """Factory function to create an MCP server instance.
    
    Args:
        config: Server configuration. If None, it is loaded from the
                environment and config/server.yaml
        **kwargs: Passed through to MCPServer
        
    Returns:
        MCPServer instance
        
    Raises:
        MissingCredentialError: If no config is given and AGENTQL_API_KEY is unset
    """
    if config is None:
        config = load_config()
    return MCPServer(config, **kwargs)
