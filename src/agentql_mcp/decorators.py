"""Decorators for tool invocation handlers.

This module provides the error boundary between tool handlers and the MCP
client: failures become error results instead of crashing the server.
"""

import logging
from functools import wraps
from typing import Any, Awaitable, Callable, Sequence, TypeVar, ParamSpec

from mcp import types

from .constants import ErrorCode, ErrorMessage
from .exceptions import AgentQLMCPError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def error_result(message: str) -> types.CallToolResult:
    """Build an MCP error result carrying a human-readable message."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=message)],
        isError=True,
    )


def handle_errors(
    func: Callable[P, Awaitable[Sequence[Any]]],
) -> Callable[P, Awaitable[types.CallToolResult]]:
    """Decorator to handle errors in async tool invocation functions.
    
    The wrapped function returns a sequence of content blocks. On success
    they are wrapped in a ``CallToolResult``; on failure the exception is
    logged with its error code and reported as an error result.
    
    Args:
        func: Async function returning content blocks
        
    Returns:
        Wrapped function that always returns a CallToolResult
    """
    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> types.CallToolResult:
        try:
            content = await func(*args, **kwargs)
            return types.CallToolResult(content=list(content), isError=False)
        except AgentQLMCPError as e:
            logger.error(
                f"{e.error_code.value} in {func.__name__}: {e.message}",
                exc_info=False,
            )
            return error_result(e.message)
        except Exception as e:
            logger.error(
                f"{ErrorCode.UNEXPECTED_ERROR.value} in {func.__name__}: {e}",
                exc_info=True,
            )
            return error_result(f"{ErrorMessage.UNEXPECTED_ERROR}: {e}")
    
    return wrapper
