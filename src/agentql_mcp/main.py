"""Main entry point for the AgentQL MCP Server.

Exit codes: 0 on normal shutdown, 1 on missing credential or any
failure while starting or connecting the server.
"""

import asyncio
import sys

from .config import load_config
from .exceptions import ConfigurationError
from .server import MCPServer


async def main() -> None:
    """Load configuration and run the MCP server."""
    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    try:
        server = MCPServer(config)
        await server.start()
    except KeyboardInterrupt:
        print("\nServer interrupted by user", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        print(f"Server error: {e}", file=sys.stderr)
        sys.exit(1)


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    run()
