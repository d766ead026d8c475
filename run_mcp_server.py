#!/usr/bin/env python3
"""Convenience script to run the AgentQL MCP server.

Usage:
    AGENTQL_API_KEY=... python run_mcp_server.py

Or, once installed:
    AGENTQL_API_KEY=... agentql-mcp
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from agentql_mcp.main import run


if __name__ == "__main__":
    run()
