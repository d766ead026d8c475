"""Pytest configuration and shared fixtures."""

import json
import logging
import sys
from pathlib import Path

import httpx
import pytest

# Add src to Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from agentql_mcp.config import ServerConfig


class RecordingUpstream:
    """Fake AgentQL endpoint that records every request it receives."""

    def __init__(self, status_code: int = 200, body=None, text: str | None = None):
        self.status_code = status_code
        self.body = {"data": {}} if body is None else body
        self.text = text
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def config():
    """Server configuration with a test API key."""
    return ServerConfig(api_key="test-key", log_format="text")


@pytest.fixture
def upstream():
    """Upstream returning {"data": {"title": "Example"}}."""
    return RecordingUpstream(body={"data": {"title": "Example"}})


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo root logger changes made by server logging setup."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
