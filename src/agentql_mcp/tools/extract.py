"""Handler for the extract-web-data tool.

Validates the url/prompt arguments, forwards them to the AgentQL
query-data API and returns the extracted data as pretty-printed JSON.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

from mcp import types

from ..client import AgentQLClient
from ..constants import EXTRACT_TOOL_NAME, ErrorMessage
from ..exceptions import InvalidArgumentsError
from .schemas import ToolSchema, get_tool_schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractRequest:
    """Validated input of an extraction."""

    url: str
    prompt: str


def format_data(data: Any) -> list[types.TextContent]:
    """Serialize extracted data into a single text content block."""
    return [
        types.TextContent(
            type="text",
            text=json.dumps(data, indent=2, ensure_ascii=False),
        )
    ]


class ExtractWebDataTool:
    """Extracts structured data from a web page using AgentQL."""

    def __init__(self, client: AgentQLClient):
        self.client = client
        self.schema: ToolSchema = get_tool_schema(EXTRACT_TOOL_NAME)

    def validate(self, arguments: dict[str, Any]) -> ExtractRequest:
        """Validate tool arguments.
        
        Both ``url`` and ``prompt`` are coerced to strings and must be
        non-empty.
        
        Raises:
            InvalidArgumentsError: If either argument is missing or empty
        """
        is_valid, missing = self.schema.validate_required(arguments)
        if not is_valid:
            logger.debug(f"Missing arguments: {missing}")
            raise InvalidArgumentsError(ErrorMessage.MISSING_URL_OR_PROMPT)
        return ExtractRequest(
            url=str(arguments["url"]).strip(),
            prompt=str(arguments["prompt"]).strip(),
        )

    async def execute(self, request: ExtractRequest) -> list[types.TextContent]:
        """Run the extraction and format the result."""
        data = await self.client.query_data(request.url, request.prompt)
        logger.info(f"Extracted data from {request.url}")
        return format_data(data)
