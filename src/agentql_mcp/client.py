"""HTTP client for the AgentQL query-data API.

Builds the fixed-shape request body, performs the single POST and
unwraps the ``data`` field of the response.
"""

import json
import logging
from typing import Any, Optional

import httpx

from .config import ServerConfig
from .constants import (
    API_KEY_HEADER,
    ErrorMessage,
    QUERY_PARAMS,
    REQUEST_ORIGIN,
    REQUEST_ORIGIN_HEADER,
)
from .exceptions import MalformedResponseError, UpstreamError, UpstreamTimeoutError

logger = logging.getLogger(__name__)


def build_query(url: str, prompt: str) -> dict[str, Any]:
    """Build the request body for a query-data call.
    
    Args:
        url: Public webpage URL
        prompt: Natural language description of the data to extract
        
    Returns:
        JSON-serializable request body
    """
    return {
        "url": url,
        "prompt": prompt,
        "params": dict(QUERY_PARAMS),
    }


class AgentQLClient:
    """Client for the AgentQL REST API.
    
    A new ``httpx.AsyncClient`` is opened per call; nothing is shared
    between invocations except the configuration.
    """

    def __init__(
        self,
        config: ServerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize client.
        
        Args:
            config: Server configuration carrying API key, URL and timeout
            transport: Optional httpx transport (used by tests)
        """
        self.config = config
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            API_KEY_HEADER: self.config.api_key,
            REQUEST_ORIGIN_HEADER: REQUEST_ORIGIN,
            "Content-Type": "application/json",
        }

    async def query_data(self, url: str, prompt: str) -> Any:
        """Extract data from a webpage.
        
        Args:
            url: Public webpage URL
            prompt: Natural language description of the data to extract
            
        Returns:
            The ``data`` field of the AgentQL response
            
        Raises:
            UpstreamError: If the API returns a non-success status
            UpstreamTimeoutError: If the API does not answer in time
            MalformedResponseError: If the body is not JSON or lacks ``data``
        """
        logger.info(f"Querying AgentQL for {url}")
        logger.debug(f"Prompt length: {len(prompt)} characters")

        async with httpx.AsyncClient(
            timeout=self.config.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    self.config.api_url,
                    headers=self.headers,
                    content=json.dumps(build_query(url, prompt)),
                )
            except httpx.TimeoutException as e:
                raise UpstreamTimeoutError(
                    ErrorMessage.UPSTREAM_TIMEOUT.format(timeout=self.config.timeout)
                ) from e

        if not response.is_success:
            logger.warning(f"AgentQL API returned {response.status_code}")
            raise UpstreamError(
                ErrorMessage.UPSTREAM_ERROR.format(
                    reason=response.reason_phrase,
                    body=response.text,
                ),
                status_code=response.status_code,
                body=response.text,
            )

        return parse_response(response)


def parse_response(response: httpx.Response) -> Any:
    """Unwrap the ``data`` field of a successful response.
    
    Raises:
        MalformedResponseError: If the body is not a JSON object with ``data``
    """
    try:
        payload = response.json()
    except ValueError as e:
        raise MalformedResponseError(ErrorMessage.NOT_JSON) from e

    if not isinstance(payload, dict) or "data" not in payload:
        raise MalformedResponseError(ErrorMessage.MISSING_DATA)

    return payload["data"]
