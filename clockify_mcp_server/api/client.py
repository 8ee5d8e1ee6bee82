"""
Clockify API client for handling HTTP requests and authentication.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from clockify_mcp_server.config import ClockifyConfig
from clockify_mcp_server.errors import ClockifyApiError

logger = logging.getLogger(__name__)


class ClockifyApiClient:
    """
    API client for interacting with the Clockify API.

    Every call is a single authenticated HTTP exchange. Failures are raised,
    never retried or translated; callers decide how to report them.
    """

    def __init__(self, config: ClockifyConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the Clockify API client.

        Args:
            config: Loaded Clockify configuration (API key and base URL)
            transport: Optional httpx transport, used to substitute the network in tests
        """
        self.base_url = config.base_url
        self.headers = self._get_auth_headers(config.api_key)
        self._transport = transport

    def _get_auth_headers(self, api_key: str) -> Dict[str, str]:
        """
        Create authentication headers for Clockify API requests.

        Returns:
            Dict containing the API key header and JSON content type
        """
        return {
            "X-Api-Key": api_key,
            "Content-Type": "application/json",
        }

    async def request(self, endpoint: str, method: str = "GET", body: Optional[Any] = None) -> Any:
        """
        Send a request to the Clockify API.

        Args:
            endpoint: API endpoint path, including any query string (e.g. "/user")
            method: HTTP method
            body: Optional JSON-serializable request body

        Returns:
            The decoded JSON response, or None for an empty or non-JSON body

        Raises:
            ClockifyApiError: If Clockify answers with a non-2xx status
            ValueError: If a JSON response body cannot be decoded
        """
        url = f"{self.base_url}{endpoint}"
        kwargs: Dict[str, Any] = {"headers": self.headers}
        if body is not None:
            kwargs["json"] = body

        logger.debug("%s %s", method, endpoint)
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.request(method, url, **kwargs)

        if not response.is_success:
            raise self._api_error(response)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return response.json() if response.content else None

        return None

    def _api_error(self, response: httpx.Response) -> ClockifyApiError:
        try:
            body = response.text
        except Exception:
            # An unreadable body must not hide the status code
            logger.debug("Could not read error body for status %s", response.status_code)
            body = None

        logger.warning("Clockify API returned %s for %s", response.status_code, response.request.url.path)
        return ClockifyApiError(response.status_code, response.reason_phrase, body)
