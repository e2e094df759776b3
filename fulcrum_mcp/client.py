# client.py - one authenticated call per operation against the Fulcrum API
import json
import logging
from typing import Any, Dict, Optional

import httpx

from fulcrum_mcp.config import Settings
from fulcrum_mcp.errors import FormattingError, RemoteAPIError, TransportError

logger = logging.getLogger(__name__)

METHODS = ("GET", "POST", "PUT", "DELETE")


def status_message(status: int, url: str, body_text: str) -> str:
    if status == 401:
        return (
            "Authentication failed (401): Check if your API token is valid and not expired. "
            "Generate a token from Business Setup -> System Data -> Public Api in your Fulcrum site."
        )
    if status == 403:
        return "Access forbidden (403): Your API token may not have sufficient permissions for this operation."
    if status == 404:
        return f"Endpoint not found (404): {url} - Check if the API endpoint is correct."
    return f"HTTP error {status}: {body_text}"


class FulcrumClient:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.settings.auth_header,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def call(self, endpoint: str, method: str = "GET", body: Optional[Dict[str, Any]] = None) -> Any:
        """Issue one request to ``base_url + endpoint`` and return the parsed JSON body.

        Raises RemoteAPIError for non-2xx answers, TransportError when the host
        cannot be reached and FormattingError when a 2xx body is not JSON.
        """
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self.settings.base_url}{endpoint}"
        payload = body if (body is not None and method != "GET") else None

        logger.info(f"{method} {url}")
        if payload is not None:
            logger.debug(f"Request body: {json.dumps(payload)}")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout, transport=self._transport, follow_redirects=True
            ) as c:
                r = await c.request(method, url, json=payload, headers=self.headers())
        except httpx.RequestError as e:
            logger.error(f"Could not reach Fulcrum API at {url}: {e!r}")
            raise TransportError(f"Could not reach the Fulcrum API at {url}: {e.__class__.__name__}") from e

        logger.info(f"Response status: {r.status_code}")
        if not r.is_success:
            text = r.text
            logger.warning(f"Fulcrum API error {r.status_code} for {url}: {text}")
            raise RemoteAPIError(status_message(r.status_code, url, text), r.status_code, text, url)

        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise FormattingError(f"Response from {url} is not valid JSON") from e
