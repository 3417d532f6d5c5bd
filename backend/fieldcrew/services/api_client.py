"""
Base client for the collaborator management REST API.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from fieldcrew.config import settings
from fieldcrew.exceptions import CollaboratorServiceError

logger = logging.getLogger(__name__)


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error message from an API error response."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        for field in ("error", "message", "detail"):
            if data.get(field):
                return str(data[field])
    return response.text[:200] or response.reason_phrase


class ApiClient:
    """Issues JSON requests against the API, one httpx.AsyncClient per call"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.token = settings.API_TOKEN if token is None else token
        self.timeout = timeout or settings.REQUEST_TIMEOUT
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(self, operation: str, method: str, path: str, json: Any = None) -> Any:
        """
        Send a request and return the decoded JSON body (None for an empty body).

        Args:
            operation: Human-readable name used in errors and logs
            method: HTTP method
            path: Path relative to the API base URL
            json: Optional JSON body

        Raises:
            CollaboratorServiceError: on transport errors, non-2xx responses
                and undecodable bodies
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, json=json, headers=self._headers())
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            detail = _error_detail(e.response)
            logger.warning("%s failed: %s %s -> %d %s", operation, method, url, status_code, detail)
            raise CollaboratorServiceError(operation, detail, status_code) from e
        except httpx.RequestError as e:
            detail = str(e) or type(e).__name__
            logger.warning("%s failed: %s %s -> %s", operation, method, url, detail)
            raise CollaboratorServiceError(operation, detail) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.warning("%s returned a non-JSON body from %s", operation, url)
            raise CollaboratorServiceError(operation, "Invalid JSON in response", response.status_code) from e
