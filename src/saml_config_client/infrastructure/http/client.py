"""HTTP Transport for the SAML Config Client

Thin async wrapper around httpx used by the provider config client. It owns
the base endpoint, default headers and timeout, decodes JSON responses, and
turns failed responses into classified provider config errors.

Authentication is not handled here: callers that need credentials pass an
``httpx.AsyncClient`` already configured with an auth flow or headers.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from saml_config_client.domain.errors import TransportError, classify_http_error

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async JSON-over-HTTP client bound to one API endpoint"""

    def __init__(
        self,
        endpoint: str,
        headers: Optional[Mapping[str, str]] = None,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the transport.

        Args:
            endpoint: Base URL every relative request path is appended to
            headers: Headers sent with every request
            timeout: Per-request timeout in seconds for the client this transport
                creates; a caller-supplied client keeps its own timeout
            client: Pre-configured httpx client (owned by the caller)
        """
        self.endpoint = endpoint.rstrip("/")
        self.headers: Dict[str, str] = dict(headers or {})
        self.timeout = httpx.Timeout(timeout)
        self._client = client
        self._owns_client = client is None

    def get_client(self) -> httpx.AsyncClient:
        """Get the underlying httpx client, creating it on first use"""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Send a request and decode the JSON response body.

        Args:
            method: HTTP method
            url: Path relative to the endpoint (must start with ``/``)
            params: Query parameters
            json: JSON request body
            headers: Extra headers for this request only

        Returns:
            Decoded JSON object, or None if the response has no body

        Raises:
            ProviderConfigHTTPError: If the server responds with an error status
            TransportError: If the request could not be completed
        """
        full_url = f"{self.endpoint}{url}"
        request_headers = {**self.headers, **(headers or {})}
        logger.debug(f"{method} {full_url} params={dict(params or {})}")

        try:
            response = await self.get_client().request(
                method,
                full_url,
                params=params,
                json=json,
                headers=request_headers,
            )
        except httpx.HTTPError as e:
            logger.warning(f"{method} {full_url} failed: {e}")
            raise TransportError(f"failed to send {method} request: {e}") from e

        if not response.is_success:
            error = _error_from_response(response)
            logger.warning(
                f"{method} {full_url} returned HTTP {response.status_code}: {error.message}"
            )
            raise error

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"failed to decode response body: {e}") from e

    async def close(self):
        """Close the underlying httpx client if this transport created it"""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP client closed")


def _error_from_response(response: httpx.Response):
    """Extract the server error code and message from an error response.

    The identity platform reports errors as
    ``{"error": {"message": "CODE : optional detail", ...}}``.
    """
    code = None
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        code = payload["error"].get("message")

    if code:
        message = f"{code} (HTTP {response.status_code})"
    else:
        detail = response.text or response.reason_phrase
        message = f"unexpected HTTP response with status {response.status_code}: {detail}"
    return classify_http_error(response.status_code, code, message)
