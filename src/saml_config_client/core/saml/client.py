"""SAML provider config client.

Manages inboundSamlConfigs resources of an identity platform project through
its admin REST API. Every operation validates its inputs locally before a
single request is sent; errors reported by the server are raised as
``ProviderConfigHTTPError`` subclasses.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from saml_config_client.config.settings import CLIENT_VERSION, PROVIDER_CONFIG_ENDPOINT
from saml_config_client.core.saml.requests import (
    SAMLProviderConfigToCreate,
    SAMLProviderConfigToUpdate,
    validate_saml_provider_id,
)
from saml_config_client.domain.errors import (
    ConfigurationError,
    InvalidArgumentError,
    TransportError,
)
from saml_config_client.domain.models import (
    ListProviderConfigsPage,
    ListSAMLProviderConfigsResponse,
    SAMLProviderConfig,
    SAMLProviderConfigResource,
)
from saml_config_client.infrastructure.http.client import HTTPClient

logger = logging.getLogger(__name__)

MAX_LIST_CONFIGS_RESULTS = 100


class ProviderConfigClient:
    """Client for the inboundSamlConfigs admin API.

    Example:
        async with ProviderConfigClient(project_id="my-project") as client:
            config = await client.get_saml_provider_config("saml.okta")
    """

    def __init__(
        self,
        project_id: Optional[str],
        endpoint: str = PROVIDER_CONFIG_ENDPOINT,
        client_version: str = CLIENT_VERSION,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            project_id: Identity platform project ID
            endpoint: Versioned API endpoint
            client_version: Version reported in the X-Client-Version header
            timeout: Per-request timeout in seconds, unless http_client is given
            http_client: Pre-configured httpx client (e.g. with credentials)
        """
        self.project_id = project_id
        self._transport = HTTPClient(
            endpoint,
            headers={"X-Client-Version": f"Python/Admin/{client_version}"},
            timeout=timeout,
            client=http_client,
        )

    async def get_saml_provider_config(self, provider_id: str) -> SAMLProviderConfig:
        """Return the SAML provider config with the given ID.

        Raises:
            InvalidArgumentError: If the ID does not have the ``saml.`` prefix
            ConfigurationNotFoundError: If no such config exists
        """
        validate_saml_provider_id(provider_id)
        body = await self._make_request("GET", _config_path(provider_id))
        return _to_saml_provider_config(body)

    async def create_saml_provider_config(
        self, config: SAMLProviderConfigToCreate
    ) -> SAMLProviderConfig:
        """Create a new SAML provider config from the given builder.

        Raises:
            InvalidArgumentError: If the builder is None or invalid
            ConfigurationExistsError: If a config with the same ID exists
        """
        if config is None:
            raise InvalidArgumentError("config must not be None")

        params, provider_id = config.build_request()
        body = await self._make_request(
            "POST",
            "/inboundSamlConfigs",
            params={"inboundSamlConfigId": provider_id},
            json=params.to_dict(),
        )
        logger.info(f"Created SAML provider config {provider_id}")
        return _to_saml_provider_config(body)

    async def update_saml_provider_config(
        self, provider_id: str, config: SAMLProviderConfigToUpdate
    ) -> SAMLProviderConfig:
        """Update an existing SAML provider config.

        Only the fields set on the builder are sent; the update mask is derived
        from them.

        Raises:
            InvalidArgumentError: If the ID, the builder or a field is invalid
            ConfigurationNotFoundError: If no such config exists
        """
        validate_saml_provider_id(provider_id)
        if config is None:
            raise InvalidArgumentError("config must not be None")

        params = config.build_request()
        mask = params.update_mask()
        body = await self._make_request(
            "PATCH",
            _config_path(provider_id),
            params={"updateMask": ",".join(mask)},
            json=params.to_dict(),
        )
        logger.info(f"Updated SAML provider config {provider_id}: {mask}")
        return _to_saml_provider_config(body)

    async def delete_saml_provider_config(self, provider_id: str) -> None:
        """Delete the SAML provider config with the given ID.

        Raises:
            InvalidArgumentError: If the ID does not have the ``saml.`` prefix
            ConfigurationNotFoundError: If no such config exists
        """
        validate_saml_provider_id(provider_id)
        await self._make_request("DELETE", _config_path(provider_id))
        logger.info(f"Deleted SAML provider config {provider_id}")

    async def list_saml_provider_configs(
        self,
        page_token: Optional[str] = None,
        max_results: int = MAX_LIST_CONFIGS_RESULTS,
    ) -> ListProviderConfigsPage:
        """Retrieve a page of SAML provider configs.

        Args:
            page_token: Token of the page to fetch (None for the first page)
            max_results: Maximum configs in the page (1 to 100)

        Returns:
            ListProviderConfigsPage, empty if the project has no SAML configs

        Raises:
            InvalidArgumentError: If page_token or max_results is invalid
        """
        if page_token is not None and (not isinstance(page_token, str) or not page_token):
            raise InvalidArgumentError("page_token must be a non-empty string")
        if (
            not isinstance(max_results, int)
            or isinstance(max_results, bool)
            or not 1 <= max_results <= MAX_LIST_CONFIGS_RESULTS
        ):
            raise InvalidArgumentError(
                f"max_results must be an integer between 1 and {MAX_LIST_CONFIGS_RESULTS}"
            )

        params: Dict[str, Any] = {"pageSize": max_results}
        if page_token:
            params["pageToken"] = page_token

        body = await self._make_request("GET", "/inboundSamlConfigs", params=params)
        try:
            response = ListSAMLProviderConfigsResponse.model_validate(body or {})
        except ValidationError as e:
            raise TransportError(f"unexpected list response body: {e}") from e
        return ListProviderConfigsPage(
            provider_configs=tuple(
                resource.to_saml_provider_config() for resource in response.inbound_saml_configs
            ),
            next_page_token=response.next_page_token or None,
        )

    async def close(self):
        """Release the underlying HTTP client"""
        await self._transport.close()

    async def __aenter__(self) -> "ProviderConfigClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _make_request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        if not self.project_id:
            raise ConfigurationError("project id not available")

        return await self._transport.request(
            method,
            f"/projects/{self.project_id}{url}",
            params=params,
            json=json,
        )


def _config_path(provider_id: str) -> str:
    return f"/inboundSamlConfigs/{quote(provider_id, safe='')}"


def _to_saml_provider_config(body: Optional[Dict[str, Any]]) -> SAMLProviderConfig:
    try:
        resource = SAMLProviderConfigResource.model_validate(body or {})
    except ValidationError as e:
        raise TransportError(f"unexpected provider config response body: {e}") from e
    return resource.to_saml_provider_config()
