"""Provider config client factory.

Builds the process-wide client from environment configuration.
"""

import logging
from typing import Optional

from saml_config_client.config.settings import get_settings

from .client import ProviderConfigClient

logger = logging.getLogger(__name__)

# Global client instance (initialized on first call)
_client_instance: Optional[ProviderConfigClient] = None


def get_provider_config_client() -> ProviderConfigClient:
    """Get the configured provider config client instance.

    Configuration is read from environment variables (see Settings):
    - SAML_CONFIG_PROJECT_ID or GOOGLE_CLOUD_PROJECT: target project
    - SAML_CONFIG_ENDPOINT: API endpoint override (e.g. an emulator)
    - SAML_CONFIG_REQUEST_TIMEOUT_SECONDS: per-request timeout
    - SAML_CONFIG_LOG_LEVEL: level of the saml_config_client loggers

    Returns:
        Configured ProviderConfigClient instance
    """
    global _client_instance

    # Return cached instance
    if _client_instance is not None:
        return _client_instance

    settings = get_settings()
    logging.getLogger("saml_config_client").setLevel(settings.log_level.upper())

    if not settings.project_id:
        # Requests will fail with ConfigurationError until a project is set
        logger.warning(
            "No project ID configured. "
            "Set SAML_CONFIG_PROJECT_ID or GOOGLE_CLOUD_PROJECT."
        )

    _client_instance = ProviderConfigClient(
        project_id=settings.project_id,
        endpoint=settings.endpoint,
        client_version=settings.client_version,
        timeout=settings.request_timeout_seconds,
    )

    logger.info(f"Provider config client initialized for project: {settings.project_id}")
    return _client_instance


async def close_provider_config_client() -> None:
    """Close the global client"""
    global _client_instance
    if _client_instance is not None:
        await _client_instance.close()
        _client_instance = None


def reset_provider_config_client() -> None:
    """Reset the global client instance (for testing)."""
    global _client_instance
    _client_instance = None
