"""SAML provider config management.

Create, read, update, delete and list inboundSamlConfigs of an identity
platform project:
- SAMLProviderConfigToCreate / SAMLProviderConfigToUpdate: request builders
- ProviderConfigClient: async client issuing the admin API calls
- get_provider_config_client: process-wide client built from settings
"""

from .client import MAX_LIST_CONFIGS_RESULTS, ProviderConfigClient
from .factory import (
    close_provider_config_client,
    get_provider_config_client,
    reset_provider_config_client,
)
from .requests import (
    SAML_PROVIDER_ID_PREFIX,
    SAMLProviderConfigToCreate,
    SAMLProviderConfigToUpdate,
    validate_saml_provider_id,
)

__all__ = [
    "ProviderConfigClient",
    "MAX_LIST_CONFIGS_RESULTS",
    "SAMLProviderConfigToCreate",
    "SAMLProviderConfigToUpdate",
    "SAML_PROVIDER_ID_PREFIX",
    "validate_saml_provider_id",
    "get_provider_config_client",
    "close_provider_config_client",
    "reset_provider_config_client",
]
