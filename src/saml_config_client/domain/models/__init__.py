"""Domain models for the SAML Config Client"""

from saml_config_client.domain.models.nested_map import LeafValue, NestedMap
from saml_config_client.domain.models.provider_config import (
    IdpCertificate,
    IdpConfig,
    ListProviderConfigsPage,
    ListSAMLProviderConfigsResponse,
    SAMLProviderConfig,
    SAMLProviderConfigResource,
    SpConfig,
    extract_resource_id,
)

__all__ = [
    # Key-path store
    "NestedMap",
    "LeafValue",
    # Read models
    "SAMLProviderConfig",
    "ListProviderConfigsPage",
    "extract_resource_id",
    # Wire models
    "IdpCertificate",
    "IdpConfig",
    "SpConfig",
    "SAMLProviderConfigResource",
    "ListSAMLProviderConfigsResponse",
]
