"""SAML Provider Config Models

Purpose: Define the public read model and the wire transfer objects

Key Components:
- SAMLProviderConfig: Immutable snapshot of a provider config held by the server
- SAMLProviderConfigResource: Mirrors the inboundSamlConfigs JSON resource
- IdpCertificate: Wire wrapper around a single X.509 certificate
- ListProviderConfigsPage: One page of a list response
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


def extract_resource_id(name: str) -> str:
    """Return the last path segment of a fully-qualified resource name

    Example:
        ``projects/p1/inboundSamlConfigs/saml.provider1`` -> ``saml.provider1``
    """
    return name.split("/")[-1]


@dataclass(frozen=True)
class SAMLProviderConfig:
    """SAML auth provider configuration

    Attributes:
        provider_id: Provider ID (always prefixed with ``saml.``)
        display_name: User-friendly name of the provider
        enabled: Whether users can sign in with this provider
        idp_entity_id: SAML IdP entity identifier
        sso_url: SAML IdP single sign-on URL
        request_signing_enabled: Whether authentication requests are signed
        x509_certificates: IdP X.509 certificates (PEM), in server order
        rp_entity_id: Relying party (service provider) entity identifier
        callback_url: Callback URL registered with the IdP
    """
    provider_id: str
    display_name: str
    enabled: bool
    idp_entity_id: str
    sso_url: str
    request_signing_enabled: bool
    x509_certificates: Tuple[str, ...]
    rp_entity_id: str
    callback_url: str


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class IdpCertificate(_WireModel):
    """X.509 certificate entry of the idpConfig section"""

    x509_certificate: str = Field(default="", alias="x509Certificate")


class IdpConfig(_WireModel):
    """Identity provider section of the resource"""

    idp_entity_id: str = Field(default="", alias="idpEntityId")
    sso_url: str = Field(default="", alias="ssoUrl")
    idp_certificates: List[IdpCertificate] = Field(default_factory=list, alias="idpCertificates")
    sign_request: bool = Field(default=False, alias="signRequest")


class SpConfig(_WireModel):
    """Service provider section of the resource"""

    sp_entity_id: str = Field(default="", alias="spEntityId")
    callback_uri: str = Field(default="", alias="callbackUri")


class SAMLProviderConfigResource(_WireModel):
    """inboundSamlConfigs resource as returned by the identity platform"""

    name: str = ""
    idp_config: IdpConfig = Field(default_factory=IdpConfig, alias="idpConfig")
    sp_config: SpConfig = Field(default_factory=SpConfig, alias="spConfig")
    display_name: str = Field(default="", alias="displayName")
    enabled: bool = False

    def to_saml_provider_config(self) -> SAMLProviderConfig:
        """Map the wire resource to the public read model"""
        return SAMLProviderConfig(
            provider_id=extract_resource_id(self.name),
            display_name=self.display_name,
            enabled=self.enabled,
            idp_entity_id=self.idp_config.idp_entity_id,
            sso_url=self.idp_config.sso_url,
            request_signing_enabled=self.idp_config.sign_request,
            x509_certificates=tuple(
                cert.x509_certificate for cert in self.idp_config.idp_certificates
            ),
            rp_entity_id=self.sp_config.sp_entity_id,
            callback_url=self.sp_config.callback_uri,
        )


class ListSAMLProviderConfigsResponse(_WireModel):
    """Response body of the list endpoint"""

    inbound_saml_configs: List[SAMLProviderConfigResource] = Field(
        default_factory=list, alias="inboundSamlConfigs"
    )
    next_page_token: Optional[str] = Field(default=None, alias="nextPageToken")


@dataclass(frozen=True)
class ListProviderConfigsPage:
    """A page of SAML provider configs

    ``next_page_token`` is None on the last page.
    """
    provider_configs: Tuple[SAMLProviderConfig, ...]
    next_page_token: Optional[str] = None

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_page_token)
