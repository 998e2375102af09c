"""Unit tests for the provider config read model and wire mapping"""

import dataclasses

import pytest

from saml_config_client.domain.models import (
    ListProviderConfigsPage,
    SAMLProviderConfig,
    SAMLProviderConfigResource,
    extract_resource_id,
)

pytestmark = pytest.mark.unit


class TestExtractResourceId:

    def test_fully_qualified_name(self):
        name = "projects/p1/inboundSamlConfigs/saml.provider1"

        assert extract_resource_id(name) == "saml.provider1"

    def test_bare_id(self):
        assert extract_resource_id("saml.provider1") == "saml.provider1"


class TestSAMLProviderConfigResource:
    """Test decoding and mapping of inboundSamlConfigs resources"""

    def test_maps_representative_payload(self, saml_config_response):
        """Happy path: every JSON field lands on the read model"""
        resource = SAMLProviderConfigResource.model_validate(saml_config_response)

        config = resource.to_saml_provider_config()

        assert config == SAMLProviderConfig(
            provider_id="saml.provider",
            display_name="samlProviderName",
            enabled=True,
            idp_entity_id="IDP_ENTITY_ID",
            sso_url="https://example.com/login",
            request_signing_enabled=True,
            x509_certificates=("CERT1", "CERT2"),
            rp_entity_id="RP_ENTITY_ID",
            callback_url="https://projectId.firebaseapp.com/__/auth/handler",
        )

    def test_certificate_order_preserved(self):
        payload = {
            "name": "projects/p/inboundSamlConfigs/saml.x",
            "idpConfig": {
                "idpCertificates": [
                    {"x509Certificate": "C"},
                    {"x509Certificate": "A"},
                    {"x509Certificate": "B"},
                ]
            },
        }

        config = SAMLProviderConfigResource.model_validate(payload).to_saml_provider_config()

        assert config.x509_certificates == ("C", "A", "B")

    def test_missing_fields_default_to_empty(self):
        """Edge case: sparse server responses still decode"""
        config = SAMLProviderConfigResource.model_validate(
            {"name": "projects/p/inboundSamlConfigs/saml.sparse"}
        ).to_saml_provider_config()

        assert config.provider_id == "saml.sparse"
        assert config.display_name == ""
        assert config.enabled is False
        assert config.request_signing_enabled is False
        assert config.x509_certificates == ()
        assert config.callback_url == ""

    def test_unknown_fields_ignored(self, saml_config_response):
        payload = dict(saml_config_response, unknownField="x")

        config = SAMLProviderConfigResource.model_validate(payload).to_saml_provider_config()

        assert config.provider_id == "saml.provider"

    def test_read_model_is_immutable(self, saml_config_response):
        config = SAMLProviderConfigResource.model_validate(
            saml_config_response
        ).to_saml_provider_config()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.enabled = False


class TestListProviderConfigsPage:

    def test_has_next_page(self):
        assert ListProviderConfigsPage(provider_configs=(), next_page_token="token").has_next_page
        assert not ListProviderConfigsPage(provider_configs=()).has_next_page
