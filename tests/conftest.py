"""
Pytest configuration and fixtures for SAML provider config client tests.

Provides fixtures for:
- Representative inboundSamlConfigs payloads
- An httpx MockTransport that records outgoing requests
- A ProviderConfigClient wired to that transport
"""

import copy
import json
from typing import Callable, List, Optional

import httpx
import pytest

from saml_config_client.config.settings import get_settings
from saml_config_client.core.saml import ProviderConfigClient, reset_provider_config_client

PROJECT_ID = "mock-project-id"
PROVIDER_CONFIG_URL_PREFIX = (
    "https://identitytoolkit.googleapis.com/v2beta1/projects/mock-project-id"
)

SAML_PROVIDER_CONFIG_RESPONSE = {
    "name": "projects/mock-project-id/inboundSamlConfigs/saml.provider",
    "idpConfig": {
        "idpEntityId": "IDP_ENTITY_ID",
        "ssoUrl": "https://example.com/login",
        "signRequest": True,
        "idpCertificates": [
            {"x509Certificate": "CERT1"},
            {"x509Certificate": "CERT2"},
        ],
    },
    "spConfig": {
        "spEntityId": "RP_ENTITY_ID",
        "callbackUri": "https://projectId.firebaseapp.com/__/auth/handler",
    },
    "displayName": "samlProviderName",
    "enabled": True,
}

CONFIG_NOT_FOUND_RESPONSE = {"error": {"code": 404, "message": "CONFIGURATION_NOT_FOUND"}}


class RequestRecorder:
    """Mock transport handler that replies with a canned response"""

    def __init__(self, status_code: int = 200, payload: Optional[object] = None):
        self.status_code = status_code
        self.payload = payload
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.payload is None:
            return httpx.Response(self.status_code)
        if isinstance(self.payload, str):
            return httpx.Response(self.status_code, text=self.payload)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content.decode())


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset cached settings and the global client between tests"""
    get_settings.cache_clear()
    reset_provider_config_client()
    yield
    get_settings.cache_clear()
    reset_provider_config_client()


@pytest.fixture
def saml_config_response() -> dict:
    """Representative inboundSamlConfigs resource"""
    return copy.deepcopy(SAML_PROVIDER_CONFIG_RESPONSE)


@pytest.fixture
def make_client() -> Callable[..., tuple]:
    """Build a client backed by a recording mock transport"""

    def _make(status_code: int = 200, payload: Optional[object] = SAML_PROVIDER_CONFIG_RESPONSE,
              project_id: Optional[str] = PROJECT_ID):
        recorder = RequestRecorder(status_code, payload)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        client = ProviderConfigClient(project_id=project_id, http_client=http_client)
        return client, recorder

    return _make
