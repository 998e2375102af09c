"""Request builders for SAML provider configs.

``SAMLProviderConfigToCreate`` and ``SAMLProviderConfigToUpdate`` collect
fields through chained setters and store them in a ``NestedMap`` under their
wire paths. Validation runs once, when the client consumes the builder.

Example:
    config = (
        SAMLProviderConfigToCreate()
        .provider_id("saml.okta")
        .idp_entity_id("http://www.okta.com/exk123")
        .sso_url("https://example.okta.com/app/sso/saml")
        .x509_certificates([cert_pem])
        .rp_entity_id("my-app")
        .callback_url("https://my-app.example.com/__/auth/handler")
    )
"""

from typing import List, Optional, Sequence, Tuple

from pydantic import AnyUrl, TypeAdapter, ValidationError

from saml_config_client.domain.errors import InvalidArgumentError
from saml_config_client.domain.models import IdpCertificate, LeafValue, NestedMap

SAML_PROVIDER_ID_PREFIX = "saml."

IDP_ENTITY_ID_KEY = "idpConfig.idpEntityId"
SSO_URL_KEY = "idpConfig.ssoUrl"
SIGN_REQUEST_KEY = "idpConfig.signRequest"
IDP_CERTS_KEY = "idpConfig.idpCertificates"

SP_ENTITY_ID_KEY = "spConfig.spEntityId"
CALLBACK_URI_KEY = "spConfig.callbackUri"

DISPLAY_NAME_KEY = "displayName"
ENABLED_KEY = "enabled"

_url_adapter = TypeAdapter(AnyUrl)
_URL_DELIMITERS = ("/", "?", "#", "\\")


def validate_saml_provider_id(provider_id) -> str:
    """Check that a provider ID carries the ``saml.`` prefix

    The ID becomes a single URL path segment, so path and query delimiters
    are not allowed.

    Raises:
        InvalidArgumentError: If the ID is not a string with the prefix or
            contains a URL delimiter
    """
    if (
        not isinstance(provider_id, str)
        or not provider_id.startswith(SAML_PROVIDER_ID_PREFIX)
        or any(char in provider_id for char in _URL_DELIMITERS)
    ):
        raise InvalidArgumentError(f"invalid SAML provider id: {provider_id!r}")
    return provider_id


def _to_certificates(certs: Sequence[str]) -> List[IdpCertificate]:
    if isinstance(certs, str) or not isinstance(certs, (list, tuple)):
        raise InvalidArgumentError("x509_certificates must be a list of strings")
    result = []
    for cert in certs:
        if not isinstance(cert, str):
            raise InvalidArgumentError("x509_certificates must be a list of strings")
        result.append(IdpCertificate(x509_certificate=cert))
    return result


def _validate_string(params: NestedMap, key: str, label: str) -> None:
    value = params.get(key)
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{label} must not be empty")


def _validate_url(params: NestedMap, key: str, label: str) -> None:
    _validate_string(params, key, label)
    try:
        _url_adapter.validate_python(params.get(key))
    except ValidationError as e:
        raise InvalidArgumentError(
            f"failed to parse {label}: {e.errors()[0]['msg']}"
        ) from e


def _validate_certificates(params: NestedMap) -> None:
    certs = params.get(IDP_CERTS_KEY)
    if not certs:
        raise InvalidArgumentError("x509_certificates must not be empty")
    for cert in certs:
        if not cert.x509_certificate:
            raise InvalidArgumentError("x509_certificates must not contain empty strings")


def _validate_optional_types(params: NestedMap) -> None:
    for key, label in ((ENABLED_KEY, "enabled"), (SIGN_REQUEST_KEY, "request_signing_enabled")):
        if key in params and not isinstance(params.get(key), bool):
            raise InvalidArgumentError(f"{label} must be a boolean")
    if DISPLAY_NAME_KEY in params:
        name = params.get(DISPLAY_NAME_KEY)
        if name is not None and not isinstance(name, str):
            raise InvalidArgumentError("display_name must be a string")


class _SAMLProviderConfigParams:
    """Setters shared by the create and update builders"""

    def __init__(self):
        self._params = NestedMap()

    def idp_entity_id(self, entity_id: str):
        """Set the SAML IdP entity identifier"""
        return self._set(IDP_ENTITY_ID_KEY, entity_id)

    def sso_url(self, url: str):
        """Set the SAML IdP SSO URL"""
        return self._set(SSO_URL_KEY, url)

    def request_signing_enabled(self, enabled: bool):
        """Enable or disable signing of authentication requests"""
        return self._set(SIGN_REQUEST_KEY, enabled)

    def x509_certificates(self, certs: Sequence[str]):
        """Set the IdP X.509 certificates (PEM strings)"""
        return self._set(IDP_CERTS_KEY, _to_certificates(certs))

    def rp_entity_id(self, entity_id: str):
        """Set the relying party (service provider) entity identifier"""
        return self._set(SP_ENTITY_ID_KEY, entity_id)

    def callback_url(self, url: str):
        """Set the callback URL"""
        return self._set(CALLBACK_URI_KEY, url)

    def display_name(self, name: str):
        """Set the user-friendly display name"""
        return self._set(DISPLAY_NAME_KEY, name)

    def enabled(self, enabled: bool):
        """Enable or disable the provider"""
        return self._set(ENABLED_KEY, enabled)

    def _set(self, key: str, value: LeafValue):
        try:
            self._params.set(key, value)
        except TypeError as e:
            raise InvalidArgumentError(str(e)) from e
        return self


class SAMLProviderConfigToCreate(_SAMLProviderConfigParams):
    """Options used to create a new SAML provider config

    All fields except display_name, enabled and request_signing_enabled are
    required.
    """

    def __init__(self):
        super().__init__()
        self._provider_id: Optional[str] = None

    def provider_id(self, provider_id: str) -> "SAMLProviderConfigToCreate":
        """Set the provider ID of the new config (must start with ``saml.``)"""
        self._provider_id = provider_id
        return self

    def build_request(self) -> Tuple[NestedMap, str]:
        """Validate the collected fields.

        Returns:
            Tuple of (request body, provider ID)

        Raises:
            InvalidArgumentError: On the first invalid or missing field
        """
        provider_id = validate_saml_provider_id(self._provider_id)

        if not self._params:
            raise InvalidArgumentError("no parameters specified in the create request")

        _validate_string(self._params, IDP_ENTITY_ID_KEY, "idp_entity_id")
        _validate_url(self._params, SSO_URL_KEY, "sso_url")
        _validate_certificates(self._params)
        _validate_string(self._params, SP_ENTITY_ID_KEY, "rp_entity_id")
        _validate_url(self._params, CALLBACK_URI_KEY, "callback_url")
        _validate_optional_types(self._params)

        return self._params, provider_id


class SAMLProviderConfigToUpdate(_SAMLProviderConfigParams):
    """Options used to update an existing SAML provider config

    Only the fields that were set are validated and sent.
    """

    def display_name(self, name: str) -> "SAMLProviderConfigToUpdate":
        """Set the display name; an empty string clears it on the server"""
        return self._set(DISPLAY_NAME_KEY, name if name != "" else None)

    def build_request(self) -> NestedMap:
        """Validate the fields present in the request.

        Returns:
            Request body; its update mask lists the fields to patch

        Raises:
            InvalidArgumentError: On the first invalid field
        """
        if not self._params:
            raise InvalidArgumentError("no parameters specified in the update request")

        if IDP_ENTITY_ID_KEY in self._params:
            _validate_string(self._params, IDP_ENTITY_ID_KEY, "idp_entity_id")
        if SSO_URL_KEY in self._params:
            _validate_url(self._params, SSO_URL_KEY, "sso_url")
        if IDP_CERTS_KEY in self._params:
            _validate_certificates(self._params)
        if SP_ENTITY_ID_KEY in self._params:
            _validate_string(self._params, SP_ENTITY_ID_KEY, "rp_entity_id")
        if CALLBACK_URI_KEY in self._params:
            _validate_url(self._params, CALLBACK_URI_KEY, "callback_url")
        _validate_optional_types(self._params)

        return self._params
