"""Errors raised by the SAML provider config client.

Local validation problems are raised before any request is sent. Errors
reported by the identity platform are classified by the server error code
first and the HTTP status second.
"""

from typing import Dict, Optional, Type


class ProviderConfigError(Exception):
    """Base class for all provider config errors"""


class InvalidArgumentError(ProviderConfigError, ValueError):
    """An argument or request field failed local validation"""


class ConfigurationError(ProviderConfigError):
    """The client is missing required configuration (e.g. the project ID)"""


class TransportError(ProviderConfigError):
    """The request could not be delivered (connection, timeout, protocol)"""


class ProviderConfigHTTPError(ProviderConfigError):
    """The identity platform answered with a non-success status.

    Attributes:
        status_code: HTTP status code of the response
        code: Server error code (e.g. ``CONFIGURATION_NOT_FOUND``), if any
        message: Human-readable error message
    """

    def __init__(self, message: str, status_code: int, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class ConfigurationNotFoundError(ProviderConfigHTTPError):
    """No provider config exists with the given ID"""


class ConfigurationExistsError(ProviderConfigHTTPError):
    """A provider config with the given ID already exists"""


class PermissionDeniedError(ProviderConfigHTTPError):
    """The caller is not allowed to manage provider configs in this project"""


class UnauthenticatedError(ProviderConfigHTTPError):
    """The request carried missing or invalid credentials"""


_ERROR_CODES: Dict[str, Type[ProviderConfigHTTPError]] = {
    "CONFIGURATION_NOT_FOUND": ConfigurationNotFoundError,
    "DUPLICATE_IDP_CONFIG": ConfigurationExistsError,
    "CONFIGURATION_EXISTS": ConfigurationExistsError,
    "INSUFFICIENT_PERMISSION": PermissionDeniedError,
    "PERMISSION_DENIED": PermissionDeniedError,
    "UNAUTHENTICATED": UnauthenticatedError,
}

_STATUS_CODES: Dict[int, Type[ProviderConfigHTTPError]] = {
    401: UnauthenticatedError,
    403: PermissionDeniedError,
    404: ConfigurationNotFoundError,
    409: ConfigurationExistsError,
}


def classify_http_error(
    status_code: int, code: Optional[str], message: str
) -> ProviderConfigHTTPError:
    """Build the most specific error for a failed response.

    Server codes may carry a detail suffix (``CODE : detail``); only the part
    before the first colon is used for classification.
    """
    error_cls = None
    if code:
        error_cls = _ERROR_CODES.get(code.split(":", 1)[0].strip())
    if error_cls is None:
        error_cls = _STATUS_CODES.get(status_code, ProviderConfigHTTPError)
    return error_cls(message, status_code=status_code, code=code)
