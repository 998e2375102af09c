"""Configuration Settings for the SAML Config Client

Manages environment variables and client configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CLIENT_VERSION = "1.0.0"
PROVIDER_CONFIG_ENDPOINT = "https://identitytoolkit.googleapis.com/v2beta1"


class Settings(BaseSettings):
    """Client settings"""

    # Identity platform project
    project_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SAML_CONFIG_PROJECT_ID", "GOOGLE_CLOUD_PROJECT"),
    )

    # Remote API
    endpoint: str = PROVIDER_CONFIG_ENDPOINT
    client_version: str = CLIENT_VERSION
    request_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SAML_CONFIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance

    Returns:
        Settings instance
    """
    return Settings()
