"""
core/config.py
----------------

Client configuration module.

Defines strongly-typed settings loaded from the environment using
``pydantic-settings``.  These settings hold the API host, the default
tenant credentials, the authentication endpoints and the transport
limits.  Every value can be overridden with an environment variable
prefixed with ``CONEXA_`` or passed explicitly when building a
:class:`~conexa.client.ConexaClient`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_PREFIX = "/index.php/api/v2"


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``CONEXA_``.  For example, to point the client at a
    tenant host set ``CONEXA_API_HOST=https://acme.conexa.app``.
    ``CONEXA_CREDENTIALS`` accepts a JSON list (or a single JSON object)
    of credential descriptions for multi-tenant use.
    """

    # Remote platform
    api_host: str = Field("", description="Base host of the tenant, e.g. https://acme.conexa.app.")
    api_token: Optional[str] = Field(None, description="Static application token; bypasses the session registry when set.")

    # Default credential (single-tenant mode)
    secret_key: Optional[str] = Field(None, description="Default secret key for credentials that omit one.")
    access_key: Optional[str] = Field(None, description="Default access key for credentials that omit one.")
    client_id: Optional[str] = Field(None, description="External client id of the default credential.")
    default_client_key: str = Field("default", description="Alias used when a call does not name a tenant.")

    # Multi-tenant mode
    credentials: Optional[Union[List[Dict[str, Any]], Dict[str, Any]]] = Field(
        None, description="Credential descriptions registered when the session pool is built."
    )

    # Authentication endpoints
    login_path: str = Field("/pdvauth", description="Path of the credential login endpoint.")
    refresh_path: str = Field("/refresh-token", description="Path of the token refresh endpoint.")
    token_refresh_leeway: float = Field(0.0, ge=0, description="Seconds before expiry at which a token counts as expired.")

    # HTTP client settings
    http_timeout: float = Field(30.0, gt=0, description="Hard timeout for HTTP requests in seconds.")

    # Pagination guards
    max_pages: int = Field(50, ge=1, description="Maximum number of pages to request when paginating.")
    max_items: int = Field(5000, ge=1, description="Maximum number of items to retrieve during pagination.")

    log_level: str = Field("INFO", description="Level used by conexa.logging_config.setup_logging.")

    model_config = SettingsConfigDict(env_prefix="CONEXA_", env_file=None, case_sensitive=False)

    @field_validator("api_host", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def api_endpoint(self) -> str:
        """Full API root, e.g. ``https://acme.conexa.app/index.php/api/v2``."""
        return self.api_host + API_PREFIX


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the client settings.

    Using a cache prevents repeated environment parsing.  Pass an
    explicit :class:`Settings` to the client when different processes
    or tests need different values.
    """
    return Settings()
