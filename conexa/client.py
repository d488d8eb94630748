"""
client.py
----------

Entry point of the library.

:class:`ConexaClient` wires the shared HTTP client, the session
registry and the request pipeline together, the way an application
lifespan creates its shared services once and hands them to every
call site.  Resources receive the client explicitly::

    with ConexaClient(Settings(api_host="https://acme.conexa.app", client_id="42")) as api:
        customer = Customer.find(api, 127)
        charges = Charge.all(api, customer_id=[customer.id])
"""

from __future__ import annotations

import json
from typing import Any, List, Optional, Union

import httpx

from conexa.clients.http_client import HTTPClient
from conexa.core.config import Settings, get_settings
from conexa.core.context import CredentialLike, SessionRegistry
from conexa.credentials import AccountKind, Credential
from conexa.errors import MissingCredentials
from conexa.logging_config import logger
from conexa.request import Request, RequestPipeline
from conexa.session import Session


class ConexaClient:
    """Authenticated client for one Conexa host.

    :param settings: client settings; :func:`get_settings` when omitted
    :param transport: optional ``httpx`` transport (tests, proxies)
    :param credentials: tenant credentials overriding ``Settings.credentials``

    When ``Settings.api_token`` is set, that static application token is
    sent with every call and no session registry is used.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[httpx.BaseTransport] = None,
                 credentials: Optional[Union[CredentialLike, List[CredentialLike]]] = None) -> None:
        self.settings = settings or get_settings()
        self.http_client = HTTPClient(self.settings, transport=transport)
        login_pipeline = RequestPipeline(self.http_client, self.settings)
        if self.settings.api_token:
            self.registry: Optional[SessionRegistry] = None
            self.pipeline = RequestPipeline(self.http_client, self.settings, token_provider=self._static_token)
        else:
            self.registry = SessionRegistry(login_pipeline, self.settings, credentials=credentials)
            self.pipeline = RequestPipeline(self.http_client, self.settings, token_provider=self.registry.token_for)
        logger.debug(json.dumps({
            "event": "client_created",
            "api_endpoint": self.settings.api_endpoint,
            "static_token": self.registry is None,
        }))

    def _static_token(self, key: Optional[str] = None) -> str:
        return self.settings.api_token  # type: ignore[return-value]

    def _require_registry(self) -> SessionRegistry:
        if self.registry is None:
            raise MissingCredentials("Client uses a static api_token; no session registry is available")
        return self.registry

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def get(self, path: str, **options: Any) -> Request:
        return self.pipeline.get(path, **options)

    def post(self, path: str, **options: Any) -> Request:
        return self.pipeline.post(path, **options)

    def put(self, path: str, **options: Any) -> Request:
        return self.pipeline.put(path, **options)

    def patch(self, path: str, **options: Any) -> Request:
        return self.pipeline.patch(path, **options)

    def delete(self, path: str, **options: Any) -> Request:
        return self.pipeline.delete(path, **options)

    def auth(self, path: str, **options: Any) -> Request:
        return self.pipeline.auth(path, **options)

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    def token_for(self, key: Any = None) -> str:
        if self.registry is None:
            return self._static_token(key)
        return self.registry.token_for(key)

    def add_client(self, client: CredentialLike) -> Session:
        return self._require_registry().add_client(client)

    def client_for(self, key: Any = None) -> Optional[Credential]:
        return self.registry.client_for(key) if self.registry is not None else None

    def client_type_for(self, key: Any = None) -> AccountKind:
        return self.registry.client_type_for(key) if self.registry is not None else AccountKind.STANDARD

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> "ConexaClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
