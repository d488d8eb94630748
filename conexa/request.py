"""
request.py
-----------

Describe, execute and classify one HTTP call to the Conexa API.

A :class:`Request` is a transient description of a call (path, verb,
parameters, query, headers, whether it is a login call and which
tenant it is for).  The :class:`RequestPipeline` turns it into an
HTTP request, attaches the tenant's bearer token, sends it and maps
the outcome onto the :mod:`conexa.errors` taxonomy::

    Built -> Executing -> Succeeded
                       -> ConnectionFailure
                       -> ResponseFailure / NotFound
                       -> ValidationFailure

Every outcome is terminal; the pipeline never retries.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Mapping, Optional

import httpx

from conexa.clients.http_client import HTTPClient
from conexa.core.auth import build_headers, build_url, flatten_query
from conexa.core.config import Settings, get_settings
from conexa.errors import (
    ConnectionFailure,
    ConexaError,
    MissingCredentials,
    NotFound,
    ResponseFailure,
    ValidationFailure,
)
from conexa.logging_config import log_call, logger
from conexa.objects import convert_response
from conexa.utils.case import camelize_hash

# Verbs whose parameters travel in the query string instead of the body.
QUERY_VERBS = {"GET", "DELETE"}

TokenProvider = Callable[[Optional[str]], str]


class Request:
    """Description of one API call.

    Requests are normally obtained from the factory methods of a
    :class:`RequestPipeline` (``pipeline.get(...)``), which binds them
    so that :meth:`run` and :meth:`call` can execute them.
    """

    def __init__(
        self,
        path: str,
        method: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        auth: bool = False,
        client_key: Optional[str] = None,
        pipeline: Optional["RequestPipeline"] = None,
    ) -> None:
        self.path = path
        self.method = method.upper()
        self.parameters = dict(params) if params is not None else None
        self.query = dict(query or {})
        self.headers = dict(headers or {})
        self.auth = auth
        self.client_key = client_key
        self._pipeline = pipeline

    def run(self) -> Any:
        return self._bound().run(self)

    def call(self, resource_name: Optional[str] = None) -> Any:
        return self._bound().call(self, resource_name)

    def _bound(self) -> "RequestPipeline":
        if self._pipeline is None:
            raise ConexaError("Request is not bound to a pipeline")
        return self._pipeline

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "method": self.method,
            "params": self.parameters,
            "query": self.query,
            "headers": self.headers,
            "auth": self.auth,
            "client_key": self.client_key,
        }

    def __repr__(self) -> str:
        return f"Request({self.method} {self.path})"


class RequestPipeline:
    """Builds, executes and classifies requests.

    :param http_client: shared transport
    :param settings: client settings (API host, defaults)
    :param token_provider: callable returning a bearer token for a client
        key; usually :meth:`SessionRegistry.token_for`.  A pipeline
        without a provider can only run login/refresh calls.
    """

    def __init__(self, http_client: HTTPClient, settings: Optional[Settings] = None,
                 token_provider: Optional[TokenProvider] = None) -> None:
        self.http_client = http_client
        self.settings = settings or get_settings()
        self.token_provider = token_provider

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    def get(self, path: str, **options: Any) -> Request:
        return Request(path, "GET", pipeline=self, **options)

    def post(self, path: str, **options: Any) -> Request:
        return Request(path, "POST", pipeline=self, **options)

    def put(self, path: str, **options: Any) -> Request:
        return Request(path, "PUT", pipeline=self, **options)

    def patch(self, path: str, **options: Any) -> Request:
        return Request(path, "PATCH", pipeline=self, **options)

    def delete(self, path: str, **options: Any) -> Request:
        return Request(path, "DELETE", pipeline=self, **options)

    def auth(self, path: str, **options: Any) -> Request:
        """POST request that authenticates itself (login or refresh): no bearer token is attached."""
        options["auth"] = True
        return Request(path, "POST", pipeline=self, **options)

    # ------------------------------------------------------------------
    # Build phase
    # ------------------------------------------------------------------

    def request_params(self, request: Request) -> Dict[str, Any]:
        """Return method, URL, headers and payload for ``request``.

        For resource calls this fetches the tenant's token, which may
        refresh it over the network.
        """
        parameters = camelize_hash(request.parameters)
        query = flatten_query(request.query)
        payload = None
        if request.method in QUERY_VERBS:
            query.extend(flatten_query(parameters))
        elif parameters is not None:
            payload = json.dumps(parameters)

        token = None
        if not request.auth:
            if self.token_provider is None:
                raise MissingCredentials(f"Missing credentials for key: '{request.client_key}'")
            token = self.token_provider(request.client_key)

        return {
            "method": request.method,
            "url": build_url(self.settings.api_endpoint, request.path, query),
            "headers": build_headers(token, request.headers),
            "payload": payload,
        }

    # ------------------------------------------------------------------
    # Execute phase
    # ------------------------------------------------------------------

    @log_call
    def execute(self, request: Request) -> Any:
        """Send ``request`` and return the decoded body, envelope included."""
        params = self.request_params(request)
        safe_params = _redact(params)
        try:
            response = self.http_client.request(
                params["method"],
                params["url"],
                headers=params["headers"],
                content=params["payload"].encode("utf-8") if params["payload"] is not None else None,
                json_body=request.parameters,
            )
        except httpx.DecodingError as exc:
            logger.warning(json.dumps({
                "event": "request_decoding_failure",
                "method": params["method"],
                "url": params["url"],
                "detail": str(exc),
            }))
            raise ResponseFailure(safe_params, exc, "Response body could not be decoded") from exc
        except httpx.RequestError as exc:
            # transport errors, too many redirects
            logger.warning(json.dumps({
                "event": "request_connection_failure",
                "method": params["method"],
                "url": params["url"],
                "detail": str(exc),
            }))
            raise ConnectionFailure(exc) from exc

        if response.is_error:
            failure = _classify(response, safe_params)
            logger.warning(json.dumps({
                "event": "request_failed",
                "method": params["method"],
                "url": params["url"],
                "status": response.status_code,
                "error": failure.__class__.__name__,
            }))
            raise failure

        try:
            return response.json()
        except ValueError as exc:
            if response.status_code == 204:
                return {}
            raise ResponseFailure(safe_params, exc, "Response body is not valid JSON") from exc

    def run(self, request: Request) -> Any:
        """Execute ``request`` and unwrap the ``data`` envelope when present."""
        body = self.execute(request)
        if isinstance(body, dict) and body.get("data") is not None:
            return body["data"]
        return body

    def call(self, request: Request, resource_name: Optional[str] = None) -> Any:
        """Execute ``request`` and convert the result into model objects."""
        return convert_response(self.execute(request), resource_name, api=self, client_key=request.client_key)


def _redact(params: Dict[str, Any]) -> Dict[str, Any]:
    safe = dict(params)
    safe["headers"] = {k: v for k, v in params["headers"].items() if k.lower() != "authorization"}
    return safe


def _classify(response: httpx.Response, request_params: Dict[str, Any]) -> ConexaError:
    """Map an error response onto the exception taxonomy."""
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        error = exc

    if response.status_code == 404 and not response.content.strip():
        return NotFound(None, request_params, error)
    try:
        parsed = response.json()
    except ValueError:
        return ResponseFailure(request_params, error)

    message = parsed.get("message") if isinstance(parsed, dict) else None
    if response.status_code == 404:
        return NotFound(parsed if message else None, request_params, error)
    if message:
        detail = str(message)
        errors = parsed.get("errors")
        if errors:
            detail += f" => Errors: {errors}"
        return ResponseFailure(request_params, error, detail)
    return ValidationFailure(parsed, request_params)
