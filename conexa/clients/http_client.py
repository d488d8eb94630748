"""
clients/http_client.py
----------------------

HTTP client wrapper with connection pooling and timeouts.  One
instance is created per :class:`~conexa.client.ConexaClient` and
shared by every session and request of that client.  It uses the
``httpx`` library under the hood and honours the settings defined in
:mod:`conexa.core.config`.

Requests are sent exactly once: any ``httpx`` error is propagated
to the request pipeline, which logs and classifies it.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import httpx

from conexa.core.config import Settings, get_settings
from conexa.logging_config import log_http_request


class HTTPClient:
    """Thread-safe HTTP client backed by a pooled ``httpx.Client``.

    Pass ``transport`` to route calls through a custom ``httpx``
    transport (for instance ``httpx.MockTransport`` in tests).
    """

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[httpx.BaseTransport] = None) -> None:
        settings = settings or get_settings()
        self.timeout = settings.http_timeout
        # HTTPX Client uses connection pooling
        self._client = httpx.Client(timeout=self.timeout, transport=transport)

    def close(self) -> None:
        """Close the underlying HTTPX client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(self, method: str, url: str, *, headers: Dict[str, str],
                content: Optional[bytes] = None, json_body: Any = None) -> httpx.Response:
        """Perform a single HTTP request.

        ``json_body`` is only used for logging; the caller passes the
        already encoded payload in ``content``.
        """
        method = method.upper()
        log_http_request(method, url, headers=headers, json_body=json_body)
        start_time = time.time()
        response = self._client.request(method, url, headers=headers, content=content)
        duration_ms = (time.time() - start_time) * 1000
        log_http_request(method, url, status=response.status_code, duration_ms=duration_ms)
        return response
