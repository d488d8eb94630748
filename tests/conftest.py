"""Pytest configuration and common fixtures."""

import json
import os
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import jwt
import pytest

from conexa.client import ConexaClient
from conexa.clients.http_client import HTTPClient
from conexa.core.config import API_PREFIX, Settings, get_settings
from conexa.core.context import SessionRegistry
from conexa.request import RequestPipeline

# HS256 keys shorter than 32 bytes trigger PyJWT's InsecureKeyLengthWarning
SIGNING_KEY = "conexa-test-signing-key-0123456789abcdef"
API_HOST = "https://test.conexa.app"


def make_token(exp: float, **claims: Any) -> str:
    """Mint a signed JWT expiring at ``exp``."""
    return jwt.encode({"exp": int(exp), **claims}, SIGNING_KEY, algorithm="HS256")


def token_exp(token: str) -> int:
    return jwt.decode(token, options={"verify_signature": False})["exp"]


class FakeClock:
    """Controllable time source injected into sessions."""

    def __init__(self, start: Optional[float] = None):
        self.now = float(start if start is not None else time.time())

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeConexa:
    """In-memory Conexa platform used as an ``httpx.MockTransport`` handler.

    Login and refresh calls answer with a fresh token pair whose access
    token expires ``ttl`` seconds after the fake clock's current time.
    Other paths answer with the response registered through :meth:`on`,
    or an empty 404.
    """

    def __init__(self, clock: Callable[[], float], ttl: int = 3600):
        self.clock = clock
        self.ttl = ttl
        self.requests: List[httpx.Request] = []
        self.logins: List[Dict[str, Any]] = []
        self.refreshes: List[str] = []
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self._issued = 0
        self._lock = threading.Lock()

    def issue(self) -> Dict[str, str]:
        with self._lock:
            self._issued += 1
            serial = self._issued
        return {
            "access_token": make_token(self.clock() + self.ttl, jti=f"access-{serial}"),
            "refresh_token": f"refresh-{serial}",
        }

    def on(self, method: str, path: str, status: int = 200, json_body: Any = None,
           content: bytes = b"", handler: Optional[Callable[[httpx.Request], httpx.Response]] = None) -> None:
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                if json_body is not None:
                    return httpx.Response(status, json=json_body)
                return httpx.Response(status, content=content)
        self.routes[(method.upper(), path)] = handler

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method.upper() and self.path_of(r) == path]

    @staticmethod
    def path_of(request: httpx.Request) -> str:
        path = request.url.path
        return path[len(API_PREFIX):] if path.startswith(API_PREFIX) else path

    def __call__(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)
        path = self.path_of(request)
        route = self.routes.get((request.method, path))
        if route is not None:
            return route(request)
        if request.method == "POST" and path == "/pdvauth":
            with self._lock:
                self.logins.append(json.loads(request.content))
            return httpx.Response(200, json=self.issue())
        if request.method == "POST" and path == "/refresh-token":
            with self._lock:
                self.refreshes.append(request.headers.get("authorization", ""))
            return httpx.Response(200, json=self.issue())
        return httpx.Response(404, content=b"")


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Keep the process environment from leaking into the settings under test."""
    for name in list(os.environ):
        if name.upper().startswith("CONEXA_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def conexa_api(clock):
    return FakeConexa(clock)


@pytest.fixture
def settings():
    return Settings(
        api_host=API_HOST + "/",
        client_id="1001",
        secret_key="s3cr3t",
        access_key="acc3ss",
    )


@pytest.fixture
def http_client(settings, conexa_api):
    client = HTTPClient(settings, transport=httpx.MockTransport(conexa_api))
    yield client
    client.close()


@pytest.fixture
def login_pipeline(http_client, settings):
    return RequestPipeline(http_client, settings)


@pytest.fixture
def registry(login_pipeline, settings, clock):
    return SessionRegistry(login_pipeline, settings, clock=clock)


@pytest.fixture
def pipeline(http_client, settings, registry):
    return RequestPipeline(http_client, settings, token_provider=registry.token_for)


@pytest.fixture
def client(settings, conexa_api):
    with ConexaClient(settings, transport=httpx.MockTransport(conexa_api)) as api:
        yield api
