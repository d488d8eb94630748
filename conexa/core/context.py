"""
core/context.py
----------------

Registry of authenticated tenant sessions.

The :class:`SessionRegistry` maps client aliases to live
:class:`~conexa.session.Session` objects and is the single authority
the request pipeline asks for bearer tokens.  One registry is built
per :class:`~conexa.client.ConexaClient` and passed explicitly to
its pipeline; there is no module-level instance.

Locking
~~~~~~~
``_lock`` guards pool membership only.  Token fetches run outside it,
under the lock of the session concerned, so refreshing tenant A never
blocks a lookup for tenant B.  Aliases being registered are reserved
under ``_lock`` while their login runs, which keeps at most one
session per alias without holding the lock across network calls.

Pool construction
~~~~~~~~~~~~~~~~~
The pool is built on first access from ``Settings.credentials`` or, if
none are configured, from a single default credential.  The build is
atomic: if any login fails, nothing from that build is registered and
the error propagates; the next access tries again.
"""

from __future__ import annotations

import json
import threading
import time
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from conexa.core.config import Settings
from conexa.credentials import AccountKind, Credential
from conexa.errors import InvalidParameter, MissingCredentials
from conexa.logging_config import log_call, logger
from conexa.session import Clock, Session
from conexa.utils.case import to_key

CredentialLike = Union[Credential, Mapping[str, Any]]


class SessionRegistry:
    """Pool of tenant sessions keyed by alias.

    :param pipeline: login-capable request pipeline used by the sessions
    :param settings: source of configured credentials and defaults;
        taken from the pipeline when omitted
    :param credentials: explicit credentials, overriding
        ``Settings.credentials``
    :param clock: time source handed to every session
    """

    def __init__(self, pipeline: Any, settings: Optional[Settings] = None,
                 credentials: Optional[Union[CredentialLike, List[CredentialLike]]] = None,
                 clock: Clock = time.time) -> None:
        self._pipeline = pipeline
        self._settings = settings or pipeline.settings
        self._credentials = credentials
        self._clock = clock
        self._lock = threading.Lock()
        self._build_lock = threading.Lock()
        self._sessions: Optional[Dict[str, Session]] = None
        self._pending: Set[str] = set()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _pool(self) -> Dict[str, Session]:
        """Return the session map, building it on first access."""
        sessions = self._sessions
        if sessions is not None:
            return sessions
        with self._build_lock:
            if self._sessions is None:
                built = self._build()
                with self._lock:
                    self._sessions = built
            return self._sessions

    def _build(self) -> Dict[str, Session]:
        built: Dict[str, Session] = {}
        for credential in self._configured_credentials():
            if credential.key in built:
                raise InvalidParameter(f"Client key '{credential.key}' already exists", "key", "str")
            built[credential.key] = Session(credential, self._pipeline, clock=self._clock)
        logger.info(json.dumps({"event": "session_registry_built", "aliases": list(built)}))
        return built

    def _configured_credentials(self) -> List[Credential]:
        source = self._credentials if self._credentials is not None else self._settings.credentials
        if source:
            entries = [source] if isinstance(source, (Credential, Mapping)) else list(source)
            return [self._to_credential(entry) for entry in entries]
        return [Credential(
            client_id=self._settings.client_id,
            secret_key=self._settings.secret_key,
            access_key=self._settings.access_key,
            key=self._settings.default_client_key,
            default=True,
            settings=self._settings,
        )]

    def _to_credential(self, value: CredentialLike) -> Credential:
        if isinstance(value, Credential):
            return value
        return Credential(settings=self._settings, **dict(value))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _resolve(self, key: Any) -> str:
        return to_key(key if key is not None else self._settings.default_client_key)

    def _session_for(self, key: Any) -> Optional[Session]:
        pool = self._pool()
        with self._lock:
            return pool.get(self._resolve(key))

    def token_for(self, key: Any = None) -> str:
        """Return a valid access token for ``key`` (the default client when ``None``).

        :raises MissingCredentials: if no session is registered for the key
        """
        session = self._session_for(key)
        if session is None:
            raise MissingCredentials(f"Missing credentials for key: '{self._resolve(key)}'")
        return session.token()

    def client_for(self, key: Any = None) -> Optional[Credential]:
        session = self._session_for(key)
        return session.credential if session is not None else None

    def client_type_for(self, key: Any = None) -> AccountKind:
        credential = self.client_for(key)
        return credential.type if credential is not None else AccountKind.STANDARD

    def aliases(self) -> List[str]:
        """Aliases with a live session, in registration order."""
        pool = self._pool()
        with self._lock:
            return list(pool)

    def __len__(self) -> int:
        return len(self.aliases())

    def __contains__(self, key: object) -> bool:
        return self._session_for(key) is not None

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    @log_call
    def add_client(self, client: CredentialLike) -> Session:
        """Log ``client`` in and register its session.

        :raises InvalidParameter: if a session for the alias exists or is
            being registered
        """
        credential = self._to_credential(client)
        pool = self._pool()
        with self._lock:
            if credential.key in pool or credential.key in self._pending:
                raise InvalidParameter(f"Client key '{credential.key}' already exists", "key", "str")
            self._pending.add(credential.key)
        try:
            session = Session(credential, self._pipeline, clock=self._clock)
            with self._lock:
                pool[credential.key] = session
        finally:
            with self._lock:
                self._pending.discard(credential.key)
        logger.info(json.dumps({"event": "session_registry_client_added", "client_key": credential.key}))
        return session
