"""
session.py
-----------

Live token state for one tenant credential.

A :class:`Session` logs in when it is created and afterwards hands out
its access token, refreshing it when the token's ``exp`` claim says it
has expired.  The claim is read without verifying the signature: the
check only saves a round trip with a token the server would reject,
it never decides whether a caller is authorised.

Each session serialises its own login/refresh with a lock, so two
threads asking for the same tenant's token never interleave a refresh
and always see a complete access/refresh pair.
"""

from __future__ import annotations

import json
import threading
import time
from typing import Any, Callable, Optional

import jwt
from pydantic import ValidationError

from conexa.credentials import Credential
from conexa.errors import ResponseFailure
from conexa.logging_config import logger
from conexa.schemas.auth import LoginPayload, TokenPair

Clock = Callable[[], float]


class Session:
    """Token pair bound to one :class:`Credential`.

    :param credential: the tenant's keys
    :param pipeline: request pipeline used for login and refresh calls
    :param clock: returns the current UNIX time; ``time.time`` by default
    :raises ConexaError: the classified failure of the initial login
    """

    def __init__(self, credential: Credential, pipeline: Any, clock: Clock = time.time) -> None:
        self.credential = credential
        self._pipeline = pipeline
        self._clock = clock
        self._lock = threading.Lock()
        self.access_token: Optional[str] = None
        self.refresh_token: Optional[str] = None
        self.login()

    @property
    def key(self) -> str:
        return self.credential.key

    def login(self) -> None:
        """Authenticate the credential and store the returned token pair."""
        payload = LoginPayload(
            client_id=self.credential.client_id,
            secret_key=self.credential.secret_key,
            access_key=self.credential.access_key,
            client_key=self.key,
        )
        with self._lock:
            response = self._pipeline.auth(
                self._pipeline.settings.login_path,
                params=payload.model_dump(),
                client_key=self.key,
            ).run()
            self._store(response, "login")

    def refresh(self) -> None:
        """Exchange the refresh token for a new pair.

        On failure the previous tokens are kept and the error propagates.
        """
        with self._lock:
            self._refresh()

    def token(self) -> str:
        """Return a non-expired access token, refreshing it first if needed."""
        with self._lock:
            if self._expired():
                self._refresh()
            return self.access_token  # type: ignore[return-value]

    def expires_at(self) -> Optional[float]:
        """Decoded ``exp`` claim of the access token, or ``None`` if unreadable."""
        if not self.access_token:
            return None
        try:
            claims = jwt.decode(
                self.access_token,
                options={"verify_signature": False, "verify_exp": False},
            )
        except jwt.PyJWTError:
            return None
        exp = claims.get("exp")
        return float(exp) if isinstance(exp, (int, float)) else None

    def _expired(self) -> bool:
        exp = self.expires_at()
        if exp is None:
            logger.warning(json.dumps({"event": "session_token_unreadable", "client_key": self.key}))
            return True
        leeway = self._pipeline.settings.token_refresh_leeway
        return not exp - leeway > self._clock()

    def _refresh(self) -> None:
        response = self._pipeline.auth(
            self._pipeline.settings.refresh_path,
            headers={"Authorization": f"Bearer {self.refresh_token}"},
            client_key=self.key,
        ).run()
        self._store(response, "refresh")

    def _store(self, response: Any, event: str) -> None:
        try:
            pair = TokenPair.model_validate(response)
        except ValidationError as exc:
            logger.error(json.dumps({
                "event": f"session_{event}_invalid_response",
                "client_key": self.key,
            }))
            raise ResponseFailure(None, exc, f"Invalid {event} response: access_token and refresh_token are required") from exc
        # both tokens are assigned together
        self.access_token, self.refresh_token = pair.access_token, pair.refresh_token
        logger.info(json.dumps({
            "event": f"session_{event}",
            "client_key": self.key,
            "expires_at": self.expires_at(),
        }))

    def __repr__(self) -> str:
        return f"Session(key={self.key!r})"
