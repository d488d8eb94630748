"""
schemas/auth.py
----------------

Pydantic models for the authentication endpoints.  ``LoginPayload`` is
the body sent to the login endpoint (its keys are camelized by the
request pipeline) and ``TokenPair`` validates the login and refresh
responses before a session stores them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoginPayload(BaseModel):
    client_id: str
    secret_key: str | None = None
    access_key: str | None = None
    client_key: str


class TokenPair(BaseModel):
    """Access/refresh pair returned by ``/pdvauth`` and ``/refresh-token``."""

    access_token: str
    refresh_token: str

    model_config = ConfigDict(extra="ignore")
