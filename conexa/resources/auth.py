"""
resources/auth.py
------------------

Username/password authentication (``POST /auth``).

Most integrations authenticate through tenant credentials or a static
application token instead; this endpoint returns a user token that
can be set as ``Settings.api_token``.
"""

from __future__ import annotations

from typing import Any, Optional

from conexa.objects import ConexaObject, attribute


class Auth(ConexaObject):
    user = attribute()
    token_type = attribute()
    access_token = attribute()
    expires_in = attribute()

    @classmethod
    def login(cls, api: Any, username: str, password: str, client_key: Optional[str] = None) -> "Auth":
        """Authenticate ``username`` and return the issued token.

        The request carries no bearer token.
        """
        response = api.auth("/auth", params={"username": username, "password": password}, client_key=client_key).run()
        return cls(response, api=api, client_key=client_key)

    authenticate = login
