"""
credentials.py
---------------

Description of one tenant's API keys.

A :class:`Credential` is what the session registry logs in with.  Any
key not given explicitly falls back to the process settings, except
the external ``client_id`` which every credential must carry.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from conexa.core.config import Settings, get_settings
from conexa.errors import InvalidParameter
from conexa.utils.case import to_key


class AccountKind(str, Enum):
    """Kind of tenant account: point of sale or e-commerce."""

    STANDARD = "pdv"
    ALTERNATE = "e_commerce"


class Credential:
    """Immutable set of keys identifying one tenant.

    :param client_id: external client id (required)
    :param secret_key: defaults to ``Settings.secret_key``
    :param access_key: defaults to ``Settings.access_key``
    :param key: alias used to select the tenant; defaults to
        ``Settings.default_client_key``
    :param type: :class:`AccountKind` or its value; defaults to
        ``AccountKind.STANDARD``
    :param default: whether this is the default credential
    :raises InvalidParameter: if ``client_id`` is missing or ``type`` is
        not a known account kind
    """

    __slots__ = ("_secret_key", "_access_key", "_client_id", "_key", "_type", "default")

    def __init__(
        self,
        client_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        access_key: Optional[str] = None,
        key: Any = None,
        type: Any = AccountKind.STANDARD,
        default: bool = True,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or get_settings()
        if client_id is None or str(client_id).strip() == "":
            raise InvalidParameter("Missing data for credentials: client_id", "client_id", "str")
        try:
            kind = AccountKind(type)
        except ValueError:
            kinds = [k.value for k in AccountKind]
            raise InvalidParameter(f"Incorrect client type, must be one of {kinds}", "type", "AccountKind") from None

        object.__setattr__(self, "_client_id", str(client_id))
        object.__setattr__(self, "_secret_key", secret_key if secret_key is not None else settings.secret_key)
        object.__setattr__(self, "_access_key", access_key if access_key is not None else settings.access_key)
        object.__setattr__(self, "_key", to_key(key if key is not None else settings.default_client_key))
        object.__setattr__(self, "_type", kind)
        object.__setattr__(self, "default", bool(default))

    def __setattr__(self, name: str, value: Any) -> None:
        if name != "default":
            raise AttributeError(f"Credential.{name} is read-only")
        object.__setattr__(self, name, bool(value))

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def secret_key(self) -> Optional[str]:
        return self._secret_key

    @property
    def access_key(self) -> Optional[str]:
        return self._access_key

    @property
    def key(self) -> str:
        return self._key

    @property
    def type(self) -> AccountKind:
        return self._type

    def to_dict(self) -> Dict[str, Any]:
        """Return the fields as keyword arguments accepted by the constructor."""
        return {
            "client_id": self._client_id,
            "secret_key": self._secret_key,
            "access_key": self._access_key,
            "key": self._key,
            "type": self._type.value,
            "default": self.default,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Credential):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self._key, self._client_id))

    def __repr__(self) -> str:
        return f"Credential(key={self._key!r}, client_id={self._client_id!r}, type={self._type.value!r})"
