"""
objects.py
-----------

Attribute containers for API payloads.

A :class:`ConexaObject` keeps the payload as a plain ``snake_case``
key/value map.  Resource classes declare typed accessors with
:func:`attribute` instead of resolving names at call time; any other
key stays reachable through ``obj["key"]`` or ``obj.get("key")``.
Nested mappings are converted into the resource class matching their
(singularized) key, e.g. ``address`` becomes an ``Address``.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Iterator, List, Optional, Set, Type

from conexa.utils.case import singularize, to_snake_case

_RESOURCES: Dict[str, Type["ConexaObject"]] = {}


class attribute:
    """Typed accessor for one payload key.

    ``default`` may be a value or a zero-argument callable (``list``)
    used when the key is absent.
    """

    def __init__(self, key: Optional[str] = None, default: Any = None) -> None:
        self.key = key
        self.default = default

    def __set_name__(self, owner: type, name: str) -> None:
        if self.key is None:
            self.key = name

    def __get__(self, obj: Optional["ConexaObject"], owner: type) -> Any:
        if obj is None:
            return self
        value = obj.get(self.key)
        if value is None:
            return self.default() if callable(self.default) else self.default
        return value

    def __set__(self, obj: "ConexaObject", value: Any) -> None:
        obj[self.key] = value


class ConexaObject:
    """Generic payload object with unsaved-attribute tracking."""

    _register: ClassVar[bool] = True

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("_register", True):
            _RESOURCES[to_snake_case(cls.__name__)] = cls

    def __init__(self, attributes: Any = None, api: Any = None, client_key: Optional[str] = None) -> None:
        self._attributes: Dict[str, Any] = {}
        self._unsaved: Set[str] = set()
        self._api = api
        self._client_key = client_key
        self.update(attributes or {})

    # ------------------------------------------------------------------
    # Mapping access
    # ------------------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return self._attributes.get(to_snake_case(key))

    def __setitem__(self, key: str, value: Any) -> None:
        key = to_snake_case(key)
        self._attributes[key] = value
        self._unsaved.add(key)

    def __contains__(self, key: object) -> bool:
        return to_snake_case(str(key)) in self._attributes

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(to_snake_case(key), default)

    def keys(self) -> List[str]:
        return list(self._attributes)

    @property
    def attributes(self) -> Dict[str, Any]:
        return self._attributes

    @property
    def empty(self) -> bool:
        return not self._attributes

    @property
    def id(self) -> Any:
        return self._attributes.get("id")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConexaObject) or type(self) is not type(other):
            return NotImplemented
        if self.id is None and other.id is None:
            return self._attributes == other._attributes
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id!r} {self.to_dict()!r}>"

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def update(self, attributes: Any) -> None:
        """Replace the attribute map with ``attributes`` (mapping or object).

        Keys absent from ``attributes`` are removed and every updated key
        counts as saved.
        """
        if isinstance(attributes, ConexaObject):
            attributes = attributes._attributes
        incoming = {to_snake_case(k): v for k, v in attributes.items()}
        for key in list(self._attributes):
            if key not in incoming:
                del self._attributes[key]
        for key, value in incoming.items():
            self._attributes[key] = convert(value, singularize(key), self._api, self._client_key)
            self._unsaved.discard(key)

    def to_dict(self) -> Dict[str, Any]:
        return {key: _plain(value, "to_dict") for key, value in self._attributes.items()}

    def unsaved_attributes(self) -> Dict[str, Any]:
        return {key: _plain(self._attributes.get(key), "unsaved_attributes") for key in self._unsaved}


class Pagination(ConexaObject):
    item_per_page = attribute()
    current_page = attribute()
    total_pages = attribute()
    total_items = attribute()


class Result(ConexaObject):
    """Page of items returned by a list endpoint, with its pagination."""

    _register = False

    def __init__(self, envelope: Any = None, resource_name: Optional[str] = None,
                 api: Any = None, client_key: Optional[str] = None) -> None:
        self._resource_name = resource_name
        super().__init__(envelope, api=api, client_key=client_key)

    def update(self, attributes: Any) -> None:
        if isinstance(attributes, ConexaObject):
            attributes = attributes._attributes
        attributes = dict(attributes)
        data = attributes.pop("data", None)
        super().update(attributes)
        # items take the resource class of the request, not of the "data" key
        self._attributes["data"] = convert(data, self._resource_name, self._api, self._client_key) if data is not None else []

    @property
    def data(self) -> List[Any]:
        return self._attributes.get("data") or []

    @property
    def pagination(self) -> Optional[Pagination]:
        return self._attributes.get("pagination")

    @property
    def empty(self) -> bool:
        return not self.data

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, (int, slice)):
            return self.data[key]
        return super().__getitem__(key)

    def __repr__(self) -> str:
        return repr(self.data)


def resource_class_for(resource_name: Optional[str]) -> Type[ConexaObject]:
    if resource_name is None:
        return ConexaObject
    return _RESOURCES.get(to_snake_case(resource_name), ConexaObject)


def convert(value: Any, resource_name: Optional[str] = None, api: Any = None,
            client_key: Optional[str] = None) -> Any:
    """Convert decoded JSON into resource objects.

    Lists are converted element-wise, mappings into the class registered
    for ``resource_name`` (falling back to :class:`ConexaObject`), and
    anything else is returned unchanged.
    """
    if isinstance(value, list):
        return [convert(item, resource_name, api, client_key) for item in value]
    if isinstance(value, dict):
        return resource_class_for(resource_name)(value, api=api, client_key=client_key)
    return value


def convert_response(body: Any, resource_name: Optional[str] = None, api: Any = None,
                     client_key: Optional[str] = None) -> Any:
    """Convert a full response body, honouring the ``data``/``pagination`` envelope."""
    if isinstance(body, dict) and body.get("data") is not None:
        if "pagination" in body:
            return Result(
                {"data": body["data"], "pagination": body["pagination"]},
                resource_name, api=api, client_key=client_key,
            )
        return convert(body["data"], resource_name, api, client_key)
    return convert(body, resource_name, api, client_key)


def _plain(value: Any, method: str) -> Any:
    if isinstance(value, ConexaObject):
        return getattr(value, method)()
    if isinstance(value, list):
        return [_plain(v, method) for v in value]
    return value
