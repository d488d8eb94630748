"""
resources/model.py
-------------------

Base class for API resources (customers, charges, contracts...).

A resource maps to two endpoints: a collection URL (``/customers``)
used for listing and a member URL (``/customer/<id>``) used for
reading, creating, updating and deleting.  Every operation takes the
client (or any pipeline exposing ``get``/``post``/``patch``/``delete``)
explicitly, plus an optional ``client_key`` selecting the tenant.
Objects returned by an operation remember both, so ``save()`` and
``delete()`` go through the same tenant.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional
from urllib.parse import quote

from conexa.errors import InvalidRequest
from conexa.objects import ConexaObject, Result
from conexa.utils.case import camel_case_lower, to_snake_case
from conexa.utils.pagination import next_page, paginate

DEFAULT_PAGE_SIZE = 100


class Model(ConexaObject):
    """CRUD operations shared by all resources.

    Subclasses may set ``primary_key_name`` when the id attribute is not
    ``<underscored_class_name>_id``, and override :meth:`url` or
    :meth:`show_url` when the endpoints do not follow the default
    ``/<camelName>s`` and ``/<camelName>`` pattern.
    """

    _register = False
    primary_key_name: ClassVar[Optional[str]] = None

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------

    @classmethod
    def underscored_class_name(cls) -> str:
        return to_snake_case(cls.__name__)

    @classmethod
    def class_name(cls) -> str:
        return camel_case_lower(cls.underscored_class_name())

    @classmethod
    def url(cls, *params: Any) -> str:
        return "/".join([f"/{quote(cls.class_name())}s", *(str(p) for p in params)])

    @classmethod
    def show_url(cls, *params: Any) -> str:
        return "/".join([f"/{quote(cls.class_name())}", *(str(p) for p in params)])

    @classmethod
    def _pk(cls) -> str:
        return cls.primary_key_name or f"{cls.underscored_class_name()}_id"

    @property
    def id(self) -> Any:
        value = self._attributes.get(self._pk())
        return value if value is not None else self._attributes.get("id")

    def _set_primary_key(self, value: Any) -> None:
        self[self._pk()] = value

    def _require_api(self) -> Any:
        if self._api is None:
            raise InvalidRequest(f"{self.__class__.__name__} is not bound to a client")
        return self._api

    # ------------------------------------------------------------------
    # Class operations
    # ------------------------------------------------------------------

    @classmethod
    def find(cls, api: Any, id: Any, client_key: Optional[str] = None, **options: Any) -> Any:
        """Fetch one resource by id.

        :raises InvalidRequest: if ``id`` is ``None`` or empty
        """
        if id is None or str(id).strip() == "":
            raise InvalidRequest("Invalid ID")
        return api.get(cls.show_url(id), params=options or None, client_key=client_key).call(cls.underscored_class_name())

    @classmethod
    def find_by(cls, api: Any, params: Optional[Dict[str, Any]] = None, page: Optional[int] = None,
                size: Optional[int] = None, client_key: Optional[str] = None) -> Any:
        """List resources matching ``params``, one page at a time.

        Page and size default to 1 and 100.

        :raises InvalidRequest: if page or size is lower than 1
        """
        params = dict(params or {})
        if params.get("page") is None:
            params["page"] = page if page is not None else 1
        if params.get("size") is None:
            params["size"] = size if size is not None else DEFAULT_PAGE_SIZE
        if int(params["page"]) < 1 or int(params["size"]) < 1:
            raise InvalidRequest("Invalid page size")
        return api.get(cls.url(), params=params, client_key=client_key).call(cls.underscored_class_name())

    @classmethod
    def all(cls, api: Any, page: Optional[int] = None, size: Optional[int] = None,
            client_key: Optional[str] = None, **params: Any) -> Any:
        return cls.find_by(api, params, page, size, client_key=client_key)

    where = all

    @classmethod
    def iter_all(cls, api: Any, size: int = DEFAULT_PAGE_SIZE, client_key: Optional[str] = None,
                 **params: Any) -> List[Any]:
        """Collect every page of a listing, bounded by ``max_pages``/``max_items``."""

        def fetch(page: int) -> Any:
            return cls.find_by(api, params, page, size, client_key=client_key)

        def extract(result: Any):
            if isinstance(result, Result):
                return list(result), next_page(result.pagination)
            if isinstance(result, list):
                return result, None
            return ([result] if result else []), None

        return paginate(fetch, extract, settings=api.settings)

    @classmethod
    def create(cls, api: Any, attributes: Optional[Dict[str, Any]] = None,
               client_key: Optional[str] = None, **fields: Any) -> Any:
        obj = cls(dict(attributes or {}, **fields), api=api, client_key=client_key)
        obj._unsaved.update(obj._attributes)
        return obj.save()

    @classmethod
    def destroy(cls, api: Any, id: Any, client_key: Optional[str] = None) -> Any:
        obj = cls({}, api=api, client_key=client_key)
        obj._set_primary_key(id)
        return obj.delete()

    # ------------------------------------------------------------------
    # Instance operations
    # ------------------------------------------------------------------

    def save(self) -> "Model":
        """Create the resource when it has no id, otherwise PATCH its unsaved attributes."""
        api = self._require_api()
        if self.id is None:
            created = api.post(self.show_url(), params=self.to_dict(), client_key=self._client_key).run()
            new_id = None
            if isinstance(created, dict):
                new_id = created.get("id", created.get(camel_case_lower(self._pk())))
            self._set_primary_key(new_id)
            return self.fetch()
        changes = self.unsaved_attributes()
        response = api.patch(self.show_url(self.id), params=changes, client_key=self._client_key).run()
        if isinstance(response, dict) and response:
            self.update(response)
        self._unsaved.clear()
        return self

    def fetch(self) -> "Model":
        api = self._require_api()
        fresh = self.find(api, self.id, client_key=self._client_key)
        self.update(fresh)
        return self

    def delete(self) -> "Model":
        """Delete the resource.

        :raises InvalidRequest: if the object has no id
        """
        if self.id is None or str(self.id).strip() == "":
            raise InvalidRequest("Invalid ID")
        api = self._require_api()
        response = api.delete(self.show_url(self.id), client_key=self._client_key).run()
        if isinstance(response, dict) and response:
            self.update(response)
        return self
