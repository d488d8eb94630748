"""
resources/customer.py
----------------------

Customers (``/customer``) and the helpers listing their requesters,
contracts and charges.
"""

from __future__ import annotations

from typing import Any, Optional

from conexa.objects import attribute
from conexa.resources.model import Model


class Customer(Model):
    company_id = attribute()
    name = attribute()
    trade_name = attribute()
    has_login_access = attribute()
    is_active = attribute()
    is_blocked = attribute()
    is_juridical_person = attribute()
    is_foreign = attribute()
    address = attribute()
    legal_person = attribute()
    natural_person = attribute()
    phones = attribute(default=list)
    emails_message = attribute(default=list)
    emails_financial_messages = attribute(default=list)
    tags_id = attribute(default=list)
    created_at = attribute()

    @classmethod
    def persons(cls, api: Any, customer_id: Any, client_key: Optional[str] = None) -> Any:
        """Requesters registered for ``customer_id``."""
        from conexa.resources.simple import Person

        return Person.all(api, client_key=client_key, customer_id=customer_id)

    @classmethod
    def contracts(cls, api: Any, customer_id: Any, client_key: Optional[str] = None) -> Any:
        from conexa.resources.contract import Contract

        return Contract.all(api, client_key=client_key, customer_id=[customer_id])

    @classmethod
    def charges(cls, api: Any, customer_id: Any, client_key: Optional[str] = None) -> Any:
        from conexa.resources.charge import Charge

        return Charge.all(api, client_key=client_key, customer_id=[customer_id])
