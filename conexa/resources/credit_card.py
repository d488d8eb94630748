"""
resources/credit_card.py
-------------------------

Stored credit cards.  The API uses ``/creditCard`` for both listing
and member calls.
"""

from __future__ import annotations

from typing import Any

from conexa.objects import attribute
from conexa.resources.model import Model


class CreditCard(Model):
    customer_id = attribute()
    brand = attribute()
    last_digits = attribute()
    is_default = attribute()

    @classmethod
    def url(cls, *params: Any) -> str:
        return "/".join(["/creditCard", *(str(p) for p in params)])

    @classmethod
    def show_url(cls, *params: Any) -> str:
        return cls.url(*params)
