"""
resources/contract.py
----------------------

Recurring billing contracts.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from conexa.objects import attribute
from conexa.resources.model import Model


class Contract(Model):
    status = attribute()
    customer_id = attribute()
    plan_id = attribute()
    start_date = attribute()
    end_date = attribute()
    payment_day = attribute()

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @property
    def is_ended(self) -> bool:
        return self.status in ("ended", "cancelled")

    def end_contract(self, params: Optional[Dict[str, Any]] = None) -> "Contract":
        """Terminate the contract; ``params`` may carry ``end_date`` and ``reason``."""
        api = self._require_api()
        api.post(self.show_url("end", self.id), params=params or {}, client_key=self._client_key).run()
        return self

    @classmethod
    def end_contract_by_id(cls, api: Any, id: Any, params: Optional[Dict[str, Any]] = None,
                           client_key: Optional[str] = None) -> "Contract":
        return cls.find(api, id, client_key=client_key).end_contract(params)
