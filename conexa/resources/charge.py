"""
resources/charge.py
--------------------

Charges (invoices) and the actions the API offers on them: settle,
PIX QR code, cancel and e-mail notification.  Class-level variants
take the charge id, fetch the charge first and then run the action.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from conexa.objects import attribute
from conexa.resources.model import Model


class Charge(Model):
    status = attribute()
    amount = attribute()
    due_date = attribute()
    customer_id = attribute()

    @property
    def is_paid(self) -> bool:
        return self.status == "paid"

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"

    @property
    def is_overdue(self) -> bool:
        return self.status == "overdue"

    def settle(self, params: Optional[Dict[str, Any]] = None) -> "Charge":
        """Mark the charge as paid; ``params`` carries optional payment details."""
        api = self._require_api()
        api.post(self.show_url("settle", self.id), params=params or {}, client_key=self._client_key).run()
        return self

    def pix(self) -> Any:
        """PIX payment data (QR code) of the charge."""
        api = self._require_api()
        return api.get(self.show_url("pix", self.id), client_key=self._client_key).call("pix")

    def cancel(self) -> "Charge":
        api = self._require_api()
        api.post(self.show_url("cancel", self.id), client_key=self._client_key).run()
        return self

    def send_email(self) -> "Charge":
        api = self._require_api()
        api.post(self.show_url("sendEmail", self.id), client_key=self._client_key).run()
        return self

    @classmethod
    def settle_by_id(cls, api: Any, id: Any, params: Optional[Dict[str, Any]] = None,
                     client_key: Optional[str] = None) -> "Charge":
        return cls.find(api, id, client_key=client_key).settle(params)

    @classmethod
    def cancel_by_id(cls, api: Any, id: Any, client_key: Optional[str] = None) -> "Charge":
        return cls.find(api, id, client_key=client_key).cancel()

    @classmethod
    def send_email_by_id(cls, api: Any, id: Any, client_key: Optional[str] = None) -> "Charge":
        return cls.find(api, id, client_key=client_key).send_email()

    @classmethod
    def pix_by_id(cls, api: Any, id: Any, client_key: Optional[str] = None) -> Any:
        return cls.find(api, id, client_key=client_key).pix()
