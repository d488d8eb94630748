"""
resources/recurring_sale.py
----------------------------

Recurring sales (``/recurringSales``, ``/recurringSale/<id>``).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from conexa.objects import attribute
from conexa.resources.model import Model


class RecurringSale(Model):
    status = attribute()
    customer_id = attribute()
    product_id = attribute()
    start_date = attribute()
    end_date = attribute()

    def end(self, params: Optional[Dict[str, Any]] = None) -> "RecurringSale":
        """End the recurrence; the response replaces the local attributes."""
        api = self._require_api()
        response = api.patch(self.show_url("end", self.id), params=params, client_key=self._client_key).run()
        if isinstance(response, dict) and response:
            self.update(response)
        return self
