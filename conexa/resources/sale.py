"""
resources/sale.py
------------------

One-time sales.  ``status`` is one of paid, billed, cancelled,
notBilled, deductedFromQuota, billedCancelled, billedNegociated or
partiallyPaid; only ``notBilled`` sales can still be edited.
"""

from __future__ import annotations

from conexa.objects import attribute
from conexa.resources.model import Model


class Sale(Model):
    status = attribute()
    customer_id = attribute()
    requester_id = attribute()
    product_id = attribute()
    seller_id = attribute()
    quantity = attribute()
    amount = attribute()
    original_amount = attribute()
    discount_value = attribute()
    reference_date = attribute()
    notes = attribute()
    created_at = attribute()
    updated_at = attribute()

    @property
    def is_billed(self) -> bool:
        return self.status == "billed"

    @property
    def is_paid(self) -> bool:
        return self.status == "paid"

    @property
    def is_editable(self) -> bool:
        return self.status == "notBilled"
