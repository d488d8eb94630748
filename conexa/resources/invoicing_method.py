"""
resources/invoicing_method.py
------------------------------

Invoicing methods (boleto, card, PIX...) available to a company.
"""

from __future__ import annotations

from conexa.objects import attribute
from conexa.resources.model import Model


class InvoicingMethod(Model):
    name = attribute()
    type = attribute()
    is_active = attribute()
