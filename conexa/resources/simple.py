"""
resources/simple.py
--------------------

Resources with no behaviour beyond the CRUD of :class:`Model`.
"""

from __future__ import annotations

from conexa.objects import attribute
from conexa.resources.model import Model


class Company(Model):
    name = attribute()
    trade_name = attribute()
    document = attribute()


class Bill(Model):
    status = attribute()
    amount = attribute()
    due_date = attribute()
    supplier_id = attribute()


class Person(Model):
    customer_id = attribute()
    name = attribute()
    email = attribute()
    cellphone = attribute()


class Plan(Model):
    name = attribute()
    company_id = attribute()
    is_active = attribute()


class Product(Model):
    name = attribute()
    price = attribute()
    company_id = attribute()
    is_active = attribute()


class Supplier(Model):
    name = attribute()
    company_id = attribute()
