"""
resources/address.py
---------------------

Value objects embedded in other resources.  They have no endpoint of
their own; :func:`conexa.objects.convert` builds them from the
``address`` and ``legalPerson`` keys of a payload.
"""

from __future__ import annotations

from conexa.objects import ConexaObject, attribute


class Address(ConexaObject):
    zip_code = attribute()
    street = attribute()
    number = attribute()
    neighborhood = attribute()
    city = attribute()
    state = attribute()
    country = attribute()
    additional_details = attribute()


class LegalPerson(ConexaObject):
    cnpj = attribute()
    foundation_date = attribute()
    state_inscription = attribute()
    municipal_inscription = attribute()
