"""
conexa package
--------------

Python client for the Conexa billing platform REST API.

Importing :mod:`conexa` registers every resource class, so responses
are converted into ``Customer``, ``Charge``... objects.
"""

from conexa.client import ConexaClient  # noqa: F401
from conexa.core.config import Settings, get_settings  # noqa: F401
from conexa.credentials import AccountKind, Credential  # noqa: F401
from conexa.errors import (  # noqa: F401
    ConexaError,
    ConnectionFailure,
    InvalidParameter,
    InvalidRequest,
    MissingCredentials,
    NotFound,
    ResponseFailure,
    ValidationFailure,
)
from conexa.logging_config import setup_logging  # noqa: F401
from conexa.objects import ConexaObject, Pagination, Result  # noqa: F401
from conexa.resources import (  # noqa: F401
    Address,
    Auth,
    Bill,
    Charge,
    Company,
    Contract,
    CreditCard,
    Customer,
    InvoicingMethod,
    LegalPerson,
    Model,
    Person,
    Plan,
    Product,
    RecurringSale,
    Sale,
    Supplier,
)
from conexa.version import __version__  # noqa: F401
