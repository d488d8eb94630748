from conexa.resources.address import Address, LegalPerson
from conexa.resources.auth import Auth
from conexa.resources.charge import Charge
from conexa.resources.contract import Contract
from conexa.resources.credit_card import CreditCard
from conexa.resources.customer import Customer
from conexa.resources.invoicing_method import InvoicingMethod
from conexa.resources.model import Model
from conexa.resources.recurring_sale import RecurringSale
from conexa.resources.sale import Sale
from conexa.resources.simple import Bill, Company, Person, Plan, Product, Supplier

__all__ = [
    "Address",
    "Auth",
    "Bill",
    "Charge",
    "Company",
    "Contract",
    "CreditCard",
    "Customer",
    "InvoicingMethod",
    "LegalPerson",
    "Model",
    "Person",
    "Plan",
    "Product",
    "RecurringSale",
    "Sale",
    "Supplier",
]
