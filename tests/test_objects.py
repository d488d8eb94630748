"""Tests for payload objects and response conversion."""

from conexa.objects import ConexaObject, Pagination, Result, convert, convert_response
from conexa.resources import Address, Charge, Customer, LegalPerson


def test_keys_are_snake_case():
    obj = ConexaObject({"companyId": 3, "tradeName": "ACME"})
    assert obj["company_id"] == 3
    assert obj["companyId"] == 3
    assert obj.get("trade_name") == "ACME"
    assert "tradeName" in obj
    assert sorted(obj.keys()) == ["company_id", "trade_name"]


def test_typed_accessors():
    customer = Customer({"customerId": 127, "name": "Empresa ABC", "isActive": True})
    assert customer.id == 127
    assert customer.name == "Empresa ABC"
    assert customer.is_active is True
    assert customer.phones == []
    assert customer.trade_name is None


def test_nested_objects_are_converted():
    customer = Customer({
        "customerId": 1,
        "address": {"zipCode": "80000-000", "city": "Curitiba"},
        "legalPerson": {"cnpj": "99.557.155/0001-90"},
    })
    assert isinstance(customer.address, Address)
    assert customer.address.city == "Curitiba"
    assert customer.address.zip_code == "80000-000"
    assert isinstance(customer.legal_person, LegalPerson)
    assert customer.legal_person.cnpj == "99.557.155/0001-90"


def test_unsaved_attributes():
    customer = Customer({"customerId": 1, "name": "Old"})
    assert customer.unsaved_attributes() == {}
    customer.name = "New"
    customer["trade_name"] = "NEW"
    assert customer.unsaved_attributes() == {"name": "New", "trade_name": "NEW"}
    customer.update({"customerId": 1, "name": "New", "tradeName": "NEW"})
    assert customer.unsaved_attributes() == {}


def test_update_removes_absent_keys():
    obj = ConexaObject({"a": 1, "b": 2})
    obj.update({"a": 3})
    assert obj.to_dict() == {"a": 3}


def test_to_dict_is_plain():
    customer = Customer({"customerId": 1, "address": {"city": "Curitiba"}, "phones": ["4199"]})
    assert customer.to_dict() == {"customer_id": 1, "address": {"city": "Curitiba"}, "phones": ["4199"]}


def test_equality_by_class_and_id():
    assert Customer({"customerId": 1}) == Customer({"customerId": 1, "name": "x"})
    assert Customer({"customerId": 1}) != Customer({"customerId": 2})
    assert Customer({"customerId": 1}) != Charge({"chargeId": 1})
    assert ConexaObject({"a": 1}) == ConexaObject({"a": 1})


def test_empty():
    assert ConexaObject().empty
    assert not ConexaObject({"a": 1}).empty


def test_convert_lists_and_scalars():
    items = convert([{"chargeId": 1}, {"chargeId": 2}], "charge")
    assert [type(i) for i in items] == [Charge, Charge]
    assert convert("plain", "charge") == "plain"
    assert type(convert({"a": 1}, "unknown_thing")) is ConexaObject


def test_result_items_and_pagination():
    result = convert_response(
        {
            "data": [{"customerId": 1}, {"customerId": 2}],
            "pagination": {"itemPerPage": 2, "currentPage": 1, "totalPages": 2, "totalItems": 3},
        },
        "customer",
    )
    assert isinstance(result, Result)
    assert len(result) == 2
    assert isinstance(result[0], Customer)
    assert [c.id for c in result[0:2]] == [1, 2]
    assert isinstance(result.pagination, Pagination)
    assert result.pagination.item_per_page == 2
    assert result.pagination.total_pages == 2
    assert not result.empty


def test_result_empty_with_pagination():
    result = convert_response({"data": [], "pagination": {"currentPage": 1, "totalPages": 0}}, "customer")
    assert isinstance(result, Result)
    assert result.empty
    assert list(result) == []


def test_convert_response_unwraps_data_without_pagination():
    customer = convert_response({"data": {"customerId": 9}}, "customer")
    assert isinstance(customer, Customer)
    assert customer.id == 9
