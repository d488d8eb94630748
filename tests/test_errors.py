"""Tests for the exception hierarchy."""

import httpx
import pytest

from conexa.errors import (
    ConexaError,
    ConnectionFailure,
    InvalidParameter,
    InvalidRequest,
    MissingCredentials,
    NotFound,
    ResponseFailure,
    ValidationFailure,
)


def _status_error(status: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://test.conexa.app/index.php/api/v2/customer/1")
    response = httpx.Response(status, request=request)
    return httpx.HTTPStatusError(f"HTTP {status}", request=request, response=response)


@pytest.mark.parametrize(
    "error_class",
    [ConnectionFailure, InvalidRequest, ResponseFailure, NotFound, InvalidParameter, ValidationFailure, MissingCredentials],
)
def test_errors_derive_from_base(error_class):
    assert issubclass(error_class, ConexaError)


def test_not_found_is_response_failure():
    assert issubclass(NotFound, ResponseFailure)


def test_conexa_error_to_dict():
    error = ConexaError("boom")
    assert error.message == "boom"
    assert str(error) == "boom"
    assert error.to_dict() == {"error": "ConexaError", "message": "boom"}


def test_connection_failure_keeps_cause():
    cause = httpx.ConnectError("connection refused")
    error = ConnectionFailure(cause)
    assert error.error is cause
    assert "connection refused" in error.message


def test_response_failure_message_and_status():
    error = ResponseFailure({"method": "GET"}, _status_error(400), "Invalid customer")
    assert error.message.endswith(" => Invalid customer")
    assert error.status_code == 400
    assert error.request_params == {"method": "GET"}
    assert error.to_dict()["status_code"] == 400


def test_response_failure_without_response():
    error = ResponseFailure(None, ValueError("not json"))
    assert error.status_code is None
    assert error.message == "not json"


def test_not_found_keeps_body():
    body = {"message": "Customer not found"}
    error = NotFound(body, None, _status_error(404))
    assert error.response == body
    assert error.status_code == 404
    assert "Customer not found" in error.message


def test_not_found_without_body():
    error = NotFound(None, None, _status_error(404))
    assert error.response is None
    assert error.detail is None


def test_validation_failure_entries():
    body = {
        "errors": [
            {"field": "name", "message": "The name is required", "type": "required"},
            {"parameter_name": "email", "message": "Invalid e-mail"},
        ]
    }
    error = ValidationFailure(body)
    assert error.response == body
    assert [e.parameter_name for e in error.errors] == ["name", "email"]
    assert all(isinstance(e, InvalidParameter) for e in error.errors)
    assert error.message == "The name is required, Invalid e-mail"
    assert error.to_list()[0] == {"parameter_name": "name", "type": "required", "message": "The name is required"}


def test_validation_failure_without_entries():
    error = ValidationFailure({"unexpected": True})
    assert error.errors == []
    assert error.message == "Validation failed"


def test_invalid_parameter_to_dict():
    error = InvalidParameter("Client key 'shop' already exists", "key", "str")
    assert error.to_dict() == {
        "parameter_name": "key",
        "type": "str",
        "message": "Client key 'shop' already exists",
    }
