"""
errors.py
----------

Exception hierarchy raised by the Conexa client.

Every failure surfaced to callers derives from :class:`ConexaError`.
Transport problems, HTTP error statuses, missing credentials and bad
constructor input each have a dedicated class carrying the context a
caller needs to react programmatically (the request that failed, the
parsed response body, the offending parameter).  Nothing in the client
retries; retry policy belongs to the caller.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ConexaError(Exception):
    """Base exception for the Conexa client."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {"error": self.__class__.__name__, "message": self.message}


class ConnectionFailure(ConexaError):
    """The platform could not be reached or dropped the connection."""

    def __init__(self, error: BaseException):
        self.error = error
        super().__init__(str(error))


class InvalidRequest(ConexaError):
    """The caller passed an unusable argument, e.g. an empty resource id."""


class ResponseFailure(ConexaError):
    """The platform answered with an error status or an unreadable body.

    ``request_params`` is the description of the outbound call (method,
    URL, headers without the bearer token) and ``error`` the underlying
    exception.  The optional ``detail`` is appended to the message.
    """

    def __init__(self, request_params: Optional[Dict[str, Any]], error: Any, detail: Optional[str] = None):
        self.request_params = request_params
        self.error = error
        self.detail = detail
        message = str(error) if error is not None else "Request failed"
        if detail:
            message += " => " + detail
        super().__init__(message)

    @property
    def status_code(self) -> Optional[int]:
        response = getattr(self.error, "response", None)
        return getattr(response, "status_code", None)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["status_code"] = self.status_code
        return data


class NotFound(ResponseFailure):
    """404 response.  ``response`` holds the parsed body when it had a message."""

    def __init__(self, response: Optional[Dict[str, Any]], request_params: Optional[Dict[str, Any]], error: Any):
        self.response = response
        super().__init__(request_params, error, (response or {}).get("message"))


class InvalidParameter(ConexaError):
    """A parameter was rejected, locally or by the platform."""

    def __init__(self, message: str, parameter_name: Any = None, type: Any = None, url: Optional[str] = None):
        self.parameter_name = parameter_name
        self.type = type
        self.url = url
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"parameter_name": self.parameter_name, "type": self.type, "message": self.message}


class ValidationFailure(ConexaError):
    """Error response without a single message but with per-field errors.

    ``errors`` holds one :class:`InvalidParameter` per entry of the
    body's ``errors`` list.
    """

    def __init__(self, response: Any, request_params: Optional[Dict[str, Any]] = None):
        self.response = response
        self.request_params = request_params
        entries = response.get("errors") if isinstance(response, dict) else None
        self.errors: List[InvalidParameter] = [
            _parameter_error(entry) for entry in (entries or [])
        ]
        super().__init__(", ".join(e.message for e in self.errors) or "Validation failed")

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.to_list()
        return data


class MissingCredentials(ConexaError):
    """No session is registered for the requested client key."""


def _parameter_error(entry: Any) -> InvalidParameter:
    if not isinstance(entry, dict):
        return InvalidParameter(str(entry))
    return InvalidParameter(
        str(entry.get("message", "")),
        entry.get("parameter_name", entry.get("field")),
        entry.get("type"),
        entry.get("url"),
    )
