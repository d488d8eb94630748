"""
logging_config.py
------------------

Shared logging configuration and utilities for structured logging
throughout the Conexa client.  It uses Python's built-in ``logging``
module so that log output can be captured by the host application's
handlers.  Messages are serialised as JSON to make them easier to
parse downstream.

Import ``logger`` and call its methods instead of ``logging.info``
directly.  The ``log_call`` decorator records entry and exit points at
the DEBUG level without leaking tokens or API secrets.  Call
:func:`setup_logging` once from the application entry point to send
the output to stdout; a library never configures the root logger on
import.
"""

from __future__ import annotations

import inspect
import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict

from conexa.core.config import get_settings

logger = logging.getLogger("conexa")
logger.addHandler(logging.NullHandler())

_SENSITIVE_KEYWORDS = ("token", "password", "secret", "access_key", "accesskey", "authorization")
_SENSITIVE_HEADERS = {"authorization"}


def setup_logging(level: str | int | None = None) -> None:
    """Attach a stdout handler to the ``conexa`` logger.

    Messages are formatted with a timestamp, the level and the raw
    message, which itself is a JSON string.  Calling this function more
    than once does not add duplicate handlers.  ``level`` defaults to
    ``Settings.log_level``.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    if not any(getattr(h, "_conexa_stdout", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        handler._conexa_stdout = True  # type: ignore[attr-defined]
        logger.addHandler(handler)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries have keys containing 'token', 'password', 'secret' or
    'access_key' removed.  Lists and tuples are processed element-wise.
    Objects exposing ``to_dict`` (credentials, resources) are logged
    through that representation.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A sanitised representation of the input suitable for JSON serialisation.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in _SENSITIVE_KEYWORDS):
                continue
            clean[str(k)] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        try:
            return _sanitize(to_dict())
        except Exception:
            return repr(obj)
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions.

    A DEBUG ``call_start`` event is emitted before the function runs and a
    ``call_end`` event after it returns.  Arguments and the return value
    are passed through :func:`_sanitize` so credentials never reach the
    logs.  Exceptions raised by the wrapped function propagate unchanged.

    Examples
    --------

    >>> @log_call
    ... def add(a, b):
    ...     return a + b
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_start",
                "function": func.__qualname__,
                "args": _sanitize(args),
                "kwargs": _sanitize(kwargs),
            }))
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_end",
                "function": func.__qualname__,
                "result": _sanitize(result),
            }))
        return result

    wrapper.__signature__ = inspect.signature(func)  # type: ignore[attr-defined]
    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     json_body: Any = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Tokens are removed from headers and only high-level information
    (method, URL, status and duration) is recorded.  The HTTP client
    wrapper invokes this before and after performing requests.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested, query string included.
    headers : dict, optional
        Request headers.  ``Authorization`` is removed.
    json_body : Any, optional
        JSON payload for non-GET requests.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in _SENSITIVE_HEADERS}
    if json_body:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
