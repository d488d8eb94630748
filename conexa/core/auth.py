"""
core/auth.py
-------------

Helpers for building authenticated requests to the Conexa API.

These helpers centralise construction of the endpoint URLs and HTTP
headers required by every call.  They encapsulate the API prefix,
the default headers and the PHP-style query encoding the platform
expects, and keep the bearer token out of every other module.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from conexa.version import __version__

DEFAULT_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json; charset=utf8",
    "Accept": "application/json",
    "User-Agent": f"conexa-python/{__version__}",
}


def build_url(endpoint: str, path: str, query: Optional[Iterable[Tuple[str, str]]] = None) -> str:
    """Return the absolute URL for ``path`` under ``endpoint``.

    :param endpoint: API root, e.g. ``https://acme.conexa.app/index.php/api/v2``
    :param path: resource path starting with ``/``
    :param query: already flattened query pairs; omitted when empty
    :return: the URL, with an encoded query string when one is given
    """
    url = endpoint + path
    pairs = list(query or [])
    if pairs:
        url += "?" + urlencode(pairs)
    return url


def flatten_query(params: Optional[Mapping[str, Any]], prefix: str = "") -> List[Tuple[str, str]]:
    """Flatten nested parameters into PHP-style query pairs.

    Sequences become ``key[]`` entries and mappings ``key[sub]`` entries,
    which is how the platform reads filters such as ``customerId[]=3``.
    ``None`` values are dropped and booleans are sent as ``true``/``false``.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in (params or {}).items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            pairs.extend(flatten_query(value, name))
        elif isinstance(value, (list, tuple, set)):
            for item in value:
                pairs.append((f"{name}[]", _query_value(item)))
        else:
            pairs.append((name, _query_value(value)))
    return pairs


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_headers(token: Optional[str] = None, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Create the HTTP headers for one call.

    The defaults are copied so that callers never mutate the shared
    dictionary.  ``extra`` headers override the defaults.  The bearer
    token is added last so it always wins over a caller-supplied header
    with the same name.

    :param token: access token, or ``None`` for login/refresh calls
    :param extra: additional headers supplied by the caller
    :return: a dictionary of headers suitable for use with httpx
    """
    headers = dict(DEFAULT_HEADERS)
    if extra:
        headers.update(extra)
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"
    return headers
