"""
utils/case.py
--------------

Pure string and mapping transforms used at the serialization boundary.

The platform speaks camelCase while the Python objects use snake_case.
Request bodies go through :func:`camelize_hash` right before encoding
and response keys through :func:`to_snake_case` right after decoding;
nothing else in the client converts names.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

_SINGULAR_RULES = [
    (re.compile(r"(alias|status)(es)?$", re.I), r"\1"),
    (re.compile(r"(database)s$", re.I), r"\1"),
    (re.compile(r"(matr)ices$", re.I), r"\1ix"),
    (re.compile(r"(vert|ind)ices$", re.I), r"\1ex"),
    (re.compile(r"([^aeiouy]|qu)ies$", re.I), r"\1y"),
    (re.compile(r"(x|ch|ss|sh)es$", re.I), r"\1"),
    (re.compile(r"([lr])ves$", re.I), r"\1f"),
    (re.compile(r"([^f])ves$", re.I), r"\1fe"),
    (re.compile(r"(ss)$", re.I), r"\1"),
    (re.compile(r"s$", re.I), ""),
]


def to_snake_case(value: str) -> str:
    """``companyId`` -> ``company_id``; snake_case input is returned as is."""
    return re.sub(r"([A-Z])", r"_\1", str(value)).lower().lstrip("_")


def camel_case_lower(value: Any) -> str:
    parts = str(value).split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


def camelize_hash(value: Any) -> Any:
    """Return ``value`` with every mapping key converted to camelCase.

    Nested mappings and mappings inside lists are converted too; other
    values are left untouched.  ``None`` stays ``None``.
    """
    if isinstance(value, Mapping):
        return {camel_case_lower(k): camelize_hash(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [camelize_hash(v) for v in value]
    return value


def singularize(word: str) -> str:
    for pattern, replacement in _SINGULAR_RULES:
        if pattern.search(word):
            return pattern.sub(replacement, word)
    return word


def to_key(value: Any) -> str:
    """Normalise a client alias: ``" hello - world "`` -> ``"hello_world"``."""
    return re.sub(r"[\s\-]+", "_", str(value).strip())
