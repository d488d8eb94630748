"""
Utility helpers shared by the request pipeline and the model layer.
"""

from conexa.utils.case import (  # noqa: F401
    camel_case_lower,
    camelize_hash,
    singularize,
    to_key,
    to_snake_case,
)
from conexa.utils.pagination import next_page, paginate  # noqa: F401

__all__ = [
    "camel_case_lower",
    "camelize_hash",
    "singularize",
    "to_key",
    "to_snake_case",
    "next_page",
    "paginate",
]
