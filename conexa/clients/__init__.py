"""
Transport clients used by the request pipeline.
"""

from conexa.clients.http_client import HTTPClient  # noqa: F401

__all__ = ["HTTPClient"]
