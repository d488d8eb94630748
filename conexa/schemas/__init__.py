"""
Pydantic schemas for request payloads and token responses.
"""

from conexa.schemas.auth import LoginPayload, TokenPair  # noqa: F401

__all__ = ["LoginPayload", "TokenPair"]
