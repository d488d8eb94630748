"""
Core helpers package for the Conexa client.

This package contains the low-level infrastructure: settings, URL and
header construction, and the session registry that hands out bearer
tokens.  Keeping these helpers in a dedicated package makes it easy to
swap implementations or customise behaviour for testing.
"""

__all__ = []
