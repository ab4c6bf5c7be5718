"""
Link API module for the TinyLink client.
Implements Strategy Pattern for the remote API and its in-memory stand-in.
"""

from .strategies import LinkAPIStrategy, HttpLinkAPI, InMemoryLinkAPI
from .short_codes import RandomShortCodeStrategy
from .factory import LinkAPIFactory, LinkAPIBackend

__all__ = [
    "LinkAPIStrategy",
    "HttpLinkAPI",
    "InMemoryLinkAPI",
    "RandomShortCodeStrategy",
    "LinkAPIFactory",
    "LinkAPIBackend",
]
