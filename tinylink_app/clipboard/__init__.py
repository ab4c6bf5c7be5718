"""
Clipboard module for the TinyLink client.
Implements Strategy Pattern for clipboard backends.
"""

from .strategies import ClipboardStrategy, BrowserClipboard, UnavailableClipboard

__all__ = [
    "ClipboardStrategy",
    "BrowserClipboard",
    "UnavailableClipboard",
]
