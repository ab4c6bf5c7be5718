"""
Errors raised by the link API and clipboard strategies.

Workflows catch these and turn them into notifications; they never
reach the user as exceptions.
"""


class LinkAPIError(Exception):
    """Base class for link API failures"""


class LinkAPITransportError(LinkAPIError):
    """
    The call failed before a usable response was obtained.

    Covers network errors, non-JSON bodies and bodies that don't
    decode into the expected shape.
    """


class ClipboardAccessDenied(Exception):
    """The clipboard refused the write"""
