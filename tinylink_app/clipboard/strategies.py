"""
Clipboard strategies using Strategy Pattern.

The clipboard that matters is the visitor's, so the page writes to it
with navigator.clipboard and posts back what happened. The strategies
here turn that report (or the lack of any clipboard) into the same
write() interface the copy action awaits.
"""

from abc import ABC, abstractmethod

from tinylink_app.exceptions import ClipboardAccessDenied


class ClipboardStrategy(ABC):
    """
    Abstract base class for clipboard backends.

    Writes are async so a backend may wait for the platform to confirm.
    """

    @abstractmethod
    async def write(self, text: str) -> None:
        """
        Put text on the clipboard.

        Raises:
            ClipboardAccessDenied: the clipboard refused the write
        """
        pass


class BrowserClipboard(ClipboardStrategy):
    """
    Result of a write the browser already attempted.

    The page calls navigator.clipboard.writeText() and submits whether
    the promise resolved. Without JavaScript nothing was written, which
    arrives here as denied.
    """

    def __init__(self, confirmed: bool):
        self.confirmed = confirmed

    async def write(self, text: str) -> None:
        if not self.confirmed:
            raise ClipboardAccessDenied("Browser denied clipboard access")


class UnavailableClipboard(ClipboardStrategy):
    """
    Clipboard that always refuses access.

    Default for contexts used outside a browser (the server process
    has no clipboard of the visitor's to write to).
    """

    async def write(self, text: str) -> None:
        raise ClipboardAccessDenied("Clipboard access is not available")
