import logging
from typing import Optional

from tinylink_app.clipboard.strategies import ClipboardStrategy
from tinylink_app.exceptions import ClipboardAccessDenied
from tinylink_app.services.notifications import NotificationChannel

logger = logging.getLogger(__name__)

COPY_SUCCEEDED = "Copied to clipboard"
COPY_FAILED = "Failed to copy to clipboard"


class CopyAction:
    """Copies text to the clipboard and reports the result"""

    def __init__(self, clipboard: ClipboardStrategy, notifications: NotificationChannel):
        self.clipboard = clipboard
        self.notifications = notifications

    async def copy(self, text: str, clipboard: Optional[ClipboardStrategy] = None) -> bool:
        """
        Write `text` and raise the matching notification.

        `clipboard` overrides the default for one call; the page passes
        the browser's own result this way.
        """
        # Success is only reported once the clipboard confirmed the write
        try:
            await (clipboard or self.clipboard).write(text)
        except ClipboardAccessDenied:
            logger.warning("Clipboard refused write", exc_info=True)
            self.notifications.error(COPY_FAILED)
            return False

        self.notifications.success(COPY_SUCCEEDED)
        return True
