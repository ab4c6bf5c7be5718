import logging
from typing import Tuple

from tinylink_app.exceptions import LinkAPIError
from tinylink_app.link_api.strategies import LinkAPIStrategy
from tinylink_app.schemas.link import LinkRecord
from tinylink_app.services.notifications import NotificationChannel

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load links"


class LinkDirectoryStore:
    """
    In-memory mirror of the server's link set.

    The snapshot is a tuple kept in server order and is only ever
    replaced whole, never patched. Concurrent refreshes are not
    serialized: whichever response resolves last wins.
    """

    def __init__(self, api: LinkAPIStrategy, notifications: NotificationChannel):
        self.api = api
        self.notifications = notifications
        self._snapshot: Tuple[LinkRecord, ...] = ()
        self.loaded = False  # True once any fetch has completed

    @property
    def snapshot(self) -> Tuple[LinkRecord, ...]:
        return self._snapshot

    async def refresh(self) -> bool:
        """
        Replace the snapshot with the server's current link collection.

        On failure the previous snapshot stays and an error notification
        is raised. No retry.

        Returns:
            True if the snapshot was replaced
        """
        try:
            records = await self.api.list_links()
        except LinkAPIError:
            logger.exception("Loading links failed")
            self.notifications.error(LOAD_FAILED)
            return False

        self._snapshot = tuple(records)
        self.loaded = True
        return True
