import logging

from tinylink_app.exceptions import LinkAPIError
from tinylink_app.link_api.strategies import LinkAPIStrategy
from tinylink_app.services.directory_store import LinkDirectoryStore
from tinylink_app.services.notifications import NotificationChannel

logger = logging.getLogger(__name__)

DELETE_SUCCEEDED = "Link deleted"
DELETE_FAILED = "Failed to delete link"


class DeletionWorkflow:
    """Deletes one link per call; deletes are independent and may overlap."""

    def __init__(
        self,
        api: LinkAPIStrategy,
        store: LinkDirectoryStore,
        notifications: NotificationChannel
    ):
        self.api = api
        self.store = store
        self.notifications = notifications

    async def remove(self, code: str) -> bool:
        """Delete `code`; only a 204 counts as success and triggers a refresh."""
        self.notifications.clear()
        try:
            status_code = await self.api.delete_link(code)
        except LinkAPIError:
            logger.exception("Deleting link %s failed", code)
            self.notifications.error(DELETE_FAILED)
            return False

        if status_code != 204:
            logger.info("Delete of %s answered with status %s", code, status_code)
            self.notifications.error(DELETE_FAILED)
            return False

        logger.info("Deleted link %s", code)
        self.notifications.success(DELETE_SUCCEEDED)
        await self.store.refresh()
        return True
