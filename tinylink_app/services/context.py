from typing import Optional

from tinylink_app.clipboard.strategies import ClipboardStrategy, UnavailableClipboard
from tinylink_app.config import Settings
from tinylink_app.link_api.factory import LinkAPIBackend, LinkAPIFactory
from tinylink_app.link_api.strategies import LinkAPIStrategy
from tinylink_app.services.copy_action import CopyAction
from tinylink_app.services.creation import CreationWorkflow
from tinylink_app.services.deletion import DeletionWorkflow
from tinylink_app.services.directory_store import LinkDirectoryStore
from tinylink_app.services.notifications import NotificationChannel


class ClientContext:
    """
    Everything one client session works with, built explicitly.

    The API base address, the collaborator and the directory store live
    here rather than in module globals. Workflows get the shared
    notification channel and store by reference, so a test can build
    an isolated context around a fake API.
    """

    def __init__(
        self,
        api: LinkAPIStrategy,
        api_base_url: str,
        clipboard: Optional[ClipboardStrategy] = None,
        max_code_length: Optional[int] = None
    ):
        self.api = api
        self.api_base_url = api_base_url
        self.notifications = NotificationChannel()
        self.store = LinkDirectoryStore(api, self.notifications)
        self.creation = CreationWorkflow(
            api, self.store, self.notifications, max_code_length=max_code_length
        )
        self.deletion = DeletionWorkflow(api, self.store, self.notifications)
        self.copy_action = CopyAction(clipboard or UnavailableClipboard(), self.notifications)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientContext":
        """Build a context from static configuration via the factories"""
        return cls(
            api=LinkAPIFactory.create(LinkAPIBackend(settings.api_backend)),
            api_base_url=settings.api_base_url,
            max_code_length=settings.custom_code_max_length,
        )

    async def aclose(self) -> None:
        await self.api.aclose()
