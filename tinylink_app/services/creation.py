import logging
from enum import Enum
from typing import Optional

from pydantic import ValidationError

from tinylink_app.exceptions import LinkAPIError
from tinylink_app.link_api.strategies import LinkAPIStrategy
from tinylink_app.schemas.link import CreatedLink, build_create_request
from tinylink_app.services.directory_store import LinkDirectoryStore
from tinylink_app.services.notifications import NotificationChannel

logger = logging.getLogger(__name__)

CREATE_REJECTED = "Error creating link"
CREATE_FAILED = "Something went wrong"


class CreationOutcome(str, Enum):
    CREATED = "created"
    REJECTED = "rejected"  # server answered with an error status
    FAILED = "failed"  # no usable answer
    SKIPPED = "skipped"  # another creation was in flight


class CreationWorkflow:
    """
    Submits one create request at a time.

    Also owns the form inputs: they are kept after a failed attempt so
    the user can fix and resubmit, and cleared after a successful one.
    """

    def __init__(
        self,
        api: LinkAPIStrategy,
        store: LinkDirectoryStore,
        notifications: NotificationChannel,
        max_code_length: Optional[int] = None
    ):
        self.api = api
        self.store = store
        self.notifications = notifications
        self.max_code_length = max_code_length
        self.url_input = ""
        self.code_input = ""
        self.submitting = False

    async def submit(self, url_input: str, code_input: Optional[str] = None) -> CreationOutcome:
        """
        Create a short link from the form input.

        While a submission is in flight further calls return SKIPPED
        without dispatching anything. `submitting` is reset on every exit.

        Raises:
            ValueError: empty url or over-long code (rejected by the form
                before it gets here)
        """
        if self.submitting:
            logger.info("Creation already in flight, ignoring submit")
            return CreationOutcome.SKIPPED

        request = build_create_request(url_input, code_input, self.max_code_length)

        self.url_input = url_input
        self.code_input = code_input or ""
        self.notifications.clear()
        self.submitting = True
        try:
            try:
                response = await self.api.create_link(request)
            except LinkAPIError:
                logger.exception("Creating link failed")
                self.notifications.error(CREATE_FAILED)
                return CreationOutcome.FAILED

            if not response.ok:
                logger.info("Server rejected link (status %s)", response.status_code)
                self.notifications.error(response.message or CREATE_REJECTED)
                return CreationOutcome.REJECTED

            try:
                created = CreatedLink.model_validate(response.body)
            except ValidationError:
                logger.exception("Create response had no short_url")
                self.notifications.error(CREATE_FAILED)
                return CreationOutcome.FAILED

            logger.info("Created short link %s", created.short_url)
            self.notifications.success(f"Short URL created: {created.short_url}")
            self.url_input = ""
            self.code_input = ""
            await self.store.refresh()
            return CreationOutcome.CREATED
        finally:
            self.submitting = False
