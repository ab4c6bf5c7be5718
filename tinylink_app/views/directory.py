"""
Directory View - pure projections of client state.

Nothing here holds state: every function maps what the context
currently holds to something the page (or /state) can show.
"""

from datetime import datetime
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, computed_field

from tinylink_app.schemas.link import LinkRecord
from tinylink_app.services.context import ClientContext
from tinylink_app.services.notifications import Notification, Severity

NEVER_CLICKED = "Never"

SEVERITY_STYLES = {
    Severity.ERROR: "text-red-700 bg-red-100 border-red-300",
    Severity.SUCCESS: "text-green-700 bg-green-100 border-green-300",
    Severity.INFO: "text-sky-700 bg-sky-100 border-sky-300",
}


def severity_style(severity: Severity) -> str:
    """CSS classes for a notification of this severity"""
    return SEVERITY_STYLES.get(Severity(severity), SEVERITY_STYLES[Severity.INFO])


def format_last_clicked(timestamp: Optional[datetime]) -> str:
    if timestamp is None:
        return NEVER_CLICKED
    return timestamp.strftime("%Y-%m-%d %H:%M:%S")


class DirectoryRow(BaseModel):
    id: Union[int, str]
    code: str
    short_url: str
    original_url: str
    clicks: int
    last_clicked: str

    model_config = ConfigDict(frozen=True)


class DirectoryTable(BaseModel):
    rows: List[DirectoryRow]

    @computed_field
    @property
    def total(self) -> int:
        return len(self.rows)

    @computed_field
    @property
    def is_empty(self) -> bool:
        return not self.rows


def project_directory(snapshot: Sequence[LinkRecord]) -> DirectoryTable:
    """Rows in snapshot order - never sorted, filtered or deduplicated here"""
    return DirectoryTable(rows=[
        DirectoryRow(
            id=record.id,
            code=record.code,
            short_url=record.short_url,
            original_url=record.original_url,
            clicks=record.clicks,
            last_clicked=format_last_clicked(record.last_clicked_at),
        )
        for record in snapshot
    ])


class PageState(BaseModel):
    """Everything the page renders, as one JSON-friendly value"""
    notification: Optional[Notification] = None
    notification_style: Optional[str] = None
    submitting: bool
    submit_label: str
    url_input: str
    code_input: str
    directory: DirectoryTable


def build_page_state(context: ClientContext) -> PageState:
    notification = context.notifications.current
    creation = context.creation
    return PageState(
        notification=notification,
        notification_style=severity_style(notification.severity) if notification else None,
        submitting=creation.submitting,
        submit_label="Creating..." if creation.submitting else "Create short link",
        url_input=creation.url_input,
        code_input=creation.code_input,
        directory=project_directory(context.store.snapshot),
    )
