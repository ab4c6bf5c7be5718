from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"


class Notification(BaseModel):
    text: str
    severity: Severity

    model_config = ConfigDict(frozen=True)


class NotificationChannel:
    """
    Holds at most one user-facing status message.

    A new notification always replaces the current one, whatever its
    severity. Nothing expires on its own; the next operation clears it.
    """

    def __init__(self):
        self.current: Optional[Notification] = None

    def set(self, text: str, severity: Severity) -> Notification:
        self.current = Notification(text=text, severity=Severity(severity))
        return self.current

    def clear(self) -> None:
        self.current = None

    def info(self, text: str) -> Notification:
        return self.set(text, Severity.INFO)

    def success(self, text: str) -> Notification:
        return self.set(text, Severity.SUCCESS)

    def error(self, text: str) -> Notification:
        return self.set(text, Severity.ERROR)
