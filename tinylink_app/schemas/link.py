from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Dict, Literal, Optional, Union
from datetime import datetime
from tinylink_app.config import settings


class LinkRecord(BaseModel):
    """One link as the server reports it.

    Immutable snapshot - the client never edits a record, it only
    replaces the whole directory with a fresh fetch.
    """
    id: Union[int, str] = Field(..., description="Opaque server identifier")
    code: str
    short_url: str
    original_url: str
    clicks: int = Field(0, ge=0)
    last_clicked_at: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)


class CreateLinkWithoutCode(BaseModel):
    """Create request that lets the server pick the code"""
    kind: Literal["without_code"] = "without_code"
    url: str

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> Dict[str, str]:
        return {"url": self.url}


class CreateLinkWithCode(BaseModel):
    """Create request carrying a user-chosen code"""
    kind: Literal["with_code"] = "with_code"
    url: str
    code: str

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> Dict[str, str]:
        return {"url": self.url, "code": self.code}


CreateLinkRequest = Union[CreateLinkWithCode, CreateLinkWithoutCode]


def build_create_request(
    url_input: str,
    code_input: Optional[str] = None,
    max_code_length: Optional[int] = None
) -> CreateLinkRequest:
    """
    Turn raw form input into a create request.

    Surrounding whitespace is trimmed from both fields. A code that is
    empty after trimming means "no custom code". Character set and
    uniqueness of the code are left to the server.

    Raises:
        ValueError: url is empty, or code is longer than allowed
    """
    if max_code_length is None:
        max_code_length = settings.custom_code_max_length

    url = (url_input or "").strip()
    if not url:
        raise ValueError("url must not be empty")

    code = (code_input or "").strip()
    if not code:
        return CreateLinkWithoutCode(url=url)

    if len(code) > max_code_length:
        raise ValueError(
            f"code '{code}' is longer than {max_code_length} characters"
        )
    return CreateLinkWithCode(url=url, code=code)


class APIResponse(BaseModel):
    """Status and decoded JSON body of a link API call"""
    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def message(self) -> Optional[str]:
        """Server-provided error message, if the body carries one"""
        if isinstance(self.body, dict):
            message = self.body.get("message")
            if isinstance(message, str) and message:
                return message
        return None


class CreatedLink(BaseModel):
    """Success body of a create call - only short_url is relied on"""
    short_url: str
    code: Optional[str] = None

    model_config = ConfigDict(extra="ignore")
