"""
Link API strategies using Strategy Pattern.
Allows switching between the remote HTTP API and an in-memory stand-in.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from urllib.parse import quote, urlparse

import httpx
from pydantic import TypeAdapter

from tinylink_app.exceptions import LinkAPITransportError
from tinylink_app.link_api.short_codes import RandomShortCodeStrategy
from tinylink_app.schemas.link import APIResponse, CreateLinkRequest, LinkRecord

logger = logging.getLogger(__name__)

LINKS_PATH = "/api/links"


class LinkAPIStrategy(ABC):
    """
    Abstract base class for the remote link-management API.

    The client treats this as a collaborator: it owns storage, code
    generation, click counting and redirects. All methods are async
    because every call crosses the network.
    """

    @abstractmethod
    async def list_links(self) -> List[LinkRecord]:
        """
        Fetch the full link collection, in server order.

        Raises:
            LinkAPITransportError: network failure, error status or undecodable body
        """
        pass

    @abstractmethod
    async def create_link(self, request: CreateLinkRequest) -> APIResponse:
        """
        Create a link.

        Returns:
            APIResponse for any status the server answered with

        Raises:
            LinkAPITransportError: no status was obtained, or the body wasn't JSON
        """
        pass

    @abstractmethod
    async def delete_link(self, code: str) -> int:
        """
        Delete the link with this code.

        Returns:
            HTTP status code (204 means deleted)

        Raises:
            LinkAPITransportError: no status was obtained
        """
        pass

    async def aclose(self) -> None:
        """Release network resources (no-op by default)"""
        return None


class HttpLinkAPI(LinkAPIStrategy):
    """
    Remote link API over HTTP with JSON payloads.

    Used in every real deployment. A transport can be injected so tests
    can answer requests without a server (httpx.MockTransport).
    """

    _records = TypeAdapter(List[LinkRecord])

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            base_url: API base address, e.g. http://localhost:5000
            timeout: seconds per call, None waits indefinitely
            transport: optional httpx transport override
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def list_links(self) -> List[LinkRecord]:
        try:
            response = await self.client.get(LINKS_PATH)
            response.raise_for_status()
            return self._records.validate_python(response.json())
        except httpx.HTTPError as e:
            raise LinkAPITransportError(f"GET {LINKS_PATH} failed: {e}") from e
        except ValueError as e:
            # JSON decode errors and pydantic validation errors
            raise LinkAPITransportError(f"GET {LINKS_PATH} returned an unusable body: {e}") from e

    async def create_link(self, request: CreateLinkRequest) -> APIResponse:
        try:
            response = await self.client.post(LINKS_PATH, json=request.to_payload())
            body = response.json()
        except httpx.HTTPError as e:
            raise LinkAPITransportError(f"POST {LINKS_PATH} failed: {e}") from e
        except ValueError as e:
            raise LinkAPITransportError(f"POST {LINKS_PATH} returned a non-JSON body: {e}") from e

        return APIResponse(status_code=response.status_code, body=body)

    async def delete_link(self, code: str) -> int:
        path = f"{LINKS_PATH}/{quote(code, safe='')}"
        try:
            response = await self.client.delete(path)
        except httpx.HTTPError as e:
            raise LinkAPITransportError(f"DELETE {path} failed: {e}") from e
        return response.status_code

    async def aclose(self) -> None:
        await self.client.aclose()


class InMemoryLinkAPI(LinkAPIStrategy):
    """
    In-memory stand-in for the link server.

    Pros:
    - No server needed (development, demos, tests)
    - Follows the same status codes and error bodies as the real API

    Cons:
    - Lost on restart
    - Not shared between processes

    Note: Async for interface consistency, but operations are instant.
    """

    CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{6,8}$")

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        code_strategy: Optional[RandomShortCodeStrategy] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.code_strategy = code_strategy or RandomShortCodeStrategy()
        self._links: Dict[str, LinkRecord] = {}
        self._next_id = 1

    async def list_links(self) -> List[LinkRecord]:
        # Newest first, like the real server
        return list(reversed(list(self._links.values())))

    async def create_link(self, request: CreateLinkRequest) -> APIResponse:
        parsed = urlparse(request.url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return APIResponse(status_code=400, body={"message": "Invalid URL"})

        code = getattr(request, "code", None)
        if code is not None:
            if not self.CODE_PATTERN.match(code):
                return APIResponse(
                    status_code=400,
                    body={"message": "Code must be 6-8 alphanumeric characters"}
                )
            if code in self._links:
                return APIResponse(status_code=409, body={"message": "Code already exists"})
        else:
            try:
                code = self.code_strategy.generate(self._links)
            except RuntimeError:
                logger.error("In-memory API ran out of free codes", exc_info=True)
                return APIResponse(
                    status_code=500,
                    body={"message": "Could not generate unique code"}
                )

        record = LinkRecord(
            id=self._next_id,
            code=code,
            short_url=f"{self.base_url}/{code}",
            original_url=request.url,
            clicks=0,
        )
        self._next_id += 1
        self._links[code] = record
        logger.info("In-memory API created link %s", code)
        return APIResponse(status_code=201, body=record.model_dump(mode="json"))

    async def delete_link(self, code: str) -> int:
        if self._links.pop(code, None) is None:
            return 404
        return 204
