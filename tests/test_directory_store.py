import asyncio
from typing import List

from tinylink_app.exceptions import LinkAPITransportError
from tinylink_app.link_api.strategies import LinkAPIStrategy
from tinylink_app.schemas.link import LinkRecord
from tinylink_app.services.directory_store import LinkDirectoryStore
from tinylink_app.services.notifications import NotificationChannel, Severity


class ScriptedListAPI(LinkAPIStrategy):
    """Each list call waits for its own event and returns its own records"""

    def __init__(self, scripted):
        self.scripted = list(scripted)

    async def list_links(self) -> List[LinkRecord]:
        release, records = self.scripted.pop(0)
        await release.wait()
        return records

    async def create_link(self, request):
        raise NotImplementedError

    async def delete_link(self, code):
        raise NotImplementedError


def record(code: str, link_id: int = 1) -> LinkRecord:
    return LinkRecord(
        id=link_id,
        code=code,
        short_url=f"http://x/{code}",
        original_url="https://example.com/",
    )


class TestDirectoryRefresh:
    """Test wholesale refresh of the link directory"""

    def test_refresh_is_idempotent(self, http_context, fake_server, make_link):
        """Two refreshes without a mutation give the same snapshot"""
        fake_server.links = [make_link("abc123", 1), make_link("xyz789", 2, clicks=3)]

        asyncio.run(http_context.store.refresh())
        first = http_context.store.snapshot
        asyncio.run(http_context.store.refresh())

        assert http_context.store.snapshot == first
        assert len(first) == 2

    def test_server_order_is_kept(self, http_context, fake_server, make_link):
        """No local sorting or deduplication"""
        fake_server.links = [
            make_link("zzzzzz", 3),
            make_link("aaaaaa", 1),
            make_link("zzzzzz", 3),
        ]

        asyncio.run(http_context.store.refresh())

        assert [r.code for r in http_context.store.snapshot] == ["zzzzzz", "aaaaaa", "zzzzzz"]

    def test_decodes_optional_last_click(self, http_context, fake_server, make_link):
        fake_server.links = [
            make_link("abc123", 1, clicks=2, last_clicked_at="2025-01-02T03:04:05Z"),
            make_link("xyz789", 2),
        ]

        asyncio.run(http_context.store.refresh())

        clicked, never = http_context.store.snapshot
        assert clicked.clicks == 2
        assert clicked.last_clicked_at.year == 2025
        assert never.last_clicked_at is None

    def test_failure_keeps_previous_snapshot(self, http_context, fake_server, make_link):
        """A failed load leaves the old list and raises an error"""
        fake_server.links = [make_link("abc123")]
        asyncio.run(http_context.store.refresh())

        fake_server.list_status = 503
        refreshed = asyncio.run(http_context.store.refresh())

        assert refreshed is False
        assert [r.code for r in http_context.store.snapshot] == ["abc123"]
        assert http_context.notifications.current.text == "Failed to load links"
        assert http_context.notifications.current.severity == Severity.ERROR

    def test_undecodable_body_is_a_failure(self, http_context, fake_server):
        """A body that isn't a list of links counts as a load failure"""
        fake_server.list_content = b'{"message": "oops"}'

        assert asyncio.run(http_context.store.refresh()) is False
        assert http_context.store.snapshot == ()
        assert http_context.store.loaded is False

    def test_last_resolved_refresh_wins(self):
        """Overlapping refreshes: the one that resolves last decides"""

        async def scenario():
            older, newer = asyncio.Event(), asyncio.Event()
            api = ScriptedListAPI([(older, [record("older1")]), (newer, [record("newer1")])])
            store = LinkDirectoryStore(api, NotificationChannel())

            first = asyncio.create_task(store.refresh())
            second = asyncio.create_task(store.refresh())
            await asyncio.sleep(0)

            newer.set()
            await second
            after_second = store.snapshot

            older.set()
            await first
            return after_second, store.snapshot

        after_second, final = asyncio.run(scenario())

        assert [r.code for r in after_second] == ["newer1"]
        assert [r.code for r in final] == ["older1"]

    def test_transport_error_from_collaborator(self):
        """Errors raised by any strategy are handled the same way"""

        class BrokenAPI(ScriptedListAPI):
            async def list_links(self):
                raise LinkAPITransportError("down")

        notifications = NotificationChannel()
        store = LinkDirectoryStore(BrokenAPI([]), notifications)

        assert asyncio.run(store.refresh()) is False
        assert notifications.current.text == "Failed to load links"
