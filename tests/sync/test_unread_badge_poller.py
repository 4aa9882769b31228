import asyncio
from typing import List
from unittest.mock import AsyncMock
from uuid import uuid4

import httpx
import pytest

from inbox.clients.conversations_client import ConversationsClient
from inbox.sync.conversation_sync_loop import SyncState
from inbox.sync.unread_badge_poller import UnreadBadgePoller


class ScriptedCount:
    """Count fetcher whose responses are resolved by the test."""

    def __init__(self) -> None:
        self.pending: List[asyncio.Future] = []

    async def __call__(self) -> int:
        future = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future

    @property
    def calls(self) -> int:
        return len(self.pending)


async def settle() -> None:
    """Let freshly created tasks run up to their first real await."""
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def fetch() -> ScriptedCount:
    return ScriptedCount()


class TestUnreadBadgePoller:
    """Unit tests for UnreadBadgePoller."""

    def test_prime_sets_count(self, fetch: ScriptedCount) -> None:
        """Test the page-rendered count is taken as is."""
        poller = UnreadBadgePoller(fetch, initial_count=2)
        assert poller.unread_count == 2

        poller.prime(6)

        assert poller.unread_count == 6

    @pytest.mark.asyncio
    async def test_poll_updates_count(self, fetch: ScriptedCount) -> None:
        """Test a successful poll replaces the count and notifies once."""
        changes: List[int] = []
        poller = UnreadBadgePoller(fetch, initial_count=1, on_change=changes.append)

        task = poller.tick()
        await settle()
        assert poller.tick() is None
        fetch.pending[0].set_result(4)
        await task

        assert poller.unread_count == 4
        assert changes == [4]
        assert poller.state == SyncState.IDLE
        assert fetch.calls == 1

    @pytest.mark.asyncio
    async def test_poll_failure_keeps_count(self, fetch: ScriptedCount) -> None:
        """Test transient errors leave the badge unchanged."""
        poller = UnreadBadgePoller(fetch, initial_count=3)

        task = poller.tick()
        await settle()
        fetch.pending[0].set_exception(httpx.ConnectError("connection refused"))
        await task

        assert poller.unread_count == 3
        retry = poller.tick()
        assert retry is not None
        await settle()
        fetch.pending[1].set_result(2)
        await retry
        assert poller.unread_count == 2

    @pytest.mark.asyncio
    async def test_hidden_poller_skips_polls(self, fetch: ScriptedCount) -> None:
        """Test no poll is sent while hidden and one is sent when shown."""
        poller = UnreadBadgePoller(fetch)

        poller.set_visible(False)
        assert poller.tick() is None

        poller.set_visible(True)
        await settle()
        assert fetch.calls == 1
        fetch.pending[0].set_result(0)
        await settle()

    @pytest.mark.asyncio
    async def test_result_after_stop_is_discarded(self, fetch: ScriptedCount) -> None:
        """Test a count arriving after teardown is dropped."""
        poller = UnreadBadgePoller(fetch, initial_count=1)

        task = poller.tick()
        await settle()
        poller.stop()
        fetch.pending[0].set_result(9)
        await task

        assert poller.is_alive is False
        assert poller.unread_count == 1

    @pytest.mark.asyncio
    async def test_polls_on_interval(self) -> None:
        """Test start polls right away and keeps polling on the timer."""
        fetch = AsyncMock(return_value=2)
        async with UnreadBadgePoller(fetch, poll_interval=0.01) as poller:
            await asyncio.sleep(0.05)

        assert fetch.await_count >= 2
        assert poller.unread_count == 2
        assert poller.is_alive is False

    @pytest.mark.asyncio
    async def test_from_client(self) -> None:
        """Test the poller reads the count through the HTTP client."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"unreadCount": 7})

        client = ConversationsClient(
            uuid4(),
            base_url="http://inbox.test",
            transport=httpx.MockTransport(handler),
        )
        poller = UnreadBadgePoller.from_client(client, request_timeout=5)

        await poller.tick()

        assert poller.unread_count == 7

    def test_set_visible_without_event_loop(self, fetch: ScriptedCount) -> None:
        """Test visibility changes outside an event loop only record the flag."""
        poller = UnreadBadgePoller(fetch)

        poller.set_visible(True)

        assert poller.state == SyncState.IDLE
        assert fetch.calls == 0
