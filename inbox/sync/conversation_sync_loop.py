"""Client-side controller that keeps a conversation list fresh.

Three inputs write the list: the page-level snapshot (``prime``), the refresh
that follows a user mutation (``refresh_after_mutation``) and a periodic
background poll (``tick``). Every write replaces the whole list. A poll is
only dispatched while no other poll and no mutation refresh is in flight, and
a mutation refresh cancels any outstanding poll, so a stale poll response can
never land on top of a mutation's result.
"""

import asyncio
import logging
import os
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from inbox.clients.conversations_client import ConversationsClient
from inbox.models.api.conversations import ConversationResponse

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = float(os.getenv("CONVERSATION_POLL_INTERVAL", "15"))
# Upper bound for a single refresh; a hung request would otherwise block polling
REFRESH_TIMEOUT_SECONDS = float(os.getenv("CONVERSATION_REFRESH_TIMEOUT", "30"))

Fetcher = Callable[[], Awaitable[List[ConversationResponse]]]
ChangeCallback = Callable[[List[ConversationResponse]], None]


def loop_running() -> bool:
    """Return True when called from inside a running event loop."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class SyncState(str, Enum):
    IDLE = "idle"
    POLLING = "polling"


class ConversationSyncLoop:
    """Polling controller owning one session's authoritative conversation list."""

    def __init__(
        self,
        fetch: Fetcher,
        initial_conversations: Sequence[ConversationResponse] = (),
        poll_interval: float = POLL_INTERVAL_SECONDS,
        request_timeout: Optional[float] = REFRESH_TIMEOUT_SECONDS,
        on_change: Optional[ChangeCallback] = None,
    ):
        self._fetch = fetch
        self._conversations: List[ConversationResponse] = list(initial_conversations)
        self.poll_interval = poll_interval
        self.request_timeout = request_timeout
        self.on_change = on_change

        self._poll_task: Optional[asyncio.Task] = None
        self._timer_task: Optional[asyncio.Task] = None
        self._mutations_in_flight = 0
        self._alive = True
        self._visible = True

    @classmethod
    def from_client(
        cls,
        client: ConversationsClient,
        initial_conversations: Sequence[ConversationResponse] = (),
        **kwargs,
    ) -> "ConversationSyncLoop":
        return cls(client.fetch_conversations, initial_conversations, **kwargs)

    @property
    def conversations(self) -> Tuple[ConversationResponse, ...]:
        return tuple(self._conversations)

    @property
    def state(self) -> SyncState:
        return SyncState.POLLING if self._poll_task is not None else SyncState.IDLE

    @property
    def mutation_in_flight(self) -> bool:
        return self._mutations_in_flight > 0

    @property
    def is_alive(self) -> bool:
        return self._alive

    def prime(self, snapshot: Sequence[ConversationResponse]) -> None:
        """Replace the list with a fresh page-level snapshot."""
        self._apply(snapshot)

    def tick(self) -> Optional[asyncio.Task]:
        """Dispatch a background poll if nothing else is in flight.

        Returns the poll task, or None when the tick was a no-op, including
        when no event loop is running.
        """
        if not self._alive or not self._visible:
            return None
        if self._poll_task is not None or self.mutation_in_flight:
            return None
        if not loop_running():
            return None

        self._poll_task = asyncio.create_task(self._poll())
        return self._poll_task

    async def refresh_after_mutation(self) -> List[ConversationResponse]:
        """Refresh right after a user mutation, taking priority over polling.

        Errors propagate to the caller; the list is left unchanged on failure.
        """
        self._mutations_in_flight += 1
        self._cancel_poll()
        try:
            conversations = await self._fetch_with_timeout()
            self._apply(conversations)
            return list(conversations)
        finally:
            self._mutations_in_flight -= 1

    def set_visible(self, visible: bool) -> None:
        """Pause polling while hidden; poll right away when shown again.

        Safe to call without a running event loop, in which case only the
        flag is recorded.
        """
        self._visible = visible
        if visible:
            self.tick()

    def start(self) -> None:
        """Poll immediately, then every ``poll_interval`` seconds."""
        if not self._alive or self._timer_task is not None:
            return
        self.tick()
        self._timer_task = asyncio.create_task(self._run_timer())

    def stop(self) -> None:
        """Tear down: clear the timer and discard any later results.

        A poll already in flight is left to finish on its own.
        """
        self._alive = False
        if self._timer_task is not None:
            self._timer_task.cancel()
            self._timer_task = None

    async def aclose(self) -> None:
        timer = self._timer_task
        self.stop()
        if timer is not None:
            await asyncio.gather(timer, return_exceptions=True)

    async def __aenter__(self) -> "ConversationSyncLoop":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _run_timer(self) -> None:
        while self._alive:
            await asyncio.sleep(self.poll_interval)
            self.tick()

    async def _poll(self) -> None:
        try:
            conversations = await self._fetch_with_timeout()
        except Exception as e:
            # Background freshness only; keep the current list and retry next tick
            logger.debug("Conversation poll failed: %r", e)
        else:
            try:
                self._apply(conversations)
            except Exception:
                logger.exception("Conversation change callback failed")
        finally:
            if self._poll_task is asyncio.current_task():
                self._poll_task = None

    async def _fetch_with_timeout(self) -> List[ConversationResponse]:
        if self.request_timeout is None:
            return await self._fetch()
        return await asyncio.wait_for(self._fetch(), timeout=self.request_timeout)

    def _cancel_poll(self) -> None:
        if self._poll_task is not None:
            self._poll_task.cancel()
            self._poll_task = None

    def _apply(self, conversations: Sequence[ConversationResponse]) -> None:
        if not self._alive:
            logger.debug("Discarding conversation update after teardown")
            return
        self._conversations = list(conversations)
        if self.on_change is not None:
            self.on_change(list(self._conversations))
