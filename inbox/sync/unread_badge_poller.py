"""Background poller for the unread message badge.

The badge is only eventually fresh: a poll that fails is ignored and the
next one retries. Results that arrive after ``stop`` are dropped.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from inbox.clients.conversations_client import ConversationsClient
from inbox.sync.conversation_sync_loop import (
    POLL_INTERVAL_SECONDS,
    REFRESH_TIMEOUT_SECONDS,
    SyncState,
    loop_running,
)

logger = logging.getLogger(__name__)

CountFetcher = Callable[[], Awaitable[int]]
CountCallback = Callable[[int], None]


class UnreadBadgePoller:
    """Keeps one session's unread message count in step with the server."""

    def __init__(
        self,
        fetch: CountFetcher,
        initial_count: int = 0,
        poll_interval: float = POLL_INTERVAL_SECONDS,
        request_timeout: Optional[float] = REFRESH_TIMEOUT_SECONDS,
        on_change: Optional[CountCallback] = None,
    ):
        self._fetch = fetch
        self._unread_count = initial_count
        self.poll_interval = poll_interval
        self.request_timeout = request_timeout
        self.on_change = on_change

        self._poll_task: Optional[asyncio.Task] = None
        self._timer_task: Optional[asyncio.Task] = None
        self._alive = True
        self._visible = True

    @classmethod
    def from_client(
        cls, client: ConversationsClient, initial_count: int = 0, **kwargs
    ) -> "UnreadBadgePoller":
        return cls(client.fetch_unread_count, initial_count, **kwargs)

    @property
    def unread_count(self) -> int:
        return self._unread_count

    @property
    def state(self) -> SyncState:
        return SyncState.POLLING if self._poll_task is not None else SyncState.IDLE

    @property
    def is_alive(self) -> bool:
        return self._alive

    def prime(self, count: int) -> None:
        """Take the count rendered with the page."""
        self._apply(count)

    def tick(self) -> Optional[asyncio.Task]:
        """Dispatch a poll under the same rules as ``ConversationSyncLoop.tick``."""
        if not self._alive or not self._visible or self._poll_task is not None:
            return None
        if not loop_running():
            return None

        self._poll_task = asyncio.create_task(self._poll())
        return self._poll_task

    def set_visible(self, visible: bool) -> None:
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
        self._alive = False
        if self._timer_task is not None:
            self._timer_task.cancel()
            self._timer_task = None

    async def aclose(self) -> None:
        timer = self._timer_task
        self.stop()
        if timer is not None:
            await asyncio.gather(timer, return_exceptions=True)

    async def __aenter__(self) -> "UnreadBadgePoller":
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
            if self.request_timeout is None:
                count = await self._fetch()
            else:
                count = await asyncio.wait_for(
                    self._fetch(), timeout=self.request_timeout
                )
        except Exception as e:
            logger.debug("Unread count poll failed: %r", e)
        else:
            try:
                self._apply(count)
            except Exception:
                logger.exception("Unread count change callback failed")
        finally:
            if self._poll_task is asyncio.current_task():
                self._poll_task = None

    def _apply(self, count: int) -> None:
        if not self._alive:
            logger.debug("Discarding unread count after teardown")
            return
        if count == self._unread_count:
            return
        self._unread_count = count
        if self.on_change is not None:
            self.on_change(count)
