"""
Request lifecycle: tracks the single lookup the UI currently cares about.

The lookup itself runs as an asyncio task on the running loop, so `start`
never blocks the frame loop.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from icecream import ic

from core.models.events import (
    RequestEvent,
    RequestFailed,
    RequestReset,
    RequestStarted,
    RequestSucceeded,
)
from core.models.network import RequestState, RequestStatus, has_content, initial_state
from core.reducer import apply
from core.types import LookupFunction

logger = logging.getLogger(__name__)


class RequestLifecycle:
    """State container for one outstanding lookup at a time."""

    def __init__(
        self,
        lookup: LookupFunction,
        identifier: str | None = None,
        *,
        discard_stale: bool = False,
    ) -> None:
        """
        Initialize a new instance of the RequestLifecycle class.

        Args:
            lookup: Async function resolving an identifier into a record
            identifier: When given, the lifecycle starts pending and the lookup
                is fired right away (needs a running event loop)
            discard_stale: Drop results from lookups superseded by a newer start
        """
        self.lookup = lookup
        self.discard_stale = discard_stale
        self.state: RequestState = initial_state(identifier)
        self.identifier: str | None = None
        self.generation = 0
        self.tasks: set[asyncio.Task] = set()
        self.on_change_callbacks: list[Callable[[RequestState], Any]] = []
        self._fatal_error: BaseException | None = None

        if has_content(identifier):
            self.start(identifier)

    def subscribe(self, callback: Callable[[RequestState], Any]) -> None:
        self.on_change_callbacks.append(callback)

    def dispatch(self, event: RequestEvent) -> None:
        self.state = apply(self.state, event)
        ic(type(event).__name__, self.state.status)

        for cb in self.on_change_callbacks:
            try:
                cb(self.state)
            except Exception:
                logger.exception("Error in request state callback")

    def start(self, identifier: str | None) -> None:
        """
        Start looking up `identifier`.

        Empty or whitespace-only identifiers are ignored and leave the state
        untouched. Otherwise the state becomes pending before this returns.
        """
        if not has_content(identifier):
            return

        loop = asyncio.get_running_loop()

        self.generation += 1
        self.identifier = identifier
        self.dispatch(RequestStarted())

        task = loop.create_task(self._run(identifier, self.generation))
        self.tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def reset(self) -> None:
        self.generation += 1
        self.identifier = None
        self.dispatch(RequestReset())

    async def _run(self, identifier: str, generation: int) -> None:
        try:
            data = await self.lookup(identifier)
        except Exception as e:
            logger.info(f"Lookup for {identifier!r} failed: {e}")
            event: RequestEvent = RequestFailed(str(e))
        else:
            event = RequestSucceeded(data)

        if self.discard_stale and generation != self.generation:
            logger.debug(f"Discarding stale result for {identifier!r}")
            return

        self.dispatch(event)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self.tasks.discard(task)
        if task.cancelled():
            return

        error = task.exception()
        if error is not None:
            logger.error(f"Request lifecycle task crashed: {error!r}")
            self._fatal_error = error

    def raise_for_fatal(self) -> None:
        """Re-raise a programming error that escaped a lookup task."""
        if self._fatal_error is not None:
            raise self._fatal_error

    async def join(self) -> None:
        """Wait for every lookup still in flight, superseded ones included."""
        while pending := [task for task in self.tasks if not task.done()]:
            await asyncio.gather(*pending, return_exceptions=True)
        self.raise_for_fatal()

    @property
    def is_pending(self) -> bool:
        return self.state.status == RequestStatus.PENDING
