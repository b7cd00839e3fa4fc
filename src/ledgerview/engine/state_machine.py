"""Page load lifecycle with stale-result suppression.

Every page request bumps a monotonically increasing token. A fetch result is
committed only while its token is still the current one; anything older is
dropped. Remote calls are never aborted, superseded results are simply
ignored when they arrive.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from ledgerview.domain.enums import Network
from ledgerview.domain.models.load_state import Failed, Loaded, LoadState, Pending
from ledgerview.domain.models.paging import PageRequest
from ledgerview.domain.models.transaction import TransactionRecord
from ledgerview.engine.fetcher import TransactionFetcher
from ledgerview.exceptions import LedgerViewError

logger = logging.getLogger(__name__)

Listener = Callable[[LoadState], None]


class MachineState(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: int = 0
    request: PageRequest | None = None
    load: LoadState = Pending()
    closed: bool = False


@dataclass(frozen=True)
class PageRequested:
    request: PageRequest


@dataclass(frozen=True)
class FetchSucceeded:
    token: int
    records: tuple[TransactionRecord, ...]


@dataclass(frozen=True)
class FetchFailed:
    token: int
    failure: Failed


@dataclass(frozen=True)
class TornDown:
    pass


Event = PageRequested | FetchSucceeded | FetchFailed | TornDown


def reduce(state: MachineState, event: Event) -> MachineState:
    """Pure transition function. Returns ``state`` itself when the event is discarded."""
    if isinstance(event, TornDown):
        if state.closed:
            return state
        return state.model_copy(update={"closed": True})

    if state.closed:
        return state

    if isinstance(event, PageRequested):
        return MachineState(token=state.token + 1, request=event.request, load=Pending())

    if event.token != state.token:
        return state

    if isinstance(event, FetchSucceeded):
        return state.model_copy(update={"load": Loaded(records=event.records)})
    if isinstance(event, FetchFailed):
        # Previous Loaded payload is dropped, never shown under a new page number
        return state.model_copy(update={"load": event.failure})

    raise TypeError(f"Unknown event: {event!r}")


class LoadStateMachine:
    """Effect wrapper around ``reduce``: starts fetches and commits their results."""

    def __init__(self, fetcher: TransactionFetcher, network: Network | str = Network.DEVNET) -> None:
        self._fetcher = fetcher
        self._network = network
        self._state = MachineState()
        self._listeners: list[Listener] = []
        self._tasks: set[asyncio.Task] = set()

    @property
    def fetcher(self) -> TransactionFetcher:
        return self._fetcher

    @property
    def network(self) -> Network | str:
        return self._network

    @property
    def state(self) -> MachineState:
        return self._state

    @property
    def load_state(self) -> LoadState:
        return self._state.load

    @property
    def token(self) -> int:
        return self._state.token

    @property
    def closed(self) -> bool:
        return self._state.closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register for committed LoadState transitions. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> MachineState:
        previous = self._state
        self._state = reduce(previous, event)

        if self._state is previous:
            if isinstance(event, (FetchSucceeded, FetchFailed)):
                logger.debug("Discarding stale result for token %d (current %d)", event.token, previous.token)
            return self._state

        if self._state.load is not previous.load:
            self._notify(self._state.load)
        return self._state

    def _notify(self, load: LoadState) -> None:
        for listener in list(self._listeners):
            try:
                listener(load)
            except Exception:
                logger.exception("LoadState listener %r failed", listener)

    def on_page_request(self, request: PageRequest) -> asyncio.Task:
        """Enter Pending for ``request`` and start its fetch.

        The returned task never raises; failures surface as ``Failed``.
        """
        if self.closed:
            raise RuntimeError("LoadStateMachine is closed")

        self.dispatch(PageRequested(request))
        token = self._state.token
        task = asyncio.create_task(self._run(token, request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, token: int, request: PageRequest) -> None:
        try:
            records = await self._fetcher.fetch(self._network, request.total_count, request.page_size, request.page)
        except LedgerViewError as e:
            logger.warning("Fetching page %d failed: %s", request.page, e)
            self.dispatch(FetchFailed(token, Failed.from_exception(e)))
        except Exception as e:
            logger.exception("Encountered error when fetching page %d", request.page)
            self.dispatch(FetchFailed(token, Failed.from_exception(e)))
        else:
            self.dispatch(FetchSucceeded(token, tuple(records)))

    def fail_current(self, exc: BaseException) -> MachineState:
        """Commit a failure raised outside a page fetch (e.g. while reading the total count)."""
        return self.dispatch(FetchFailed(self._state.token, Failed.from_exception(exc)))

    async def wait_idle(self) -> None:
        """Wait until every in-flight fetch, stale or current, has resolved."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Tear down: every resolution that arrives from now on is discarded."""
        self.dispatch(TornDown())

    async def __aenter__(self) -> "LoadStateMachine":
        return self

    async def __aexit__(self, *args: object) -> None:
        self.close()
