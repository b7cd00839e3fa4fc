"""View controller for a paginated recent-transactions table."""

import asyncio
import logging

from ledgerview.domain.enums import LoadStatus
from ledgerview.domain.models.display import DisplayRow, TableData
from ledgerview.domain.models.load_state import Loaded, LoadState
from ledgerview.domain.models.paging import PageRequest, PaginationMeta
from ledgerview.engine.projector import RowProjector
from ledgerview.engine.range import clamp_page, max_page, parse_page_param
from ledgerview.engine.state_machine import LoadStateMachine
from ledgerview.exceptions import LedgerViewError

logger = logging.getLogger(__name__)

PAGE_PARAM = "p"
DEFAULT_PAGE_SIZE = 20


class PageController:
    """Holds the page index, page size and total count the view renders against.

    Page changes go through the LoadStateMachine, so only the latest request
    can ever populate ``load_state``.
    """

    def __init__(
        self,
        machine: LoadStateMachine,
        projector: RowProjector | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        initial_page: int | str | None = None,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {page_size}")
        self._machine = machine
        self._projector = projector or RowProjector()
        self._page_size = page_size
        self._page = parse_page_param(initial_page)
        self._total_count = 0

    @classmethod
    def from_query(cls, machine: LoadStateMachine, params: dict, **kwargs) -> "PageController":
        """Restore the page index from a query-string mapping (``?p=3``)."""
        return cls(machine, initial_page=params.get(PAGE_PARAM), **kwargs)

    @property
    def machine(self) -> LoadStateMachine:
        return self._machine

    @property
    def load_state(self) -> LoadState:
        return self._machine.load_state

    @property
    def current_page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def pagination(self) -> PaginationMeta:
        return PaginationMeta(
            current_page=self._page,
            total_count=self._total_count,
            page_size=self._page_size,
            max_page=max_page(self._total_count, self._page_size),
        )

    @property
    def is_empty(self) -> bool:
        """Loaded, but the ledger window held nothing ("No Transactions Found")."""
        state = self.load_state
        return state.status == LoadStatus.LOADED and not state.records

    def query_params(self) -> dict[str, str]:
        return {PAGE_PARAM: str(self._page)}

    async def mount(self, total_count: int | None = None) -> asyncio.Task | None:
        """Read the total count (unless supplied) and request the current page.

        Returns the fetch task, or None when the count itself could not be read.
        """
        if total_count is None:
            try:
                total_count = await self._machine.fetcher.get_total_count(self._machine.network)
            except LedgerViewError as e:
                logger.warning("Could not read the transaction count: %s", e)
                self._machine.fail_current(e)
                return None
            except Exception as e:
                logger.exception("Encountered error when reading the transaction count")
                self._machine.fail_current(e)
                return None
        self._total_count = total_count
        return self._request()

    def change_page(self, page: int | str | None) -> asyncio.Task:
        """Page-change callback handed to the renderer."""
        self._page = parse_page_param(page)
        return self._request()

    def set_page_size(self, page_size: int) -> asyncio.Task:
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {page_size}")
        self._page_size = page_size
        return self._request()

    def set_total_count(self, total_count: int) -> asyncio.Task:
        """The owner of the count saw the ledger advance; re-request the current page."""
        self._total_count = total_count
        return self._request()

    def _request(self) -> asyncio.Task:
        self._page = clamp_page(self._page, self._total_count, self._page_size)
        request = PageRequest(
            page=self._page,
            page_size=self._page_size,
            total_count=self._total_count,
        )
        return self._machine.on_page_request(request)

    def rows(self) -> list[DisplayRow]:
        state = self.load_state
        if not isinstance(state, Loaded):
            return []
        return self._projector.project(state.records)

    def table(self) -> TableData:
        state = self.load_state
        records = state.records if isinstance(state, Loaded) else ()
        return self._projector.build_table(records)

    def close(self) -> None:
        self._machine.close()
