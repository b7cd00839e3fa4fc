"""Tests for LoadStateMachine: stale-result suppression and teardown."""

import asyncio

import pytest

from conftest import make_record
from ledgerview.domain.enums import LoadStatus, Network
from ledgerview.domain.models.load_state import Failed, Loaded, Pending
from ledgerview.domain.models.paging import PageRequest
from ledgerview.engine.fetcher import TransactionFetcher
from ledgerview.engine.state_machine import (
    FetchFailed,
    FetchSucceeded,
    LoadStateMachine,
    MachineState,
    PageRequested,
    TornDown,
    reduce,
)
from ledgerview.exceptions import InvalidRange, TransportError


class GatedFetcher(TransactionFetcher):
    """Each page's fetch blocks until the test resolves its future."""

    def __init__(self) -> None:
        self.gates: dict[int, asyncio.Future] = {}

    async def get_total_count(self, network) -> int:
        return 100

    async def fetch(self, network, total_count, page_size, page_number=None):
        future = asyncio.get_running_loop().create_future()
        self.gates[page_number] = future
        return await future

    async def _resolve(self, network, seq_range):
        raise NotImplementedError


async def _settle() -> None:
    for _ in range(3):
        await asyncio.sleep(0)


def _request(page: int) -> PageRequest:
    return PageRequest(page=page, page_size=20, total_count=100)


class TestReduce:
    def test_initial_state_is_pending(self):
        state = MachineState()
        assert isinstance(state.load, Pending)
        assert state.token == 0

    def test_page_request_bumps_token(self):
        state = reduce(MachineState(), PageRequested(_request(1)))
        assert state.token == 1
        assert state.request.page == 1
        assert isinstance(state.load, Pending)

    def test_matching_success_commits(self):
        state = reduce(MachineState(), PageRequested(_request(1)))
        state = reduce(state, FetchSucceeded(1, (make_record(1),)))
        assert isinstance(state.load, Loaded)
        assert state.load.records[0].seq == 1

    def test_stale_success_is_discarded(self):
        state = reduce(MachineState(), PageRequested(_request(1)))
        state = reduce(state, PageRequested(_request(2)))
        after = reduce(state, FetchSucceeded(1, (make_record(1),)))
        assert after is state

    def test_failure_drops_previous_payload(self):
        state = reduce(MachineState(), PageRequested(_request(1)))
        state = reduce(state, FetchSucceeded(1, (make_record(1),)))
        state = reduce(state, PageRequested(_request(2)))
        state = reduce(state, FetchFailed(2, Failed.from_exception(TransportError("boom"))))
        assert isinstance(state.load, Failed)
        assert state.load.error_type == "TransportError"
        assert not state.load.recoverable

    def test_new_request_after_loaded_reenters_pending(self):
        state = reduce(MachineState(), PageRequested(_request(1)))
        state = reduce(state, FetchSucceeded(1, ()))
        state = reduce(state, PageRequested(_request(2)))
        assert isinstance(state.load, Pending)

    def test_teardown_discards_everything(self):
        state = reduce(MachineState(), PageRequested(_request(1)))
        state = reduce(state, TornDown())
        assert state.closed
        assert reduce(state, FetchSucceeded(1, ())) is state
        assert reduce(state, PageRequested(_request(2))) is state

    def test_pure(self):
        state = reduce(MachineState(), PageRequested(_request(1)))
        event = FetchSucceeded(1, (make_record(3),))
        assert reduce(state, event) == reduce(state, event)
        assert isinstance(state.load, Pending)


class TestLoadStateMachine:
    async def test_pending_then_loaded(self, offline_fetcher):
        machine = LoadStateMachine(offline_fetcher, Network.DEVNET)
        task = machine.on_page_request(PageRequest(page=1, page_size=5, total_count=12))

        assert machine.load_state.status == LoadStatus.PENDING
        await task

        state = machine.load_state
        assert isinstance(state, Loaded)
        assert [r.seq for r in state.records] == [7, 8, 9, 10, 11]

    async def test_failure_becomes_failed(self):
        fetcher = GatedFetcher()
        machine = LoadStateMachine(fetcher)
        task = machine.on_page_request(_request(1))
        await _settle()

        fetcher.gates[1].set_exception(TransportError("node down"))
        await task

        state = machine.load_state
        assert isinstance(state, Failed)
        assert state.message == "node down"

    async def test_invalid_range_is_recoverable(self):
        fetcher = GatedFetcher()
        machine = LoadStateMachine(fetcher)
        task = machine.on_page_request(_request(1))
        await _settle()

        fetcher.gates[1].set_exception(InvalidRange())
        await task

        assert machine.load_state.recoverable

    async def test_unexpected_error_becomes_failed(self):
        fetcher = GatedFetcher()
        machine = LoadStateMachine(fetcher)
        task = machine.on_page_request(_request(1))
        await _settle()

        fetcher.gates[1].set_exception(KeyError("seq"))
        await task

        assert machine.load_state.error_type == "KeyError"

    async def test_slow_older_request_never_overwrites_newer(self):
        fetcher = GatedFetcher()
        machine = LoadStateMachine(fetcher)

        task_a = machine.on_page_request(_request(2))
        task_b = machine.on_page_request(_request(5))
        await _settle()

        fetcher.gates[5].set_result([make_record(5)])
        await task_b
        fetcher.gates[2].set_result([make_record(2)])
        await task_a

        state = machine.load_state
        assert isinstance(state, Loaded)
        assert [r.seq for r in state.records] == [5]
        assert machine.state.request.page == 5

    async def test_stale_failure_is_discarded(self):
        fetcher = GatedFetcher()
        machine = LoadStateMachine(fetcher)

        task_a = machine.on_page_request(_request(2))
        task_b = machine.on_page_request(_request(5))
        await _settle()

        fetcher.gates[5].set_result([make_record(5)])
        fetcher.gates[2].set_exception(TransportError("late"))
        await asyncio.gather(task_a, task_b)

        assert isinstance(machine.load_state, Loaded)

    async def test_older_resolving_first_is_still_discarded(self):
        fetcher = GatedFetcher()
        machine = LoadStateMachine(fetcher)

        task_a = machine.on_page_request(_request(2))
        machine.on_page_request(_request(5))
        await _settle()

        fetcher.gates[2].set_result([make_record(2)])
        await task_a

        assert isinstance(machine.load_state, Pending)

        fetcher.gates[5].set_result([make_record(5)])
        await machine.wait_idle()
        assert [r.seq for r in machine.load_state.records] == [5]

    async def test_teardown_discards_in_flight_result(self):
        fetcher = GatedFetcher()
        machine = LoadStateMachine(fetcher)
        task = machine.on_page_request(_request(1))
        await _settle()

        machine.close()
        fetcher.gates[1].set_result([make_record(1)])
        await task

        assert isinstance(machine.load_state, Pending)
        assert machine.closed

    async def test_request_after_close_raises(self, offline_fetcher):
        machine = LoadStateMachine(offline_fetcher)
        machine.close()
        with pytest.raises(RuntimeError):
            machine.on_page_request(_request(1))

    async def test_context_manager_closes(self, offline_fetcher):
        async with LoadStateMachine(offline_fetcher) as machine:
            await machine.on_page_request(PageRequest(page=1, page_size=5, total_count=12))
        assert machine.closed

    async def test_listeners_see_committed_transitions_only(self):
        fetcher = GatedFetcher()
        machine = LoadStateMachine(fetcher)
        seen = []
        unsubscribe = machine.subscribe(lambda state: seen.append(state.status))

        task_a = machine.on_page_request(_request(2))
        task_b = machine.on_page_request(_request(5))
        await _settle()
        fetcher.gates[5].set_result([])
        fetcher.gates[2].set_result([])
        await asyncio.gather(task_a, task_b)

        assert seen == [LoadStatus.PENDING, LoadStatus.PENDING, LoadStatus.LOADED]

        unsubscribe()
        machine.dispatch(PageRequested(_request(3)))
        assert len(seen) == 3

    async def test_failing_listener_does_not_break_commit(self, offline_fetcher):
        machine = LoadStateMachine(offline_fetcher)

        def broken(state):
            raise RuntimeError("listener bug")

        machine.subscribe(broken)
        await machine.on_page_request(PageRequest(page=1, page_size=5, total_count=12))
        assert isinstance(machine.load_state, Loaded)

    async def test_fail_current(self, offline_fetcher):
        machine = LoadStateMachine(offline_fetcher)
        machine.fail_current(TransportError("count unavailable"))
        assert isinstance(machine.load_state, Failed)
