"""Resolve a page of the ledger into hydrated transaction records."""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping

from ledgerview.domain.enums import Network
from ledgerview.domain.models.paging import SequenceRange
from ledgerview.domain.models.transaction import TransactionRecord
from ledgerview.engine.range import clamp_page, compute_range
from ledgerview.exceptions import InvalidRange, TransportError
from ledgerview.infra.fixtures.source import FixtureSource
from ledgerview.infra.rpc.base import LedgerClient

logger = logging.getLogger(__name__)


class TransactionFetcher(ABC):
    """Clamp the page, compute its sequence window, then hand it to a data source.

    No caching and no retries: every call goes back to the source.
    """

    async def fetch(
        self,
        network: Network | str,
        total_count: int,
        page_size: int,
        page_number: int | None = None,
    ) -> list[TransactionRecord]:
        try:
            page = clamp_page(page_number, total_count, page_size)
            seq_range = compute_range(total_count, page_size, page)
        except ValueError as e:
            raise InvalidRange(str(e)) from e

        if not seq_range.is_valid:
            logger.warning(
                "Page %s of %d (size %d) resolves to invalid range [%d, %d)",
                page_number, total_count, page_size, seq_range.start, seq_range.end,
            )
            raise InvalidRange(start=seq_range.start, end=seq_range.end)

        if seq_range.is_empty:
            return []

        records = await self._resolve(network, seq_range)
        logger.debug("Resolved page %d -> [%d, %d): %d records", page, seq_range.start, seq_range.end, len(records))
        return records

    @abstractmethod
    async def get_total_count(self, network: Network | str) -> int:
        """Current number of transactions on the ledger."""

    @abstractmethod
    async def _resolve(self, network: Network | str, seq_range: SequenceRange) -> list[TransactionRecord]:
        """Fetch the records for a valid, non-empty window."""


class RpcTransactionFetcher(TransactionFetcher):
    """One range lookup plus one batched hydration per page."""

    def __init__(self, clients: Mapping[str, LedgerClient]) -> None:
        self._clients = dict(clients)

    def client_for(self, network: Network | str) -> LedgerClient:
        key = network.value if isinstance(network, Network) else str(network)
        client = self._clients.get(key)
        if client is None:
            raise TransportError(f"No ledger endpoint configured for network {key!r}")
        return client

    async def get_total_count(self, network: Network | str) -> int:
        return await self.client_for(network).get_sequence_count()

    async def _resolve(self, network: Network | str, seq_range: SequenceRange) -> list[TransactionRecord]:
        client = self.client_for(network)
        digests = await client.get_digests_in_range(seq_range.start, seq_range.end)
        return await client.hydrate(digests)


class FixtureTransactionFetcher(TransactionFetcher):
    """Offline stand-in: serves the fixture set after a fixed artificial delay."""

    def __init__(
        self,
        source: FixtureSource,
        delay_seconds: float = 0.5,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self._source = source
        self._delay = delay_seconds
        self._sleep = sleep

    async def _pause(self) -> None:
        if self._delay > 0:
            await self._sleep(self._delay)

    async def get_total_count(self, network: Network | str) -> int:
        """Highest fixture sequence number + 1, after the same delay as a page read."""
        await self._pause()
        records = self._source.get_all_fixture_transactions()
        return max((r.seq for r in records), default=-1) + 1

    async def _resolve(self, network: Network | str, seq_range: SequenceRange) -> list[TransactionRecord]:
        await self._pause()
        return [r for r in self._source.get_all_fixture_transactions() if r.seq in seq_range]
