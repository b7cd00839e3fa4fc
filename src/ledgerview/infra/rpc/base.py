"""Read-side contract the page engine needs from a ledger node."""

from abc import ABC, abstractmethod
from typing import NamedTuple

from ledgerview.domain.models.transaction import TransactionRecord


class SequencedDigest(NamedTuple):
    """A transaction digest together with its ledger sequence number."""

    seq: int
    digest: str


class LedgerClient(ABC):
    """Strategy interface for talking to one ledger endpoint."""

    @abstractmethod
    async def get_sequence_count(self) -> int:
        """Total number of transactions committed to the ledger."""

    @abstractmethod
    async def get_digests_in_range(self, start: int, end: int) -> list[SequencedDigest]:
        """Digests for sequence numbers in ``[start, end)``, in ledger order."""

    @abstractmethod
    async def hydrate(self, digests: list[SequencedDigest]) -> list[TransactionRecord]:
        """Resolve digests into full records in one batch.

        Must preserve input order and fail wholesale with ``TransportError``
        rather than return a partial result.
        """
