import pytest

from ledgerview.domain.enums import ExecutionStatus, TransactionKind
from ledgerview.domain.models.transaction import TransactionRecord
from ledgerview.engine.fetcher import FixtureTransactionFetcher
from ledgerview.infra.fixtures.source import FixtureSource

# 2022-10-05 20:00:00 UTC; every fixture timestamp is earlier
NOW_MS = 1665000000000 + 4 * 3600 * 1000


def make_record(seq: int, **overrides) -> TransactionRecord:
    fields = {
        "tx_id": f"Digest{seq:038d}",
        "seq": seq,
        "sender": "0x4cfd9e4b1d3e2f0a7c0e5d5d5f1a2b3c4d5e6f70",
        "recipient": "0xa8f2bd7c1e0f4d2a9b6c3e5f7a8b9c0d1e2f3a4b",
        "kind": TransactionKind.TRANSFER_SUI,
        "status": ExecutionStatus.SUCCESS,
        "gas": 1500,
        "amount": 1000,
        "timestamp_ms": NOW_MS - 60_000,
    }
    fields.update(overrides)
    return TransactionRecord(**fields)


@pytest.fixture()
def fixture_source() -> FixtureSource:
    return FixtureSource()


@pytest.fixture()
def offline_fetcher(fixture_source) -> FixtureTransactionFetcher:
    return FixtureTransactionFetcher(fixture_source, delay_seconds=0)
