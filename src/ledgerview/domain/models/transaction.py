"""Hydrated ledger transaction as returned by the read API."""

from pydantic import BaseModel, ConfigDict, Field

from ledgerview.domain.enums import ExecutionStatus, TransactionKind


class TransactionRecord(BaseModel):
    """One ledger entry. Immutable once fetched."""

    model_config = ConfigDict(frozen=True)

    tx_id: str
    seq: int = Field(ge=0)  # Ledger sequence number
    sender: str
    recipient: str | None = None
    kind: TransactionKind | None = None
    status: ExecutionStatus
    failure_reason: str | None = None
    gas: int | None = None  # Computation + storage cost, smallest unit
    amount: int | None = Field(default=None, ge=0)  # Arbitrary precision, smallest unit
    timestamp_ms: int | None = None
