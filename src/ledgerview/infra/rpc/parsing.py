"""Turn raw ledger RPC payloads into domain records."""

from typing import Any

from pydantic import ValidationError

from ledgerview.domain.enums import ExecutionStatus, TransactionKind
from ledgerview.domain.models.transaction import TransactionRecord
from ledgerview.exceptions import TransportError
from ledgerview.infra.rpc.base import SequencedDigest

KIND_NAMES = {kind.value for kind in TransactionKind}


def parse_digest_range(result: Any) -> list[SequencedDigest]:
    """Parse ``[[seq, digest], ...]`` into ``SequencedDigest`` tuples, keeping order."""
    if result is None:
        return []
    if not isinstance(result, list):
        raise TransportError(f"Malformed digest range: {result!r}", method="sui_getTransactionDigestsInRange")

    digests = []
    for entry in result:
        try:
            seq, digest = entry
            digests.append(SequencedDigest(seq=int(seq), digest=str(digest)))
        except (TypeError, ValueError) as e:
            raise TransportError(
                f"Malformed digest range entry: {entry!r}", method="sui_getTransactionDigestsInRange"
            ) from e
    return digests


def _kind_name(txn: dict) -> str | None:
    """Single-key dict ``{"TransferSui": {...}}`` -> ``"TransferSui"``."""
    for key in txn:
        if key in KIND_NAMES:
            return key
    return None


def _recipient(kind: str | None, body: dict) -> str | None:
    if kind in ("TransferObject", "TransferSui"):
        return body.get("recipient")
    if kind in ("Pay", "PaySui", "PayAllSui"):
        recipients = body.get("recipients") or []
        if recipients:
            return recipients[0]
        return body.get("recipient")
    return None


def _amount(kind: str | None, body: dict) -> int | None:
    if kind == "TransferSui":
        amount = body.get("amount")
        return int(amount) if amount is not None else None
    if kind in ("Pay", "PaySui"):
        amounts = body.get("amounts")
        if amounts:
            return sum(int(a) for a in amounts)
    return None


def _gas_cost(gas_used: dict | None) -> int | None:
    """Net gas = computation + storage - rebate."""
    if not gas_used:
        return None
    return (
        int(gas_used.get("computationCost", 0))
        + int(gas_used.get("storageCost", 0))
        - int(gas_used.get("storageRebate", 0))
    )


def parse_transaction(ref: SequencedDigest, result: Any) -> TransactionRecord:
    """Build a TransactionRecord from a ``getTransaction`` result.

    Only the first transaction of a batch transaction is considered when
    deriving kind, recipient and amount.
    """
    if not isinstance(result, dict):
        raise TransportError(f"Missing transaction data for {ref.digest}", method="sui_getTransaction")

    certificate = result.get("certificate") or {}
    data = certificate.get("data") or {}
    effects = result.get("effects") or {}
    status_info = effects.get("status") or {}

    txns = data.get("transactions") or []
    first = txns[0] if txns and isinstance(txns[0], dict) else {}
    kind = _kind_name(first)
    body = first.get(kind) if kind else None
    if not isinstance(body, dict):
        body = {}

    status = status_info.get("status", "failure")

    try:
        return TransactionRecord(
            tx_id=certificate.get("transactionDigest") or ref.digest,
            seq=ref.seq,
            sender=data.get("sender", ""),
            recipient=_recipient(kind, body),
            kind=kind,
            status=ExecutionStatus(status),
            failure_reason=status_info.get("error"),
            gas=_gas_cost(effects.get("gasUsed")),
            amount=_amount(kind, body),
            timestamp_ms=result.get("timestamp_ms"),
        )
    except (ValidationError, ValueError, TypeError) as e:
        raise TransportError(f"Malformed transaction {ref.digest}: {e}", method="sui_getTransaction") from e
