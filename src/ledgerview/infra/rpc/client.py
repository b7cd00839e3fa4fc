"""Ledger JSON-RPC client: digests by sequence range + batched getTransaction."""

import logging
from typing import Any

import httpx
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from ledgerview.domain.models.transaction import TransactionRecord
from ledgerview.exceptions import TransportError
from ledgerview.infra.http.rate_limited_client import RateLimitedClient
from ledgerview.infra.rpc.base import LedgerClient, SequencedDigest
from ledgerview.infra.rpc.parsing import parse_digest_range, parse_transaction

logger = logging.getLogger(__name__)


def _is_transient(exc: BaseException) -> bool:
    """Connection drops, timeouts and 5xx responses are worth another attempt."""
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return False


class LedgerRPCClient(LedgerClient):
    """JSON-RPC 2.0 client for a single ledger full node."""

    def __init__(self, rpc_url: str, http_client: RateLimitedClient) -> None:
        self._rpc_url = rpc_url
        self._http = http_client

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    @retry(
        retry=retry_if_exception(_is_transient),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        reraise=True,
    )
    async def _post(self, payload: dict | list) -> Any:
        resp = await self._http.post(self._rpc_url, json=payload)
        resp.raise_for_status()
        return resp.json()

    async def _send(self, payload: dict | list, method: str) -> Any:
        try:
            return await self._post(payload)
        except httpx.HTTPError as e:
            raise TransportError(f"RPC transport failure ({method}): {e}", method=method) from e
        except ValueError as e:
            raise TransportError(f"RPC returned a non-JSON body ({method})", method=method) from e

    async def _call(self, method: str, params: list) -> Any:
        """Execute a single JSON-RPC call and return the result field."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params,
        }
        data = await self._send(payload, method)
        if not isinstance(data, dict):
            raise TransportError(f"Unexpected RPC response ({method}): {data!r}", method=method)

        if "error" in data:
            error = data["error"]
            msg = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            raise TransportError(f"RPC error ({method}): {msg}", method=method)

        return data.get("result")

    async def get_sequence_count(self) -> int:
        result = await self._call("sui_getTotalTransactionNumber", [])
        try:
            return int(result)
        except (TypeError, ValueError) as e:
            raise TransportError(
                f"Invalid transaction count: {result!r}", method="sui_getTotalTransactionNumber"
            ) from e

    async def get_digests_in_range(self, start: int, end: int) -> list[SequencedDigest]:
        """Fetch ``[[seq, digest], ...]`` for sequence numbers in ``[start, end)``."""
        result = await self._call("sui_getTransactionDigestsInRange", [start, end])
        return parse_digest_range(result)

    async def hydrate(self, digests: list[SequencedDigest]) -> list[TransactionRecord]:
        """Fetch every digest in one batched request; any failure fails the whole batch."""
        if not digests:
            return []

        method = "sui_getTransaction"
        payload = [
            {"jsonrpc": "2.0", "id": i, "method": method, "params": [ref.digest]}
            for i, ref in enumerate(digests)
        ]
        data = await self._send(payload, method)
        if not isinstance(data, list):
            raise TransportError(f"Expected a batch response, got {type(data).__name__}", method=method)

        # Batch responses may come back in any order; match them up by id
        by_id: dict[int, dict] = {}
        for item in data:
            if isinstance(item, dict) and isinstance(item.get("id"), int):
                by_id[item["id"]] = item

        records = []
        for i, ref in enumerate(digests):
            item = by_id.get(i)
            if item is None:
                raise TransportError(f"No response for transaction {ref.digest}", method=method)
            if "error" in item:
                error = item["error"]
                msg = error.get("message", str(error)) if isinstance(error, dict) else str(error)
                raise TransportError(f"RPC error ({method} {ref.digest}): {msg}", method=method)
            records.append(parse_transaction(ref, item.get("result")))

        logger.debug("Hydrated %d transactions from %s", len(records), self._rpc_url)
        return records
