"""Project hydrated transactions into the recent-transactions table contract."""

from collections.abc import Callable, Iterable

from ledgerview.domain.enums import LinkCategory
from ledgerview.domain.models.display import DisplayRow, LinkCell, TableColumn, TableData, TxTypeCell
from ledgerview.domain.models.transaction import TransactionRecord
from ledgerview.utils.formatting import UNKNOWN, now_ms, number_suffix, present_amount, time_ago, truncate

DEFAULT_TRUNCATE_LENGTH = 10
DEFAULT_CURRENCY_SUFFIX = "SUI"

COLUMNS: tuple[TableColumn, ...] = (
    TableColumn(header_label="Time", accessor_key="date"),
    TableColumn(header_label="Type", accessor_key="tx_types"),
    TableColumn(header_label="Transaction ID", accessor_key="transaction_id"),
    TableColumn(header_label="Addresses", accessor_key="addresses"),
    TableColumn(header_label="Amount", accessor_key="amount"),
    TableColumn(header_label="Gas", accessor_key="gas"),
)


class RowProjector:
    """Pure, order-preserving TransactionRecord -> DisplayRow mapping.

    Never fails: absent optional fields render as a placeholder.
    """

    def __init__(
        self,
        truncate_length: int = DEFAULT_TRUNCATE_LENGTH,
        currency_suffix: str = DEFAULT_CURRENCY_SUFFIX,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.truncate_length = truncate_length
        self.currency_suffix = currency_suffix
        self._clock = clock

    def with_truncate_length(self, truncate_length: int) -> "RowProjector":
        """Per-view override of the identifier budget."""
        return RowProjector(truncate_length, self.currency_suffix, self._clock)

    def project(self, records: Iterable[TransactionRecord]) -> list[DisplayRow]:
        now = self._clock()
        return [self._row(record, now) for record in records]

    def build_table(self, records: Iterable[TransactionRecord]) -> TableData:
        return TableData(data=self.project(records), columns=list(COLUMNS))

    def _row(self, txn: TransactionRecord, now: int) -> DisplayRow:
        addresses = [self._link(txn.sender, LinkCategory.ADDRESSES)]
        if txn.recipient:
            addresses.append(self._link(txn.recipient, LinkCategory.ADDRESSES))

        return DisplayRow(
            date=self._age(txn.timestamp_ms, now),
            tx_types=TxTypeCell(kind=txn.kind, status=txn.status),
            transaction_id=[self._link(txn.tx_id, LinkCategory.TRANSACTIONS)],
            addresses=addresses,
            amount=self.format_amount(txn.amount),
            gas=self.format_amount(number_suffix(txn.gas) if txn.gas is not None else None),
        )

    def _link(self, value: str, category: LinkCategory) -> LinkCell:
        return LinkCell(url=value, name=truncate(value, self.truncate_length), category=category)

    @staticmethod
    def _age(timestamp_ms: int | None, now: int) -> str:
        if timestamp_ms is None:
            return UNKNOWN
        return f"{time_ago(timestamp_ms, now, short=True)} ago"

    def format_amount(self, amount: int | str | None) -> str:
        """Integers get thousands grouping; pre-formatted strings pass through. Both get the suffix."""
        if amount is None or amount == "":
            return UNKNOWN
        if isinstance(amount, int):
            return f"{present_amount(amount)} {self.currency_suffix}"
        return f"{amount} {self.currency_suffix}"
