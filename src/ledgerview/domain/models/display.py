"""Renderer-agnostic row/column contract for the recent transactions table."""

from pydantic import BaseModel, ConfigDict

from ledgerview.domain.enums import ExecutionStatus, LinkCategory, TransactionKind


class LinkCell(BaseModel):
    """A truncated identifier that links to its detail page."""

    model_config = ConfigDict(frozen=True)

    url: str
    name: str
    category: LinkCategory
    is_link: bool = True
    copyable: bool = False


class TxTypeCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TransactionKind | None
    status: ExecutionStatus


class DisplayRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    tx_types: TxTypeCell
    transaction_id: list[LinkCell]
    addresses: list[LinkCell]
    amount: str
    gas: str


class TableColumn(BaseModel):
    model_config = ConfigDict(frozen=True)

    header_label: str
    accessor_key: str


class TableData(BaseModel):
    data: list[DisplayRow]
    columns: list[TableColumn]
