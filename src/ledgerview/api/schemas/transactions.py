from typing import Optional

from pydantic import BaseModel

from ledgerview.domain.enums import LoadStatus
from ledgerview.domain.models.display import DisplayRow, TableColumn
from ledgerview.domain.models.paging import PaginationMeta


class ErrorDetail(BaseModel):
    error_type: str
    message: str
    recoverable: bool


class RecentTransactionsResponse(BaseModel):
    status: LoadStatus
    rows: list[DisplayRow]
    columns: list[TableColumn]
    pagination: PaginationMeta
    query_params: dict[str, str]
    error: Optional[ErrorDetail] = None
