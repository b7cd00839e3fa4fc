from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ledgerview.api.deps import get_page_controller
from ledgerview.api.schemas.transactions import ErrorDetail, RecentTransactionsResponse
from ledgerview.domain.models.load_state import Failed
from ledgerview.engine.controller import PageController

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("/recent", response_model=RecentTransactionsResponse)
async def recent_transactions(
    response: Response,
    controller: PageController = Depends(get_page_controller),
    count: Optional[int] = Query(None, ge=0, description="Total transaction count held by the caller"),
) -> RecentTransactionsResponse:
    await controller.mount(total_count=count)
    await controller.machine.wait_idle()

    state = controller.load_state
    error = None
    if isinstance(state, Failed):
        error = ErrorDetail(error_type=state.error_type, message=state.message, recoverable=state.recoverable)
        response.status_code = status.HTTP_404_NOT_FOUND if state.recoverable else status.HTTP_502_BAD_GATEWAY

    table = controller.table()
    return RecentTransactionsResponse(
        status=state.status,
        rows=table.data,
        columns=table.columns,
        pagination=controller.pagination,
        query_params=controller.query_params(),
        error=error,
    )
