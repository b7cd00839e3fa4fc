from typing import AsyncGenerator, Callable, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Query

from ledgerview.config import Settings
from ledgerview.container import Container
from ledgerview.domain.enums import Network
from ledgerview.engine.controller import PageController
from ledgerview.engine.projector import RowProjector
from ledgerview.engine.state_machine import LoadStateMachine


@inject
async def get_page_controller(
    p: Optional[str] = Query(None, description="1-based page number; invalid values mean page 1"),
    per_page: Optional[int] = Query(None, ge=1, le=100),
    network: Optional[Network] = Query(None),
    settings: Settings = Depends(Provide[Container.settings]),
    machine_factory: Callable[..., LoadStateMachine] = Depends(Provide[Container.state_machine.provider]),
    projector: RowProjector = Depends(Provide[Container.projector]),
) -> AsyncGenerator[PageController, None]:
    """One controller per request; torn down when the response is sent."""
    machine = machine_factory(network=network or settings.network)
    controller = PageController(
        machine,
        projector,
        page_size=per_page or settings.page_size,
        initial_page=p,
    )
    try:
        yield controller
    finally:
        controller.close()
