"""Tagged load lifecycle: Pending | Loaded | Failed."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ledgerview.domain.enums import LoadStatus
from ledgerview.domain.models.transaction import TransactionRecord
from ledgerview.exceptions import InvalidRange


class Pending(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal[LoadStatus.PENDING] = LoadStatus.PENDING


class Loaded(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal[LoadStatus.LOADED] = LoadStatus.LOADED
    records: tuple[TransactionRecord, ...] = ()


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal[LoadStatus.FAILED] = LoadStatus.FAILED
    error_type: str
    message: str
    recoverable: bool = False  # True for "no such page", False for transport failures

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failed":
        return cls(
            error_type=type(exc).__name__,
            message=str(exc) or type(exc).__name__,
            recoverable=isinstance(exc, InvalidRange),
        )


LoadState = Annotated[Union[Pending, Loaded, Failed], Field(discriminator="status")]
