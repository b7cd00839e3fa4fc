"""Page requests and the sequence windows they resolve to."""

from pydantic import BaseModel, ConfigDict, Field


class PageRequest(BaseModel):
    """A single navigation event: which page, how big, against which total."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    page_size: int = Field(gt=0)
    total_count: int = Field(ge=0)


class SequenceRange(BaseModel):
    """Half-open window ``[start, end)`` of ledger sequence numbers.

    ``end`` goes negative when the page lies past the oldest transaction;
    such a range is kept (not rejected at construction) so callers can
    report it as ``InvalidRange``.
    """

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.start <= self.end

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def __len__(self) -> int:
        return max(self.end - self.start, 0)

    def __contains__(self, seq: object) -> bool:
        return isinstance(seq, int) and self.start <= seq < self.end


class PaginationMeta(BaseModel):
    current_page: int
    total_count: int
    page_size: int
    max_page: int
